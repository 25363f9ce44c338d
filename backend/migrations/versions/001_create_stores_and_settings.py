"""Create stores and settings tables.

Revision ID: 001
Revises:
Create Date: 2026-10-19

Structured store columns (``settings``, ``meta``) and setting values are
stored as JSON text.
"""

from alembic import op
import sqlalchemy as sa

revision = "001"
down_revision = None
branch_labels = None
depends_on = None

SETTING_TYPES = ("string", "number", "boolean", "json", "array")


def upgrade() -> None:
    op.create_table(
        "stores",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("slug", sa.String(255), nullable=False),
        sa.Column("domain", sa.String(255), nullable=True),
        sa.Column("logo_url", sa.String(1024), nullable=True),
        sa.Column("default_locale", sa.String(10), nullable=False, server_default="en"),
        sa.Column("default_currency", sa.String(3), nullable=False, server_default="USD"),
        sa.Column("timezone", sa.String(64), nullable=False, server_default="UTC"),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default=sa.true()),
        sa.Column("settings", sa.Text, nullable=False, server_default="{}"),
        sa.Column("meta", sa.Text, nullable=False, server_default="{}"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("ix_stores_slug", "stores", ["slug"], unique=True)

    op.create_table(
        "settings",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("store_id", sa.String(36), sa.ForeignKey("stores.id", ondelete="CASCADE"), nullable=True),
        sa.Column("group", sa.String(100), nullable=False),
        sa.Column("key", sa.String(255), nullable=False),
        sa.Column("value", sa.Text, nullable=True),
        sa.Column(
            "type",
            sa.Enum(*SETTING_TYPES, name="setting_type"),
            nullable=False,
            server_default="string",
        ),
        sa.Column("is_public", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.UniqueConstraint("store_id", "group", "key", name="uq_settings_store_group_key"),
    )
    op.create_index("ix_settings_store_id", "settings", ["store_id"])
    op.create_index("ix_settings_group", "settings", ["group"])
    op.create_index(
        "uq_settings_global_group_key",
        "settings",
        ["group", "key"],
        unique=True,
        sqlite_where=sa.text("store_id IS NULL"),
        postgresql_where=sa.text("store_id IS NULL"),
    )


def downgrade() -> None:
    op.drop_index("uq_settings_global_group_key", table_name="settings")
    op.drop_index("ix_settings_group", table_name="settings")
    op.drop_index("ix_settings_store_id", table_name="settings")
    op.drop_table("settings")
    sa.Enum(name="setting_type").drop(op.get_bind(), checkfirst=True)
    op.drop_index("ix_stores_slug", table_name="stores")
    op.drop_table("stores")
