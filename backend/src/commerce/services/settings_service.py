"""
Service for reading and writing typed store settings.

Settings are scoped by ``store_id``; passing ``None`` addresses the global,
store-less settings. Reads return values interpreted through each row's
``type`` tag.
"""

from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.exceptions import InvalidSettingTypeError
from ..core.logging import LoggerMixin
from ..models.setting import Setting
from ..utils.setting_values import SettingType, decode_json_value


def _scope(statement, store_id: str | None):
    """Restrict a statement to one store, or to global settings when ``store_id`` is None."""
    if store_id is not None:
        return statement.where(Setting.store_id == store_id)
    return statement.where(Setting.store_id.is_(None))


def _group_typed_values(settings: list[Setting]) -> dict[str, dict[str, Any]]:
    grouped: dict[str, dict[str, Any]] = {}
    for setting in settings:
        grouped.setdefault(setting.group, {})[setting.key] = setting.get_typed_value()
    return grouped


class SettingsService(LoggerMixin):
    """Persistence helpers for the Setting table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_setting(self, store_id: str | None, group: str, key: str) -> Setting | None:
        stmt = _scope(select(Setting), store_id).where(Setting.group == group, Setting.key == key)
        result = await self.db.execute(stmt)
        return result.scalars().first()

    async def get_setting(self, store_id: str | None, group: str, key: str) -> Any:
        """Return the typed value of a setting, or ``None`` when it does not exist."""
        setting = await self.find_setting(store_id, group, key)
        if setting is None:
            return None
        return setting.get_typed_value()

    def _validate(self, value: Any, type: str | SettingType) -> str:
        """Check the type tag and that json/array text decodes; return the tag."""
        type_tag = type.value if isinstance(type, SettingType) else type
        if type_tag not in SettingType.values():
            raise InvalidSettingTypeError(str(type_tag))
        if type_tag in (SettingType.JSON.value, SettingType.ARRAY.value):
            decode_json_value(type_tag, value)
        return type_tag

    async def _upsert(
        self,
        store_id: str | None,
        group: str,
        key: str,
        value: Any,
        type_tag: str,
        is_public: bool,
    ) -> Setting:
        setting = await self.find_setting(store_id, group, key)
        if setting is None:
            setting = Setting(
                store_id=store_id,
                group=group,
                key=key,
                value=value,
                type=type_tag,
                is_public=is_public,
            )
            self.db.add(setting)
        else:
            setting.value = value
            setting.type = type_tag
            setting.is_public = is_public
        return setting

    async def set_setting(
        self,
        store_id: str | None,
        group: str,
        key: str,
        value: Any,
        type: str | SettingType = SettingType.STRING,
        is_public: bool = False,
    ) -> Setting:
        """Create or update a setting.

        Raises ``InvalidSettingTypeError`` for unknown tags and
        ``SettingValueDecodeError`` for json/array text that does not decode;
        nothing is written in either case.
        """
        type_tag = self._validate(value, type)
        setting = await self._upsert(store_id, group, key, value, type_tag, is_public)

        await self.db.commit()
        await self.db.refresh(setting)
        self.logger.info(
            "Setting saved",
            extra={"store_id": store_id, "group": group, "key": key, "type": type_tag},
        )
        return setting

    async def set_settings(
        self,
        store_id: str | None,
        group: str,
        entries: dict[str, tuple[Any, str | SettingType, bool]],
    ) -> list[Setting]:
        """Upsert ``{key: (value, type, is_public)}`` into ``group`` in one transaction.

        Every entry is validated before any row is touched.
        """
        tags = {key: self._validate(value, type) for key, (value, type, _) in entries.items()}

        saved = []
        try:
            for key, (value, _, is_public) in entries.items():
                saved.append(await self._upsert(store_id, group, key, value, tags[key], is_public))
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise

        self.logger.info(
            "Settings group saved",
            extra={"store_id": store_id, "group": group, "count": len(saved)},
        )
        return saved

    async def get_settings_by_group(self, store_id: str | None, group: str) -> dict[str, Any]:
        """Return ``{key: typed_value}`` for one group."""
        stmt = _scope(select(Setting), store_id).where(Setting.group == group).order_by(Setting.key)
        result = await self.db.execute(stmt)
        return {setting.key: setting.get_typed_value() for setting in result.scalars().all()}

    async def get_all_settings(self, store_id: str | None) -> dict[str, dict[str, Any]]:
        """Return ``{group: {key: typed_value}}`` for a store."""
        stmt = _scope(select(Setting), store_id).order_by(Setting.group, Setting.key)
        result = await self.db.execute(stmt)
        return _group_typed_values(list(result.scalars().all()))

    async def get_public_settings(self, store_id: str | None) -> dict[str, dict[str, Any]]:
        """Same as ``get_all_settings`` restricted to settings flagged public."""
        stmt = (
            _scope(select(Setting), store_id)
            .where(Setting.is_public.is_(True))
            .order_by(Setting.group, Setting.key)
        )
        result = await self.db.execute(stmt)
        return _group_typed_values(list(result.scalars().all()))

    async def delete_setting(self, store_id: str | None, group: str, key: str) -> int:
        """Delete a setting and return the number of rows removed."""
        stmt = _scope(delete(Setting), store_id).where(Setting.group == group, Setting.key == key)
        result = await self.db.execute(stmt)
        await self.db.commit()
        deleted = result.rowcount or 0
        if deleted:
            self.logger.info("Setting deleted", extra={"store_id": store_id, "group": group, "key": key})
        return deleted
