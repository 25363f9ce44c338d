"""
Unit tests for the JSON column codec and its column declaration helpers.

Covers the prepare/consume pair, the JsonText type decorator, and how the
column_name / serialize_as options reach the SQLAlchemy Column and to_dict().
"""

import json
import math

from hypothesis import given
from hypothesis import strategies as st

from commerce.models.base import BaseModel
from commerce.models.columns import (
    UNSET,
    JsonColumnOptions,
    JsonText,
    consume,
    json_column,
    json_column_options,
    prepare,
    serialization_key,
)
from commerce.models.store import Store

json_values = st.recursive(
    st.none() | st.booleans() | st.integers() | st.floats(allow_nan=False, allow_infinity=False) | st.text(),
    lambda children: st.lists(children, max_size=5) | st.dictionaries(st.text(), children, max_size=5),
    max_leaves=20,
)
structured_values = st.lists(json_values, max_size=5) | st.dictionaries(st.text(), json_values, max_size=5)


def _reject_constant(token):
    raise ValueError(token)


class _ApiCredential(BaseModel):
    """Model used only to exercise serialization options."""

    __tablename__ = "test_api_credentials"

    secret = json_column(json_column_options(serialize_as=None))
    scopes = json_column(json_column_options(column_name="scope_list", serialize_as="permissions"))


class TestPrepare:
    """Tests for the write-side encoder."""

    def test_none_is_storage_null(self):
        assert prepare(None) is None

    def test_structures_become_json_text(self):
        encoded = prepare({"a": [1, 2, {"b": None}]})
        assert isinstance(encoded, str)
        assert json.loads(encoded) == {"a": [1, 2, {"b": None}]}

    def test_empty_structures_are_not_null(self):
        assert prepare({}) == "{}"
        assert prepare([]) == "[]"

    def test_non_finite_floats_written_as_null(self):
        assert prepare({"a": math.nan, "b": [math.inf, -math.inf, 1.5]}) == '{"a": null, "b": [null, null, 1.5]}'
        assert prepare(math.nan) == "null"

    @given(st.recursive(st.floats() | st.text(), lambda children: st.lists(children, max_size=4), max_leaves=10))
    def test_output_is_strict_json(self, value):
        json.loads(prepare(value), parse_constant=_reject_constant)


class TestConsume:
    """Tests for the read-side decoder."""

    def test_json_text_is_parsed(self):
        assert consume('{"a": 1}') == {"a": 1}
        assert consume("[1, 2, 3]") == [1, 2, 3]

    def test_non_strings_are_unchanged(self):
        value = {"already": "decoded"}
        assert consume(value) is value
        assert consume(None) is None
        assert consume(12) == 12
        items = [1, 2]
        assert consume(items) is items

    def test_malformed_text_is_returned_unchanged(self):
        assert consume("not json {") == "not json {"
        assert consume("") == ""

    def test_non_json_constants_are_returned_unchanged(self):
        assert consume("NaN") == "NaN"
        assert consume("Infinity") == "Infinity"
        assert consume("-Infinity") == "-Infinity"
        assert consume('{"a": NaN}') == '{"a": NaN}'

    def test_consume_is_idempotent_on_decoded_values(self):
        decoded = consume('{"a": [1]}')
        assert consume(decoded) == decoded

    @given(structured_values)
    def test_prepare_then_consume_restores_value(self, value):
        assert consume(prepare(value)) == value

    @given(st.text())
    def test_consume_never_raises(self, text):
        consume(text)


class TestJsonText:
    """Tests for the SQLAlchemy type decorator."""

    def test_bind_param_uses_prepare(self):
        column_type = JsonText()
        assert column_type.process_bind_param({"a": 1}, dialect=None) == '{"a": 1}'
        assert column_type.process_bind_param(None, dialect=None) is None

    def test_result_value_uses_consume(self):
        column_type = JsonText()
        assert column_type.process_result_value('{"a": 1}', dialect=None) == {"a": 1}
        assert column_type.process_result_value("legacy", dialect=None) == "legacy"


class TestColumnOptions:
    """Tests for option pass-through into column declarations."""

    def test_factory_defaults(self):
        options = json_column_options()
        assert options == JsonColumnOptions()
        assert options.column_name is None
        assert options.serialize_as is UNSET

    def test_column_name_overrides_physical_name(self):
        column = json_column(json_column_options(column_name="settings"))
        assert column.name == "settings"
        assert isinstance(column.type, JsonText)

    def test_serialize_as_recorded_in_info(self):
        column = json_column(json_column_options(serialize_as=None), info={"note": "kept"})
        assert column.info == {"serialize_as": None, "note": "kept"}

    def test_serialization_key(self):
        assert serialization_key(json_column(), "meta") == "meta"
        assert serialization_key(json_column(json_column_options(serialize_as="extra")), "meta") == "extra"
        assert serialization_key(json_column(json_column_options(serialize_as=None)), "meta") is None

    def test_store_config_maps_to_settings_column(self):
        column_names = [column.name for column in Store.__table__.columns]
        assert "settings" in column_names
        assert "config" not in column_names
        assert Store.config.property.columns[0].name == "settings"


class TestToDict:
    """Tests for BaseModel.to_dict honoring serialize_as."""

    def test_hidden_and_renamed_fields(self):
        credential = _ApiCredential(id="cred-1", secret={"token": "s3cret"}, scopes=["read"])

        data = credential.to_dict()

        assert "secret" not in data
        assert "scopes" not in data
        assert data["permissions"] == ["read"]
        assert data["id"] == "cred-1"

    def test_store_config_serialized_under_attribute_key(self):
        store = Store(id="store-1", name="S", slug="s", config={"theme": "dark"}, meta={})

        data = store.to_dict()

        assert data["config"] == {"theme": "dark"}
        assert "settings" not in data
