"""Unit tests for the Setting model."""

import math

from commerce.models.setting import Setting


def test_typed_value_follows_type_tag():
    assert Setting(group="tax", key="rate", value="8.5", type="number").get_typed_value() == 8.5
    assert Setting(group="tax", key="enabled", value="", type="boolean").get_typed_value() is False
    assert Setting(group="seo", key="tags", value='["a"]', type="array").get_typed_value() == ["a"]


def test_missing_type_is_treated_as_string():
    assert Setting(group="general", key="name", value="Shop").get_typed_value() == "Shop"


def test_non_numeric_number_is_nan():
    assert math.isnan(Setting(group="tax", key="rate", value="n/a", type="number").get_typed_value())


def test_repr_includes_scope():
    setting = Setting(store_id="store-1", group="general", key="name", type="string")
    assert repr(setting) == "<Setting(store_id=store-1, group='general', key='name', type='string')>"
