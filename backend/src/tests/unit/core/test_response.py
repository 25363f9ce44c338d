"""Unit tests for response envelopes."""

import json
import math

from commerce.core.response import CommerceResponse, to_serializable
from commerce.schemas.setting import SettingsGroup


class TestToSerializable:
    def test_non_finite_floats_become_none(self):
        assert to_serializable({"a": math.nan, "b": [math.inf, 1.5]}) == {"a": None, "b": [None, 1.5]}

    def test_pydantic_models_are_dumped(self):
        group = SettingsGroup(group="tax", settings={"rate": math.nan})
        assert to_serializable(group) == {"group": "tax", "settings": {"rate": None}}


class TestCommerceResponse:
    def test_success_envelope(self):
        response = CommerceResponse.success({"store_name": "Shop"}, status_code=201)

        assert response.status_code == 201
        assert json.loads(response.body) == {"data": {"store_name": "Shop"}}

    def test_error_envelope(self):
        response = CommerceResponse.error("Bad input", code="BAD", details={"field": "type"})

        assert response.status_code == 400
        assert json.loads(response.body) == {
            "error": {"message": "Bad input", "code": "BAD", "details": {"field": "type"}}
        }

    def test_no_content(self):
        assert CommerceResponse.no_content().status_code == 204
