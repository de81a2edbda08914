"""Tests for type definitions and response decoding."""

import pydantic
import pytest
from pydantic import BaseModel

from binance_sdk import ErrorBody, HTTPMethod, parse_response


class SubAccount(BaseModel):
    email: str
    isFreeze: bool
    createTime: int


class TestParseResponse:
    """Test response decoding helpers."""

    def test_plain_json(self):
        """Test decoding without a model returns plain JSON values."""
        assert parse_response(b'{"subAccounts": []}') == {"subAccounts": []}

    def test_model(self):
        """Test decoding into a pydantic model."""
        body = b'{"email": "a@b.com", "isFreeze": false, "createTime": 1700000000000}'
        account = parse_response(body, SubAccount)
        assert account.email == "a@b.com"
        assert account.isFreeze is False

    def test_list_of_models(self):
        """Test decoding into a list type."""
        body = b'[{"email": "a@b.com", "isFreeze": true, "createTime": 1}]'
        accounts = parse_response(body, list[SubAccount])
        assert len(accounts) == 1
        assert accounts[0].isFreeze is True

    def test_model_mismatch(self):
        """Test a body of the wrong shape fails validation."""
        with pytest.raises(pydantic.ValidationError):
            parse_response(b'{"email": "a@b.com"}', SubAccount)


class TestErrorBody:
    """Test exchange error payloads."""

    def test_from_bytes(self):
        """Test a standard error payload is decoded."""
        error = ErrorBody.from_bytes(b'{"code": -1022, "msg": "Signature for this request is not valid."}')
        assert error.code == -1022
        assert error.msg.startswith("Signature")

    def test_other_shape_returns_none(self):
        """Test bodies that are not error payloads give None."""
        assert ErrorBody.from_bytes(b"not json") is None
        assert ErrorBody.from_bytes(b'{"msg": "missing code"}') is None


class TestHTTPMethod:
    """Test HTTP method enum."""

    def test_values(self):
        """Test the supported verbs."""
        assert [method.value for method in HTTPMethod] == ["GET", "POST", "PUT", "DELETE"]
