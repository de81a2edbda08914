"""Tests for query serialization and request signing."""

from enum import IntEnum

import pytest

from binance_sdk import HTTPMethod, ValidationError, build_query_string, sign


class FuturesType(IntEnum):
    USDT_MARGINED = 1
    COIN_MARGINED = 2


class Email(str):
    def __str__(self):
        return "<hidden>"


class TestSign:
    """Test HMAC-SHA256 signing."""

    def test_golden_value(self):
        """Test signature against an independently computed digest."""
        query = "amount=1.5&asset=BTC&timestamp=1700000000000"
        assert (
            sign("test_secret", query)
            == "34fb1f1545f65728f638cef3efc88f57bd4c9f79a7b88e001ca2bfed99896f6e"
        )

    def test_exchange_documentation_example(self):
        """Test the signing example published in the exchange's API docs."""
        secret = "NhqPtmdSJYdKjVHjA7PZj4Mge3R5YNiP1e3UZjInClVN65XAbvqqM6A7H5fATj0j"
        query = (
            "symbol=LTCBTC&side=BUY&type=LIMIT&timeInForce=GTC&quantity=1"
            "&price=0.1&recvWindow=5000&timestamp=1499827319559"
        )
        assert (
            sign(secret, query)
            == "c8db56825ae71d6d79447849e617115f4a920fa2acdcab2b053c4b2838bd6b71"
        )

    def test_deterministic(self):
        """Test signing the same query twice gives the same signature."""
        query = "limit=10&page=1&timestamp=1700000000000"
        assert sign("secret", query) == sign("secret", query)

    def test_secret_changes_signature(self):
        """Test a different secret gives a different signature."""
        query = "amount=1.5&asset=BTC&timestamp=1700000000000"
        assert sign("test_secret", query) != sign("other_secret", query)
        assert (
            sign("other_secret", query)
            == "501bf43301fbdca67e53ea146fdf725a2c31b5801f4fdf5a585452476e248e3c"
        )

    def test_lowercase_hex(self):
        """Test signature is 64 lowercase hex characters."""
        signature = sign("secret", "a=1")
        assert len(signature) == 64
        assert signature == signature.lower()
        int(signature, 16)


class TestBuildQueryString:
    """Test canonical query string serialization."""

    def test_empty(self):
        """Test None and empty mappings serialize to an empty string."""
        assert build_query_string(None) == ""
        assert build_query_string({}) == ""

    def test_keys_sorted(self):
        """Test keys come out in lexicographic order."""
        assert build_query_string({"page": 1, "limit": 10}) == "limit=10&page=1"

    def test_insertion_order_does_not_matter(self):
        """Test the same pairs inserted in another order serialize identically."""
        first = {"asset": "BTC", "amount": 1.5, "timestamp": 1700000000000}
        second = {"timestamp": 1700000000000, "amount": 1.5, "asset": "BTC"}
        assert build_query_string(first) == build_query_string(second)
        assert build_query_string(first) == "amount=1.5&asset=BTC&timestamp=1700000000000"

    def test_none_and_empty_string_omitted(self):
        """Test None values and empty strings are skipped."""
        query = build_query_string({"coin": "", "network": None, "email": "x"})
        assert query == "email=x"
        assert "coin" not in query
        assert "network" not in query

    def test_zero_and_false_kept(self):
        """Test zero numbers and False are serialized."""
        query = build_query_string({"offset": 0, "amount": 0.0, "isFreeze": False})
        assert query == "amount=0&isFreeze=false&offset=0"

    def test_booleans(self):
        """Test booleans become lowercase words, not 1/0."""
        assert build_query_string({"enableBlvt": True}) == "enableBlvt=true"

    def test_large_integers(self):
        """Test 64-bit integers are written in full."""
        assert build_query_string({"startTime": 9223372036854775807}) == (
            "startTime=9223372036854775807"
        )

    def test_float_formatting(self):
        """Test floats use fixed-point shortest form."""
        assert build_query_string({"a": 1.5}) == "a=1.5"
        assert build_query_string({"a": 2.0}) == "a=2"
        assert build_query_string({"a": 0.1}) == "a=0.1"
        assert build_query_string({"a": 1e-7}) == "a=0.0000001"
        assert build_query_string({"a": 1e20}) == "a=100000000000000000000"
        assert build_query_string({"a": -3.25}) == "a=-3.25"

    def test_non_finite_float_rejected(self):
        """Test NaN and infinity are rejected before any request."""
        with pytest.raises(ValidationError) as exc_info:
            build_query_string({"amount": float("nan")})
        assert exc_info.value.parameter == "amount"

        with pytest.raises(ValidationError):
            build_query_string({"amount": float("inf")})

    def test_string_list_repeats_key(self):
        """Test list values become repeated pairs in list order."""
        query = build_query_string({"symbols": ["ETH", "BTC", "ETH"], "a": "1"})
        assert query == "a=1&symbols=ETH&symbols=BTC&symbols=ETH"

    def test_empty_list_omitted(self):
        """Test an empty list emits nothing."""
        assert build_query_string({"symbols": [], "a": "1"}) == "a=1"

    def test_list_of_non_strings_rejected(self):
        """Test lists must hold strings only."""
        with pytest.raises(ValidationError) as exc_info:
            build_query_string({"ids": [1, 2]})
        assert exc_info.value.parameter == "ids"

    def test_unsupported_type_rejected(self):
        """Test values outside the supported kinds are rejected."""
        with pytest.raises(ValidationError) as exc_info:
            build_query_string({"payload": {"nested": 1}})
        assert "payload" in str(exc_info.value)

    def test_url_encoding(self):
        """Test reserved characters are form-encoded."""
        assert build_query_string({"email": "a@b.com"}) == "email=a%40b.com"
        assert build_query_string({"note": "a b&c"}) == "note=a+b%26c"
        assert build_query_string({"ipAddress": "1.1.1.1,2.2.2.2"}) == (
            "ipAddress=1.1.1.1%2C2.2.2.2"
        )

    def test_str_enum_sends_value(self):
        """Test (str, Enum) members go out as their value, not their name."""
        assert build_query_string({"side": HTTPMethod.GET}) == "side=GET"
        assert build_query_string({"sides": [HTTPMethod.POST, "GET"]}) == (
            "sides=POST&sides=GET"
        )

    def test_int_enum_sends_digits(self):
        """Test IntEnum members go out as plain digits."""
        assert build_query_string({"futuresType": FuturesType.COIN_MARGINED}) == (
            "futuresType=2"
        )

    def test_str_subclass_sends_content(self):
        """Test a str subclass with a custom __str__ sends its text content."""
        assert build_query_string({"email": Email("a@b.com")}) == "email=a%40b.com"

    def test_lone_surrogate_rejected(self):
        """Test text that cannot be UTF-8 encoded raises a validation error."""
        with pytest.raises(ValidationError) as exc_info:
            build_query_string({"note": "bad\ud800"})
        assert exc_info.value.parameter == "note"

    def test_lone_surrogate_in_list_rejected(self):
        """Test list items are checked for valid text too."""
        with pytest.raises(ValidationError) as exc_info:
            build_query_string({"symbols": ["BTC", "\udfff"]})
        assert exc_info.value.parameter == "symbols"
