"""Signed REST client: serializes, timestamps and signs every request."""

import hashlib
import hmac
import math
import time
from decimal import Decimal
from typing import Optional, Union
from urllib.parse import urlencode

import httpx

from .config import ClientConfig
from .exceptions import APIError, TransportError, ValidationError
from .logger import Logger, NoopLogger, redact_query
from .types import HTTPMethod, ParamValue, Params

API_KEY_HEADER = "X-MBX-APIKEY"


def current_timestamp_ms() -> int:
    """Current wall-clock time in milliseconds since the epoch."""
    return int(time.time() * 1000)


def sign(secret: str, query_string: str) -> str:
    """
    Sign a query string.

    Args:
        secret: API secret used as the HMAC key
        query_string: Exact query string to sign, without the signature field

    Returns:
        Lowercase hex HMAC-SHA256 digest
    """
    return hmac.new(
        secret.encode("utf-8"), query_string.encode("utf-8"), hashlib.sha256
    ).hexdigest()


def _format_float(key: str, value: float) -> str:
    # Shortest round-trip digits, fixed-point notation, no trailing ".0".
    if not math.isfinite(value):
        raise ValidationError(f"parameter {key} must be a finite number", parameter=key)
    return format(Decimal(repr(value)).normalize(), "f")


def _encode_str(key: str, value: str) -> str:
    # Plain str content, so (str, Enum) members go out as their value.
    text = str.__str__(value)
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise ValidationError(f"parameter {key} is not valid UTF-8 text", parameter=key) from exc
    return text


def _encode_value(key: str, value: ParamValue) -> list[str]:
    """Serialize one parameter value; an empty list means "omit"."""
    if value is None:
        return []
    # bool is a subclass of int, so it has to be matched first.
    if isinstance(value, bool):
        return ["true" if value else "false"]
    if isinstance(value, int):
        return [int.__repr__(value)]
    if isinstance(value, float):
        return [_format_float(key, value)]
    if isinstance(value, str):
        return [_encode_str(key, value)] if value else []
    if isinstance(value, (list, tuple)):
        if not all(isinstance(item, str) for item in value):
            raise ValidationError(f"parameter {key} must be a list of strings", parameter=key)
        return [_encode_str(key, item) for item in value]
    raise ValidationError(
        f"parameter {key} has unsupported type {type(value).__name__}", parameter=key
    )


def build_query_string(params: Optional[Params]) -> str:
    """
    Serialize parameters to a canonical, URL-encoded query string.

    Keys are sorted so the result does not depend on insertion order.
    None values and empty strings are dropped; zero and False are kept.
    List values become repeated ``key=value`` pairs in list order.

    Args:
        params: Parameter mapping

    Returns:
        Query string without a leading "?"
    """
    pairs: list[tuple[str, str]] = []
    for key in sorted(params or {}):
        for encoded in _encode_value(key, params[key]):
            pairs.append((key, encoded))
    return urlencode(pairs)


class SignedClient:
    """
    Signed request pipeline for the Binance REST API.

    Every call gets a fresh ``timestamp``, is signed with HMAC-SHA256 and
    carries the API key header. The raw response body is returned as bytes;
    decoding is left to the caller.

    Example:
        ```python
        config = ClientConfig(api_key="...", api_secret="...")
        with SignedClient(config) as client:
            body = client.execute("GET", "/sapi/v1/sub-account/list", {"page": 1})
        ```
    """

    def __init__(
        self,
        config: ClientConfig,
        logger: Optional[Logger] = None,
        transport: Optional[httpx.BaseTransport] = None,
        http_client: Optional[httpx.Client] = None,
    ):
        """
        Initialize the client.

        Args:
            config: Credentials, base URL and timeout
            logger: Logger instance, silent when omitted
            transport: Custom httpx transport (e.g. httpx.MockTransport)
            http_client: Pre-built httpx client; it is not closed by `close()`
        """
        self.config = config
        self.logger = logger or NoopLogger()
        self._secret = config.api_secret.get_secret_value()

        if http_client is not None:
            self._http = http_client
            self._owns_http = False
        else:
            self._http = httpx.Client(
                timeout=httpx.Timeout(config.timeout), transport=transport
            )
            self._owns_http = True

    def __enter__(self) -> "SignedClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_http:
            self._http.close()

    def execute(
        self,
        method: Union[str, HTTPMethod],
        path: str,
        params: Optional[Params] = None,
    ) -> bytes:
        """
        Send a signed request.

        Args:
            method: HTTP verb (GET, POST, PUT or DELETE)
            path: Endpoint path, e.g. "/sapi/v1/sub-account/list"
            params: Query parameters; the mapping is not modified

        Returns:
            Raw response body

        Raises:
            ValidationError: unsupported method or parameter value
            TransportError: the request could not be sent or timed out
            APIError: the exchange answered with a status other than 200
        """
        verb = self._resolve_method(method)

        query = dict(params or {})
        query["timestamp"] = current_timestamp_ms()

        query_string = build_query_string(query)
        query_string += "&signature=" + sign(self._secret, query_string)
        url = f"{self.config.base_url}{path}?{query_string}"

        self.logger.debug("%s %s", verb.value, redact_query(url))
        try:
            response = self._http.request(
                verb.value, url, headers={API_KEY_HEADER: self.config.api_key}
            )
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            raise TransportError(f"failed to execute request: {exc}", cause=exc) from exc

        self.logger.debug("%s %s -> %d", verb.value, path, response.status_code)
        if response.status_code != 200:
            raise APIError(response.status_code, response.content)
        return response.content

    @staticmethod
    def _resolve_method(method: Union[str, HTTPMethod]) -> HTTPMethod:
        try:
            return HTTPMethod(str(getattr(method, "value", method)).upper())
        except ValueError:
            raise ValidationError(f"unsupported HTTP method {method!r}", parameter="method") from None
