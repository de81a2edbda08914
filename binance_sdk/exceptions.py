"""Exceptions raised by the Binance SDK."""

from typing import Optional

from .types import ErrorBody


class BinanceError(Exception):
    """Base exception for all SDK errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(BinanceError, ValueError):
    """A request could not be built from the supplied parameters.

    Raised before any network I/O, so supplying the missing or corrected
    value is always enough to recover.
    """

    def __init__(self, message: str, parameter: Optional[str] = None):
        super().__init__(message)
        self.parameter = parameter


class TransportError(BinanceError):
    """The HTTP round trip failed before a response was received."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class APIError(BinanceError):
    """The exchange answered with a non-200 status.

    The body is kept verbatim; use `error_body()` to read the exchange's
    structured error code and message.
    """

    def __init__(self, status_code: int, body: bytes):
        self.status_code = status_code
        self.body = body
        super().__init__(f"API error (status {status_code}): {self.text}")

    @property
    def text(self) -> str:
        """Response body decoded as UTF-8."""
        return self.body.decode("utf-8", errors="replace")

    def error_body(self) -> Optional[ErrorBody]:
        """
        Decode the body as a Binance error payload.

        Returns:
            ErrorBody, or None if the body is not `{"code": ..., "msg": ...}`
        """
        return ErrorBody.from_bytes(self.body)
