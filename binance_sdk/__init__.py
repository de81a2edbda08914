"""Binance SDK for Python."""

# Main unified client
from .sdk import BinanceClient

# Signed request pipeline
from .client import SignedClient, build_query_string, current_timestamp_ms, sign

# Endpoint groups
from .sub_account import SubAccountAPI
from .wallet import WalletAPI

# Services
from .config import ClientConfig
from .logger import Logger, ConsoleLogger, NoopLogger, LogLevel, redact_query
from .validation import check_required_parameter, check_required_parameters

# Types
from .types import HTTPMethod, ParamValue, Params, ErrorBody, parse_response

# Exceptions
from .exceptions import (
    BinanceError,
    ValidationError,
    TransportError,
    APIError,
)

__all__ = [
    # Main client
    "BinanceClient",
    # Signed request pipeline
    "SignedClient",
    "build_query_string",
    "current_timestamp_ms",
    "sign",
    # Endpoint groups
    "SubAccountAPI",
    "WalletAPI",
    # Services
    "ClientConfig",
    "ConsoleLogger",
    "NoopLogger",
    "Logger",
    "LogLevel",
    "redact_query",
    "check_required_parameter",
    "check_required_parameters",
    # Types
    "HTTPMethod",
    "ParamValue",
    "Params",
    "ErrorBody",
    "parse_response",
    # Exceptions
    "BinanceError",
    "ValidationError",
    "TransportError",
    "APIError",
]

__version__ = "0.1.0"
