"""Main Binance SDK client with a unified interface."""

from pathlib import Path
from typing import Optional, Union

import httpx

from .client import SignedClient
from .config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, ClientConfig
from .logger import ConsoleLogger, Logger, LogLevel
from .sub_account import SubAccountAPI
from .types import HTTPMethod, Params
from .wallet import WalletAPI


class BinanceClient:
    """
    Main Binance SDK client grouping sub-account and wallet endpoints.

    Example:
        ```python
        with BinanceClient(api_key="...", api_secret="...") as client:
            body = client.sub_account.sub_account_list(page=1, limit=10)
            accounts = parse_response(body)
        ```
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        api_secret: Optional[str] = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        config: Optional[ClientConfig] = None,
        log_level: LogLevel = LogLevel.WARN,
        logger: Optional[Logger] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize the Binance SDK.

        Args:
            api_key: API key sent with every request
            api_secret: API secret used to sign requests
            base_url: Base URL of the REST API
            timeout: Request timeout in seconds
            config: Complete configuration; overrides the four arguments above
            log_level: Minimum log level of the default console logger
            logger: Custom logger instance
            transport: Custom httpx transport, mainly for tests
        """
        if config is None:
            if not api_key or not api_secret:
                raise ValueError("api_key and api_secret are required")
            config = ClientConfig(
                api_key=api_key, api_secret=api_secret, base_url=base_url, timeout=timeout
            )

        self.config = config
        self.logger = logger or ConsoleLogger(level=log_level)
        self.rest = SignedClient(config, logger=self.logger, transport=transport)

        self.sub_account = SubAccountAPI(self.rest)
        self.wallet = WalletAPI(self.rest)

    @classmethod
    def from_env(cls, env_file: Optional[Union[str, Path]] = None, **kwargs) -> "BinanceClient":
        """Create a client from BINANCE_* environment variables (and .env)."""
        return cls(config=ClientConfig.from_env(env_file), **kwargs)

    def __enter__(self) -> "BinanceClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP connection pool."""
        self.rest.close()

    def execute(
        self,
        method: Union[str, HTTPMethod],
        path: str,
        params: Optional[Params] = None,
    ) -> bytes:
        """Send a signed request to an endpoint without a dedicated wrapper."""
        return self.rest.execute(method, path, params)
