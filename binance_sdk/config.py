"""Client configuration and environment loading."""

import os
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator

DEFAULT_BASE_URL = "https://api.binance.com"
DEFAULT_TIMEOUT = 30.0

ENV_API_KEY = "BINANCE_API_KEY"
ENV_API_SECRET = "BINANCE_SECRET_KEY"
ENV_BASE_URL = "BINANCE_BASE_URL"
ENV_TIMEOUT = "BINANCE_TIMEOUT"


class ClientConfig(BaseModel):
    """Immutable credentials and transport settings for a client."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    api_key: str = Field(min_length=1)
    api_secret: SecretStr
    base_url: str = DEFAULT_BASE_URL
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)

    @field_validator("api_secret")
    @classmethod
    def _secret_not_empty(cls, value: SecretStr) -> SecretStr:
        if not value.get_secret_value():
            raise ValueError("api_secret must not be empty")
        return value

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @classmethod
    def from_env(cls, env_file: Optional[Union[str, Path]] = None) -> "ClientConfig":
        """
        Build a config from environment variables.

        A `.env` file is loaded first when present; variables already set in
        the process environment take precedence over it.

        Args:
            env_file: Path of the dotenv file, `.env` lookup when omitted

        Returns:
            ClientConfig
        """
        load_dotenv(env_file)

        api_key = os.getenv(ENV_API_KEY, "")
        api_secret = os.getenv(ENV_API_SECRET, "")
        if not api_key or not api_secret:
            raise ValueError(f"{ENV_API_KEY} and {ENV_API_SECRET} must be set")

        return cls(
            api_key=api_key,
            api_secret=SecretStr(api_secret),
            base_url=os.getenv(ENV_BASE_URL) or DEFAULT_BASE_URL,
            timeout=float(os.getenv(ENV_TIMEOUT) or DEFAULT_TIMEOUT),
        )
