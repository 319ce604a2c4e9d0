"""Configuration management for the threewords client."""

import os
from dataclasses import dataclass
from typing import List
from dotenv import load_dotenv

from .exceptions import ConfigurationError

load_dotenv()

DEFAULT_API_GATEWAY = "https://api.what3words.com"
DEFAULT_TIMEOUT_MS = 30000

# Values shipped in .env.example that must never be sent as a real key
PLACEHOLDER_API_KEYS = ("your-api-key-here", "{your-api-key}")

DELIMITERS: List[str] = ['.', '。', '︒', '។', '։', '။', '۔', '።', '।']

TEST_WORDS: List[str] = ['filled', 'count', 'soap']

LOG_FORMATS = ("json", "text")


def get_api_key() -> str:
    """Return API_KEY from the environment.

    Raises:
        ConfigurationError: if the key is unset or still a placeholder.
    """
    api_key = os.getenv("API_KEY")

    if not api_key or api_key in PLACEHOLDER_API_KEYS:
        raise ConfigurationError(
            "API_KEY is not set. Please create a .env file with your API key.\n"
            "See .env.example for reference."
        )

    return api_key


def get_api_gateway() -> str:
    return os.getenv("API_GATEWAY") or DEFAULT_API_GATEWAY


@dataclass
class Settings:
    """Central configuration for the threewords client.

    The API key is not a field: it is read from the environment each time
    ``api_key`` is accessed, so building settings (or importing this module)
    never fails on a machine without a key.
    """

    api_gateway: str = DEFAULT_API_GATEWAY
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    log_format: str = "json"
    log_level: str = "INFO"

    @property
    def api_key(self) -> str:
        return get_api_key()

    @property
    def has_api_key(self) -> bool:
        try:
            get_api_key()
        except ConfigurationError:
            return False
        return True

    @classmethod
    def from_env(cls) -> 'Settings':
        """Create settings from environment variables."""
        raw_timeout = os.getenv("API_TIMEOUT_MS")
        if raw_timeout:
            try:
                timeout_ms = int(raw_timeout)
            except ValueError:
                raise ConfigurationError(
                    f"API_TIMEOUT_MS must be an integer, got {raw_timeout!r}"
                ) from None
        else:
            timeout_ms = DEFAULT_TIMEOUT_MS

        return cls(
            api_gateway=get_api_gateway(),
            timeout_ms=timeout_ms,
            log_format=os.getenv("LOG_FORMAT", "json").lower(),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def validate(self) -> None:
        """Validate configuration values."""
        if not self.api_gateway:
            raise ConfigurationError("API gateway must not be empty")
        if self.timeout_ms <= 0:
            raise ConfigurationError("Timeout must be positive")
        if self.log_format not in LOG_FORMATS:
            raise ConfigurationError(
                f"LOG_FORMAT must be one of {', '.join(LOG_FORMATS)}, got {self.log_format!r}"
            )

    def create_client(self):
        """Build an ApiClient bound to these settings."""
        from .api_client import ApiClient

        return ApiClient(base_url=self.api_gateway, timeout=self.timeout_ms)
