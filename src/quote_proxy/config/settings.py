"""Application settings and configuration."""

from typing import Literal, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://www.alphavantage.co/query"
DEFAULT_LISTEN_ADDR = ":8443"


class Settings(BaseSettings):
    """
    Process configuration loaded from environment variables.

    Read once at startup and never mutated afterwards. API_KEY, SYMBOL and
    NDAYS are required; a missing or invalid value fails construction.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # Request configuration
    api_key: str
    symbol: str
    ndays: int
    listen_addr: str = DEFAULT_LISTEN_ADDR

    # Upstream HTTP client
    base_url: str = DEFAULT_BASE_URL
    series_function: str = "TIME_SERIES_DAILY_ADJUSTED"
    insecure_skip_verify: bool = False
    request_timeout_seconds: float = 30.0
    quote_provider: Literal["alpha_vantage", "stub"] = "alpha_vantage"

    # Retry policy
    retry_interval_seconds: float = 30.0
    retry_max_attempts: int = 5

    # TLS material, provisioned externally
    tls_cert_file: str = "../certs/certbundle.pem"
    tls_key_file: str = "../certs/server.key"

    log_level: str = "INFO"

    @field_validator("api_key", "symbol")
    @classmethod
    def _require_non_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("must be set to a non-empty string")
        return v.strip()

    @field_validator("ndays")
    @classmethod
    def _validate_ndays(cls, v: int) -> int:
        if v < 1:
            raise ValueError("out of range, must be at least 1 day")
        return v

    @field_validator("listen_addr", mode="before")
    @classmethod
    def _default_listen_addr(cls, v: Optional[str]) -> str:
        # An empty LISTEN_ADDR behaves as if it were unset
        addr = v or DEFAULT_LISTEN_ADDR
        _, sep, port = addr.rpartition(":")
        if not sep or not port.isdigit():
            raise ValueError(f"expected host:port, got {addr!r}")
        return addr

    @field_validator("retry_max_attempts")
    @classmethod
    def _validate_max_attempts(cls, v: int) -> int:
        if v < 1:
            raise ValueError("must allow at least 1 attempt")
        return v

    @field_validator("retry_interval_seconds", "request_timeout_seconds")
    @classmethod
    def _validate_non_negative(cls, v: float) -> float:
        if v < 0:
            raise ValueError("must not be negative")
        return v

    def listen_host(self) -> str:
        """Host part of listen_addr; an empty host means all interfaces."""
        host, _, _ = self.listen_addr.rpartition(":")
        # "[::]:8443" binds "::"
        host = host.removeprefix("[").removesuffix("]")
        return host or "0.0.0.0"

    def listen_port(self) -> int:
        """Port part of listen_addr."""
        _, _, port = self.listen_addr.rpartition(":")
        return int(port)


# Global settings instance (can be replaced at runtime)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the current settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Set the global settings instance (used by tests and the entrypoint)."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Reset settings to force reload."""
    global _settings
    _settings = None
