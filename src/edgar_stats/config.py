"""Configuration management via environment variables.

Reads from .env file (via pydantic-settings) with sensible defaults.
All values can be overridden via environment variables.

Required:
    EDGAR_IDENTITY  — Your name + email for SEC EDGAR API User-Agent header

Optional:
    REQUEST_TIMEOUT     — Per-request timeout in seconds (default 10)
    MAX_RECENT_FILINGS  — How many recent filings to keep on a profile (default 10)
    LOG_LEVEL           — Root log level for the CLI / server (default INFO)
    PORT                — Server port when running the SSE transport
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # SEC EDGAR API identity (name + email, required by SEC)
    edgar_identity: str = "EDGAR Company Stats edgar-stats@example.com"

    # SEC rejects slow clients anyway; the registry file is ~1MB
    request_timeout: float = 10.0

    max_recent_filings: int = 10

    log_level: str = "INFO"

    port: int = 8877

    # Strip whitespace from string fields — the .env file often has
    # trailing spaces and quotes that end up in the User-Agent header
    @field_validator("edgar_identity", "log_level", mode="before")
    @classmethod
    def strip_whitespace(cls, v: str) -> str:
        if isinstance(v, str):
            return v.strip().strip('"').strip("'").strip()
        return v

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


_config: Settings | None = None


def get_config() -> Settings:
    """Get or create the shared Settings singleton."""
    global _config
    if _config is None:
        _config = Settings()
    return _config
