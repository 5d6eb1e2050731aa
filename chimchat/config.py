import logging
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

_config_logger = logging.getLogger(__name__)

_PROJECT_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _PROJECT_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Chim Chat API"
    app_version: str = "0.1.0"
    app_env: str = "development"

    # Chim configuration
    chim_key: str = ""
    chim_base_url: str = "https://chimeragpt.adventblocks.cc/v1"
    chim_proxy: str | None = None            # Outbound HTTP proxy URL
    chim_timeout_seconds: float = 120.0

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_http: str = "WARNING"          # httpx / httpcore — outbound HTTP
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_chim: str = "INFO"             # Chim provider adapter

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    def model_post_init(self, __context: object) -> None:
        if not self.chim_key.strip():
            _config_logger.warning("CHIM_KEY is not configured; Chim requests will be rejected")


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
