"""Logging setup driven by the per-category levels in Settings.

Each category groups the loggers of one concern (outbound HTTP, the
ASGI server, the Chim adapter) so their verbosity can be tuned with a
single environment variable.
"""

import logging
import sys

from chimchat.config import get_settings

_DEFAULT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Settings field -> loggers it controls
_CATEGORY_MAP: dict[str, tuple[str, ...]] = {
    "log_level_http": ("httpx", "httpcore"),
    "log_level_uvicorn": ("uvicorn", "uvicorn.access", "uvicorn.error"),
    "log_level_chim": ("chimchat.infrastructure.chim",),
}


def setup_logging() -> None:
    """Apply root and per-category levels. Run once from the app lifespan."""
    settings = get_settings()

    root = logging.getLogger()
    root.setLevel(_parse_level(settings.log_level))
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_DEFAULT_FORMAT))
        root.addHandler(handler)

    levels = {
        field_name: getattr(settings, field_name, "INFO")
        for field_name in _CATEGORY_MAP
    }
    for field_name, logger_names in _CATEGORY_MAP.items():
        level = _parse_level(levels[field_name])
        for name in logger_names:
            logging.getLogger(name).setLevel(level)

    logging.getLogger(__name__).debug(
        "Log levels: root=%s %s",
        settings.log_level,
        " ".join(f"{k}={v}" for k, v in levels.items()),
    )


def _parse_level(raw: str) -> int:
    """Map a level name to its logging constant; unknown names mean INFO."""
    numeric = logging.getLevelName(raw.upper())
    return numeric if isinstance(numeric, int) else logging.INFO
