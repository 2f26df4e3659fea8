# app/logger.py
import logging
import sys
from typing import Dict, Optional

from app.config import config

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Server loggers follow our level; noisy client libraries never go below the floor given here
_SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access", "gunicorn.error", "gunicorn.access")
_LIBRARY_FLOORS: Dict[str, int] = {
    "httpx": logging.WARNING,   # one INFO line per OpenAI request
    "openai": logging.INFO,
}

_configured = False


def _resolve_level(name: str) -> int:
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(level: Optional[str] = None, *, force: bool = False) -> int:
    """
    Route the root logger to stdout at LOG_LEVEL (or `level`).
    Runs once per process unless `force` is set. Returns the level applied.
    """
    global _configured
    level_value = _resolve_level(level or config.log_level)
    if _configured and not force:
        return logging.getLogger().level

    root = logging.getLogger()
    root.setLevel(level_value)
    if not root.handlers:
        root.addHandler(logging.StreamHandler(sys.stdout))
    for handler in root.handlers:
        handler.setLevel(level_value)
        if handler.formatter is None:
            handler.setFormatter(logging.Formatter(LOG_FORMAT))

    for name in _SERVER_LOGGERS:
        logging.getLogger(name).setLevel(level_value)
    for name, floor in _LIBRARY_FLOORS.items():
        logging.getLogger(name).setLevel(max(level_value, floor))

    _configured = True
    return level_value


def get_logger(name: Optional[str] = None) -> logging.Logger:
    configure_logging()
    return logging.getLogger(name or "app")
