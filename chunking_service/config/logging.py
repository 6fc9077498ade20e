"""Logging setup: one stdout handler, structured fields from extra= rendered as key=value."""

import logging
import sys
from typing import Any

from chunking_service.config.settings import get_settings

# Attributes every LogRecord carries; anything else arrived through extra=
_RESERVED_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {"message", "asctime", "fields"}

_NOISY_LOGGERS = ("urllib3", "httpx", "openai", "botocore", "sentence_transformers")


class ExtraFieldsFilter(logging.Filter):
    """Collect extra= fields of a record into record.fields, e.g. " | method=fixed chunks=3"."""

    def filter(self, record: logging.LogRecord) -> bool:
        extras = {k: v for k, v in vars(record).items() if k not in _RESERVED_ATTRS}
        record.fields = " | " + " ".join(f"{k}={v}" for k, v in extras.items()) if extras else ""
        return True


def configure_logging() -> None:
    """Install the stdout handler on the root logger at the configured level (DEBUG when debug is set)."""
    settings = get_settings()
    level_name = "DEBUG" if settings.debug else settings.log_level.upper()
    level = getattr(logging, level_name, logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.addFilter(ExtraFieldsFilter())
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s%(fields)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    for noisy in _NOISY_LOGGERS:
        logging.getLogger(noisy).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def log_extra(extra: dict[str, Any]) -> dict[str, Any]:
    """Keyword arguments for logger calls: logger.debug("msg", **log_extra({...}))."""
    return {"extra": extra}
