"""Logging helpers shared by the app and the CLI."""

from __future__ import annotations

import logging

_ROOT_NAME = "tripboard"
_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the package logger, or a child of it when *name* is given."""

    if not name:
        return logging.getLogger(_ROOT_NAME)
    if name == _ROOT_NAME or name.startswith(_ROOT_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_ROOT_NAME}.{name}")


def configure_logging(level: int | str = logging.INFO) -> logging.Logger:
    """Attach a stream handler to the package logger once."""

    logger = get_logger()
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logger.setLevel(level)
    if not any(getattr(h, "_tripboard", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        handler._tripboard = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    return logger


__all__ = ["configure_logging", "get_logger"]
