"""
clacks.demo.logging.logging_config

Purpose:
    Central logging configuration for the demo service.
    Routes app logs and uvicorn logs (uvicorn.error, uvicorn.access) through one handler.

Created:
    2026-10-19
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

HANDLER_NAME = "clacks.demo"


def _make_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT))
    return handler


def _configure_logger(logger_name: str, handler: logging.Handler, level: int, *, clear_handlers: bool) -> None:
    logger = logging.getLogger(logger_name)
    logger.setLevel(level)

    if clear_handlers:
        logger.handlers.clear()

    logger.addHandler(handler)
    logger.propagate = False


def configure_logging(level: str = "INFO") -> None:
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level!r}")

    handler = _make_handler(numeric_level)

    # Root/app logs (don't clear root handlers; other libs may have added theirs)
    root = logging.getLogger()
    root.setLevel(numeric_level)
    ours = [h for h in root.handlers if h.get_name() == HANDLER_NAME]
    if ours:
        # Reconfiguration: keep our handler in step with the new level.
        for h in ours:
            h.setLevel(numeric_level)
    elif not any(isinstance(h, logging.StreamHandler) for h in root.handlers):
        root.addHandler(handler)

    # Uvicorn uses these loggers; clear their handlers so our formatter wins.
    _configure_logger("uvicorn", handler, numeric_level, clear_handlers=True)
    _configure_logger("uvicorn.error", handler, numeric_level, clear_handlers=True)
    _configure_logger("uvicorn.access", handler, numeric_level, clear_handlers=True)
