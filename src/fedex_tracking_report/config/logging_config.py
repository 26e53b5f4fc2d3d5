from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

_DEFAULT_FMT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"

_LEVELS = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
    "NOTSET": logging.NOTSET,
}

# Truncation applied to request/response bodies before they are logged
MAX_LOGGED_BODY = 4000


def _coerce_level(level: Optional[Union[int, str]]) -> int:
    """int or name ('debug', 'INFO'); None falls back to LOG_LEVEL, then INFO."""
    if level is None:
        level = os.getenv("LOG_LEVEL") or None
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        return _LEVELS.get(level.strip().upper(), logging.INFO)
    return logging.INFO


def truncate_body(text: Optional[str], limit: int = MAX_LOGGED_BODY) -> Optional[str]:
    if text and len(text) > limit:
        return text[:limit] + "..."
    return text


def get_logger(
    name: Optional[str] = None,
    *,
    level: Optional[Union[int, str]] = None,
    log_file: Optional[Union[str, Path]] = None,
    console: bool = True,
    propagate: bool = False,
    fmt: str = _DEFAULT_FMT,
    datefmt: str = _DEFAULT_DATEFMT,
    max_bytes: int = 5_000_000,
    backup_count: int = 5,
) -> logging.Logger:
    """
    Configure a logger with an optional stderr handler and an optional
    rotating log file. Repeated calls add only the targets still missing; a
    new `log_file` replaces and closes the previous rotating file handler.
    """
    logger = logging.getLogger(name)
    logger.setLevel(_coerce_level(level))
    logger.propagate = propagate
    formatter = logging.Formatter(fmt=fmt, datefmt=datefmt)

    has_console = any(
        type(h) is logging.StreamHandler and h.stream in (sys.stderr, sys.stdout)
        for h in logger.handlers
    )
    if console and not has_console:
        sh = logging.StreamHandler(stream=sys.stderr)
        sh.setFormatter(formatter)
        logger.addHandler(sh)

    if log_file is not None:
        log_path = Path(log_file).resolve()
        for h in list(logger.handlers):
            if isinstance(h, RotatingFileHandler) and Path(h.baseFilename) != log_path:
                logger.removeHandler(h)
                h.close()
        has_file = any(isinstance(h, RotatingFileHandler) for h in logger.handlers)
        if not has_file:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            fh = RotatingFileHandler(
                filename=str(log_path),
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding="utf-8",
                delay=True,
            )
            fh.setFormatter(formatter)
            logger.addHandler(fh)

    for h in logger.handlers:
        h.setLevel(logger.level)
    return logger
