from __future__ import annotations

import logging
import os
import sys
from contextlib import suppress
from logging.handlers import RotatingFileHandler
from pathlib import Path

from typographer.env import env_truthy

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"


def _log_level_from_env() -> str | None:
    raw = str(os.getenv("TYPOGRAPHER_LOG_LEVEL", "") or "").strip()
    return raw or None


def default_log_dir() -> Path:
    raw = str(os.getenv("TYPOGRAPHER_LOG_DIR", "") or "").strip()
    return Path(raw) if raw else Path.cwd() / "logs"


def ensure_file_logging(*, log_dir: Path, filename: str = "typographer.log") -> Path:
    """Attach a rotating file handler to the root logger (idempotent).

    This works well with uvicorn's logging config (we just add another handler).
    """

    if env_truthy("TYPOGRAPHER_DISABLE_FILE_LOG"):
        return log_dir / filename

    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = (log_dir / filename).resolve()

    root = logging.getLogger()
    for h in root.handlers:
        if getattr(h, "_typographer_file_log", False):
            base = getattr(h, "baseFilename", None)
            return Path(str(base)).resolve() if base else log_file
        base = getattr(h, "baseFilename", None)
        if base and Path(str(base)).resolve() == log_file:
            return log_file

    handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,
        encoding="utf-8",
    )
    handler._typographer_file_log = True  # type: ignore[attr-defined]
    handler.setLevel(logging.INFO)
    handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt=_DATEFMT))
    root.addHandler(handler)

    lvl = _log_level_from_env()
    if lvl:
        with suppress(Exception):
            root.setLevel(lvl.upper())

    return log_file


def configure_console_logging(level: str | None = None) -> None:
    """stderr logging for the command line; stdout carries the formatted text."""

    root = logging.getLogger()
    if not any(getattr(h, "_typographer_console_log", False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler._typographer_console_log = True  # type: ignore[attr-defined]
        handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt=_DATEFMT))
        root.addHandler(handler)

    lvl = level or _log_level_from_env() or "WARNING"
    with suppress(Exception):
        root.setLevel(lvl.upper())
