"""Logging bootstrap for the servarr_tui logger hierarchy.

The TUI owns the terminal, so records go to a rotating file only.

// [LAW:single-enforcer] Handler wiring happens in this module only; every
//   other module just calls logging.getLogger(__name__).
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_LEVEL_ENV = "SERVARR_TUI_LOG_LEVEL"
LOG_DIR_ENV = "SERVARR_TUI_LOG_DIR"
LOG_FILE_NAME = "servarr-tui.log"


@dataclass(frozen=True)
class LoggingRuntime:
    level_name: str
    level: int
    file_path: str


_RUNTIME: LoggingRuntime | None = None


def _parse_level(raw: str) -> tuple[str, int]:
    normalized = str(raw or "INFO").strip().upper()
    level = getattr(logging, normalized, logging.INFO)
    if not isinstance(level, int):
        level = logging.INFO
    return str(logging.getLevelName(level)), level


def default_log_dir() -> Path:
    return Path(os.environ.get(LOG_DIR_ENV, os.path.expanduser("~/.local/share/servarr-tui/logs")))


def _make_file_handler(level: int, file_path: str) -> logging.Handler:
    handler = RotatingFileHandler(
        file_path,
        maxBytes=20 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s [%(threadName)s] %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    )
    return handler


def configure() -> LoggingRuntime:
    """Attach the file handler to the ``servarr_tui`` logger.

    Idempotent: repeated calls return the originally configured runtime.
    """
    global _RUNTIME
    if _RUNTIME is not None:
        return _RUNTIME

    level_name, level = _parse_level(os.environ.get(LOG_LEVEL_ENV, "INFO"))
    log_dir = default_log_dir()
    log_dir.mkdir(parents=True, exist_ok=True)
    file_path = str(log_dir / LOG_FILE_NAME)

    logger = logging.getLogger("servarr_tui")
    logger.setLevel(level)
    logger.propagate = False
    logger.handlers.clear()
    logger.addHandler(_make_file_handler(level, file_path))

    # Keep third-party logging quiet unless it is warning+.
    root = logging.getLogger()
    if root.level > logging.WARNING:
        root.setLevel(logging.WARNING)

    logging.captureWarnings(True)

    _RUNTIME = LoggingRuntime(level_name=level_name, level=level, file_path=file_path)
    return _RUNTIME


def get_runtime() -> LoggingRuntime | None:
    return _RUNTIME


def reset() -> None:
    """Detach handlers and forget the runtime. Used by tests."""
    global _RUNTIME
    logger = logging.getLogger("servarr_tui")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    _RUNTIME = None
