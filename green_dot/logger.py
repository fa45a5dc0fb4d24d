"""
Logging setup for Green Dot.

Every record carries a ``component`` field (``worker``, ``controller``,
``pointer``...) so the file log shows which side of the activity loop
produced it.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional

from loguru import logger as _logger

_LOG_INITIALISED = False
LOG_DIR = Path(os.environ.get("GREEN_DOT_LOG_DIR", str(Path.home() / ".green_dot" / "logs")))
DEFAULT_LOG_PATH = LOG_DIR / "green_dot.log"
CONSOLE_LEVEL = os.environ.get("GREEN_DOT_LOG_LEVEL", "INFO").upper()
DEFAULT_COMPONENT = "app"
# RFC 1123 style timestamps, e.g. "Mon, 19 Oct 2026 14:03:11 UTC".
LOG_FORMAT = "{time:ddd, DD MMM YYYY HH:mm:ss zz} | {level: <8} | {extra[component]: <10} | {message}"


def configure(log_path: Optional[Path] = None) -> None:
    """Install the console and rotating file sinks once per process."""
    global _LOG_INITIALISED
    if _LOG_INITIALISED:
        return
    target = log_path or DEFAULT_LOG_PATH
    target.parent.mkdir(parents=True, exist_ok=True)

    _logger.remove()
    _logger.configure(extra={"component": DEFAULT_COMPONENT})
    if sys.stderr is not None:
        _logger.add(sys.stderr, level=CONSOLE_LEVEL, format=LOG_FORMAT, enqueue=True)
    _logger.add(
        target,
        level="DEBUG",
        format=LOG_FORMAT,
        rotation="5 MB",
        retention=3,
        encoding="utf-8",
        enqueue=True,
        backtrace=True,
        diagnose=False,
    )
    _LOG_INITIALISED = True


def get_logger(component: str = DEFAULT_COMPONENT):
    """Return the shared logger bound to ``component``."""
    configure()
    return _logger.bind(component=component)
