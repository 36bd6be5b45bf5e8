# === FILE: js_packer/logger.py ===
"""Logger shared by every JsPacker module.

Build output is read next to the site generator's own log, so records are
short and tagged with the tool name. ``JS_PACKER_LOG_LEVEL`` sets the level
used at import time; the CLI calls :func:`configure` again with its options.
"""
from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Union

_LOGGER_NAME: Final[str] = "JsPacker"
DEFAULT_FORMAT: Final[str] = "[%(name)s] %(levelname)s: %(message)s"
DEFAULT_LEVEL: Final[str] = os.environ.get("JS_PACKER_LOG_LEVEL", "INFO").upper()


def configure(
    *,
    level: Union[int, str] = DEFAULT_LEVEL,
    log_file: str | Path | None = None,
    log_format: str = DEFAULT_FORMAT,
    replace_handlers: bool = True,
) -> logging.Logger:
    """Point the ``JsPacker`` logger at stdout and, optionally, a rotating *log_file*."""
    lg = logging.getLogger(_LOGGER_NAME)
    lg.setLevel(level)
    if replace_handlers:
        lg.handlers.clear()

    formatter = logging.Formatter(log_format)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file is not None:
        handlers.append(RotatingFileHandler(str(log_file), maxBytes=1024 * 1024, backupCount=1, encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        lg.addHandler(handler)

    lg.propagate = False
    return lg


logger: logging.Logger = configure()

__all__ = ["logger", "configure", "DEFAULT_FORMAT", "DEFAULT_LEVEL"]
