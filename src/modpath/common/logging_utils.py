"""Logging helpers shared by the validation modules.

Debug traces carry structured fields through ``extra`` so that a JSON or
key/value formatter can pick them up; the default format only prints the
message.
"""
from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

from ..constants import Constants


def is_debug_enabled(logger: logging.Logger) -> bool:
    """Return True when ``logger`` would emit DEBUG records."""
    return logger.isEnabledFor(logging.DEBUG)


def extra_context(**fields: Any) -> Dict[str, Any]:
    """Build an ``extra`` mapping for a log call, dropping unset fields."""
    return {key: value for key, value in fields.items() if value is not None}


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging once for applications embedding modpath.

    The level comes from ``level`` when given, otherwise from the
    MODPATH_LOG_LEVEL environment variable, falling back to WARNING.
    """
    level_name = (level or os.environ.get(Constants.ENV_LOG_LEVEL) or Constants.DEFAULT_LOG_LEVEL).upper()
    level_value = getattr(logging, level_name, None)
    if not isinstance(level_value, int):
        level_value = getattr(logging, Constants.DEFAULT_LOG_LEVEL)

    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(Constants.LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(level_value)
