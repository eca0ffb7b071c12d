"""
Logging setup shared by the application entry points
"""

import logging
from typing import Union

_LEVELS = {
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}

_FORMAT = "[%(name)s] %(levelname)s: %(message)s"


def resolve_level(level: Union[str, int, None]) -> int:
    """Map a level name (case-insensitive) or number to a logging constant"""
    if level is None:
        return logging.INFO
    if isinstance(level, str):
        return _LEVELS.get(level.lower(), logging.INFO)
    return int(level)


def setup_logging(level: Union[str, int, None] = "INFO") -> None:
    """
    Configure the root logger once.

    Repeated calls only change the level, so the GUI and tests can call
    this freely without stacking handlers.
    """
    root = logging.getLogger()
    if not any(getattr(h, "_lorenz_handler", False) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        handler._lorenz_handler = True
        root.addHandler(handler)
    root.setLevel(resolve_level(level))
    logging.captureWarnings(True)
