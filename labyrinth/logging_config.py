"""Root logger setup for the ``labyrinth`` command line.

The library modules only create loggers; handlers are installed here, once,
by the CLI.
"""

import logging
import os
from typing import Optional

LOG_LEVEL_ENV = "LABYRINTH_LOG_LEVEL"
LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"


def resolve_level(level: Optional[str] = None, default: int = logging.WARNING) -> int:
    """Pick the log level: explicit ``level``, then $LABYRINTH_LOG_LEVEL, then ``default``.

    Unknown level names fall back to ``default``.
    """
    name = level or os.getenv(LOG_LEVEL_ENV)
    if not name:
        return default
    value = logging.getLevelName(name.upper())
    return value if isinstance(value, int) else default


def configure_logging(level: Optional[str] = None, default: int = logging.WARNING) -> int:
    """Install a stderr handler on the root logger and return the level used."""
    resolved = resolve_level(level, default)
    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    if level or os.getenv(LOG_LEVEL_ENV):
        logging.getLogger().setLevel(resolved)
    return resolved
