"""
Logging configuration for the content API.

Records go to the console and, when ``LOG_FILE`` is set, to a UTF-8
log file.  Handlers installed here are named so that calling
``setup_logging`` again (every ``create_app`` call does) only adjusts
the level instead of duplicating output.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

CONSOLE_HANDLER = "spirit_emeraude_api.console"
FILE_HANDLER = "spirit_emeraude_api.file"

# Connection pool chatter from the API client is only useful when debugging.
QUIET_LOGGERS = ("urllib3",)


def resolve_level(level: str) -> int:
    """Map a level name to its number; unknown names mean ``INFO``."""
    value = logging.getLevelName(str(level).strip().upper())
    return value if isinstance(value, int) else logging.INFO


def _installed(root: logging.Logger, name: str) -> bool:
    return any(handler.get_name() == name for handler in root.handlers)


def _install(root: logging.Logger, handler: logging.Handler, name: str) -> None:
    handler.set_name(name)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(handler)


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger.

    Parameters
    ----------
    level : str
        Level name such as ``"DEBUG"`` or ``"info"``.
    logfile : Optional[str]
        Optional path of a log file, resolved against the working
        directory.
    """
    root = logging.getLogger()
    numeric_level = resolve_level(level)
    root.setLevel(numeric_level)

    if not _installed(root, CONSOLE_HANDLER):
        _install(root, logging.StreamHandler(), CONSOLE_HANDLER)
    if logfile and not _installed(root, FILE_HANDLER):
        _install(root, logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"), FILE_HANDLER)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))
