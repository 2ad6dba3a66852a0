"""loguru setup for narrow.

Everything goes to a rotating file. The console sink is opt-in and writes
to stderr, because ``narrow pick`` prints its result on stdout.
"""

import os
import sys
from typing import Optional

from loguru import logger

from narrow.utils import get_project_root

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"
CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)

_log_file_path: Optional[str] = None


def _resolve_log_file(log_file: Optional[str]) -> str:
    """Pick the sink path; later calls without a path reuse the first one."""
    global _log_file_path

    if log_file is not None:
        _log_file_path = log_file if os.path.isabs(log_file) else os.path.join(get_project_root(), log_file)
    elif _log_file_path is None:
        _log_file_path = os.getenv("NARROW_LOG_FILE") or os.path.join(get_project_root(), "narrow.log")
    return _log_file_path


def setup_logger(
    log_file: Optional[str] = None,
    log_level: str = "INFO",
    rotation: str = "10 MB",
    retention: str = "7 days",
    compression: str = "zip",
    console_output: bool = False,
) -> None:
    """(Re)install the narrow sinks at ``log_level``.

    Args:
        log_file: Log path, relative paths resolve against the project root.
            Defaults to ``NARROW_LOG_FILE`` or ``narrow.log``
        log_level: Minimum level for every sink
        rotation: Size at which the file rotates
        retention: How long rotated files are kept
        compression: Archive format for rotated files
        console_output: Also log to stderr
    """
    path = _resolve_log_file(log_file)
    logger.remove()

    if console_output:
        logger.add(sys.stderr, level=log_level, format=CONSOLE_FORMAT, colorize=True)

    logger.add(
        path,
        level=log_level,
        format=FILE_FORMAT,
        rotation=rotation,
        retention=retention,
        compression=compression,
        encoding="utf-8",
    )


def get_logger(name: Optional[str] = None):
    """Module logger, tagged with ``name`` when given."""
    return logger.bind(name=name) if name else logger


setup_logger()
