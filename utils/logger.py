"""
Logging for the pair store. Level and optional log file come from config
(system.log_level, system.log_file). The level may be a name ("DEBUG") or a
number (10), since YAML hands back either.

setup_logger can be called again: the level is reapplied to the logger and
its handlers, and a log file is attached at most once.
"""
import logging
import os
import sys
from pathlib import Path

LOGGER_NAME = "pair_store"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def parse_level(level: str | int | None) -> int:
    """Map a config level to a logging level; unknown values fall back to INFO."""
    if isinstance(level, bool) or level is None:
        return logging.INFO
    if isinstance(level, int):
        return level
    name = str(level).strip()
    if name.isdigit():
        return int(name)
    value = logging.getLevelName(name.upper())
    return value if isinstance(value, int) else logging.INFO


def _has_file_handler(logger: logging.Logger, log_file: str) -> bool:
    target = os.path.abspath(log_file)
    return any(
        isinstance(h, logging.FileHandler) and h.baseFilename == target
        for h in logger.handlers
    )


def setup_logger(
    level: str | int | None = "INFO",
    log_file: str | None = None,
    name: str = LOGGER_NAME,
) -> logging.Logger:
    log_level = parse_level(level)
    logger = logging.getLogger(name)
    logger.setLevel(log_level)
    fmt = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    # stderr keeps command output on stdout clean
    if not any(type(h) is logging.StreamHandler for h in logger.handlers):
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(fmt)
        logger.addHandler(console)

    if log_file and not _has_file_handler(logger, log_file):
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(fmt)
        logger.addHandler(file_handler)

    for handler in logger.handlers:
        handler.setLevel(log_level)
    return logger
