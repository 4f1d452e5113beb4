import logging
import os
from logging.handlers import RotatingFileHandler

from config import Configuration

MAX_LOG_BYTES = 10 * 1024 * 1024  # 10 MiB
BACKUP_COUNT = 5
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _log_filename(name: str) -> str:
    sanitized = name.replace("/", "_").replace(os.sep, "_").replace(".", "_")
    return f"{sanitized or 'root'}.log"


def _attach_handler(logger, handler, formatter, level):
    handler.setFormatter(formatter)
    handler.setLevel(level)
    logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Return a logger writing to the console and, if CLOCK_LOG_DIR is set, a rolling file."""
    logger = logging.getLogger(name)
    level = getattr(logging, Configuration.log_level(), logging.INFO)
    logger.setLevel(level)

    if logger.handlers:
        return logger

    formatter = logging.Formatter(LOG_FORMAT)
    _attach_handler(logger, logging.StreamHandler(), formatter, level)

    log_dir = Configuration.log_dir()
    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_dir / _log_filename(name),
            maxBytes=MAX_LOG_BYTES,
            backupCount=BACKUP_COUNT,
        )
        _attach_handler(logger, file_handler, formatter, level)
    logger.propagate = False
    return logger
