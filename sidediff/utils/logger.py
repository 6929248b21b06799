# sidediff/utils/logger.py

import logging
import os
from pathlib import Path
from platformdirs import user_log_dir

from sidediff import config


def log_dir() -> Path:
    """Per-user log directory, created on demand."""
    d = Path(user_log_dir(appname=config.APP_NAME, appauthor=config.APP_AUTHOR))
    d.mkdir(parents=True, exist_ok=True)
    return d


def setup_logger(name: str = config.APP_NAME) -> logging.Logger:
    logger = logging.getLogger(name)

    # Engine is a library first: stay quiet unless SIDEDIFF_DEBUG is set
    if not os.environ.get(config.DEBUG_ENV_VAR):
        logger.setLevel(logging.CRITICAL)
        if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
            logger.addHandler(logging.NullHandler())
        logger.propagate = False
        return logger

    level = logging.getLevelName(config.LOG_LEVEL)
    logger.setLevel(level)
    if not any(isinstance(h, logging.FileHandler) for h in logger.handlers):
        fh = logging.FileHandler(log_dir() / config.LOG_FILE_NAME, encoding="utf-8")
        fh.setLevel(level)
        fh.setFormatter(logging.Formatter(config.LOG_FORMAT))
        logger.addHandler(fh)
    return logger

logger = setup_logger()
