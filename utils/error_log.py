"""
Error Log Module
Append-only diagnostic log for failures; never read back by the program
"""

import logging
from pathlib import Path
from typing import Optional

import config


LOGGER_NAME = 'Enrollment'


class QuietFileHandler(logging.FileHandler):
    """File handler whose write failures never reach the caller"""

    def handleError(self, record):
        pass


def setup_error_logging(log_path: Path = config.ERROR_LOG) -> logging.Logger:
    """
    Attach the error log file handler to the enrollment logger

    Safe to call more than once; an existing handler for a different path
    is replaced.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, config.LOG_LEVEL, logging.INFO))
    logger.propagate = False

    for handler in list(logger.handlers):
        if isinstance(handler, QuietFileHandler):
            if Path(handler.baseFilename) == Path(log_path).resolve():
                return logger
            logger.removeHandler(handler)
            handler.close()

    if config.LOG_TO_FILE:
        # delay=True: the file is only opened on the first logged failure
        handler = QuietFileHandler(log_path, mode='a', encoding='utf-8', delay=True)
        formatter = logging.Formatter(config.LOG_FORMAT, datefmt=config.LOG_DATE_FORMAT)
        handler.setLevel(logging.WARNING)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    else:
        logger.addHandler(logging.NullHandler())

    return logger


def get_logger(component: Optional[str] = None) -> logging.Logger:
    """Get the enrollment logger, or a child logger for one component"""
    if component:
        return logging.getLogger(f'{LOGGER_NAME}.{component}')
    return logging.getLogger(LOGGER_NAME)


def log_error(message: str, exc: Optional[BaseException] = None,
              component: Optional[str] = None):
    """Write one failure entry, with the exception traceback when given"""
    logger = get_logger(component)
    try:
        if exc is not None:
            logger.error(message, exc_info=(type(exc), exc, exc.__traceback__))
        else:
            logger.error(message)
    except Exception:
        pass
