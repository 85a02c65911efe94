"""Package-wide logger."""
import logging
import sys
from typing import Union


LOGGER_NAME = "arithmetic_evaluator"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(processName)s %(name)s: %(message)s"

logger: logging.Logger = logging.getLogger(LOGGER_NAME)
# Library code stays silent until the application configures logging
logger.addHandler(logging.NullHandler())


def configure_logging(level: Union[int, str] = logging.WARNING) -> logging.Logger:
    """
    Attach a stream handler to the package logger.

    Calling it more than once replaces the previous stream handler instead of stacking them.

    :param level: Logging level name or number
    :return: The configured package logger
    :rtype: logging.Logger
    """
    for handler in list(logger.handlers):
        if isinstance(handler, logging.StreamHandler):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    return logger
