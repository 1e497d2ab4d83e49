import logging
import sys
from typing import Optional

from class_stripper.settings import get_settings

LOG_FORMAT = "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_logger(name: str = "class-stripper", level: Optional[int] = None) -> logging.Logger:
    """
    Configures and returns a standardized logger instance.

    Logs go to stderr so that cleaned HTML written to stdout stays untouched.

    Args:
        name: Logger name, usually the calling module's __name__
        level: Explicit level; defaults to DEBUG when the debug_logs_enabled
            setting is on, INFO otherwise
    """
    logger = logging.getLogger(name)

    if level is None:
        level = logging.DEBUG if get_settings().debug_logs_enabled else logging.INFO
    logger.setLevel(level)

    # One stderr handler per logger, however often it is requested
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        logger.addHandler(handler)

    return logger


def set_package_level(level: int, prefix: str = "class_stripper") -> None:
    """Apply *level* to every logger already created under *prefix*."""
    for name in list(logging.root.manager.loggerDict):
        if name == prefix or name.startswith(prefix + "."):
            logging.getLogger(name).setLevel(level)
