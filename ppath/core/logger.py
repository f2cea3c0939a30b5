import logging
import sys
from typing import Optional

ROOT_LOGGER = "ppath"

logging.getLogger(ROOT_LOGGER).addHandler(logging.NullHandler())


def get_logger(component: Optional[str] = None) -> logging.Logger:
    """
    Return the logger for a ppath component ("merge", "path", "cli", ...).
    """
    if not component:
        return logging.getLogger(ROOT_LOGGER)
    return logging.getLogger(f"{ROOT_LOGGER}.{component}")


def log(level: str, component: str, message: str) -> None:
    get_logger(component).log(logging.getLevelName(level.upper()), message)


def configure_logging(level: str = "WARNING", stream=None) -> logging.Handler:
    """
    Attach a stderr handler to the ppath logger. Used by the CLI only;
    library callers configure logging themselves.
    """
    root = get_logger()
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    root.addHandler(handler)
    root.setLevel(level.upper())
    return handler
