# Auto-generated __init__.py

from . import errors
from .errors import AlreadyExistsError
from .errors import InvalidTargetError
from .errors import NotFoundError
from .errors import PathError
from .errors import PathIOError
from . import logger
from .logger import configure_logging
from .logger import get_logger
from .logger import log
from . import merge
from .merge import merge_move
from . import path
from .path import Path
from .path import new
from . import settings
from .settings import DEFAULT_SETTINGS
from .settings import load_settings
from .settings import resolve_dir_mode
from .settings import resolve_log_level

__all__ = [
    "errors",
    "logger",
    "merge",
    "path",
    "settings",
    "AlreadyExistsError",
    "DEFAULT_SETTINGS",
    "InvalidTargetError",
    "NotFoundError",
    "Path",
    "PathError",
    "PathIOError",
    "configure_logging",
    "get_logger",
    "load_settings",
    "log",
    "merge_move",
    "new",
    "resolve_dir_mode",
    "resolve_log_level",
]
