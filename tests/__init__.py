# Auto-generated __init__.py

from . import conftest
from . import test_cli
from . import test_errors
from . import test_logger
from . import test_merge
from . import test_path
from . import test_settings

__all__ = [
    "conftest",
    "test_cli",
    "test_errors",
    "test_logger",
    "test_merge",
    "test_path",
    "test_settings",
]
