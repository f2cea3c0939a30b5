# Auto-generated __init__.py

from . import main
from .main import build_parser
from .main import run

__all__ = [
    "main",
    "build_parser",
    "run",
]
