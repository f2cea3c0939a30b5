from ppath.core import (
    AlreadyExistsError,
    InvalidTargetError,
    NotFoundError,
    Path,
    PathError,
    PathIOError,
    merge_move,
    new,
)

__all__ = [
    "AlreadyExistsError",
    "InvalidTargetError",
    "NotFoundError",
    "Path",
    "PathError",
    "PathIOError",
    "merge_move",
    "new",
]
