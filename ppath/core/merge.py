import stat
from pathlib import Path as FsPath

from ppath.core.errors import InvalidTargetError, NotFoundError, PathError, PathIOError
from ppath.core.logger import log
from ppath.core.settings import DEFAULT_DIR_MODE


def _stat_mode(path: FsPath):
    try:
        return path.stat().st_mode
    except OSError:
        return None


def _rename(src: FsPath, dst: FsPath, step: str) -> None:
    try:
        src.rename(dst)
    except OSError as e:
        log("WARNING", "merge", f"{step} failed: {src} -> {dst}: {e}")
        raise PathIOError.wrap(step, e, path=str(src)) from e
    log("DEBUG", "merge", f"{step}: {src} -> {dst}")


def merge_move(source, destination, *, dir_mode: int = DEFAULT_DIR_MODE) -> None:
    """
    Move source into destination, merging directory trees.

    - destination missing: parents are created and source is renamed onto it
    - source is a file: moved into a destination directory, or replaces a
      destination file
    - source is a directory: every entry is merge-moved into the destination
      directory, then the emptied source directory is removed

    The first failure is raised. Entries already moved stay where they are.
    """
    src = FsPath(source)
    dst = FsPath(destination)

    src_mode = _stat_mode(src)
    if src_mode is None:
        raise NotFoundError("source does not exist", path=str(src))

    dst_mode = _stat_mode(dst)

    if dst_mode is None:
        if not dst.parent.exists():
            try:
                dst.parent.mkdir(mode=dir_mode, parents=True, exist_ok=True)
            except OSError as e:
                raise PathIOError.wrap("create parent directory", e, path=str(dst.parent)) from e
        _rename(src, dst, "rename file")
        return

    if not stat.S_ISDIR(src_mode):
        if stat.S_ISDIR(dst_mode):
            _rename(src, dst / src.name, "move file")
            return

        if stat.S_ISREG(dst_mode):
            try:
                dst.unlink()
            except OSError as e:
                raise PathIOError.wrap("delete old file", e, path=str(dst)) from e
            log("DEBUG", "merge", f"delete old file: {dst}")
            _rename(src, dst, "rename file")
            return

        raise InvalidTargetError(
            "destination is neither a directory nor a regular file",
            path=str(dst),
        )

    if not stat.S_ISDIR(dst_mode):
        raise InvalidTargetError("destination is not a directory", path=str(dst))

    try:
        entries = sorted(child.name for child in src.iterdir())
    except OSError as e:
        raise PathIOError.wrap("reading directory entries", e, path=str(src)) from e

    for name in entries:
        try:
            merge_move(src / name, dst / name, dir_mode=dir_mode)
        except PathError as e:
            raise e.with_entry(name) from e

    try:
        src.rmdir()
    except OSError as e:
        raise PathIOError.wrap("remove source directory", e, path=str(src)) from e
    log("DEBUG", "merge", f"remove source directory: {src}")
