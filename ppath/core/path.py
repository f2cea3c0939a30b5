import fnmatch
import hashlib
import os
import shutil
import stat
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from ppath.core.errors import AlreadyExistsError, InvalidTargetError
from ppath.core.logger import log
from ppath.core.merge import merge_move
from ppath.core.settings import DEFAULT_DIR_MODE, DEFAULT_FILE_MODE

HASH_CHUNK_SIZE = 1024 * 1024


def _clean(p: str) -> str:
    if not p:
        return ""
    cleaned = os.path.normpath(p)
    # POSIX keeps a leading "//"; collapse it like any other repeated separator
    if os.sep == "/" and cleaned.startswith("//"):
        cleaned = "/" + cleaned.lstrip("/")
    return cleaned


@dataclass(frozen=True)
class Path:
    """
    Immutable, string-like filesystem path.

    Every derivation (join, dir, base, ...) returns a new Path; nothing is
    parsed or cached. Path implements __fspath__, so it can be handed to any
    API that takes a path.
    """
    value: str = ""

    def __post_init__(self):
        object.__setattr__(self, "value", os.fspath(self.value))

    def __str__(self) -> str:
        return self.value

    def __fspath__(self) -> str:
        return self.value

    def __bool__(self) -> bool:
        return bool(self.value)

    @classmethod
    def new(cls, *parts: str) -> "Path":
        parts = [os.fspath(p) for p in parts if p]
        if not parts:
            return cls("")
        return cls(_clean(os.sep.join(parts)))

    # -------- Derivation --------

    def join(self, *parts: str) -> "Path":
        return Path.new(self, *parts)

    def base(self) -> "Path":
        """
        Last element of the path. Trailing separators are ignored; an empty
        path gives "." and a path of only separators gives the separator.
        """
        if not self.value:
            return Path(".")
        stripped = self.value.rstrip(os.sep)
        if not stripped:
            return Path(os.sep)
        return Path(os.path.basename(stripped))

    def dir(self) -> "Path":
        """
        Everything but the last element, cleaned. "a" gives ".".
        """
        return Path(os.path.normpath(os.path.dirname(self)))

    def nth_parent(self, n: int) -> "Path":
        p = self
        for _ in range(n):
            p = p.dir()
        return p

    def ext(self) -> "Path":
        return Path(os.path.splitext(self)[1])

    def split(self) -> Tuple["Path", "Path"]:
        head, tail = os.path.split(self)
        return Path(head), Path(tail)

    def rel(self, root: str) -> "Path":
        """
        This path expressed relative to root.
        """
        return Path(os.path.relpath(self, os.fspath(root)))

    def abs(self, cwd: Optional[str] = None) -> "Path":
        """
        Absolute form of this path. Relative paths are resolved against cwd,
        or the process working directory when cwd is None.
        """
        if os.path.isabs(self):
            return Path(os.path.normpath(self))
        base = os.fspath(cwd) if cwd is not None else os.getcwd()
        return Path(os.path.normpath(os.path.join(base, self)))

    def volume_name(self) -> str:
        return os.path.splitdrive(self)[0]

    # -------- Lexical predicates --------

    def is_abs(self) -> bool:
        return os.path.isabs(self)

    def is_local(self) -> bool:
        """
        True if the path is relative, non-empty and stays inside the
        directory it is evaluated from.
        """
        if not self.value or os.path.isabs(self) or self.volume_name():
            return False
        cleaned = os.path.normpath(self)
        return cleaned != os.pardir and not cleaned.startswith(os.pardir + os.sep)

    def is_valid(self) -> bool:
        """
        True for unrooted, slash-separated names with no empty, "." or ".."
        elements. "." on its own names the root and is valid.
        """
        if self.value == ".":
            return True
        if not self.value or "\\" in self.value or "\x00" in self.value:
            return False
        return all(elem not in ("", ".", "..") for elem in self.value.split("/"))

    def match(self, pattern: str) -> bool:
        """
        Shell-style match of the whole path. "*" and "?" never match a
        separator, so the pattern needs one element per path element.
        """
        pat_elems = pattern.split(os.sep)
        path_elems = self.value.split(os.sep)
        if len(pat_elems) != len(path_elems):
            return False
        return all(
            fnmatch.fnmatchcase(elem, pat)
            for elem, pat in zip(path_elems, pat_elems)
        )

    # -------- Filesystem predicates --------

    def _mode(self):
        try:
            return os.stat(self).st_mode
        except (OSError, ValueError):
            return None

    def exists(self) -> bool:
        return self._mode() is not None

    def is_dir(self) -> bool:
        mode = self._mode()
        return mode is not None and stat.S_ISDIR(mode)

    def is_regular(self) -> bool:
        mode = self._mode()
        return mode is not None and stat.S_ISREG(mode)

    def is_symlink(self) -> bool:
        return os.path.islink(self)

    def is_dev(self) -> bool:
        mode = self._mode()
        return mode is not None and (stat.S_ISBLK(mode) or stat.S_ISCHR(mode))

    # -------- Metadata --------

    def stat(self) -> os.stat_result:
        return os.stat(self)

    def size(self) -> int:
        return self.stat().st_size

    def size_or_zero(self) -> int:
        try:
            return self.size()
        except OSError:
            return 0

    def digest(self, algorithm: str = "sha256") -> str:
        """
        Hex digest of the file's contents.
        """
        h = hashlib.new(algorithm)
        with open(self, "rb") as f:
            for chunk in iter(lambda: f.read(HASH_CHUNK_SIZE), b""):
                h.update(chunk)
        return h.hexdigest()

    def walk(self) -> Iterator["Path"]:
        """
        Yield this path and every path below it, depth first, in name order.
        """
        yield self
        if not self.is_dir() or self.is_symlink():
            return
        for name in sorted(os.listdir(self)):
            yield from self.join(name).walk()

    # -------- File I/O --------

    def open(self, mode: str = "rb", **kwargs):
        return open(self, mode, **kwargs)

    def create(self, *, dir_mode: int = DEFAULT_DIR_MODE):
        """
        Create a new file, making missing parent directories. The returned
        handle is open for binary writing.
        """
        if self.exists():
            raise AlreadyExistsError("already exists", path=str(self))
        parent = self.dir()
        if not parent.exists():
            os.makedirs(parent, mode=dir_mode, exist_ok=True)
        return open(self, "xb")

    def read_file(self) -> bytes:
        with open(self, "rb") as f:
            return f.read()

    def write_file(self, data: bytes, *, mode: int = DEFAULT_FILE_MODE) -> None:
        fd = os.open(self, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, mode)
        with os.fdopen(fd, "wb") as f:
            f.write(data)

    # -------- Tree operations --------

    def delete(self) -> None:
        """
        Remove the path and everything below it. A missing path is fine.
        """
        if self.is_dir() and not self.is_symlink():
            shutil.rmtree(self)
        elif os.path.lexists(self):
            os.remove(self)
        log("DEBUG", "path", f"deleted: {self}")

    def rename(self, new: str) -> "Path":
        os.rename(self, new)
        return Path(new)

    def copy(self, dst: str, *, dir_mode: int = DEFAULT_DIR_MODE) -> "Path":
        """
        Copy this file or directory tree to dst and return where it landed.

        Directories are copied into dst, which is created if missing.
        Files go into dst when it is a directory, otherwise onto dst.
        """
        dst = Path(dst)

        if self.is_dir():
            if dst.exists() and not dst.is_dir():
                raise InvalidTargetError(
                    "destination is not a directory, cannot copy directory to file",
                    path=str(dst),
                )
            if not dst.exists():
                os.makedirs(dst, mode=dir_mode, exist_ok=True)
            shutil.copytree(self, dst, dirs_exist_ok=True)
            log("DEBUG", "path", f"copied tree: {self} -> {dst}")
            return dst

        if dst.is_dir():
            dst = dst.join(self.base())
        parent = dst.dir()
        if not parent.exists():
            os.makedirs(parent, mode=dir_mode, exist_ok=True)
        shutil.copyfile(self, dst)
        log("DEBUG", "path", f"copied file: {self} -> {dst}")
        return dst

    def merge_move(self, dst: str, *, dir_mode: int = DEFAULT_DIR_MODE) -> None:
        merge_move(self, dst, dir_mode=dir_mode)


def new(*parts: str) -> Path:
    return Path.new(*parts)
