from typing import Optional


class PathError(Exception):
    """
    Base class for every error raised by ppath.

    Attributes:
        path:  the path the failing step operated on
        step:  short description of the failing step, if any
        entry: directory entry (relative to the top-level source) being
               processed when the failure happened
    """

    def __init__(
        self,
        message: str,
        *,
        path: Optional[str] = None,
        step: Optional[str] = None,
        entry: Optional[str] = None,
    ):
        self.message = message
        self.path = path
        self.step = step
        self.entry = entry
        super().__init__(str(self))

    def __str__(self) -> str:
        parts = []
        if self.entry:
            parts.append(f"entry {self.entry!r}")
        if self.step:
            parts.append(self.step)
        parts.append(self.message)
        return ": ".join(parts)

    def with_entry(self, name: str) -> "PathError":
        """
        Return a copy of this error scoped one directory level up.
        """
        entry = f"{name}/{self.entry}" if self.entry else name
        err = self.__class__.__new__(self.__class__)
        PathError.__init__(
            err,
            self.message,
            path=self.path,
            step=self.step,
            entry=entry,
        )
        return err


class NotFoundError(PathError, FileNotFoundError):
    pass


class AlreadyExistsError(PathError, FileExistsError):
    pass


class InvalidTargetError(PathError):
    pass


class PathIOError(PathError, OSError):
    """
    A filesystem primitive failed (permission, device, disk full, ...).
    """

    @classmethod
    def wrap(cls, step: str, exc: OSError, path: Optional[str] = None) -> "PathIOError":
        return cls(
            exc.strerror or str(exc),
            path=path if path is not None else exc.filename,
            step=step,
        )
