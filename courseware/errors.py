"""Exceptions raised while building a course package."""

from __future__ import annotations

from pathlib import Path


class CourseBuildError(Exception):
    """Base class for failures raised by the build stages."""


class FilesystemError(CourseBuildError):
    """Raised when a read, write, or mkdir against the package fails."""

    def __init__(self, action: str, path: Path | str, reason: str) -> None:
        self.action = action
        self.path = Path(path)
        super().__init__(f"Unable to {action} {self.path}: {reason}")


class PatternNotFoundError(CourseBuildError):
    """Raised when the index page carries no generated pageArray line."""

    def __init__(self, path: Path | str | None = None) -> None:
        self.path = Path(path) if path is not None else None
        where = f" in {self.path}" if self.path is not None else ""
        super().__init__(f"No 'var pageArray = ...;' line found{where}")


__all__ = ["CourseBuildError", "FilesystemError", "PatternNotFoundError"]
