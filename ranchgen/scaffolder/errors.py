"""Exceptions raised while scaffolding a project.

Every failure that ends a generation run derives from ``ScaffoldError`` so
the CLI can report it with a single handler.  Validation errors are raised
before anything touches the filesystem; materialization errors are raised by
the filesystem sink and captured in the run report.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for every terminal generation failure."""


class InvalidNameError(ScaffoldError):
    """Raised when the application or module name breaks its syntax rule."""

    def __init__(self, identifier: str, value: str, rule: str, message: str) -> None:
        self.identifier = identifier
        self.value = value
        self.rule = rule
        super().__init__(message)


class NameCollisionError(ScaffoldError):
    """Raised when the module name is already defined in the host namespace."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f"Module name {name} is already taken, please choose another name"
        )


class AlreadyExistsError(ScaffoldError):
    """Raised when a file to be generated is already present on disk."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        super().__init__(
            f"Refusing to overwrite existing file: {self.path}"
        )


class PathUncreatableError(ScaffoldError):
    """Raised when a directory or file cannot be created."""

    def __init__(self, path: str | Path, reason: str = "") -> None:
        self.path = Path(path)
        self.reason = reason
        message = f"Cannot create {self.path}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)
