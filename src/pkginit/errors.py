"""Error types raised while initializing a package.

File-system failures are not wrapped: they propagate as the builtin
``OSError`` raised by the failing call.
"""

from __future__ import annotations

from pathlib import Path


class PackageInitError(Exception):
    """Base class for package initialization errors."""


class InvalidNameError(PackageInitError):
    """The package name is not a legal identifier."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"invalid package name: '{name}' is not a valid C99 identifier")


class InvalidModeError(PackageInitError):
    """The requested initialization type is not recognized."""

    def __init__(self, raw: str) -> None:
        self.raw = raw
        super().__init__(f"invalid initialization type: {raw}")


class ManifestAlreadyExistsError(PackageInitError):
    """The target directory already contains a package manifest."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__("a manifest file already exists in this directory")
