"""Package types supported by ``pkginit init``."""

from __future__ import annotations

from enum import Enum

from pkginit.errors import InvalidModeError


class InitMode(Enum):
    """Represents a package type for the purposes of initialization."""

    LIBRARY = "library"
    EXECUTABLE = "executable"
    SYSTEM_MODULE = "system-module"


def parse_mode(raw: str) -> InitMode:
    """Parse an initialization type, ignoring case.

    Raises:
        InvalidModeError: If ``raw`` is not one of library, executable
            or system-module.
    """
    for mode in InitMode:
        if mode.value == raw.lower():
            return mode
    raise InvalidModeError(raw)


def format_mode(mode: InitMode) -> str:
    """Return the canonical spelling of ``mode``."""
    return mode.value
