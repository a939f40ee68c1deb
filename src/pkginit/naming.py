"""Identifier legality checks for package names."""

from __future__ import annotations

import re

from pkginit.errors import InvalidNameError

_C99_IDENT_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


def is_c99_identifier(name: str) -> bool:
    """Return True if ``name`` is a legal C99 identifier (ASCII only)."""
    return _C99_IDENT_RE.fullmatch(name) is not None


def c99name(name: str) -> str:
    """Validate that ``name`` can be used as a module and type name.

    Args:
        name: Candidate package name, usually a directory base name.

    Returns:
        The name unchanged.

    Raises:
        InvalidNameError: If the name is empty, starts with a digit, or
            contains characters other than letters, digits and underscores.
    """
    if not is_c99_identifier(name):
        raise InvalidNameError(name)
    return name
