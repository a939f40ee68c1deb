"""Diagnostics for pkginit on stderr.

Progress lines ("Creating Sources/") own stdout; anything logged here
goes to stderr. Only warnings show unless PKGINIT_LOG_LEVEL says otherwise.
"""

from __future__ import annotations

import logging
import os
import sys

_loggers: dict[str, logging.Logger] = {}


def get_logger(name: str) -> logging.Logger:
    """Return the ``pkginit.<name>`` logger, setting it up on first use.

    Records look like ``[pkginit:scaffold.initializer] DEBUG: ...``.
    Set PKGINIT_LOG_LEVEL=DEBUG to see which steps were skipped because
    their target already existed.
    """
    if name in _loggers:
        return _loggers[name]

    logger = logging.getLogger(f"pkginit.{name}")

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(f"[pkginit:{name}] %(levelname)s: %(message)s"))
        logger.addHandler(handler)

        level_name = os.environ.get("PKGINIT_LOG_LEVEL", "WARNING").upper()
        logger.setLevel(getattr(logging, level_name, logging.WARNING))

    _loggers[name] = logger
    return logger
