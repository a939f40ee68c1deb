"""pkginit: scaffold a new Swift package.

This package provides:
- The initialization modes (library, executable, system-module)
- The literal templates written for each mode
- The package initializer and its ``pkginit`` command line
"""

__version__ = "0.1.0"

# Re-export commonly used entry points
from pkginit.errors import (
    InvalidModeError,
    InvalidNameError,
    ManifestAlreadyExistsError,
    PackageInitError,
)
from pkginit.logging import get_logger
from pkginit.scaffold import InitMode, PackageInitializer, format_mode, parse_mode

__all__ = [
    "InitMode",
    "InvalidModeError",
    "InvalidNameError",
    "ManifestAlreadyExistsError",
    "PackageInitError",
    "PackageInitializer",
    "format_mode",
    "get_logger",
    "parse_mode",
]
