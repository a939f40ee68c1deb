"""Configuration and path helpers for pkginit.

Provides canonical names for the files a new package is made of and the
resolution of the directory to initialize.
"""

import os
from pathlib import Path

MANIFEST_FILENAME = "Package.swift"
GITIGNORE_FILENAME = ".gitignore"
MODULE_MAP_FILENAME = "module.modulemap"
SOURCES_DIRNAME = "Sources"
TESTS_DIRNAME = "Tests"
SOURCE_EXTENSION = ".swift"


def get_package_dir(path: Path | str | None = None) -> Path:
    """Get the directory to initialize, as a normalized absolute path.

    Uses ``path`` if given, then PKGINIT_PACKAGE_DIR if set, otherwise
    falls back to cwd.
    """
    if path is not None:
        return Path(os.path.abspath(path))
    env_dir = os.environ.get("PKGINIT_PACKAGE_DIR")
    if env_dir:
        return Path(os.path.abspath(env_dir))
    return Path.cwd()


def get_manifest_path(root: Path) -> Path:
    """Get the path to the package manifest."""
    return root / MANIFEST_FILENAME


def get_gitignore_path(root: Path) -> Path:
    """Get the path to the package's .gitignore."""
    return root / GITIGNORE_FILENAME


def get_module_map_path(root: Path) -> Path:
    """Get the path to module.modulemap."""
    return root / MODULE_MAP_FILENAME


def get_sources_dir(root: Path) -> Path:
    """Get the Sources/ directory."""
    return root / SOURCES_DIRNAME


def get_tests_dir(root: Path) -> Path:
    """Get the Tests/ directory."""
    return root / TESTS_DIRNAME
