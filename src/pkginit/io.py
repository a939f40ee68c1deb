"""File-system helpers for pkginit.

Each file is written atomically so a generated file is never left in a
partial state. Unlike a best-effort writer, failures are not swallowed:
the ``OSError`` from the failing call reaches the caller.
"""

from __future__ import annotations

import contextlib
import os
import tempfile
from pathlib import Path


def ensure_dir(path: Path | str) -> Path:
    """Create a directory and any missing parents.

    Args:
        path: Directory to create.

    Returns:
        The path as a Path object.
    """
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def ensure_parent_dir(path: Path | str) -> Path:
    """Ensure the parent directory of a path exists.

    Args:
        path: File path whose parent directory should be created.

    Returns:
        The path as a Path object.
    """
    path = Path(path)
    ensure_dir(path.parent)
    return path


def _file_mode() -> int:
    """Permissions for a new file under the current umask."""
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def write_file(path: Path | str, content: str) -> Path:
    """Write content to a file atomically.

    Uses write-to-temp + rename pattern to ensure the file is never
    left in a partial/corrupt state. Missing parent directories are
    created.

    Args:
        path: Destination file path.
        content: String content to write.

    Returns:
        The destination path.

    Raises:
        OSError: If the directory or file cannot be written.
    """
    path = ensure_parent_dir(path)
    # Create temp file in same directory for atomic rename
    fd, tmp_path = tempfile.mkstemp(
        suffix=".tmp",
        prefix=path.name + ".",
        dir=path.parent,
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            f.write(content)
        # mkstemp creates files readable by the owner only
        os.chmod(tmp_path, _file_mode())
        os.replace(tmp_path, path)
    except BaseException:
        with contextlib.suppress(OSError):
            os.unlink(tmp_path)
        raise
    return path
