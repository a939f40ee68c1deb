"""Package scaffolding for pkginit.

Provides logic for:
- Parsing and formatting the initialization mode
- The literal templates written for each mode
- Writing the package structure into a target directory
"""

from __future__ import annotations

from pkginit.scaffold.initializer import Artifact, PackageInitializer
from pkginit.scaffold.mode import InitMode, format_mode, parse_mode
from pkginit.scaffold.templates import ArtifactKind, FileTemplate, template_for

__all__ = [
    "Artifact",
    "ArtifactKind",
    "FileTemplate",
    "InitMode",
    "PackageInitializer",
    "format_mode",
    "parse_mode",
    "template_for",
]
