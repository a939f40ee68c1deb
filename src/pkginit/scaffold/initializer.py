"""Create an initial template package.

The package structure is written in a fixed order of steps: manifest,
.gitignore, Sources/, module.modulemap and Tests/. The manifest step is
the "already initialized" gate and fails if a manifest exists; every
other step is a no-op when its target already exists, so a partial run
can be safely repeated once the manifest is removed.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

import typer

from pkginit.config import (
    get_gitignore_path,
    get_manifest_path,
    get_module_map_path,
    get_sources_dir,
    get_tests_dir,
)
from pkginit.errors import ManifestAlreadyExistsError
from pkginit.io import ensure_dir, write_file
from pkginit.logging import get_logger
from pkginit.naming import c99name
from pkginit.scaffold.mode import InitMode, format_mode
from pkginit.scaffold.templates import ArtifactKind, template_for

_logger = get_logger("scaffold.initializer")


@dataclass(frozen=True)
class Artifact:
    """A file or directory the initializer will create.

    Attributes:
        path: Absolute path of the entry.
        relative_path: Path relative to the package root, POSIX style.
        content: File contents, or None for a directory.
    """

    path: Path
    relative_path: str
    content: str | None = None

    @property
    def is_directory(self) -> bool:
        return self.content is None

    @property
    def display_path(self) -> str:
        """Relative path as shown to the operator (directories end in /)."""
        return self.relative_path + "/" if self.is_directory else self.relative_path


class PackageInitializer:
    """Writes the initial structure of a package into a directory.

    The package name is the base name of ``root`` and is used verbatim as
    the module name and the example type name.
    """

    def __init__(
        self,
        mode: InitMode,
        root: Path | str,
        *,
        echo: Callable[[str], object] = typer.echo,
    ) -> None:
        # abspath collapses ".." so the name is the real directory name
        root = Path(os.path.abspath(root))
        # Validate that the name is valid before touching the file system
        self.package_name = c99name(root.name)
        self.root = root
        self.mode = mode
        self._echo = echo

    @property
    def module_name(self) -> str:
        return self.package_name

    @property
    def type_name(self) -> str:
        return self.package_name

    def _steps(self) -> list[Callable[[], list[Artifact]]]:
        return [
            self._manifest_step,
            self._gitignore_step,
            self._sources_step,
            self._module_map_step,
            self._tests_step,
        ]

    def plan(self) -> list[Artifact]:
        """List what write_package_structure() would create, without writing.

        Raises:
            ManifestAlreadyExistsError: If the directory already has a manifest.
        """
        artifacts: list[Artifact] = []
        for step in self._steps():
            artifacts.extend(step())
        return artifacts

    def write_package_structure(self) -> None:
        """Write the package structure.

        Steps run in order and each one checks for existing files at the
        moment it runs. Errors are not caught: files written by earlier
        steps stay in place.

        Raises:
            ManifestAlreadyExistsError: If the directory already has a manifest.
            OSError: If a directory or file cannot be created.
        """
        self._echo(f"Creating {format_mode(self.mode)} package: {self.package_name}")

        for step in self._steps():
            for artifact in step():
                self._create(artifact)

    def _create(self, artifact: Artifact) -> None:
        self._echo(f"Creating {artifact.display_path}")
        if artifact.content is None:
            ensure_dir(artifact.path)
        else:
            write_file(artifact.path, artifact.content)

    def _directory(self, path: Path) -> Artifact:
        return Artifact(path=path, relative_path=path.relative_to(self.root).as_posix())

    def _file(self, kind: ArtifactKind) -> Artifact:
        template = template_for(self.mode, kind)
        if template is None:
            raise KeyError(f"{format_mode(self.mode)} packages have no {kind.value} file")
        relative_path = template.render_path(self.package_name)
        return Artifact(
            path=self.root / relative_path,
            relative_path=relative_path,
            content=template.render_body(self.package_name),
        )

    def _manifest_step(self) -> list[Artifact]:
        manifest = get_manifest_path(self.root)
        if manifest.exists():
            raise ManifestAlreadyExistsError(manifest)
        return [self._file(ArtifactKind.MANIFEST)]

    def _gitignore_step(self) -> list[Artifact]:
        if get_gitignore_path(self.root).exists():
            _logger.debug(".gitignore already exists, skipping")
            return []
        return [self._file(ArtifactKind.GITIGNORE)]

    def _sources_step(self) -> list[Artifact]:
        if template_for(self.mode, ArtifactKind.SOURCE) is None:
            return []
        sources = get_sources_dir(self.root)
        if sources.exists():
            _logger.debug("%s already exists, skipping sources", sources)
            return []
        return [self._directory(sources), self._file(ArtifactKind.SOURCE)]

    def _module_map_step(self) -> list[Artifact]:
        if template_for(self.mode, ArtifactKind.MODULE_MAP) is None:
            return []
        if get_module_map_path(self.root).exists():
            _logger.debug("module map already exists, skipping")
            return []
        return [self._file(ArtifactKind.MODULE_MAP)]

    def _tests_step(self) -> list[Artifact]:
        if self.mode is InitMode.SYSTEM_MODULE:
            return []
        tests = get_tests_dir(self.root)
        if tests.exists():
            _logger.debug("%s already exists, skipping tests", tests)
            return []

        artifacts = [self._directory(tests)]
        # Only libraries are testable for now
        if template_for(self.mode, ArtifactKind.TEST_STUB) is not None:
            artifacts.append(self._file(ArtifactKind.LINUX_MAIN))
            artifacts.append(self._directory(tests / self.module_name))
            artifacts.append(self._file(ArtifactKind.TEST_STUB))
        return artifacts
