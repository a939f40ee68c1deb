"""Package initialization command."""

from pathlib import Path
from typing import Annotated

import typer

from pkginit.config import get_package_dir
from pkginit.errors import InvalidModeError, PackageInitError
from pkginit.logging import get_logger
from pkginit.scaffold import PackageInitializer, format_mode, parse_mode

_logger = get_logger("cli.init")


def init(
    mode: Annotated[
        str,
        typer.Option(
            "--type",
            "-t",
            help="Package type: library, executable or system-module",
        ),
    ] = "library",
    path: Annotated[
        Path | None,
        typer.Option("--path", "-p", help="Package root directory (defaults to cwd)"),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", "-n", help="Print the files that would be created"),
    ] = False,
) -> None:
    """Initialize a new package in the target directory.

    The package is named after the directory. Fails if the directory
    already contains a manifest; other existing files are left untouched.
    """
    try:
        init_mode = parse_mode(mode)
    except InvalidModeError as e:
        raise typer.BadParameter(str(e), param_hint="'--type'") from e

    root = get_package_dir(path)
    _logger.info("Initializing %s package in %s", format_mode(init_mode), root)

    try:
        initializer = PackageInitializer(init_mode, root)
        if dry_run:
            artifacts = initializer.plan()
            typer.echo(f"Would create {format_mode(init_mode)} package: {initializer.package_name}")
            for artifact in artifacts:
                typer.echo(f"  {artifact.display_path}")
            return
        initializer.write_package_structure()
    except (PackageInitError, OSError) as e:
        _logger.debug("Initialization failed", exc_info=True)
        typer.echo(f"error: {e}", err=True)
        raise typer.Exit(1) from e
