"""Command line for pkginit.

    pkginit init                        # Initialize a library in cwd
    pkginit init --type executable      # Initialize an executable
    pkginit init -t system-module -p DIR
    pkginit init --dry-run              # Show what would be created
"""

from typing import Annotated

import typer

from pkginit import __version__
from pkginit.cli.init import init

app = typer.Typer(
    name="pkginit",
    help="Scaffold a new Swift package",
    no_args_is_help=True,
)

app.command("init")(init)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"pkginit {__version__}")
        raise typer.Exit()


@app.callback()
def callback(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            help="Show the version and exit",
            callback=_version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """Scaffold a new Swift package."""


def main() -> None:
    """Main entry point for the pkginit CLI."""
    app()


if __name__ == "__main__":
    main()
