"""
vuehooks CLI.

- hooks.py: dump, check, list and resolve commands
- utils.py: logging setup and version output
"""

import typer

from vuehooks.cli.hooks import check_command, dump_command, list_command, resolve_command
from vuehooks.cli.utils import configure_logging, version_callback

app = typer.Typer(
    help="""vuehooks – generate Vue component hooks

Reads vuehooks.toml in the current directory (or --manifest) and writes one
generated component per host component and hook point.
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    """vuehooks CLI main callback for global options."""
    configure_logging(verbose)


app.command(name="dump")(dump_command)
app.command(name="check")(check_command)
app.command(name="list")(list_command)
app.command(name="resolve")(resolve_command)


def main(argv: list[str] | None = None) -> None:
    app(args=argv)


__all__ = ["app", "main"]
