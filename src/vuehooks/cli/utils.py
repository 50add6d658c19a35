"""
vuehooks CLI utilities.

Shared utility functions used across CLI modules.
"""

import logging
import os
import platform

import typer

from vuehooks._version import get_version

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(verbose: bool = False) -> None:
    """Configure root logging from --verbose or the LOG_LEVEL environment variable."""
    if verbose:
        level = logging.DEBUG
    else:
        log_level = os.getenv("LOG_LEVEL", "WARNING").upper()
        level = getattr(logging, log_level, logging.WARNING)
    logging.basicConfig(level=level, format=LOG_FORMAT)


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"vuehooks version {get_version()}")
        typer.echo("")
        typer.echo("Environment:")
        typer.echo(f"  Python:        {platform.python_implementation()} {platform.python_version()}")
        typer.echo(f"  Platform:      {platform.system()} {platform.release()}")
        raise typer.Exit()
