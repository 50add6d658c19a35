"""Installed version of vuehooks."""

from importlib.metadata import PackageNotFoundError, version


def get_version() -> str:
    """Version from the installed distribution metadata, or 0.0.0 when not installed."""
    try:
        return version("vuehooks")
    except PackageNotFoundError:
        return "0.0.0"
