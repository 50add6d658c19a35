"""
vuehooks - build-time generator for Vue component hooks.

Components declare named hook points; other packages register components
to be rendered at those points. vuehooks validates the registrations and
writes one generated component per host component and hook point, ready
to be imported by the bundler.
"""

from __future__ import annotations

from ._version import get_version
from .core.aliases import AliasResolver
from .core.errors import (
    ConfigError,
    HookIOError,
    HooksError,
    InvalidArgumentError,
    NotFoundError,
    UnresolvedAliasError,
)
from .core.registry import HookRegistry

__version__ = get_version()

__all__ = [
    "__version__",
    "AliasResolver",
    "HookRegistry",
    "HooksError",
    "ConfigError",
    "UnresolvedAliasError",
    "InvalidArgumentError",
    "NotFoundError",
    "HookIOError",
]
