"""
Core vuehooks components.

- aliases: load the bundler alias table and resolve logical paths
- registry: hold, validate and dump component hooks
- emitter: render generated hook components
- manifest: vuehooks.toml configuration
"""

from .aliases import AliasResolver, AliasTable
from .emitter import HookComponentEmitter
from .errors import (
    ConfigError,
    ErrorContext,
    HookIOError,
    HooksError,
    InvalidArgumentError,
    NotFoundError,
    UnresolvedAliasError,
)
from .files import CheckResult, empty_dir, file_error
from .manifest import HookSpec, HooksManifest, build_registry, load_manifest
from .paths import OutputPathRule, VendorSegmentRule
from .registry import DumpResult, HookRegistry

__all__ = [
    "AliasResolver",
    "AliasTable",
    "CheckResult",
    "ConfigError",
    "DumpResult",
    "ErrorContext",
    "HookComponentEmitter",
    "HookIOError",
    "HookRegistry",
    "HookSpec",
    "HooksError",
    "HooksManifest",
    "InvalidArgumentError",
    "NotFoundError",
    "OutputPathRule",
    "UnresolvedAliasError",
    "VendorSegmentRule",
    "build_registry",
    "empty_dir",
    "file_error",
    "load_manifest",
]
