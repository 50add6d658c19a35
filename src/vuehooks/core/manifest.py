import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from .errors import ConfigError
from .paths import DEFAULT_VENDOR_SEGMENT, VendorSegmentRule
from .registry import HookRegistry

logger = logging.getLogger(__name__)

DEFAULT_MANIFEST = "vuehooks.toml"


@dataclass
class HookSpec:
    """One hook: insert ``inserted`` into ``hook`` of ``component``."""

    component: str
    hook: str
    inserted: str


@dataclass
class HooksManifest:
    """Project configuration read from vuehooks.toml."""

    output_dir: Path
    aliases_file: Path | None = None
    vendor_segment: str = DEFAULT_VENDOR_SEGMENT
    create_output_dir: bool = True
    hooks: list[HookSpec] = field(default_factory=list)


def _parse_hook(index: int, entry: object, path: Path) -> HookSpec:
    if not isinstance(entry, dict):
        raise ConfigError(f"{path}: hooks[{index}] must be a table.")
    values = {}
    for key in ("component", "hook", "inserted"):
        value = entry.get(key)
        if not isinstance(value, str) or not value:
            raise ConfigError(f'{path}: hooks[{index}] needs a non-empty "{key}" string.')
        values[key] = value
    return HookSpec(**values)


def _optional(project: dict, key: str, kind: type, default: object, path: Path) -> object:
    value = project.get(key, default)
    if not isinstance(value, kind):
        raise ConfigError(f'{path}: [project] "{key}" must be a {kind.__name__}, got {type(value).__name__}.')
    return value


def load_manifest(path: Path) -> HooksManifest:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"Cannot read manifest {path}: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Manifest {path} is not valid TOML: {e}") from e

    root = path.parent
    project = data.get("project", {})
    if not isinstance(project, dict):
        raise ConfigError(f"{path}: [project] must be a table.")

    output_dir = project.get("output_dir")
    if not isinstance(output_dir, str) or not output_dir:
        raise ConfigError(f'{path}: [project] must set "output_dir" to a non-empty string.')

    # Relative paths are relative to the manifest
    aliases_file = _optional(project, "aliases_file", str, "", path)
    vendor_segment = _optional(project, "vendor_segment", str, DEFAULT_VENDOR_SEGMENT, path)
    create_output_dir = _optional(project, "create_output_dir", bool, True, path)

    entries = data.get("hooks", [])
    if not isinstance(entries, list):
        raise ConfigError(f"{path}: hooks must be an array of tables.")
    hooks = [_parse_hook(i, entry, path) for i, entry in enumerate(entries)]

    manifest = HooksManifest(
        output_dir=root / output_dir,
        aliases_file=root / aliases_file if aliases_file else None,
        vendor_segment=vendor_segment,
        create_output_dir=create_output_dir,
        hooks=hooks,
    )
    logger.debug("Loaded %d hook(s) from %s", len(hooks), path)
    return manifest


def build_registry(manifest: HooksManifest) -> HookRegistry:
    """
    Create a registry from a manifest and add every hook in file order.

    Raises:
        ConfigError: If the output directory or aliases file is unusable
        InvalidArgumentError: If a hook fails validation
        UnresolvedAliasError: If a hook uses an undefined alias
    """
    try:
        rule = VendorSegmentRule(manifest.vendor_segment)
    except ValueError as e:
        raise ConfigError(f"Invalid vendor_segment: {e}") from e

    registry = HookRegistry(
        manifest.output_dir,
        manifest.aliases_file or "",
        path_rule=rule,
        create_output_dir=manifest.create_output_dir,
    )
    for spec in manifest.hooks:
        registry.add(spec.component, spec.hook, spec.inserted)
    return registry
