"""
Hook registry.

Holds which components are inserted into which hook points of which host
components, validates new hooks against the files on disk, and dumps the
generated hook components.

Example:
    registry = HookRegistry("public_src/component_hooks", "aliases.json")
    registry.add(
        "@GuzabaPlatform.Navigation/components/AddLink.vue",
        "_after_tabs",
        "@GuzabaPlatform.Cms/components/hooks/AddLinkPage.vue",
    )
    registry.dump_all()
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from .aliases import AliasResolver
from .emitter import HookComponentEmitter
from .errors import ConfigError, ErrorContext, InvalidArgumentError, NotFoundError
from .files import CheckResult, FileCheck, empty_dir, file_error
from .paths import OutputPathRule

logger = logging.getLogger(__name__)

HOOK_MARKER = "hook_name"


@dataclass
class DumpResult:
    """
    Result of dumping the registry.

    Attributes:
        files_created: Generated files in the order they were written
    """

    files_created: list[Path] = field(default_factory=list)

    def add_file(self, path: Path) -> None:
        self.files_created.append(path)


class HookRegistry:
    """
    Registry of component hooks.

    The mapping is ``component -> hook -> [inserted, ...]``; insertion order
    is kept and decides both render order and import order.

    Args:
        output_dir: Directory the hooks are dumped into
        aliases_file: JSON file with the bundler's aliases (optional)
        path_rule: Maps a physical host path to a path relative to output_dir
        file_check: Returns an error description for an unusable path, or None
        create_output_dir: Create output_dir if it does not exist yet
        resolver: Pre-built alias resolver, used instead of aliases_file
    """

    def __init__(
        self,
        output_dir: str | Path,
        aliases_file: str | Path = "",
        *,
        path_rule: OutputPathRule | None = None,
        file_check: FileCheck = file_error,
        create_output_dir: bool = False,
        resolver: AliasResolver | None = None,
    ):
        if resolver is not None:
            self._resolver = resolver
        elif aliases_file:
            self._resolver = AliasResolver.load(aliases_file)
        else:
            self._resolver = AliasResolver()

        output_dir = Path(output_dir)
        if create_output_dir:
            try:
                output_dir.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise ConfigError(f"Cannot create output_dir {output_dir}: {e}") from e
        error = file_check(output_dir, writeable=True, is_dir=True, arg_name="output_dir")
        if error:
            raise ConfigError(error)

        self._output_dir = output_dir
        self._file_check = file_check
        self._emitter = HookComponentEmitter(output_dir, self._resolver, path_rule)
        self._hooks: dict[str, dict[str, list[str]]] = {}

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def output_dir(self) -> Path:
        return self._output_dir

    @property
    def aliases_file(self) -> str:
        return self._resolver.aliases_file

    @property
    def aliases(self) -> dict[str, str]:
        return self._resolver.aliases

    @property
    def emitter(self) -> HookComponentEmitter:
        return self._emitter

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add(self, component: str, hook: str, inserted: str) -> None:
        """
        Insert ``inserted`` into ``hook`` of ``component``.

        Adding a hook that is already registered does nothing. Both files are
        validated before the registry is touched.

        Raises:
            InvalidArgumentError: If the hook point or either file is missing, the
                host has no output path, or the inserted component's identifier
                is already used at this hook point
            UnresolvedAliasError: If a path uses an undefined alias
        """
        if self.has(component, hook, inserted):
            logger.debug("Hook %s#%s <- %s already registered", component, hook, inserted)
            return

        check = self.hook_exists(component, hook)
        if not check:
            raise InvalidArgumentError(check.error, ErrorContext(component=component, hook=hook))
        check = self.component_file_exists(inserted)
        if not check:
            raise InvalidArgumentError(check.error, ErrorContext(component=component, hook=hook))
        try:
            self._emitter.output_path(component, hook)
            self._emitter.check_identifiers([*self.get(component, hook), inserted])
        except InvalidArgumentError as e:
            raise InvalidArgumentError(e.message, ErrorContext(component=component, hook=hook)) from e

        self._hooks.setdefault(component, {}).setdefault(hook, []).append(inserted)
        logger.debug("Registered hook %s#%s <- %s", component, hook, inserted)

    def remove(self, component: str, hook: str, inserted: str) -> None:
        """
        Remove a registered hook, keeping the order of the remaining ones.

        Raises:
            NotFoundError: If the hook is not registered
        """
        if not self.has(component, hook, inserted):
            raise NotFoundError(
                f"There is no hooked component {inserted} added for hook {hook} in component {component}."
            )
        hooks = self._hooks[component]
        hooks[hook].remove(inserted)
        if not hooks[hook]:
            del hooks[hook]
        if not hooks:
            del self._hooks[component]
        logger.debug("Removed hook %s#%s <- %s", component, hook, inserted)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def has(self, component: str, hook: str, inserted: str) -> bool:
        return inserted in self._hooks.get(component, {}).get(hook, ())

    isset = has

    def __contains__(self, item: object) -> bool:
        if not isinstance(item, tuple) or len(item) != 3:
            return False
        return self.has(*item)

    def get(self, component: str, hook: str) -> list[str]:
        """Inserted components for a hook point, in insertion order."""
        return list(self._hooks.get(component, {}).get(hook, ()))

    def get_all(self) -> Mapping[str, Mapping[str, tuple[str, ...]]]:
        """Read-only snapshot of the whole mapping."""
        return MappingProxyType(
            {
                component: MappingProxyType({hook: tuple(items) for hook, items in hooks.items()})
                for component, hooks in self._hooks.items()
            }
        )

    def triples(self) -> Iterator[tuple[str, str, str]]:
        """Iterate ``(component, hook, inserted)`` in registration order."""
        for component, hooks in self._hooks.items():
            for hook, items in hooks.items():
                for inserted in items:
                    yield component, hook, inserted

    def __len__(self) -> int:
        return sum(len(items) for hooks in self._hooks.values() for items in hooks.values())

    # ------------------------------------------------------------------
    # Resolution and validation
    # ------------------------------------------------------------------

    def resolve_component_name(self, component: str) -> str:
        """Physical path of a (possibly aliased) component path."""
        return self._resolver.resolve(component)

    def resolve_alias(self, alias: str) -> str | None:
        return self._resolver.resolve_alias(alias)

    def component_file_exists(self, component: str) -> CheckResult:
        """Check that the component's resolved file exists and is readable."""
        path = self.resolve_component_name(component)
        error = self._file_check(path, writeable=False, is_dir=False, arg_name="component")
        if error:
            return CheckResult.failed(error)
        return CheckResult.passed()

    def hook_exists(self, component: str, hook: str) -> CheckResult:
        """
        Check that ``hook`` is declared in the component's source.

        This is a textual search for ``hook_name`` followed by the hook name
        on the same line, not a parse of the component. It can match a
        coincidental substring and miss unusually formatted declarations.
        """
        check = self.component_file_exists(component)
        if not check:
            return check
        path = self.resolve_component_name(component)
        try:
            content = Path(path).read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            return CheckResult.failed(f"Cannot read {path}: {e}")
        if not re.search(rf"{HOOK_MARKER}.*({re.escape(hook)})", content):
            return CheckResult.failed(f'In file {path} there is no hook "{hook}".')
        return CheckResult.passed()

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def dump_all(self) -> DumpResult:
        """
        Empty the output directory and write one file per component and hook.

        The registry itself is not changed. A failure while writing leaves
        the output directory partially populated.

        Raises:
            InvalidArgumentError: If a hook cannot be rendered; nothing is deleted
            HookIOError: If the directory cannot be emptied or a file cannot be written
        """
        logger.info("Dumping %d hook(s) into %s", len(self), self._output_dir)
        # Render everything first so path and identifier errors leave the old output intact
        prepared = [
            self._emitter.prepare(component, hook, inserted)
            for component, hooks in self._hooks.items()
            for hook, inserted in hooks.items()
        ]
        empty_dir(self._output_dir)

        result = DumpResult()
        for path, content in prepared:
            result.add_file(self._emitter.write(path, content))
        logger.info("Wrote %d hook component(s)", len(result.files_created))
        return result
