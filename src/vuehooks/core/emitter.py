"""
Generated hook component emitter.

For one host component and hook point, renders a Vue single-file component
that renders every inserted component in sequence:

    <template>
        <fragment>
            <AddLinkPageC></AddLinkPageC>
        </fragment>
    </template>

The root uses vue-fragment (https://www.npmjs.com/package/vue-fragment) so
the hook adds no wrapper element to the host's DOM. Imports keep the
unresolved alias form so the bundler resolves them itself.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path, PurePosixPath

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError

from .aliases import AliasResolver
from .errors import HookIOError, InvalidArgumentError
from .files import write_file
from .paths import OutputPathRule, VendorSegmentRule

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent.parent / "templates"
TEMPLATE_NAME = "hook_component.vue.j2"

INDENT_UNIT = 4


def indent(text: str, level: int, unit: int = INDENT_UNIT) -> str:
    """
    Indent all non-blank lines in text.

    Args:
        text: Text to indent
        level: Number of indentation units
        unit: Spaces per unit

    Returns:
        Indented text
    """
    indent_str = " " * (level * unit)
    lines = text.split("\n")
    return "\n".join(indent_str + line if line.strip() else line for line in lines)


def create_jinja_env() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        undefined=StrictUndefined,
        autoescape=False,
        keep_trailing_newline=False,
    )


class HookComponentEmitter:
    """
    Renders and writes generated hook components.

    Args:
        output_dir: Root directory for generated files
        resolver: Alias resolver used to locate host and inserted components
        path_rule: Maps a physical host path to a path relative to output_dir
        extension: Component file extension
        identifier_suffix: Appended to component basenames to build local identifiers
    """

    def __init__(
        self,
        output_dir: str | Path,
        resolver: AliasResolver,
        path_rule: OutputPathRule | None = None,
        extension: str = ".vue",
        identifier_suffix: str = "C",
    ):
        self.output_dir = Path(output_dir)
        self.resolver = resolver
        self.path_rule = path_rule or VendorSegmentRule()
        self.extension = extension
        self.identifier_suffix = identifier_suffix
        self._env = create_jinja_env()

    def output_path(self, component: str, hook: str) -> Path:
        """
        Path of the generated file for a host component and hook point.

        ``<output_dir>/<rule(host)>`` with the host's extension replaced by
        a directory, followed by ``<hook><extension>``.
        """
        relative = self.path_rule(self.resolver.resolve(component))
        if relative.endswith(self.extension):
            relative = relative[: -len(self.extension)]
        return self.output_dir / relative.strip("/") / f"{hook}{self.extension}"

    def identifier(self, inserted: str) -> str:
        """Local identifier for an inserted component, e.g. ``AddLinkPageC``."""
        name = PurePosixPath(self.resolver.resolve(inserted)).name
        if name.endswith(self.extension):
            name = name[: -len(self.extension)]
        return name + self.identifier_suffix

    def check_identifiers(self, inserted: Sequence[str]) -> None:
        """
        Ensure no two inserted components share a local identifier.

        Raises:
            InvalidArgumentError: If two components resolve to the same identifier
        """
        seen: dict[str, str] = {}
        for item in inserted:
            ident = self.identifier(item)
            if ident in seen:
                raise InvalidArgumentError(
                    f'Components {seen[ident]} and {item} would both be imported as "{ident}".'
                )
            seen[ident] = item

    def render(self, component: str, hook: str, inserted: Sequence[str]) -> str:
        """
        Render the generated component source.

        Args:
            component: Host component (logical path)
            hook: Hook point name
            inserted: Inserted components (logical paths) in render order

        Returns:
            Generated file content
        """
        self.check_identifiers(inserted)

        usage_lines = []
        import_lines = []
        registration_lines = []
        for item in inserted:
            ident = self.identifier(item)
            usage_lines.append(f"<{ident}></{ident}>")
            import_lines.append(f"import {ident} from '{item}'")
            registration_lines.append(f"{ident},")

        component_name = self.output_path(component, hook).name[: -len(self.extension)]

        try:
            template = self._env.get_template(TEMPLATE_NAME)
            return template.render(
                usage_block=indent("\n".join(usage_lines), 2),
                import_block=indent("\n".join(import_lines), 1),
                component_name=component_name,
                registration_block=indent("\n".join(registration_lines), 3),
            )
        except TemplateError as e:
            raise HookIOError(f"Cannot render hook {hook} for {component}: {e}") from e

    def prepare(self, component: str, hook: str, inserted: Sequence[str]) -> tuple[Path, str]:
        """Output path and rendered content, without touching the file system."""
        return self.output_path(component, hook), self.render(component, hook, inserted)

    def write(self, path: Path, content: str) -> Path:
        """Write a prepared component, overwriting any existing file."""
        write_file(path, content)
        logger.info("Wrote %s", path)
        return path
