"""
Alias resolution for logical component paths.

Bundlers such as webpack let components be imported as
``@Vendor.Module/components/Thing.vue``. The bundler's alias table is
exported as a JSON object and loaded here once, so that the physical file
behind a logical path can be checked on disk.
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path

from pydantic import ConfigDict, RootModel, ValidationError, field_validator

from .errors import ConfigError, UnresolvedAliasError
from .files import file_error

logger = logging.getLogger(__name__)

# First "@token/" in the path; the token stops at the first slash.
ALIAS_PATTERN = re.compile(r"@(.*?)/")


class AliasTable(RootModel[dict[str, str]]):
    """Alias token (``@Name``) to physical path prefix."""

    model_config = ConfigDict(frozen=True)

    @field_validator("root")
    @classmethod
    def _check_entries(cls, value: dict[str, str]) -> dict[str, str]:
        for alias, target in value.items():
            if not alias.startswith("@"):
                raise ValueError(f'alias "{alias}" must start with "@"')
            if not target:
                raise ValueError(f'alias "{alias}" maps to an empty path')
        return value

    def get(self, alias: str) -> str | None:
        return self.root.get(alias)

    def __len__(self) -> int:
        return len(self.root)

    def __contains__(self, alias: object) -> bool:
        return alias in self.root


class AliasResolver:
    """
    Resolves alias-prefixed logical paths to physical paths.

    The table is loaded once and never changes afterwards.

    Example:
        resolver = AliasResolver.load("aliases.json")
        resolver.resolve("@GuzabaPlatform.Navigation/components/AddLink.vue")
        # -> "./vendor/guzaba-platform/navigation/app/public_src/src/components/AddLink.vue"
    """

    def __init__(self, table: AliasTable | None = None, aliases_file: str = ""):
        self._table = table if table is not None else AliasTable({})
        self._aliases_file = aliases_file

    @classmethod
    def load(cls, aliases_file: str | Path) -> AliasResolver:
        """
        Load the alias table from a JSON file.

        Args:
            aliases_file: Path to a JSON object of alias -> path prefix

        Returns:
            AliasResolver bound to the loaded table

        Raises:
            ConfigError: If the file is unreadable, not JSON, or not a valid alias object
        """
        aliases_file = str(aliases_file)
        error = file_error(aliases_file, arg_name="aliases_file")
        if error:
            raise ConfigError(error)

        try:
            data = json.loads(Path(aliases_file).read_text(encoding="utf-8"))
        except OSError as e:
            raise ConfigError(f"Cannot read aliases file {aliases_file}: {e}") from e
        except json.JSONDecodeError as e:
            raise ConfigError(f"Aliases file {aliases_file} is not valid JSON: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(
                f"Aliases file {aliases_file} must contain a JSON object, got {type(data).__name__}."
            )

        try:
            table = AliasTable(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid aliases in {aliases_file}: {e}") from e

        logger.debug("Loaded %d aliases from %s", len(table), aliases_file)
        return cls(table, aliases_file)

    @property
    def aliases_file(self) -> str:
        return self._aliases_file

    @property
    def aliases(self) -> dict[str, str]:
        """A copy of the alias table."""
        return dict(self._table.root)

    def resolve_alias(self, alias: str) -> str | None:
        """Return the path prefix for an alias token, or None if it is not defined."""
        return self._table.get(alias)

    def resolve(self, path: str) -> str:
        """
        Resolve a logical path to its physical path.

        Only the first alias token is substituted; the rest of the path is kept.

        Args:
            path: Logical path, e.g. ``@App/components/A.vue``

        Returns:
            Physical path, or ``path`` unchanged when there is nothing to resolve

        Raises:
            UnresolvedAliasError: If the alias token is not in the table
        """
        if not len(self._table):
            return path
        if "@" not in path:
            return path

        match = ALIAS_PATTERN.search(path)
        if not match:
            return path

        alias = "@" + match.group(1)
        target = self.resolve_alias(alias)
        if target is None:
            raise UnresolvedAliasError(alias, self._aliases_file)

        start = match.start()
        resolved = path[:start] + target + path[start + len(alias):]
        logger.debug("Resolved %s -> %s", path, resolved)
        return resolved
