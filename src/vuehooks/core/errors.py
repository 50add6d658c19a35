"""
Error types for vuehooks registry, alias resolution, and emission.
"""

from dataclasses import dataclass
from typing import Optional


class HooksError(Exception):
    """Base exception for all vuehooks errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class ConfigError(HooksError):
    """
    Raised when configuration cannot be loaded.

    Examples:
    - Missing or unreadable aliases file
    - Aliases file that is not a JSON object
    - Output directory that is not a writable directory
    - Malformed manifest
    """

    pass


class UnresolvedAliasError(HooksError):
    """Raised when a path uses an alias that is not defined in the aliases file."""

    def __init__(self, alias: str, aliases_file: str):
        self.alias = alias
        self.aliases_file = aliases_file
        super().__init__(f'The provided alias "{alias}" is not defined in {aliases_file or "<no aliases file>"}.')


class InvalidArgumentError(HooksError, ValueError):
    """
    Raised when a hook cannot be accepted.

    Examples:
    - Host component file is missing
    - Hook point is not declared in the host component
    - Inserted component file is missing
    """

    pass


class NotFoundError(HooksError, LookupError):
    """Raised when removing a hook that was never added."""

    pass


class HookIOError(HooksError, OSError):
    """Raised when the output directory cannot be cleared or written."""

    pass


@dataclass
class ErrorContext:
    """
    Context information for an error.

    Attributes:
        component: Host component path (logical, as added)
        hook: Hook point name
        file: Resolved physical file involved in the failure
    """

    component: str | None = None
    hook: str | None = None
    file: str | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "@App/A.vue#_slot (/srv/vendor/app/A.vue)"
        """
        location = self.component or ""
        if self.hook:
            location += f"#{self.hook}"
        if self.file and self.file != self.component:
            location = f"{location} ({self.file})" if location else self.file
        return location
