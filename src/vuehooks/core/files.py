"""
File system checks and helpers.

Provides:
- CheckResult: success flag plus an error description
- file_error: describe why a path is not usable (or None when it is)
- empty_dir: remove every entry inside a directory
"""

from __future__ import annotations

import logging
import os
import shutil
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from .errors import HookIOError

logger = logging.getLogger(__name__)

# (path, writeable, is_dir, arg_name) -> error description or None
FileCheck = Callable[..., str | None]


@dataclass(frozen=True)
class CheckResult:
    """
    Outcome of a validation check.

    Truthy when the check passed, so it can be used directly in conditions.

    Attributes:
        ok: Whether the check passed
        error: Human-readable description of the failure
    """

    ok: bool
    error: str | None = None

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def passed(cls) -> CheckResult:
        return cls(ok=True)

    @classmethod
    def failed(cls, error: str) -> CheckResult:
        return cls(ok=False, error=error)


def file_error(
    path: str | Path,
    writeable: bool = False,
    is_dir: bool = False,
    arg_name: str = "path",
) -> str | None:
    """
    Describe why a path cannot be used.

    Args:
        path: File or directory to check
        writeable: Whether the path must also be writeable
        is_dir: Whether the path must be a directory (otherwise a regular file)
        arg_name: Name used in the message to identify the argument

    Returns:
        An error description, or None when the path is usable
    """
    path = Path(path)
    kind = "directory" if is_dir else "file"
    if not path.exists():
        return f"The {arg_name} {kind} {path} does not exist."
    if is_dir and not path.is_dir():
        return f"The {arg_name} path {path} is not a directory."
    if not is_dir and path.is_dir():
        return f"The {arg_name} path {path} is a directory, not a file."
    if not os.access(path, os.R_OK):
        return f"The {arg_name} {kind} {path} is not readable."
    if writeable and not os.access(path, os.W_OK):
        return f"The {arg_name} {kind} {path} is not writeable."
    return None


def empty_dir(path: str | Path) -> None:
    """
    Remove all contents of a directory, keeping the directory itself.

    Raises:
        HookIOError: If the directory is missing or an entry cannot be removed
    """
    path = Path(path)
    if not path.is_dir():
        raise HookIOError(f"Cannot empty {path}: not a directory.")
    for entry in sorted(path.iterdir()):
        try:
            if entry.is_dir() and not entry.is_symlink():
                shutil.rmtree(entry)
            else:
                entry.unlink()
        except OSError as e:
            raise HookIOError(f"Cannot remove {entry} while emptying {path}: {e}") from e
    logger.debug("Emptied %s", path)


def write_file(path: Path, content: str) -> None:
    """
    Write content to a file, creating parent directories if needed.

    Raises:
        HookIOError: If the directory or file cannot be written
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise HookIOError(f"Cannot write {path}: {e}") from e
