"""Shared pytest fixtures for vuehooks tests."""

import json
from pathlib import Path

import pytest

from vuehooks.core.registry import HookRegistry

HOST_SOURCE = """<template>
    <div>
        <ComponentHook hook_name="_slot"></ComponentHook>
        <ComponentHook hook_name="_after_tabs"></ComponentHook>
    </div>
</template>
"""

HOOK_SOURCE = """<template>
    <span>hooked</span>
</template>
"""


@pytest.fixture
def vendor_dir(tmp_path: Path) -> Path:
    """Create a vendored package with a host component and three hook components."""
    app_dir = tmp_path / "vendor" / "app"
    (app_dir / "hooks").mkdir(parents=True)
    (app_dir / "A.vue").write_text(HOST_SOURCE)
    for name in ("B", "C", "D"):
        (app_dir / "hooks" / f"{name}.vue").write_text(HOOK_SOURCE)
    return app_dir


@pytest.fixture
def aliases_file(tmp_path: Path, vendor_dir: Path) -> Path:
    """Return an aliases file mapping @App to the vendored package."""
    path = tmp_path / "aliases.json"
    path.write_text(json.dumps({"@App": str(vendor_dir)}))
    return path


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    path = tmp_path / "out"
    path.mkdir()
    return path


@pytest.fixture
def registry(output_dir: Path, aliases_file: Path) -> HookRegistry:
    """Return an empty registry using the @App alias."""
    return HookRegistry(output_dir, aliases_file)
