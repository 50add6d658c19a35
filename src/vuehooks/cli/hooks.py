"""
CLI commands for component hooks.

Commands:
- dump: Validate all hooks and write the generated components
- check: Validate all hooks without writing anything
- list: Show component → hook → inserted mapping
- resolve: Resolve an aliased path to its physical path
"""

from __future__ import annotations

from pathlib import Path

import typer

from vuehooks.core.aliases import AliasResolver
from vuehooks.core.errors import HooksError
from vuehooks.core.manifest import DEFAULT_MANIFEST, build_registry, load_manifest
from vuehooks.core.registry import HookRegistry


def _load_registry(manifest: str) -> HookRegistry:
    manifest_path = Path(manifest).resolve()
    return build_registry(load_manifest(manifest_path))


def dump_command(
    manifest: str = typer.Option(DEFAULT_MANIFEST, "--manifest", "-m", help="Path to vuehooks.toml"),
) -> None:
    """
    Empty the output directory and write one component per host component and hook.
    """
    try:
        registry = _load_registry(manifest)
        result = registry.dump_all()
    except HooksError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    for path in result.files_created:
        typer.echo(f"Generated: {path}")
    typer.echo(f"{len(result.files_created)} hook component(s) written to {registry.output_dir}")


def check_command(
    manifest: str = typer.Option(DEFAULT_MANIFEST, "--manifest", "-m", help="Path to vuehooks.toml"),
) -> None:
    """
    Validate every hook in the manifest without writing output.
    """
    try:
        registry = _load_registry(manifest)
    except HooksError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"✓ {len(registry)} hook(s) valid")


def list_command(
    manifest: str = typer.Option(DEFAULT_MANIFEST, "--manifest", "-m", help="Path to vuehooks.toml"),
) -> None:
    """
    Show registered hooks in registration order.
    """
    try:
        registry = _load_registry(manifest)
    except HooksError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    all_hooks = registry.get_all()
    if not all_hooks:
        typer.echo("(no hooks registered)")
        return

    for component, hooks in all_hooks.items():
        typer.echo(component)
        for hook, inserted in hooks.items():
            typer.echo(f"  {hook}")
            for item in inserted:
                typer.echo(f"    → {item}")


def resolve_command(
    path: str = typer.Argument(..., help="Logical component path, e.g. @Vendor.Module/components/A.vue"),
    aliases: str = typer.Option(..., "--aliases", "-a", help="JSON file with bundler aliases"),
) -> None:
    """
    Print the physical path of an aliased component path.
    """
    try:
        resolver = AliasResolver.load(aliases)
        typer.echo(resolver.resolve(path))
    except HooksError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
