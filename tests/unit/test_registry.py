"""Tests for the hook registry."""

from pathlib import Path

import pytest

from vuehooks.core.errors import (
    ConfigError,
    InvalidArgumentError,
    NotFoundError,
    UnresolvedAliasError,
)
from vuehooks.core.registry import HookRegistry

HOST = "@App/A.vue"


class TestConstruction:
    def test_accessors(self, registry: HookRegistry, output_dir: Path, aliases_file: Path, vendor_dir: Path) -> None:
        assert registry.output_dir == output_dir
        assert registry.aliases_file == str(aliases_file)
        assert registry.aliases == {"@App": str(vendor_dir)}

    def test_missing_output_dir(self, tmp_path: Path, aliases_file: Path) -> None:
        with pytest.raises(ConfigError, match="output_dir"):
            HookRegistry(tmp_path / "nope", aliases_file)

    def test_output_dir_is_file(self, tmp_path: Path) -> None:
        target = tmp_path / "file.txt"
        target.write_text("x")

        with pytest.raises(ConfigError, match="not a directory"):
            HookRegistry(target)

    def test_create_output_dir(self, tmp_path: Path) -> None:
        registry = HookRegistry(tmp_path / "build" / "hooks", create_output_dir=True)

        assert registry.output_dir.is_dir()

    def test_bad_aliases_file(self, output_dir: Path, tmp_path: Path) -> None:
        bad = tmp_path / "aliases.json"
        bad.write_text("[]")

        with pytest.raises(ConfigError):
            HookRegistry(output_dir, bad)

    def test_without_aliases(self, output_dir: Path) -> None:
        registry = HookRegistry(output_dir)

        assert registry.aliases == {}
        assert registry.aliases_file == ""


class TestAdd:
    def test_add_appends_last(self, registry: HookRegistry) -> None:
        registry.add(HOST, "_slot", "@App/hooks/B.vue")
        registry.add(HOST, "_slot", "@App/hooks/C.vue")

        assert registry.get(HOST, "_slot") == ["@App/hooks/B.vue", "@App/hooks/C.vue"]

    def test_add_is_idempotent(self, registry: HookRegistry) -> None:
        registry.add(HOST, "_slot", "@App/hooks/B.vue")
        registry.add(HOST, "_slot", "@App/hooks/B.vue")

        assert registry.get(HOST, "_slot") == ["@App/hooks/B.vue"]
        assert len(registry) == 1

    def test_same_component_in_different_hooks(self, registry: HookRegistry) -> None:
        registry.add(HOST, "_slot", "@App/hooks/B.vue")
        registry.add(HOST, "_after_tabs", "@App/hooks/B.vue")

        assert registry.has(HOST, "_slot", "@App/hooks/B.vue")
        assert registry.has(HOST, "_after_tabs", "@App/hooks/B.vue")

    def test_missing_hook_point(self, registry: HookRegistry) -> None:
        registry.add(HOST, "_slot", "@App/hooks/B.vue")

        with pytest.raises(InvalidArgumentError, match='no hook "_missing"'):
            registry.add(HOST, "_missing", "@App/hooks/C.vue")

        assert registry.get(HOST, "_missing") == []
        assert registry.get(HOST, "_slot") == ["@App/hooks/B.vue"]

    def test_missing_host_file(self, registry: HookRegistry) -> None:
        with pytest.raises(InvalidArgumentError, match="does not exist"):
            registry.add("@App/Missing.vue", "_slot", "@App/hooks/B.vue")

        assert registry.get_all() == {}

    def test_missing_inserted_file(self, registry: HookRegistry) -> None:
        with pytest.raises(InvalidArgumentError, match="does not exist"):
            registry.add(HOST, "_slot", "@App/hooks/Missing.vue")

        assert registry.get(HOST, "_slot") == []

    def test_error_names_host_and_hook(self, registry: HookRegistry, vendor_dir: Path) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            registry.add(HOST, "_missing", "@App/hooks/B.vue")

        message = str(exc_info.value)
        assert HOST in message
        assert "_missing" in message
        assert str(vendor_dir / "A.vue") in message

    def test_undefined_alias(self, registry: HookRegistry) -> None:
        with pytest.raises(UnresolvedAliasError):
            registry.add("@Other/A.vue", "_slot", "@App/hooks/B.vue")

    def test_custom_file_check(self, output_dir: Path, aliases_file: Path) -> None:
        def deny_inserted(path, writeable=False, is_dir=False, arg_name="path"):
            if str(path).endswith("B.vue"):
                return f"{path} is locked."
            return None

        registry = HookRegistry(output_dir, aliases_file, file_check=deny_inserted)

        with pytest.raises(InvalidArgumentError, match="is locked"):
            registry.add(HOST, "_slot", "@App/hooks/B.vue")


class TestRemove:
    def test_remove_preserves_order(self, registry: HookRegistry) -> None:
        for name in ("B", "C", "D"):
            registry.add(HOST, "_slot", f"@App/hooks/{name}.vue")

        registry.remove(HOST, "_slot", "@App/hooks/C.vue")

        assert registry.get(HOST, "_slot") == ["@App/hooks/B.vue", "@App/hooks/D.vue"]
        assert not registry.has(HOST, "_slot", "@App/hooks/C.vue")

    def test_remove_absent(self, registry: HookRegistry) -> None:
        registry.add(HOST, "_slot", "@App/hooks/B.vue")

        with pytest.raises(NotFoundError):
            registry.remove(HOST, "_slot", "@App/hooks/C.vue")
        with pytest.raises(NotFoundError):
            registry.remove("@App/Other.vue", "_slot", "@App/hooks/B.vue")

    def test_remove_last_drops_empty_entries(self, registry: HookRegistry) -> None:
        registry.add(HOST, "_slot", "@App/hooks/B.vue")

        registry.remove(HOST, "_slot", "@App/hooks/B.vue")

        assert registry.get_all() == {}
        assert registry.get(HOST, "_slot") == []


class TestQueries:
    def test_has_absent_levels(self, registry: HookRegistry) -> None:
        assert not registry.has("@App/Nope.vue", "_slot", "@App/hooks/B.vue")
        assert not registry.isset(HOST, "_nope", "@App/hooks/B.vue")

    def test_contains_triple(self, registry: HookRegistry) -> None:
        registry.add(HOST, "_slot", "@App/hooks/B.vue")

        assert (HOST, "_slot", "@App/hooks/B.vue") in registry
        assert (HOST, "_slot") not in registry

    def test_get_returns_copy(self, registry: HookRegistry) -> None:
        registry.add(HOST, "_slot", "@App/hooks/B.vue")

        registry.get(HOST, "_slot").append("@App/hooks/C.vue")

        assert registry.get(HOST, "_slot") == ["@App/hooks/B.vue"]

    def test_get_all_is_read_only(self, registry: HookRegistry) -> None:
        registry.add(HOST, "_slot", "@App/hooks/B.vue")

        snapshot = registry.get_all()

        assert snapshot == {HOST: {"_slot": ("@App/hooks/B.vue",)}}
        with pytest.raises(TypeError):
            snapshot[HOST] = {}  # type: ignore[index]
        with pytest.raises(TypeError):
            snapshot[HOST]["_slot"] = ()  # type: ignore[index]

    def test_triples_in_registration_order(self, registry: HookRegistry) -> None:
        registry.add(HOST, "_slot", "@App/hooks/C.vue")
        registry.add(HOST, "_after_tabs", "@App/hooks/B.vue")
        registry.add(HOST, "_slot", "@App/hooks/B.vue")

        assert list(registry.triples()) == [
            (HOST, "_slot", "@App/hooks/C.vue"),
            (HOST, "_slot", "@App/hooks/B.vue"),
            (HOST, "_after_tabs", "@App/hooks/B.vue"),
        ]


class TestChecks:
    def test_component_file_exists(self, registry: HookRegistry) -> None:
        assert registry.component_file_exists("@App/hooks/B.vue")

        check = registry.component_file_exists("@App/hooks/Nope.vue")
        assert not check
        assert "does not exist" in check.error

    def test_component_file_is_directory(self, registry: HookRegistry) -> None:
        check = registry.component_file_exists("@App/hooks")

        assert not check
        assert "is a directory" in check.error

    def test_hook_exists(self, registry: HookRegistry) -> None:
        assert registry.hook_exists(HOST, "_after_tabs")

    def test_hook_missing(self, registry: HookRegistry, vendor_dir: Path) -> None:
        check = registry.hook_exists(HOST, "_before_tabs")

        assert not check
        assert check.error == f'In file {vendor_dir / "A.vue"} there is no hook "_before_tabs".'

    def test_hook_name_is_literal(self, registry: HookRegistry) -> None:
        assert not registry.hook_exists(HOST, "_sl.t")

    def test_hook_check_is_textual(self, registry: HookRegistry, vendor_dir: Path) -> None:
        # Known-loose: any line with the marker followed by the name matches,
        # including a prefix of a longer hook name or a comment.
        (vendor_dir / "Loose.vue").write_text("<!-- hook_name is documented in _footer_notes -->\n")

        assert registry.hook_exists(HOST, "_sl")
        assert registry.hook_exists("@App/Loose.vue", "_footer")

    def test_marker_must_precede_hook(self, registry: HookRegistry, vendor_dir: Path) -> None:
        (vendor_dir / "Reversed.vue").write_text("_slot comes first, then hook_name\n")

        assert not registry.hook_exists("@App/Reversed.vue", "_slot")

    def test_resolve_component_name(self, registry: HookRegistry, vendor_dir: Path) -> None:
        assert registry.resolve_component_name(HOST) == f"{vendor_dir}/A.vue"
        assert registry.resolve_alias("@App") == str(vendor_dir)
