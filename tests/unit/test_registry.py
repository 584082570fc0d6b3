"""Tests for the component, hook and theme catalog."""

import pytest

from unicrn.core.errors import EntryNotFoundError
from unicrn.core.registry import (
    CATALOG,
    THEMES,
    CatalogEntry,
    EntryKind,
    Registry,
    require_theme,
)


def _entry(key: str, *files: str, kind: EntryKind = EntryKind.COMPONENT) -> CatalogEntry:
    return CatalogEntry(key, kind, key.title(), "desc", (), files)


def test_builtin_catalog_file_paths_are_unique() -> None:
    paths = [path for entry in CATALOG for path in entry.files]

    assert len(paths) == len(set(paths))


def test_lookup_is_case_insensitive() -> None:
    entry = CATALOG.get("BuTtOn")

    assert entry is not None
    assert entry.name == "Button"
    assert entry.files == ("lib/components/ui/Button.tsx",)


def test_hooks_share_lookup_namespace() -> None:
    entry = CATALOG.get("useDisclose")

    assert entry is not None
    assert entry.kind == EntryKind.HOOK
    assert entry.files == ("lib/hooks/useDisclose.ts",)


def test_switch_owns_two_files() -> None:
    entry = CATALOG.get("switch")

    assert entry is not None
    assert len(entry.files) == 2
    assert "react-native-reanimated" in entry.dependencies


def test_require_unknown_lists_available_names() -> None:
    with pytest.raises(EntryNotFoundError) as exc_info:
        CATALOG.require("carousel")

    assert exc_info.value.name == "carousel"
    assert "button" in exc_info.value.available
    assert "usedisclose" in exc_info.value.available
    assert "Available:" in str(exc_info.value)


def test_duplicate_file_path_rejected() -> None:
    with pytest.raises(ValueError, match="claimed by both 'a' and 'b'"):
        Registry([_entry("a", "lib/components/ui/A.tsx"), _entry("b", "lib/components/ui/A.tsx")])


def test_key_shared_by_component_and_hook_rejected() -> None:
    with pytest.raises(ValueError, match="Duplicate registry key"):
        Registry(
            [
                _entry("toggle", "lib/components/ui/Toggle.tsx"),
                _entry("toggle", "lib/hooks/useToggle.ts", kind=EntryKind.HOOK),
            ]
        )


def test_uppercase_key_rejected() -> None:
    with pytest.raises(ValueError, match="lowercase"):
        Registry([_entry("Button", "lib/components/ui/Button.tsx")])


def test_of_kind_filters_entries() -> None:
    hooks = CATALOG.of_kind(EntryKind.HOOK)

    assert [entry.key for entry in hooks] == ["usedisclose"]
    assert len(CATALOG.of_kind(EntryKind.COMPONENT)) == len(CATALOG) - 1


def test_require_theme_case_insensitive() -> None:
    assert require_theme(THEMES, "Dark").name == "Dark"


def test_require_theme_unknown() -> None:
    with pytest.raises(EntryNotFoundError) as exc_info:
        require_theme(THEMES, "purple")

    assert exc_info.value.kind_label == "Theme"
    assert exc_info.value.available == ["default", "dark", "blue", "green"]
