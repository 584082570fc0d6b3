"""Tests for the root index.ts entry point patching."""

from pathlib import Path

from unicrn.core.entry_point import (
    ENTRY_FILENAME,
    EXPO_ROUTER_IMPORT,
    UNISTYLES_IMPORT,
    EntryPointStatus,
    ensure_entry_point,
    with_required_imports,
)


def test_creates_entry_point_when_missing(tmp_path: Path) -> None:
    status = ensure_entry_point(tmp_path)

    assert status == EntryPointStatus.CREATED
    assert (tmp_path / ENTRY_FILENAME).read_text(encoding="utf-8") == (
        f"{EXPO_ROUTER_IMPORT}\n{UNISTYLES_IMPORT}\n"
    )


def test_inserts_unistyles_after_expo_router(tmp_path: Path) -> None:
    entry = tmp_path / ENTRY_FILENAME
    entry.write_text(f"import './polyfills';\n{EXPO_ROUTER_IMPORT}\n", encoding="utf-8")

    status = ensure_entry_point(tmp_path)

    assert status == EntryPointStatus.UPDATED
    assert entry.read_text(encoding="utf-8").splitlines() == [
        "import './polyfills';",
        EXPO_ROUTER_IMPORT,
        UNISTYLES_IMPORT,
    ]


def test_prepends_both_imports_to_unrelated_content() -> None:
    result = with_required_imports("console.log('hi');\n")

    assert result.splitlines() == [EXPO_ROUTER_IMPORT, UNISTYLES_IMPORT, "console.log('hi');"]


def test_complete_entry_point_is_unchanged(tmp_path: Path) -> None:
    entry = tmp_path / ENTRY_FILENAME
    original = f"{EXPO_ROUTER_IMPORT}\n{UNISTYLES_IMPORT}\nimport './other';\n"
    entry.write_text(original, encoding="utf-8")

    assert ensure_entry_point(tmp_path) == EntryPointStatus.UNCHANGED
    assert entry.read_text(encoding="utf-8") == original
