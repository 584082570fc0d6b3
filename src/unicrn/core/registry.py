"""Static catalog of components, hooks and themes.

Components and hooks share one lookup namespace so `unicrn add <name>` never
has to guess which kind was meant. The catalog is built once at import and
never mutated.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum

from unicrn.core.errors import EntryNotFoundError


class EntryKind(Enum):
    COMPONENT = "component"
    HOOK = "hook"


@dataclass(frozen=True)
class CatalogEntry:
    """A component or hook that can be added to a project.

    Attributes:
        key: Canonical lowercase lookup key (e.g. "button")
        kind: Whether the entry is a UI component or a hook
        name: Display name, also the exported symbol (e.g. "Button")
        description: One-line human description
        dependencies: npm packages the consumer must install (never resolved)
        files: Registry-relative source paths owned by this entry
    """

    key: str
    kind: EntryKind
    name: str
    description: str
    dependencies: tuple[str, ...]
    files: tuple[str, ...]


@dataclass(frozen=True)
class ThemeEntry:
    """A named color theme applied through unistyles.ts."""

    key: str
    name: str
    colors: dict[str, str] = field(hash=False)


class Registry:
    """Immutable, case-insensitive lookup over catalog entries.

    Raises:
        ValueError: At construction, if two entries share a key or claim the
            same file path
    """

    def __init__(self, entries: Iterable[CatalogEntry]) -> None:
        by_key: dict[str, CatalogEntry] = {}
        owners: dict[str, str] = {}
        for entry in entries:
            if entry.key != entry.key.lower():
                raise ValueError(f"Registry key must be lowercase: {entry.key}")
            if entry.key in by_key:
                raise ValueError(f"Duplicate registry key: {entry.key}")
            for path in entry.files:
                if path in owners:
                    raise ValueError(
                        f"File {path} is claimed by both '{owners[path]}' and '{entry.key}'"
                    )
                owners[path] = entry.key
            by_key[entry.key] = entry
        self._entries = by_key

    def get(self, name: str) -> CatalogEntry | None:
        return self._entries.get(name.lower())

    def require(self, name: str) -> CatalogEntry:
        """Look up an entry or raise EntryNotFoundError listing valid names."""
        entry = self.get(name)
        if entry is None:
            raise EntryNotFoundError("Component", name, self.keys())
        return entry

    def keys(self) -> list[str]:
        return list(self._entries)

    def of_kind(self, kind: EntryKind) -> list[CatalogEntry]:
        return [entry for entry in self._entries.values() if entry.kind == kind]

    def __iter__(self) -> Iterator[CatalogEntry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)


UNISTYLES = "react-native-unistyles"
REANIMATED = "react-native-reanimated"
LUCIDE = "lucide-react-native"


def _component(
    key: str, name: str, description: str, dependencies: tuple[str, ...], *files: str
) -> CatalogEntry:
    owned = files or (f"lib/components/ui/{name}.tsx",)
    return CatalogEntry(key, EntryKind.COMPONENT, name, description, dependencies, owned)


COMPONENTS: tuple[CatalogEntry, ...] = (
    _component(
        "avatar",
        "Avatar",
        "An image element with a fallback for representing the user.",
        (UNISTYLES,),
    ),
    _component(
        "badge",
        "Badge",
        "Displays a badge or a component that looks like a badge.",
        (UNISTYLES,),
    ),
    _component(
        "button",
        "Button",
        "Displays a button or a component that looks like a button.",
        (UNISTYLES,),
    ),
    _component(
        "card",
        "Card",
        "Displays a card with header, content, and footer.",
        (UNISTYLES,),
    ),
    _component(
        "checkbox",
        "Checkbox",
        "Checkbox input with multiple sizes and variants.",
        (UNISTYLES, LUCIDE),
    ),
    _component(
        "dialog",
        "Dialog",
        "Modal dialog component with backdrop and animations.",
        (UNISTYLES, LUCIDE),
    ),
    _component(
        "input",
        "Input",
        "Displays a form input field or a component that looks like an input field.",
        (UNISTYLES,),
    ),
    _component(
        "otpinput",
        "OTPInput",
        "One-time password input component with multiple digits.",
        (UNISTYLES,),
    ),
    _component(
        "radio",
        "Radio",
        "Radio button group component for single selection.",
        (UNISTYLES,),
    ),
    _component(
        "switch",
        "Switch",
        "A control that allows the user to toggle between checked and not checked.",
        (UNISTYLES, REANIMATED),
        "lib/components/ui/Switch.tsx",
        "lib/components/ui/SwitchThumb.tsx",
    ),
    _component(
        "typography",
        "Typography",
        "Unified typography component with semantic variants like shadcn/ui.",
        (UNISTYLES,),
    ),
)

HOOKS: tuple[CatalogEntry, ...] = (
    CatalogEntry(
        key="usedisclose",
        kind=EntryKind.HOOK,
        name="useDisclose",
        description="Open/close/toggle state for dialogs, sheets and menus.",
        dependencies=(),
        files=("lib/hooks/useDisclose.ts",),
    ),
)

CATALOG = Registry(COMPONENTS + HOOKS)

THEME_FILE = "unistyles.ts"

THEMES: dict[str, ThemeEntry] = {
    "default": ThemeEntry(
        key="default",
        name="Default",
        colors={
            "primary": "#18181b",
            "secondary": "#f4f4f5",
            "destructive": "#ef4444",
            "background": "#ffffff",
            "foreground": "#18181b",
        },
    ),
    "dark": ThemeEntry(
        key="dark",
        name="Dark",
        colors={
            "primary": "#fafafa",
            "secondary": "#27272a",
            "destructive": "#ef4444",
            "background": "#09090b",
            "foreground": "#fafafa",
        },
    ),
    "blue": ThemeEntry(
        key="blue",
        name="Blue",
        colors={
            "primary": "#3b82f6",
            "secondary": "#e0e7ff",
            "destructive": "#ef4444",
            "background": "#ffffff",
            "foreground": "#1e293b",
        },
    ),
    "green": ThemeEntry(
        key="green",
        name="Green",
        colors={
            "primary": "#22c55e",
            "secondary": "#dcfce7",
            "destructive": "#ef4444",
            "background": "#ffffff",
            "foreground": "#1e293b",
        },
    ),
}


def require_theme(themes: dict[str, ThemeEntry], name: str) -> ThemeEntry:
    """Look up a theme case-insensitively or raise EntryNotFoundError."""
    theme = themes.get(name.lower())
    if theme is None:
        raise EntryNotFoundError("Theme", name, list(themes))
    return theme
