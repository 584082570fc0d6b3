"""Exception types raised by unicrn core operations."""


class UnicrnError(Exception):
    """Base class for all well-known unicrn failures."""


class EntryNotFoundError(UnicrnError):
    """Raised when a component, hook or theme name is not in its registry."""

    def __init__(self, kind_label: str, name: str, available: list[str]) -> None:
        self.kind_label = kind_label
        self.name = name
        self.available = available
        super().__init__(
            f'{kind_label} "{name}" not found. Available: {", ".join(available)}'
        )


class SourceUnavailableError(UnicrnError):
    """Raised when no source strategy could provide a registry file."""

    def __init__(self, registry_path: str) -> None:
        self.registry_path = registry_path
        super().__init__(f"Could not obtain {registry_path}: no source available")


class FetchError(UnicrnError):
    """Raised when a remote GET fails, times out or returns a non-2xx status."""

    def __init__(self, url: str, status_code: int | None, reason: str) -> None:
        self.url = url
        self.status_code = status_code
        self.reason = reason
        if status_code is None:
            super().__init__(f"Failed to download {url}: {reason}")
        else:
            super().__init__(f"Failed to download {url}: {status_code} {reason}".rstrip())


class MaterializeError(UnicrnError):
    """Raised when a file could not be written to its destination."""

    def __init__(self, destination: str, reason: str, status_code: int | None = None) -> None:
        self.destination = destination
        self.reason = reason
        self.status_code = status_code
        super().__init__(f"Could not write {destination}: {reason}")
