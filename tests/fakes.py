# tests/fakes.py

from __future__ import annotations

from dataclasses import dataclass, field

from jungle_gem.core.ports import KeyValueStorage, Notifier


@dataclass(slots=True)
class InMemoryStorage(KeyValueStorage):
    """
    Dict-backed KeyValueStorage.

    Records every write so tests can assert "persisted after mutation"
    and "no write for a no-op".
    """

    items: dict[str, str] = field(default_factory=dict)
    writes: list[tuple[str, str]] = field(default_factory=list)

    def get_item(self, key: str) -> str | None:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.items[key] = value
        self.writes.append((key, value))


class BrokenStorage:
    """Storage whose reads always fail (e.g. unreadable database)."""

    def __init__(self) -> None:
        self.items: dict[str, str] = {}

    def get_item(self, key: str) -> str | None:
        raise OSError("disk on fire")

    def set_item(self, key: str, value: str) -> None:
        self.items[key] = value


@dataclass(slots=True)
class RecordingNotifier(Notifier):
    successes: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    def success(self, message: str) -> None:
        self.successes.append(message)

    def error(self, message: str) -> None:
        self.errors.append(message)


@dataclass(slots=True)
class FlakyStorage(KeyValueStorage):
    """In-memory storage whose writes fail while `fail_writes` is set (locked db, full disk)."""

    items: dict[str, str] = field(default_factory=dict)
    fail_writes: bool = False

    def get_item(self, key: str) -> str | None:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        if self.fail_writes:
            raise OSError("database is locked")
        self.items[key] = value
