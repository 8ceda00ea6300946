# src/jungle_gem/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The store and the console depend on Protocols instead of concrete
implementations, so storage backends and notification sinks stay swappable
and tests can use in-memory fakes.
"""

from typing import Any, Protocol

Snapshot = dict[str, Any]
# Category name -> list of {"id": str, "text": str, "done": bool}.


class KeyValueStorage(Protocol):
    """
    Durable string storage addressed by key (localStorage-like).

    get_item returns None when the key was never written.
    """

    def get_item(self, key: str) -> str | None: ...
    def set_item(self, key: str, value: str) -> None: ...


class Notifier(Protocol):
    """User-facing success/error notifications (toasts in a GUI, lines in a console)."""

    def success(self, message: str) -> None: ...
    def error(self, message: str) -> None: ...
