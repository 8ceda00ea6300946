# src/jungle_gem/errors.py

from __future__ import annotations


class JungleGemError(Exception):
    """Base class for errors raised by jungle_gem."""


class UnknownCategoryError(JungleGemError, ValueError):
    """A category name outside Personal/Work/Ideas was given."""

    def __init__(self, name: object) -> None:
        super().__init__(f"Unknown category: {name!r}")
        self.name = name


class SnapshotImportError(JungleGemError):
    """An import document could not be read or parsed; nothing was changed."""
