# src/jungle_gem/tasks/task_store.py

from __future__ import annotations

import copy
import json
import logging
from pathlib import Path
from typing import Any

from ..core.ports import KeyValueStorage, Snapshot
from ..errors import SnapshotImportError
from .task_models import TAB_ORDER, Category, Task, empty_snapshot, new_task_id

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "jg/tasks"
EXPORT_FILENAME = "jungle-gem-tasks.json"


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not allowed in JSON")


def _loads(text: str) -> Any:
    """Strict JSON: NaN/Infinity literals are rejected like any other syntax error."""
    return json.loads(text, parse_constant=_reject_constant)


def _dumps(data: Any, *, indent: int | None = None) -> str:
    return json.dumps(data, ensure_ascii=False, allow_nan=False, indent=indent)


class TaskStore:
    """
    Category -> tasks mapping, persisted verbatim after every mutation.

    The mapping is kept in its serialized shape (plain dicts and lists) so
    that an imported document round-trips through export unchanged.
    Imports are not validated beyond JSON parsing; readers skip what they
    cannot interpret instead of failing.

    Every mutation builds the next mapping, writes the full snapshot under
    `key` and only then swaps it in, so a failed write leaves memory and
    storage on the previous state. Calls that change nothing do not write.
    """

    def __init__(self, storage: KeyValueStorage, key: str = DEFAULT_STORAGE_KEY) -> None:
        self._storage = storage
        self._key = key
        self._data: Any = self._load()
        logger.info("TaskStore ready key=%s counts=%s", self._key, self.counts())

    # ---- low-level helpers ----

    def _load(self) -> Any:
        try:
            raw = self._storage.get_item(self._key)
        except Exception:
            logger.warning("Could not read key=%s; starting empty.", self._key, exc_info=True)
            return empty_snapshot()
        if raw is None:
            return empty_snapshot()
        try:
            return _loads(raw)
        except ValueError:
            logger.warning("Stored snapshot under key=%s is not valid JSON; starting empty.", self._key)
            return empty_snapshot()

    def _commit(self, data: Any, encoded: str | None = None) -> None:
        if encoded is None:
            encoded = _dumps(data)
        self._storage.set_item(self._key, encoded)
        self._data = data

    def _items(self, category: Category) -> list[Any]:
        if not isinstance(self._data, dict):
            return []
        items = self._data.get(category.value)
        return items if isinstance(items, list) else []

    def _replace(self, category: Category, items: list[Any]) -> None:
        base = dict(self._data) if isinstance(self._data, dict) else empty_snapshot()
        base[category.value] = items
        self._commit(base)

    @staticmethod
    def _matches(entry: Any, task_id: str) -> bool:
        return isinstance(entry, dict) and entry.get("id") == task_id

    # ---- mutations ----

    def add(self, category: Category | str, text: str) -> Task | None:
        """Prepend a new task. Whitespace-only text is ignored (returns None)."""
        cat = Category.parse(category)
        clean = (text or "").strip()
        if not clean:
            logger.debug("Ignored empty task text for %s", cat.value)
            return None

        task = Task(id=new_task_id(), text=clean, done=False)
        self._replace(cat, [task.to_dict(), *self._items(cat)])
        logger.debug("Task added id=%s category=%s", task.id, cat.value)
        return task

    def toggle(self, category: Category | str, task_id: str) -> Task | None:
        cat = Category.parse(category)
        items = self._items(cat)
        toggled: list[dict[str, Any]] = []
        out: list[Any] = []
        for entry in items:
            if self._matches(entry, task_id):
                flipped = {**entry, "done": not entry.get("done")}
                toggled.append(flipped)
                out.append(flipped)
            else:
                out.append(entry)

        if not toggled:
            return None

        self._replace(cat, out)
        logger.debug("Task toggled id=%s category=%s matches=%d", task_id, cat.value, len(toggled))
        return Task.from_dict(toggled[0])

    def remove(self, category: Category | str, task_id: str) -> bool:
        cat = Category.parse(category)
        items = self._items(cat)
        kept = [e for e in items if not self._matches(e, task_id)]
        if len(kept) == len(items):
            return False

        self._replace(cat, kept)
        logger.debug("Task removed id=%s category=%s", task_id, cat.value)
        return True

    def clear_completed(self, category: Category | str) -> int:
        """Drop every task whose done flag is set; returns how many went away."""
        cat = Category.parse(category)
        items = self._items(cat)
        kept = [e for e in items if not (isinstance(e, dict) and e.get("done"))]
        removed = len(items) - len(kept)
        if removed:
            self._replace(cat, kept)
            logger.debug("Cleared %d completed task(s) in %s", removed, cat.value)
        return removed

    # ---- queries ----

    def tasks(self, category: Category | str) -> list[Task]:
        cat = Category.parse(category)
        return [Task.from_dict(e) for e in self._items(cat) if isinstance(e, dict)]

    def find(self, category: Category | str, task_id: str) -> Task | None:
        for task in self.tasks(category):
            if task.id == task_id:
                return task
        return None

    def counts(self) -> dict[str, int]:
        return {c.value: len(self._items(c)) for c in TAB_ORDER}

    def completed_count(self, category: Category | str) -> int:
        return sum(1 for t in self.tasks(category) if t.done)

    # ---- export / import ----

    def export_snapshot(self) -> Snapshot:
        return copy.deepcopy(self._data)

    def export_json(self) -> str:
        return _dumps(self._data, indent=2)

    def export_to_file(self, directory: str | Path = ".") -> Path:
        path = Path(directory) / EXPORT_FILENAME
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.export_json(), "utf-8")
        logger.info("Exported tasks to %s", path)
        return path

    def import_snapshot(self, document: Any) -> None:
        """
        Replace the whole mapping with `document` (no merge, no structural validation).

        A document that cannot be written as strict JSON raises SnapshotImportError.
        """
        try:
            encoded = _dumps(document)
        except (TypeError, ValueError) as exc:
            raise SnapshotImportError(f"Import document is not JSON-serializable: {exc}") from exc
        self._commit(copy.deepcopy(document), encoded)
        logger.info("Imported snapshot counts=%s", self.counts())

    def import_json(self, text: str) -> None:
        try:
            document = _loads(text)
        except ValueError as exc:
            raise SnapshotImportError(f"Import document is not valid JSON: {exc}") from exc
        self.import_snapshot(document)

    def import_file(self, path: str | Path) -> None:
        path = Path(path)
        try:
            text = path.read_text("utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise SnapshotImportError(f"Cannot read import file {path}: {exc}") from exc
        self.import_json(text)
