# src/jungle_gem/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from pathlib import Path
from typing import cast

from ..core.notifications import IMPORT_FAILED_MESSAGE, IMPORT_OK_MESSAGE, pick_cheer
from ..core.state import AppState
from ..errors import SnapshotImportError, UnknownCategoryError
from ..tasks.task_models import TAB_ORDER, Category, Task

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}
        self._raw: set[str] = set()

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
        raw: bool = False,
    ) -> None:
        """`raw` handlers get the rest of the line verbatim as a single argument."""
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        names = [key, *(a.lower() for a in aliases)]
        for alias in names[1:]:
            self._handlers[alias] = handler
        if raw:
            self._raw.update(names)

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split(maxsplit=1)
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        rest = parts[1].strip() if len(parts) > 1 else ""
        if name in self._raw:
            args = [rest] if rest else []
        else:
            args = rest.split()

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except Exception:
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- rendering ----


def render_tabs(state: AppState) -> str:
    counts = state.store.counts()
    cells = []
    for cat in TAB_ORDER:
        label = f"{cat.value} ({counts[cat.value]})"
        cells.append(f"[{label}]" if cat is state.active else label)
    return " | ".join(cells)


def render_task(index: int, task: Task) -> str:
    mark = "x" if task.done else " "
    return f"  {index}. [{mark}] {task.text}"


def render_tab(state: AppState) -> str:
    tasks = state.store.tasks(state.active)
    lines = [render_tabs(state)]
    if tasks:
        lines.extend(render_task(i, t) for i, t in enumerate(tasks, start=1))
    else:
        lines.append(f"  (nothing in {state.active.value} yet)")
    lines.append(f"{state.store.completed_count(state.active)} completed")
    return "\n".join(lines)


def _task_at(state: AppState, raw: str) -> Task | None:
    """Resolve a 1-based list number in the active tab."""
    raw = raw.rstrip(".")
    if not raw.isdigit():
        return None
    tasks = state.store.tasks(state.active)
    idx = int(raw) - 1
    if idx < 0 or idx >= len(tasks):
        return None
    return tasks[idx]


# ---- handlers ----


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    return render_tab(state)


def cmd_tab(state: AppState, args: list[str]) -> str:
    if not args:
        return f"Active tab: {state.active.value}. Use /tab Personal | Work | Ideas."
    try:
        state.active = Category.parse(args[0])
    except UnknownCategoryError:
        return f"Unknown tab: {args[0]}. Tabs: {', '.join(c.value for c in TAB_ORDER)}."
    return render_tab(state)


def cmd_add(state: AppState, args: list[str]) -> str:
    task = state.store.add(state.active, args[0] if args else "")
    if task is None:
        return "Usage: /add <text> (text must not be empty)."
    return render_tab(state)


def cmd_done(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return "Usage: /done <n>"
    target = _task_at(state, args[0])
    if target is None:
        return f"No task #{args[0]} in {state.active.value}."
    updated = state.store.toggle(state.active, target.id)
    if updated is not None and updated.done:
        state.notifier.success(pick_cheer())
    return render_tab(state)


def cmd_rm(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return "Usage: /rm <n>"
    target = _task_at(state, args[0])
    if target is None:
        return f"No task #{args[0]} in {state.active.value}."
    state.store.remove(state.active, target.id)
    return render_tab(state)


def cmd_clear(state: AppState, args: list[str]) -> str:
    removed = state.store.clear_completed(state.active)
    return f"Cleared {removed} completed task(s).\n" + render_tab(state)


def cmd_export(state: AppState, args: list[str]) -> str:
    directory = Path(args[0]).expanduser() if args else state.export_dir
    path = state.store.export_to_file(directory)
    return f"Exported to {path}"


def cmd_import(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    if not args:
        return "Usage: /import <path-to-json>"
    path = Path(args[0]).expanduser()
    if emit:
        emit(f"Importing {path}...")
    try:
        state.store.import_file(path)
    except SnapshotImportError as exc:
        logger.info("Import rejected: %s", exc)
        state.notifier.error(IMPORT_FAILED_MESSAGE)
        return render_tab(state)
    state.notifier.success(IMPORT_OK_MESSAGE)
    return render_tab(state)


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show tasks of the active tab.", aliases=["ls"])
registry.register("tab", cmd_tab, help_text="Switch tab: /tab Personal | Work | Ideas.", aliases=["t"])
registry.register("add", cmd_add, help_text="Add a task to the active tab: /add <text>.", aliases=["a"], raw=True)
registry.register("done", cmd_done, help_text="Toggle done for task number n: /done <n>.", aliases=["toggle", "d"])
registry.register("rm", cmd_rm, help_text="Remove task number n: /rm <n>.", aliases=["remove", "del"])
registry.register("clear", cmd_clear, help_text="Remove completed tasks from the active tab.")
registry.register("export", cmd_export, help_text="Write jungle-gem-tasks.json: /export [dir].", raw=True)
registry.register("import", cmd_import, help_text="Replace all tasks from a JSON file: /import <path>.", raw=True)
