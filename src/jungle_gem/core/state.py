# src/jungle_gem/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ..tasks.task_models import Category
from ..tasks.task_store import TaskStore
from .ports import Notifier


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules later.
    settings: object

    store: TaskStore
    notifier: Notifier

    active: Category = Category.PERSONAL
    export_dir: Path = field(default_factory=lambda: Path("."))
