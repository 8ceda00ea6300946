# src/jungle_gem/tasks/task_models.py

from __future__ import annotations

import secrets
import string
import time
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from ..errors import UnknownCategoryError

_BASE36 = string.digits + string.ascii_lowercase


class Category(StrEnum):
    """
    Fixed task groupings, in tab order.

    The set is closed: stores never add or remove categories.
    """

    PERSONAL = "Personal"
    WORK = "Work"
    IDEAS = "Ideas"

    @classmethod
    def parse(cls, raw: Category | str) -> Category:
        """Accept an enum member or its name in any letter case."""
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, str):
            wanted = raw.strip().lower()
            for member in cls:
                if member.value.lower() == wanted:
                    return member
        raise UnknownCategoryError(raw)


TAB_ORDER: tuple[Category, ...] = (Category.PERSONAL, Category.WORK, Category.IDEAS)


def empty_snapshot() -> dict[str, list[dict[str, Any]]]:
    return {c.value: [] for c in TAB_ORDER}


def _base36(n: int) -> str:
    if n == 0:
        return "0"
    out = []
    while n:
        n, r = divmod(n, 36)
        out.append(_BASE36[r])
    return "".join(reversed(out))


def new_task_id() -> str:
    """Random base-36 token followed by the current time (ms) in base 36."""
    token = "".join(secrets.choice(_BASE36) for _ in range(11))
    return token + _base36(int(time.time() * 1000))


@dataclass(slots=True)
class Task:
    id: str
    text: str
    done: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "text": self.text, "done": self.done}

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> Task:
        return cls(
            id=str(raw.get("id", "")),
            text=str(raw.get("text", "")),
            done=bool(raw.get("done", False)),
        )
