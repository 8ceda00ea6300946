# src/jungle_gem/core/notifications.py

from __future__ import annotations

import logging
import random

logger = logging.getLogger(__name__)

CHEER_MESSAGES: tuple[str, ...] = (
    "Great job! 💎",
    "You crushed it! 🌿",
    "Sparkle achieved! ✨",
    "Another gem collected! 💚",
)

IMPORT_OK_MESSAGE = "Tasks imported!"
IMPORT_FAILED_MESSAGE = "Import failed"


def pick_cheer(rng: random.Random | None = None) -> str:
    """Random encouragement shown when a task gets marked as done."""
    return (rng or random).choice(CHEER_MESSAGES)


class LoggingNotifier:
    """Notifier used when there is no interactive front-end: notifications go to the log."""

    def success(self, message: str) -> None:
        logger.info("%s", message)

    def error(self, message: str) -> None:
        logger.warning("%s", message)
