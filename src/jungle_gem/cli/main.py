# src/jungle_gem/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState over the durable storage, then runs the
console REPL in the main thread.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import ConsoleNotifier, run_console_loop
from ..logging_setup import level_from_name, setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    # Console shows warnings only by default; the REPL output is the UI.
    console_level = max(level_from_name(settings.log_level), logging.WARNING)
    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    state = create_initial_state(settings=settings, notifier=ConsoleNotifier())

    try:
        run_console_loop(state)
    finally:
        logger.info("Bye. counts=%s", state.store.counts())


if __name__ == "__main__":
    main()
