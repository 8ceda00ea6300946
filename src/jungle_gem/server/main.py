# src/jungle_gem/server/main.py

"""Server entrypoint: `jungle-gem-server` (or `python -m jungle_gem.server.main`)."""

from __future__ import annotations

import logging

from ..config import get_settings
from ..logging_setup import level_from_name, setup_logging
from .app import create_app

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()
    setup_logging(log_dir=settings.data_dir, console_level=level_from_name(settings.log_level))

    app = create_app(settings)
    logger.info("Server listening on http://%s:%s", settings.server_host, settings.server_port)
    app.run(host=settings.server_host, port=settings.server_port, debug=False, use_reloader=False)


if __name__ == "__main__":
    main()
