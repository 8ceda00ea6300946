# src/jungle_gem/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

# Minimum level a record needs to reach the console, by logger-name prefix.
# Anything not listed (third-party) is console-visible only at ERROR+.
_CONSOLE_FLOORS: tuple[tuple[str, int], ...] = (
    ("jungle_gem.", logging.NOTSET),
    ("werkzeug", logging.WARNING),
    ("py.warnings", logging.ERROR),
)


class _ConsoleFilter(logging.Filter):
    """Keeps the REPL readable: app logs pass, library chatter needs a higher level."""

    def filter(self, record: logging.LogRecord) -> bool:
        for prefix, floor in _CONSOLE_FLOORS:
            if record.name.startswith(prefix):
                return record.levelno >= floor
        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_dir: str | Path = ".local/jungle_gem",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> None:
    """Install a filtered stderr handler and a full file log (`<log_dir>/jungle_gem.log`).

    Replaces whatever handlers the root logger had; call once at startup.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(fmt)
    console.addFilter(_ConsoleFilter())

    logfile = logging.FileHandler(str(log_dir / "jungle_gem.log"), encoding="utf-8")
    logfile.setLevel(file_level)
    logfile.setFormatter(fmt)

    root.addHandler(console)
    root.addHandler(logfile)
    logging.captureWarnings(True)


def level_from_name(name: str | None, default: int = logging.INFO) -> int:
    """Map 'debug'/'INFO'/... to a logging level; unknown names give `default`."""
    level = getattr(logging, str(name or "").upper(), None)
    return level if isinstance(level, int) else default
