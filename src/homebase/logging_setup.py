# src/homebase/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FILE_NAME = "homebase.log"

# Longest matching prefix decides the minimum level shown between prompts.
CONSOLE_THRESHOLDS: dict[str, int] = {
    "homebase": logging.INFO,
    "homebase.storage": logging.WARNING,
}


class _AppOnlyConsoleFilter(logging.Filter):
    """Console shows HomeBase records; anything else only at ERROR+."""

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name
        best = ""
        for prefix in CONSOLE_THRESHOLDS:
            matches = name == prefix or name.startswith(prefix + ".")
            if matches and len(prefix) > len(best):
                best = prefix
        threshold = CONSOLE_THRESHOLDS[best] if best else logging.ERROR
        return record.levelno >= threshold


def setup_logging(
    *,
    log_dir: str | Path,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> Path:
    """
    Send filtered records to stderr and everything at file_level to
    <log_dir>/homebase.log. Replaces existing root handlers. Returns the log path.
    """
    log_file = Path(log_dir) / LOG_FILE_NAME
    log_file.parent.mkdir(parents=True, exist_ok=True)

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
    console.addFilter(_AppOnlyConsoleFilter())
    root.addHandler(console)

    file_handler = logging.FileHandler(str(log_file), encoding="utf-8")
    file_handler.setLevel(file_level)
    file_handler.setFormatter(fmt)
    root.addHandler(file_handler)

    # py.warnings records fall under the ERROR+ console rule.
    logging.captureWarnings(True)
    # passlib reports backend detection at DEBUG.
    logging.getLogger("passlib").setLevel(logging.INFO)
    return log_file
