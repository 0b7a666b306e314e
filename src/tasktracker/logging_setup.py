# SPDX-License-Identifier: MIT

import logging
import sys
from pathlib import Path

from tasktracker import configuration

LOG_FILE_NAME = "tasktracker.log"


class _ConsoleNoiseFilter(logging.Filter):
    """
    Keep the terminal readable:
    - tasktracker logs pass at the console level
    - third-party and captured py.warnings only at ERROR+
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == "tasktracker" or record.name.startswith("tasktracker."):
            return True
        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_dir: Path | None = None,
    console_level: int | str = logging.WARNING,
    file_level: int = logging.DEBUG,
) -> None:
    """
    Configure logging with a filtered stderr handler and a full log file.

    Call this once, before the first command runs.
    """
    if log_dir is None:
        log_dir = configuration.LOG_PATH
    log_dir.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # Remove any pre-existing handlers to avoid duplicates.
    for handler in list(root.handlers):
        root.removeHandler(handler)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(fmt)
    console_handler.addFilter(_ConsoleNoiseFilter())
    root.addHandler(console_handler)

    file_handler = logging.FileHandler(str(log_dir / LOG_FILE_NAME), encoding="utf-8")
    file_handler.setLevel(file_level)
    file_handler.setFormatter(fmt)
    root.addHandler(file_handler)

    # Route warnings.warn(...) into logging as 'py.warnings'
    logging.captureWarnings(True)
