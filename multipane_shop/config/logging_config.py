# multipane_shop/config/logging_config.py

"""Per-run timestamped logging configuration for multipane_shop.

Each launch creates a dedicated log file inside ``logs/`` named with the
launch timestamp (e.g. ``logs/run_20261019_153045.log``). All
``multipane_shop.*`` loggers route through this file handler, so selection
changes, layout rebuilds and orientation switches from every module land in
the same per-run log.

The console handler only lets warnings through, and
:func:`console_suspended` detaches it while the TUI owns the terminal so
warnings go to the run file alone.
"""

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path

from multipane_shop.config.settings import Settings

# Reusable format strings --------------------------------------------------

_DETAILED_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)s | %(module)s:%(funcName)s:%(lineno)d | "
    "%(message)s"
)

_CONSOLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(message)s"

_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging() -> Path:
    """Initialise the root ``multipane_shop`` logger for the current run.

    Returns:
        The :class:`~pathlib.Path` to the log file created for this run.
    """
    logs_dir: Path = Settings.LOGS_DIR
    logs_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_file = logs_dir / f"run_{timestamp}.log"

    root_logger = logging.getLogger("multipane_shop")
    root_logger.setLevel(logging.DEBUG)

    # Repeated calls (tests, re-entry from main) keep the first handlers
    if root_logger.handlers:
        return log_file

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(_DETAILED_FORMAT, datefmt=_DATE_FORMAT)
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(
        logging.Formatter(_CONSOLE_FORMAT, datefmt=_DATE_FORMAT)
    )

    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    root_logger.info("Logging initialised, log file: %s", log_file)

    return log_file


@contextmanager
def console_suspended() -> Iterator[None]:
    """Detach the stderr handler for the duration of the block.

    File handlers stay attached; the console handlers are restored on exit
    even if the block raises.
    """
    root_logger = logging.getLogger("multipane_shop")
    console_handlers = [
        h
        for h in root_logger.handlers
        if isinstance(h, logging.StreamHandler)
        and not isinstance(h, logging.FileHandler)
    ]
    for handler in console_handlers:
        root_logger.removeHandler(handler)
    try:
        yield
    finally:
        for handler in console_handlers:
            root_logger.addHandler(handler)
