# src/ror2_item_scraper/utils/logging_utils.py
from __future__ import annotations

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional, Tuple, Union


PACKAGE_LOGGER = "ror2_item_scraper"


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    return getattr(logging, str(level).upper(), logging.INFO)


def create_logger(
    log_dir: Path,
    script_name: str,
    level: Union[int, str] = "INFO",
    to_console: bool = True,
    to_file: bool = True,
) -> Tuple[logging.Logger, Optional[Path]]:
    """
    Configure the package logger for one script run.

    Every module logs through logging.getLogger(__name__), so attaching the
    handlers to the package logger routes all of them to the console
    (stdout, next to the JSON output) and to a timestamped file in log_dir.

    Returns the logger and the log file path (None when to_file is False).
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    resolved_level = _resolve_level(level)
    logger.setLevel(resolved_level)
    logger.propagate = False

    # re-running main() in the same process must not stack handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    log_file: Optional[Path] = None
    if to_file:
        log_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = log_dir / f"{timestamp}_{script_name}.log"

        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(resolved_level)
        fh.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s — %(levelname)s — %(name)s — %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(fh)

    if to_console:
        ch = logging.StreamHandler(sys.stdout)
        ch.setLevel(resolved_level)
        ch.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s — %(levelname)s — %(message)s",
                datefmt="%H:%M:%S",
            )
        )
        logger.addHandler(ch)

    logger.info(f"Logger initialized for {script_name}")
    if log_file is not None:
        logger.info(f"Log file: {log_file}")

    return logger, log_file
