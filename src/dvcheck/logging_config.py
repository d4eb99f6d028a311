"""Logging configuration for dvcheck runs.

Console shows WARNING+ (INFO+ with --verbose) with concise timestamps; an
optional log file captures DEBUG+ with full timestamps and logger names.
"""

import logging
from datetime import datetime
from pathlib import Path


def setup_logging(
    log_dir: str | Path | None = None, console_level: int = logging.WARNING
) -> Path | None:
    """Configure logging with a console handler and optional file handler.

    Existing handlers on the root logger are cleared first so that calling
    this function multiple times (e.g. in tests) does not produce duplicate
    output.

    Args:
        log_dir: Directory for a timestamped ``run-*.log`` file. When None,
            only console logging is installed.
        console_level: Minimum level for console output.

    Returns:
        Path to the newly created log file, or None without ``log_dir``.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    root.handlers.clear()

    console = logging.StreamHandler()
    console.setLevel(console_level)
    console.setFormatter(
        logging.Formatter(
            "%(asctime)s %(levelname)-5s %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    root.addHandler(console)

    if log_dir is None:
        return None

    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y-%m-%d-%H%M%S")
    log_file = log_path / f"run-{timestamp}.log"

    file_handler = logging.FileHandler(str(log_file), encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)-5s [%(name)s] %(message)s")
    )
    root.addHandler(file_handler)

    return log_file
