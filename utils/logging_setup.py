"""
Logging setup utilities for arena runs.

Configures the root logger with console and file output, and creates
timestamped run directories that hold the log next to the match results.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional, Tuple

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(
    log_dir: Path,
    run_name: str,
    level: int = logging.INFO,
    format_string: Optional[str] = None
) -> Path:
    """
    Set up logging with both console and file handlers.

    Existing root handlers are removed first, so calling this twice does not
    duplicate output.

    Args:
        log_dir: Directory where the log file is created
        run_name: Log file name without extension
        level: Logging level (default: logging.INFO)
        format_string: Optional custom format string

    Returns:
        Path to the created log file
    """
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / f"{run_name}.log"

    formatter = logging.Formatter(
        format_string or DEFAULT_FORMAT,
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    return log_file


def create_run_directory(
    base_dir: Path = Path("arena_results"),
    run_name: Optional[str] = None
) -> Path:
    """
    Create a timestamped directory: <base_dir>/<YYYYMMDD>_<HHMMSS>_<run_name>/

    Args:
        base_dir: Base directory for runs
        run_name: Optional suffix (default: "arena")

    Returns:
        Path to the created run directory
    """
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    run_dir = base_dir / f"{timestamp}_{run_name or 'arena'}"
    run_dir.mkdir(parents=True, exist_ok=True)
    return run_dir


def setup_arena_logging(
    base_dir: Path = Path("arena_results"),
    run_name: Optional[str] = None,
    level: int = logging.INFO
) -> Tuple[Path, Path]:
    """
    Create a run directory and log into it.

    Returns:
        Tuple of (run_directory, log_file_path)
    """
    run_dir = create_run_directory(base_dir, run_name)
    log_file = setup_logging(run_dir, "arena", level)
    return run_dir, log_file
