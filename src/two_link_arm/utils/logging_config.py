"""Logging configuration for the project.

This module sets up consistent logging across all modules.
"""

import logging
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_NAME = "two_link_arm.log"


def setup_logging(
    log_dir: Optional[Union[str, Path]] = None,
    log_level: int = logging.INFO,
) -> Optional[Path]:
    """Configure the root logger for the pipeline.

    Args:
        log_dir: Optional directory to save log files
        log_level: Logging level (default: INFO)

    Returns:
        Path of the log file, or None when logging only to the console
    """
    log_file = None
    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / LOG_FILE_NAME

    # Logs go to stderr so the report on stdout stays clean
    handlers: list = [logging.StreamHandler()]
    if log_file is not None:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=handlers,
        force=True,
    )
    return log_file
