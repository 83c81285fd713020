# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
"""Logging setup for the startup report."""
from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional, Tuple

LOG_FORMATTER = logging.Formatter(
    "[%(asctime)s] - [%(levelname)s] - [%(name)s] - %(message)s"
)


def init_logger(
    logger_name: str,
    log_dir: Optional[str],
    log_name: str,
    log_formatter: Optional[logging.Formatter] = LOG_FORMATTER,
    log_level: int = logging.INFO,
    max_bytes: int = 1024 * 1024,
    backup_count: int = 2,
) -> Tuple[logging.Logger, logging.Handler]:
    """Set up the report logger.

    Logs are stored at {log_dir}/{log_name}, or written to stdout when no
    `log_dir` is given so they end up in the container log.
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(log_level)

    handler: logging.Handler
    if log_dir is None:
        handler = logging.StreamHandler(sys.stdout)
    else:
        file_path = os.path.join(log_dir, log_name)
        os.makedirs(os.path.dirname(file_path), exist_ok=True)
        handler = RotatingFileHandler(
            file_path, mode="a", maxBytes=max_bytes, backupCount=backup_count
        )

    if log_formatter:
        handler.setFormatter(log_formatter)
    logger.addHandler(handler)

    return logger, handler
