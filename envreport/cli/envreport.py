# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
"""Entrypoint run once when the server container starts.

This file is intentionally lightweight and should not include any complex logic.
"""
import logging
import socket
import sys
from typing import Optional

import click
from envreport._version import __version__
from envreport.click import (
    DEFAULT_CONFIG_PATH,
    logging_arguments,
    timeout_argument,
    toml_config_option,
)
from envreport.errors import FatalEnvironmentError
from envreport.log import init_logger
from envreport.reporter import DEFAULT_DATA_PATH, DEFAULT_VOLUME_ROOT, log_config
from envreport.source import EnvironmentSource, EnvironmentSourceImpl
from envreport.types import LOG_LEVEL
from typeguard import typechecked


@click.command(epilog=f"envreport version: {__version__}")
@toml_config_option("envreport", default_config_path=DEFAULT_CONFIG_PATH)
@logging_arguments
@timeout_argument
@click.option(
    "--volume-root",
    type=click.STRING,
    default=DEFAULT_VOLUME_ROOT,
    show_default=True,
    help="Mount points containing this string are treated as data volumes.",
)
@click.option(
    "--data-path",
    type=click.Path(),
    default=DEFAULT_DATA_PATH,
    show_default=True,
    help="Directory whose filesystem type is checked when a data volume is mounted.",
)
@click.version_option(__version__)
@click.pass_obj
@typechecked
def envreport(
    obj: Optional[EnvironmentSource],
    log_level: LOG_LEVEL,
    log_folder: Optional[str],
    timeout: int,
    volume_root: str,
    data_path: str,
) -> None:
    """Log the container environment and stop if it cannot host the server."""
    logger, _ = init_logger(
        logger_name="envreport",
        log_dir=log_folder,
        log_name=socket.gethostname() + ".log",
        log_level=getattr(logging, log_level),
    )
    if obj is None:
        obj = EnvironmentSourceImpl()

    try:
        log_config(
            obj,
            logger,
            volume_root=volume_root,
            data_path=data_path,
            timeout_secs=timeout,
        )
    except FatalEnvironmentError as e:
        logger.critical(str(e))
        sys.exit(e.exit_code.value)


if __name__ == "__main__":
    envreport()
