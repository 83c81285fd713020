# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


def get_version() -> str:
    root = Path(__file__).absolute().parent
    try:
        return (root / "version.txt").read_text().strip()
    except OSError:
        logger.debug("No version.txt next to the package", exc_info=True)

    # container images stamp the version at build time
    return os.environ.get("ENVREPORT_VERSION", "unknown")


__version__ = get_version()
