# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
from enum import Enum
from typing import Literal

LOG_LEVEL = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ExitCode(Enum):
    """Process exit codes for the startup report.

    Only the two fatal conditions produce a non-zero code, every other finding is
    advisory.
    """

    OK = 0
    UNSUPPORTED_PLATFORM = 2
    UNSUPPORTED_FILESYSTEM = 3
