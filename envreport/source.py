# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
import logging
import os
import platform
import pwd
import sys
from dataclasses import dataclass
from typing import Protocol

from envreport.passwd import Passwd
from envreport.subprocess import run_command, ShellCommandOut


class EnvironmentSource(Protocol):
    """Where the reporter gets its facts from. Swapped for a fake in tests."""

    def get_platform(self) -> str: ...

    def get_machine(self) -> str: ...

    def read_proc(self, path: str) -> str: ...

    def get_current_user(self) -> Passwd: ...

    def get_filesystem_type(
        self, path: str, timeout_secs: int, logger: logging.Logger
    ) -> ShellCommandOut: ...


@dataclass
class EnvironmentSourceImpl:
    def get_platform(self) -> str:
        return sys.platform

    def get_machine(self) -> str:
        return platform.machine()

    def read_proc(self, path: str) -> str:
        """Read a whole (pseudo-)file with surrounding whitespace stripped.

        Raises OSError if the file cannot be read.
        """
        # mount points and process names are raw bytes, not necessarily UTF-8
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            return f.read().strip()

    def get_current_user(self) -> Passwd:
        return pwd.getpwuid(os.getuid())

    def get_filesystem_type(
        self, path: str, timeout_secs: int, logger: logging.Logger
    ) -> ShellCommandOut:
        """Print the statfs(2) f_type of `path` in hex"""
        cmd = ["stat", "--file-system", "--format=%t", path]
        logger.debug(f"Running command '{' '.join(cmd)}'")
        return run_command(cmd, timeout_secs)
