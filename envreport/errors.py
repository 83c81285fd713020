# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
from envreport.types import ExitCode


class FatalEnvironmentError(Exception):
    """The environment cannot host the server; startup must stop."""

    exit_code: ExitCode


class UnsupportedPlatformError(FatalEnvironmentError):
    exit_code = ExitCode.UNSUPPORTED_PLATFORM

    def __init__(self, platform: str) -> None:
        super().__init__(f"Unsupported platform: {platform}")
        self.platform = platform


class UnsupportedFilesystemError(FatalEnvironmentError):
    exit_code = ExitCode.UNSUPPORTED_FILESYSTEM

    def __init__(self, path: str, fs_type: str) -> None:
        super().__init__(f"Error: {path} uses unsupported filesystem type {fs_type}")
        self.path = path
        self.fs_type = fs_type


class CapabilityDecodeError(ValueError):
    pass
