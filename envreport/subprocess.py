# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
import subprocess
from typing import List, Protocol, Sequence


class ShellCommandOut(Protocol):
    args: List[str]
    returncode: int
    stdout: str


def handle_subprocess_exception(exc: Exception) -> ShellCommandOut:
    if isinstance(exc, subprocess.TimeoutExpired):
        return subprocess.CompletedProcess(
            args=[exc.cmd],
            returncode=128,
            stdout="Error command timeout because of timeout setting.\n",
        )
    elif isinstance(exc, FileNotFoundError):
        return subprocess.CompletedProcess(
            args=[exc.filename],
            returncode=127,
            stdout=f"Error: command not found: {exc.filename}\n",
        )
    else:
        return subprocess.CompletedProcess(
            args=[],
            returncode=2,
            stdout=f"Error: Unknown subprocess exception was raised: {exc}\n",
        )


def run_command(cmd: Sequence[str], timeout_secs: int) -> ShellCommandOut:
    """Run `cmd` without a shell and capture stdout and stderr together.

    Failures to start or finish the command are folded into the returned
    result instead of being raised.
    """
    try:
        return subprocess.run(
            list(cmd),
            encoding="utf-8",
            errors="replace",
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            timeout=timeout_secs,
        )
    except (subprocess.SubprocessError, OSError) as e:
        return handle_subprocess_exception(e)
