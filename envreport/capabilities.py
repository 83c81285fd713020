# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
"""Decode Linux capability masks from /proc/<pid>/status text."""
from typing import List, Tuple

from envreport.errors import CapabilityDecodeError

# Indexed by capability bit number, see capabilities(7).
CAPABILITY_NAMES: Tuple[str, ...] = (
    "CHOWN",
    "DAC_OVERRIDE",
    "DAC_READ_SEARCH",
    "FOWNER",
    "FSETID",
    "KILL",
    "SETGID",
    "SETUID",
    "SETPCAP",
    "LINUX_IMMUTABLE",
    "NET_BIND_SERVICE",
    "NET_BROADCAST",
    "NET_ADMIN",
    "NET_RAW",
    "IPC_LOCK",
    "IPC_OWNER",
    "SYS_MODULE",
    "SYS_RAWIO",
    "SYS_CHROOT",
    "SYS_PTRACE",
    "SYS_PACCT",
    "SYS_ADMIN",
    "SYS_BOOT",
    "SYS_NICE",
    "SYS_RESOURCE",
    "SYS_TIME",
    "SYS_TTY_CONFIG",
    "MKNOD",
    "LEASE",
    "AUDIT_WRITE",
    "AUDIT_CONTROL",
    "SETFCAP",
    "MAC_OVERRIDE",
    "MAC_ADMIN",
    "SYSLOG",
    "WAKE_ALARM",
    "BLOCK_SUSPEND",
    "AUDIT_READ",
    "PERFMON",
    "BPF",
    "CHECKPOINT_RESTORE",
)


def capabilities_from_mask(mask: int) -> List[str]:
    """Names of the bits set in `mask`, lowest bit first.

    Bits the kernel defines but this table does not know are dropped.

    >>> capabilities_from_mask(0x3)
    ['CHOWN', 'DAC_OVERRIDE']
    """
    return [name for bit, name in enumerate(CAPABILITY_NAMES) if mask & (1 << bit)]


def detect_capabilities(status: str, cap_set: str = "CapPrm") -> List[str]:
    """Return the capabilities in the `cap_set` line of a process status file.

    The startup report always decodes the permitted set (CapPrm); other status
    keys such as CapEff or CapBnd can be decoded by passing `cap_set`.
    Raises CapabilityDecodeError if the line is missing or its mask is not hex.
    """
    prefix = f"{cap_set}:"
    for line in status.splitlines():
        line = line.strip()
        if not line.startswith(prefix):
            continue
        words = line.split()
        if len(words) < 2:
            raise CapabilityDecodeError(f"No mask found on line: {line!r}")
        try:
            mask = int(words[1], 16)
        except ValueError as e:
            raise CapabilityDecodeError(f"Invalid {cap_set} mask: {words[1]!r}") from e
        return capabilities_from_mask(mask)
    raise CapabilityDecodeError(f"Unable to detect capabilities, no {cap_set} line")
