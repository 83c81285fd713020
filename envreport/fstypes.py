# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
"""Filesystem magic numbers as reported by statfs(2).

See https://man7.org/linux/man-pages/man2/statfs.2.html
"""
from types import MappingProxyType
from typing import FrozenSet, Mapping

FS_TYPES: Mapping[int, str] = MappingProxyType(
    {
        0x61756673: "aufs",
        0xEF53: "ext",
        0x6969: "nfs",
        0x65735546: "fuse",
        0x9123683E: "btrfs",
        0x01021994: "tmpfs",
        0x794C7630: "overlayfs",
    }
)

# Data written under these does not survive the container or is not safe for
# the server's file locking.
UNSUPPORTED_FS_TYPES: FrozenSet[str] = frozenset({"aufs", "overlayfs", "tmpfs"})


def fs_type_name(magic: int) -> str:
    """Name for a statfs magic number, or "" when it is not in the table."""
    return FS_TYPES.get(magic, "")


def parse_magic(output: str) -> int:
    """Parse the hex magic printed by `stat --file-system --format=%t`.

    >>> parse_magic("794c7630")
    2035054128
    """
    return int(output.strip(), 16)
