# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass
class MountEntry:
    """One line of /proc/mounts, see fstab(5) for the field layout."""

    device: str
    mount_point: str
    filesystem_type: str


def as_mount_entry(line: str) -> Optional[MountEntry]:
    parts = line.split(" ")
    if len(parts) < 3:
        return None
    return MountEntry(device=parts[0], mount_point=parts[1], filesystem_type=parts[2])


def parse_mounts(lines: Iterable[str]) -> Iterator[MountEntry]:
    for line in lines:
        entry = as_mount_entry(line)
        if entry is not None:
            yield entry


def volumes_under(mounts: Iterable[MountEntry], volume_root: str) -> Iterator[MountEntry]:
    """Entries whose mount point contains `volume_root` anywhere in the path."""
    return (m for m in mounts if volume_root in m.mount_point)
