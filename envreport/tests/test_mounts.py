# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
from typing import List, Optional

import pytest

from envreport.mounts import as_mount_entry, MountEntry, parse_mounts, volumes_under
from envreport.tests.conftest import read_data


@pytest.mark.parametrize(
    "line, expected",
    [
        (
            "/dev/sdb1 /mnt/mqm ext4 rw,relatime 0 0",
            MountEntry("/dev/sdb1", "/mnt/mqm", "ext4"),
        ),
        ("proc /proc proc", MountEntry("proc", "/proc", "proc")),
        ("", None),
        ("garbage line", None),
    ],
)
def test_as_mount_entry(line: str, expected: Optional[MountEntry]) -> None:
    assert as_mount_entry(line) == expected


@pytest.mark.parametrize(
    "file_name, volume_root, expected",
    [
        ("mounts_with_volume.txt", "/mnt", ["/mnt/mqm"]),
        ("mounts_with_volume.txt", "/mnt/mqm-data", []),
        ("mounts_no_volume.txt", "/mnt", []),
        ("mounts_no_volume.txt", "/dev", ["/dev", "/dev/shm"]),
    ],
)
def test_volumes_under(file_name: str, volume_root: str, expected: List[str]) -> None:
    mounts = parse_mounts(read_data(file_name).splitlines())
    assert [m.mount_point for m in volumes_under(mounts, volume_root)] == expected
