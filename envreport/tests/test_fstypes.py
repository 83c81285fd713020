# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
import pytest

from envreport.fstypes import FS_TYPES, fs_type_name, parse_magic, UNSUPPORTED_FS_TYPES


@pytest.mark.parametrize(
    "magic, expected",
    [
        (0x61756673, "aufs"),
        (0xEF53, "ext"),
        (0x6969, "nfs"),
        (0x65735546, "fuse"),
        (0x9123683E, "btrfs"),
        (0x01021994, "tmpfs"),
        (0x794C7630, "overlayfs"),
        # xfs is not in the table
        (0x58465342, ""),
    ],
)
def test_fs_type_name(magic: int, expected: str) -> None:
    assert fs_type_name(magic) == expected


@pytest.mark.parametrize(
    "output, expected",
    [
        ("794c7630\n", 0x794C7630),
        ("ef53", 0xEF53),
        ("  1021994 ", 0x01021994),
    ],
)
def test_parse_magic(output: str, expected: int) -> None:
    assert parse_magic(output) == expected


def test_parse_magic_rejects_garbage() -> None:
    with pytest.raises(ValueError):
        parse_magic("stat: cannot read file system information")


def test_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        FS_TYPES[0x58465342] = "xfs"  # type: ignore[index]


def test_unsupported_types_are_in_table() -> None:
    assert UNSUPPORTED_FS_TYPES <= set(FS_TYPES.values())
