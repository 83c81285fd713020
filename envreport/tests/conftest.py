# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
from importlib import resources
from typing import Dict

import pytest

from envreport.reporter import (
    FILE_MAX_PATH,
    INIT_STATUS_PATH,
    KERNEL_RELEASE_PATH,
    MOUNTS_PATH,
    OS_RELEASE_PATH,
)
from envreport.tests import data
from envreport.tests.fakes import FakeEnvironmentSource


def read_data(name: str) -> str:
    return (resources.files(data) / name).read_text()


@pytest.fixture
def proc_files() -> Dict[str, str]:
    """A healthy container with a data volume mounted at /mnt/mqm."""
    return {
        KERNEL_RELEASE_PATH: "5.14.0-427.13.1.el9_4.x86_64\n",
        OS_RELEASE_PATH: read_data("os_release_ubi9.txt"),
        FILE_MAX_PATH: "9223372036854775807\n",
        INIT_STATUS_PATH: read_data("proc_1_status.txt"),
        MOUNTS_PATH: read_data("mounts_with_volume.txt"),
    }


@pytest.fixture
def source(proc_files: Dict[str, str]) -> FakeEnvironmentSource:
    return FakeEnvironmentSource(files=proc_files)
