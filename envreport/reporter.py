# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
"""One-shot report of the environment a server process starts in.

Each `report_*` step logs what it finds and returns it. Failures are logged or
skipped, except for the two conditions the server cannot run under, which raise
a `FatalEnvironmentError` for the caller to turn into a process exit.
"""
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from envreport.capabilities import detect_capabilities
from envreport.errors import (
    CapabilityDecodeError,
    UnsupportedFilesystemError,
    UnsupportedPlatformError,
)
from envreport.fstypes import fs_type_name, parse_magic, UNSUPPORTED_FS_TYPES
from envreport.mounts import MountEntry, parse_mounts, volumes_under
from envreport.source import EnvironmentSource

SUPPORTED_PLATFORM = "linux"

KERNEL_RELEASE_PATH = "/proc/sys/kernel/osrelease"
OS_RELEASE_PATH = "/etc/os-release"
FILE_MAX_PATH = "/proc/sys/fs/file-max"
INIT_STATUS_PATH = "/proc/1/status"
MOUNTS_PATH = "/proc/mounts"

DEFAULT_VOLUME_ROOT = "/mnt"
DEFAULT_DATA_PATH = "/mnt/mqm"
DEFAULT_TIMEOUT_SECS = 30


@dataclass
class UserInfo:
    uid: int
    name: str
    gid: int


@dataclass
class EnvironmentReport:
    machine: str = ""
    kernel_version: Optional[str] = None
    base_image: Optional[str] = None
    file_max: Optional[str] = None
    user: Optional[UserInfo] = None
    capabilities: Optional[List[str]] = None
    volumes: List[MountEntry] = field(default_factory=list)
    data_fs_type: Optional[str] = None


def report_platform(source: EnvironmentSource, logger: logging.Logger) -> str:
    machine = source.get_machine()
    logger.info(f"CPU architecture: {machine}")
    system = source.get_platform()
    if system != SUPPORTED_PLATFORM:
        raise UnsupportedPlatformError(system)
    return machine


def report_kernel_version(
    source: EnvironmentSource, logger: logging.Logger
) -> Optional[str]:
    try:
        release = source.read_proc(KERNEL_RELEASE_PATH)
    except OSError as e:
        logger.error(e)
        return None
    logger.info(f"Linux kernel version: {release}")
    return release


def parse_pretty_name(os_release: str) -> Optional[str]:
    """Value of the first quoted PRETTY_NAME in os-release(5) text.

    >>> parse_pretty_name('NAME="UBI"\\nPRETTY_NAME="Red Hat Enterprise Linux 9.4"')
    'Red Hat Enterprise Linux 9.4'
    """
    for line in os_release.splitlines():
        if line.startswith("PRETTY_NAME="):
            words = line.split('"')
            if len(words) >= 2:
                return words[1]
    return None


def report_base_image(
    source: EnvironmentSource, logger: logging.Logger
) -> Optional[str]:
    try:
        os_release = source.read_proc(OS_RELEASE_PATH)
    except OSError:
        return None
    pretty_name = parse_pretty_name(os_release)
    if pretty_name is not None:
        logger.info(f"Base image detected: {pretty_name}")
    return pretty_name


def report_file_handle_limit(
    source: EnvironmentSource, logger: logging.Logger
) -> Optional[str]:
    try:
        file_max = source.read_proc(FILE_MAX_PATH)
    except OSError as e:
        logger.error(e)
        return None
    logger.info(f"Maximum file handles: {file_max}")
    return file_max


def report_identity(
    source: EnvironmentSource, logger: logging.Logger
) -> Optional[UserInfo]:
    try:
        pw = source.get_current_user()
    except KeyError:
        return None
    user = UserInfo(uid=pw.pw_uid, name=pw.pw_name, gid=pw.pw_gid)
    logger.info(
        f"Running as user ID {user.uid} ({user.name}) with primary group {user.gid}"
    )
    return user


def report_capabilities(
    source: EnvironmentSource, logger: logging.Logger
) -> Optional[List[str]]:
    # Best effort: /proc/1 is often unreadable for unprivileged users.
    try:
        status = source.read_proc(INIT_STATUS_PATH)
        caps = detect_capabilities(status)
    except (OSError, CapabilityDecodeError):
        return None
    logger.info(f"Detected capabilities: {','.join(caps)}")
    return caps


def check_filesystem(
    source: EnvironmentSource,
    logger: logging.Logger,
    path: str,
    timeout_secs: int = DEFAULT_TIMEOUT_SECS,
) -> Optional[str]:
    """Fail if `path` is backed by a filesystem the server cannot keep data on.

    Returns the filesystem name, "" for a magic number missing from the table, or
    None when the type could not be queried.
    """
    out = source.get_filesystem_type(path, timeout_secs, logger)
    if out.returncode != 0:
        logger.error(
            f"Could not get filesystem type of {path}. error_code: {out.returncode} output: {out.stdout.strip()}"
        )
        return None
    try:
        magic = parse_magic(out.stdout)
    except ValueError:
        logger.error(f"Invalid filesystem type output for {path}: {out.stdout!r}")
        return None

    fs_type = fs_type_name(magic)
    if fs_type in UNSUPPORTED_FS_TYPES:
        raise UnsupportedFilesystemError(path, fs_type)
    logger.info(f"Detected {path} has filesystem type '{fs_type}'")
    return fs_type


def report_mounts(
    source: EnvironmentSource,
    logger: logging.Logger,
    volume_root: str = DEFAULT_VOLUME_ROOT,
    data_path: str = DEFAULT_DATA_PATH,
    timeout_secs: int = DEFAULT_TIMEOUT_SECS,
) -> Tuple[List[MountEntry], Optional[str]]:
    """Log volumes mounted under `volume_root` and check `data_path` if any.

    Returns the matching mounts and the filesystem type found for `data_path`.
    """
    try:
        mounts = source.read_proc(MOUNTS_PATH)
    except OSError:
        logger.error(f"Error: Couldn't read {MOUNTS_PATH}")
        return [], None

    volumes = []
    for entry in volumes_under(parse_mounts(mounts.splitlines()), volume_root):
        logger.info(
            f"Detected '{entry.filesystem_type}' volume mounted to {entry.mount_point}"
        )
        volumes.append(entry)
    if not volumes:
        logger.warning("No volume detected. Persistent messages may be lost")
        return volumes, None
    return volumes, check_filesystem(source, logger, data_path, timeout_secs)


def log_config(
    source: EnvironmentSource,
    logger: logging.Logger,
    volume_root: str = DEFAULT_VOLUME_ROOT,
    data_path: str = DEFAULT_DATA_PATH,
    timeout_secs: int = DEFAULT_TIMEOUT_SECS,
) -> EnvironmentReport:
    """Log the environment the process is starting in.

    Raises UnsupportedPlatformError before any Linux specific check when not on
    Linux, and UnsupportedFilesystemError when `data_path` sits on a volume
    whose filesystem cannot hold persistent data.
    """
    report = EnvironmentReport()
    report.machine = report_platform(source, logger)
    report.kernel_version = report_kernel_version(source, logger)
    report.base_image = report_base_image(source, logger)
    report.file_max = report_file_handle_limit(source, logger)
    report.user = report_identity(source, logger)
    report.capabilities = report_capabilities(source, logger)
    report.volumes, report.data_fs_type = report_mounts(
        source,
        logger,
        volume_root=volume_root,
        data_path=data_path,
        timeout_secs=timeout_secs,
    )
    return report
