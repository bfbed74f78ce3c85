"""
mount_checker.py - Locate the mounted EFI partition
ONE RESPONSIBILITY: Resolve the device node backing the EFI mount point
"""

import os
import plistlib
from xml.parsers.expat import ExpatError

from core.config import MountInfo
from core.errors import EfiNotMountedError
from utils import logger
from utils.shell import run_command


def probe_mount(efi_path, runner=run_command):
    """
    Ask diskutil which device backs efi_path.

    Args:
        efi_path: Expected mount point (e.g., "/Volumes/EFI")
        runner: Command runner

    Returns:
        MountInfo, or None if nothing is mounted there
    """
    result = runner(['diskutil', 'info', '-plist', efi_path])
    if result.returncode != 0:
        logger.log_info(f"diskutil info {efi_path} failed ({result.returncode})")
        return None

    try:
        data = plistlib.loads(result.stdout.encode('utf-8'))
    except (plistlib.InvalidFileException, ExpatError, ValueError) as e:
        logger.log_warning(f"Unreadable diskutil output for {efi_path}: {e}")
        return None

    # diskutil resolves plain directories to their parent volume
    mount_point = data.get('MountPoint', '')
    if os.path.normpath(mount_point or '/') != os.path.normpath(efi_path):
        logger.log_info(f"{efi_path} is not a mount point (volume is {mount_point!r})")
        return None

    device_node = data.get('DeviceNode') or ''
    if not device_node and data.get('DeviceIdentifier'):
        device_node = f"/dev/{data['DeviceIdentifier']}"

    return MountInfo(mount_point, device_node)


def check_if_efi_partition_is_mounted(config, runner=run_command):
    """Resolve the EFI mount, raising EfiNotMountedError if it is missing."""
    mount = probe_mount(config.efi_path, runner)
    if mount is None:
        raise EfiNotMountedError(config.efi_path)

    config.mount = mount
    logger.log_info(f"EFI partition {mount.device_node} mounted at {mount.mount_point}")
    return 0
