"""
environment.py - Collect diagnostic details about the machine
ONE RESPONSIBILITY: Gather display-only environment info

Every probe is best-effort: failures degrade to an empty string.
"""

import getpass
import re

from core import constants
from utils import logger
from utils.shell import run_command

RULE = '-' * 68


class OSInfo:
    def __init__(self, product_version="", build_version=""):
        self.product_version = product_version
        self.build_version = build_version


def _probe(cmd, runner):
    """Run a probe command, returning stripped stdout or "" on failure."""
    result = runner(cmd)
    if result.returncode != 0:
        logger.log_debug(f"Probe {cmd[0]} failed with {result.returncode}")
        return ""
    return result.stdout.strip()


def get_os_info(runner=run_command):
    """
    Read the macOS product and build version from sw_vers.

    sw_vers prints lines such as ``ProductVersion:\\t14.6.1``.
    """
    info = OSInfo()
    for line in _probe(['sw_vers'], runner).splitlines():
        key, _, value = line.partition(':')
        key = key.strip()
        if key == 'ProductVersion':
            info.product_version = value.strip()
        elif key == 'BuildVersion':
            info.build_version = value.strip()
    return info


def get_os_name(product_version):
    """Map "14.6.1" to "Sonoma", "10.15.7" to "Catalina"."""
    parts = product_version.split('.')
    if parts[0] == "10" and len(parts) >= 2:
        key = f"{parts[0]}.{parts[1]}"
    else:
        key = parts[0]
    return constants.OS_NAMES.get(key, "macOS")


def get_clover_version(installer_plist, runner=run_command):
    """Extract the installed Clover revision from its installer plist."""
    output = _probe(['xmllint', installer_plist, '--xpath', '/plist/dict/integer'], runner)
    match = re.search(r'\d+', output)
    return match.group(0) if match else ""


def get_current_user():
    try:
        return getpass.getuser()
    except (KeyError, OSError):
        return ""


def collect_debug_info(config, runner=run_command):
    """
    Gather the debug block contents.

    Returns:
        dict: label -> value, in display order
    """
    os_info = get_os_info(runner)
    version = os_info.product_version
    if version:
        version = f"{version} ({get_os_name(version)})"

    return {
        "OS Name": _probe(['uname', '-a'], runner),
        "OS Version": f"{version} [{os_info.build_version}]",
        "Current User": get_current_user(),
        "EFI Device Node": config.mount.device_node,
        "EFI Mount Point": config.efi_path,
        "Clover Version": get_clover_version(config.installer_plist_path, runner),
    }


def show_debug_info(info):
    print()
    print(RULE)
    for label, value in info.items():
        print(f"{label}: {value}")
    print(RULE)
    print()
