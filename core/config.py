"""
config.py - Runtime configuration
"""

import os

from core import constants


class MountInfo:
    """Mount point and backing device of the EFI partition."""

    def __init__(self, mount_point, device_node=""):
        self.mount_point = mount_point
        self.device_node = device_node

    def __repr__(self):
        return f"MountInfo(mount_point={self.mount_point!r}, device_node={self.device_node!r})"


class Config:
    def __init__(self, efi_path=constants.DEFAULT_EFI_PATH, repo_path=constants.DEFAULT_REPO_PATH,
                 debug=True, tidy=True, snapshot=False, check_network=False,
                 network_host=constants.DEFAULT_NETWORK_HOST):
        self.efi_path = efi_path
        self.repo_path = os.path.expanduser(repo_path)
        self.debug = debug
        self.tidy = tidy
        self.snapshot = snapshot
        self.check_network = check_network
        self.network_host = network_host
        # Device node stays empty until the mount check resolves it
        self.mount = MountInfo(efi_path)

    @property
    def config_plist_path(self):
        return os.path.join(self.efi_path, constants.CONFIG_PLIST_RELPATH)

    @property
    def installer_plist_path(self):
        return os.path.join(self.efi_path, constants.INSTALLER_PLIST_RELPATH)

    @classmethod
    def from_dict(cls, values):
        """Build a Config from a preferences dict, ignoring unknown keys."""
        known = ('efi_path', 'repo_path', 'debug', 'tidy', 'snapshot',
                 'check_network', 'network_host')
        return cls(**{k: values[k] for k in known if k in values})
