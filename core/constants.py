"""
constants.py - Fixed paths, tool names and macOS release names
ONE RESPONSIBILITY: Store static metadata
"""

import os

# Mount point of the EFI partition
DEFAULT_EFI_PATH = "/Volumes/EFI"

# Bare git repo used to version clover configuration
DEFAULT_REPO_PATH = os.path.expanduser("~/.clover-repository")

# Relative to the EFI mount point
CONFIG_PLIST_RELPATH = "EFI/CLOVER/config.plist"
INSTALLER_PLIST_RELPATH = "Library/Preferences/com.projectosx.clover.installer.plist"

# Tools that must be on PATH before validating
REQUIRED_TOOLS = ("tidy", "xmllint")

DEFAULT_NETWORK_HOST = "google.com"

# Step markers
OK_MARKER = "[  OK  ]"
FAILED_MARKER = "[FAILED]"

# Exit status the shell reports for a command that cannot be found
COMMAND_NOT_FOUND = 127

# tidy exits 1 on warnings, 2 on errors
TIDY_ERROR_STATUS = 2

# macOS release names, used for the debug block only
OS_NAMES = {
    "26": "Tahoe",
    "15": "Sequoia",
    "14": "Sonoma",
    "13": "Ventura",
    "12": "Monterey",
    "11": "Big Sur",
    "10.15": "Catalina",
    "10.14": "Mojave",
    "10.13": "High Sierra",
    "10.12": "Sierra",
    "10.11": "El Capitan",
    "10.10": "Yosemite",
}
