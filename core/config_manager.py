"""
config_manager.py - Manage persistent user preferences
ONE RESPONSIBILITY: Load and save user settings to a JSON file
"""

import json
import os

from core import constants
from utils import logger

CONFIG_FILE = os.path.expanduser("~/.clover_validator_prefs.json")

DEFAULT_CONFIG = {
    "efi_path": constants.DEFAULT_EFI_PATH,
    "repo_path": constants.DEFAULT_REPO_PATH,
    "debug": True,
    "tidy": True,
    "snapshot": False,
    "check_network": False,
    "network_host": constants.DEFAULT_NETWORK_HOST,
    "log_dir": logger.LOG_DIR,
}

def load_config(path=CONFIG_FILE):
    """Load configuration from file, falling back to defaults."""
    if not os.path.exists(path):
        return DEFAULT_CONFIG.copy()

    try:
        with open(path, 'r') as f:
            user_config = json.load(f)
        if not isinstance(user_config, dict):
            raise ValueError("preferences must be a JSON object")
        # Merge with defaults to ensure all keys exist
        config = DEFAULT_CONFIG.copy()
        config.update(user_config)
        return config
    except (OSError, ValueError) as e:
        print(f"Error loading config: {e}")
        logger.log_warning(f"Ignoring preferences file {path}: {e}")
        return DEFAULT_CONFIG.copy()

def save_config(config, path=CONFIG_FILE):
    """Save configuration to file."""
    try:
        with open(path, 'w') as f:
            json.dump(config, f, indent=4)
        return True
    except (OSError, TypeError) as e:
        print(f"Error saving config: {e}")
        logger.log_error(f"Could not save preferences to {path}: {e}")
        return False
