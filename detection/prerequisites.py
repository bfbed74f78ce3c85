"""
prerequisites.py - Verify required command-line tools
ONE RESPONSIBILITY: Report which external tools are missing
"""

from core import constants
from utils import logger
from utils.shell import which as default_which

def find_missing_tools(tools, which=default_which):
    """Return the tools that do not resolve on PATH, in the given order."""
    return [tool for tool in tools if not which(tool)]

def check_required_binaries(tools=constants.REQUIRED_TOOLS, which=default_which):
    """
    Check the user's system has the binaries needed to validate.

    Returns:
        int: 0 if everything is installed, 1 otherwise
    """
    missing = find_missing_tools(tools, which)
    if missing:
        print(f"Missing dependencies: {', '.join(missing)}. Please install and retry.")
        logger.log_error(f"Missing dependencies: {missing}")
        return 1

    return 0
