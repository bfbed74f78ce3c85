"""
xml_validator.py - Syntactic validation of config.plist
ONE RESPONSIBILITY: Report whether the configuration XML is well-formed

Only the XML is checked; Clover misconfigurations pass.
"""

import os

from core import constants
from utils import logger
from utils.shell import run_command

def build_xmllint_command(path):
    return ['xmllint', '--valid', '--format', '--noblanks', '--nsclean', '--xmlout', path]

def build_tidy_command(path):
    return ['tidy', '-xml', '-quiet', '-errors', path]

def validate_xml(path, runner=run_command, tidy=True):
    """
    Validate the XML in a plist file.

    Args:
        path: File to check
        runner: Command runner
        tidy: Also require tidy to accept the file without errors

    Returns:
        int: 0 if valid, non-zero otherwise
    """
    if not os.path.isfile(path):
        logger.log_error(f"Config not found: {path}")
        return 1

    result = runner(build_xmllint_command(path), quiet=True)
    if result.returncode != 0:
        logger.log_error(f"xmllint rejected {path} ({result.returncode})")
        return result.returncode

    if tidy:
        result = runner(build_tidy_command(path), quiet=True)
        if result.returncode == constants.COMMAND_NOT_FOUND:
            # The prerequisite step already reports the missing binary
            logger.log_warning("tidy not installed, skipping tidy pass")
        elif result.returncode >= constants.TIDY_ERROR_STATUS:
            logger.log_error(f"tidy reported errors in {path} ({result.returncode})")
            return result.returncode

    logger.log_info(f"{path} is well-formed")
    return 0
