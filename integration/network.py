"""
network.py - Internet reachability check
ONE RESPONSIBILITY: Ping a well-known host

Informational only; no other step depends on the outcome.
"""

from core import constants
from utils import logger
from utils.shell import run_command

def check_internet_access(host=constants.DEFAULT_NETWORK_HOST, runner=run_command):
    """Ping host once, returning ping's exit status."""
    # -o exits after the first reply (BSD ping)
    result = runner(['ping', '-o', '-q', host], quiet=True)
    if result.returncode != 0:
        logger.log_warning(f"{host} unreachable ({result.returncode})")
    return result.returncode
