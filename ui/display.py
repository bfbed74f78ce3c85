"""
display.py - Terminal display utilities
ONE RESPONSIBILITY: Formatted console output
"""

import sys

from core import constants

# ANSI color codes
class Colors:
    RED = '\033[91m'
    GREEN = '\033[92m'
    YELLOW = '\033[93m'
    CYAN = '\033[96m'
    BOLD = '\033[1m'
    END = '\033[0m'

# Disable colors if not in TTY
if not sys.stdout.isatty():
    for attr in dir(Colors):
        if not attr.startswith('_'):
            setattr(Colors, attr, '')

def print_label(text):
    """Print a step label, leaving the cursor on the same line."""
    print(text, end='', flush=True)

def print_ok():
    """Echo success in terminal."""
    print(f"{Colors.GREEN}{constants.OK_MARKER}{Colors.END}")

def print_failed():
    """Echo failure in terminal."""
    print(f"{Colors.RED}{constants.FAILED_MARKER}{Colors.END}")

def print_error(text):
    """Print error message."""
    print(f"{Colors.RED}✗ {text}{Colors.END}")

def print_info(text):
    """Print info message."""
    print(f"{Colors.CYAN}ℹ  {text}{Colors.END}")
