#!/usr/bin/env python3
"""
main.py - Clover Validator
Checks config.plist on the EFI partition and keeps its history in a bare git repo
"""

import argparse
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from core import config_manager
from core.config import Config
from core.errors import EfiNotMountedError
from detection import environment, mount_checker, prerequisites
from integration import network
from operations import repository, xml_validator
from ui import display, help
from ui.reporter import StepReporter
from utils import logger, shell

VERSION = "1.0.0"

def parse_args(argv):
    """
    Parse known options; anything else is ignored so that any
    non-empty argument list runs the full check sequence.
    """
    parser = argparse.ArgumentParser(prog="clover-validator", add_help=False, allow_abbrev=False)
    # A path option given without a value leaves the saved preference in place
    parser.add_argument("--efi-path", type=str, nargs='?')
    parser.add_argument("--repo", dest="repo_path", type=str, nargs='?')
    parser.add_argument("--no-debug", dest="debug", action="store_false", default=None)
    parser.add_argument("--no-tidy", dest="tidy", action="store_false", default=None)
    parser.add_argument("--snapshot", action="store_true", default=None)
    parser.add_argument("--check-network", action="store_true", default=None)
    parser.add_argument("--save-prefs", action="store_true")
    parser.add_argument("--verbose", action="store_true")

    return parser.parse_known_args(argv)

def merge_overrides(args, prefs):
    """Apply command-line overrides on top of saved preferences."""
    values = dict(prefs)
    for key in ('efi_path', 'repo_path', 'debug', 'tidy', 'snapshot', 'check_network'):
        value = getattr(args, key)
        if value is not None and value != '':
            values[key] = value
    return values

def build_config(args, prefs):
    return Config.from_dict(merge_overrides(args, prefs))

def run_checks(config, runner=shell.run_command, which=shell.which, reporter=None):
    """
    Run every check in order.

    Raises:
        EfiNotMountedError: the EFI partition is not mounted; later steps are skipped

    Returns:
        int: 0 if every step passed, 1 otherwise
    """
    if reporter is None:
        reporter = StepReporter()

    # Display debug info about environment if enabled
    if config.debug:
        mount = mount_checker.probe_mount(config.efi_path, runner)
        if mount is not None:
            config.mount = mount
        environment.show_debug_info(environment.collect_debug_info(config, runner))

    reporter.run("Checking for required prerequisites...",
                 lambda: prerequisites.check_required_binaries(which=which))

    reporter.run("Checking for mounted EFI partition...",
                 lambda: mount_checker.check_if_efi_partition_is_mounted(config, runner))

    # First run only
    if not repository.repository_exists(config.repo_path):
        reporter.run("Creating git repo for clover configuration...",
                     lambda: repository.create_git_repo(config.repo_path, runner))

    if config.check_network:
        reporter.run("Checking internet connection...",
                     lambda: network.check_internet_access(config.network_host, runner))

    # Look for invalid XML; not misconfigurations
    valid = reporter.run(f"Validating XML in {config.config_plist_path}...",
                         lambda: xml_validator.validate_xml(config.config_plist_path, runner, config.tidy))

    if config.snapshot and valid:
        reporter.run("Saving config.plist snapshot...",
                     lambda: repository.snapshot_config(config.repo_path, config.config_plist_path, runner))

    reporter.summary()
    return reporter.exit_code()

def main(argv=None):
    """Main entry point."""
    if argv is None:
        argv = sys.argv[1:]

    if not argv:
        help.print_usage(VERSION)
        return 0

    args, ignored = parse_args(argv)
    prefs = config_manager.load_config()
    logger.setup_logging(verbose=args.verbose, log_dir=prefs.get('log_dir', logger.LOG_DIR))
    if ignored:
        logger.log_debug(f"Ignoring arguments: {ignored}")

    values = merge_overrides(args, prefs)
    if args.save_prefs and config_manager.save_config(values):
        display.print_info(f"Saved preferences to {config_manager.CONFIG_FILE}")

    config = Config.from_dict(values)

    try:
        status = run_checks(config)
    except EfiNotMountedError as e:
        display.print_error(str(e))
        logger.log_error(str(e))
        status = 1

    if status != 0:
        display.print_info(f"Details in {logger.get_log_file()}")
    return status

def cli():
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n\nOperation cancelled by user.")
        sys.exit(130)

if __name__ == "__main__":
    cli()
