USAGE = """
USAGE:
  clover-validator check [OPTIONS]

  Run with any argument to validate the Clover config.plist on the mounted
  EFI partition. Run with no arguments to show this message.

OPTIONS:
  --efi-path PATH   EFI mount point (default: /Volumes/EFI)
  --repo PATH       Bare git repository for config history
                    (default: ~/.clover-repository)
  --no-debug        Hide the environment info block
  --no-tidy         Skip the tidy pass after xmllint
  --snapshot        Commit config.plist to the repository when it is valid
  --check-network   Also ping a well-known host
  --save-prefs      Store the options above as the new defaults
  --verbose         Echo log messages to the terminal

PREFERENCES:
  Defaults can be overridden in ~/.clover_validator_prefs.json,
  including "log_dir" (default: /tmp/clover_validator_logs)
"""

def print_usage(version):
    """Print command-line usage information."""
    print(f"Clover Validator v{version}")
    print(USAGE)
