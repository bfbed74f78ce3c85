"""
repository.py - Bare git repository for clover configuration history
ONE RESPONSIBILITY: Create the repo and record config.plist snapshots
"""

import os
from datetime import datetime

from utils import logger
from utils.shell import run_command

def repository_exists(repo_path):
    """First-run guard: the repo is created only when its directory is absent."""
    return os.path.isdir(repo_path)

def create_git_repo(repo_path, runner=run_command):
    """
    Create the git repository for the first time.

    Args:
        repo_path: Directory to create (must not exist yet)
        runner: Command runner

    Returns:
        int: exit status of git init
    """
    os.mkdir(repo_path)
    result = runner(['git', 'init', '--bare', '.'], cwd=repo_path)

    if result.returncode == 0:
        logger.log_info(f"Initialized bare repository at {repo_path}")
    else:
        logger.log_error(f"git init failed in {repo_path}: {result.stderr.strip()}")
    return result.returncode

def snapshot_config(repo_path, config_plist_path, runner=run_command):
    """
    Commit the current config.plist into the bare repository.

    The plist's own directory is used as the work tree, so the history
    holds a single file at its top level.

    Returns:
        int: 0 if committed or unchanged, otherwise the failing git status
    """
    work_tree = os.path.dirname(config_plist_path)
    filename = os.path.basename(config_plist_path)
    git = ['git', f'--git-dir={repo_path}', f'--work-tree={work_tree}']

    result = runner(git + ['add', '--', filename])
    if result.returncode != 0:
        logger.log_error(f"git add failed: {result.stderr.strip()}")
        return result.returncode

    # diff --quiet exits 0 when nothing is staged
    if runner(git + ['diff', '--cached', '--quiet', '--', filename]).returncode == 0:
        logger.log_info(f"{filename} unchanged since last snapshot")
        return 0

    message = f"Snapshot {filename} ({datetime.now().strftime('%Y-%m-%d %H:%M:%S')})"
    result = runner(git + ['commit', '--quiet', '-m', message])
    if result.returncode != 0:
        logger.log_error(f"git commit failed: {result.stderr.strip()}")
    else:
        logger.log_info(message)
    return result.returncode
