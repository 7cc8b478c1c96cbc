# What it does: Decides whether the working tree has uncommitted changes to tracked files
# How it does: Runs `git diff --no-ext-diff --quiet --exit-code` inside the repository and looks only at how it exits. Exit 0 is clean, any other exit status is dirty, and a git that cannot be started or does not finish in time is unknown

import subprocess
from .state import Modification

DIFF_COMMAND = ['git', 'diff', '--no-ext-diff', '--quiet', '--exit-code']
DEFAULT_TIMEOUT = 10.0

def working_tree_status(repo_root, timeout=DEFAULT_TIMEOUT): # Returns a Modification for the working tree at repo_root
    if not timeout:
        timeout = None
    try:
        result = subprocess.run(
            DIFF_COMMAND,
            cwd=repo_root,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            timeout=timeout,
        )
    except (OSError, subprocess.TimeoutExpired):
        return Modification.UNKNOWN

    if result.returncode == 0:
        return Modification.CLEAN
    return Modification.DIRTY
