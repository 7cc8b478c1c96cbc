# The command: vcprompt [-f FORMAT] [-d]
# What it does: Collects the git state around the current directory and prints it through the format string
# How it does: Locates the repo root, reads HEAD, asks git whether the working tree is dirty, then renders a RepoState. A missing repository prints nothing; an unreadable HEAD or a failing git are only reported as debug diagnostics

import sys
from utils import repository, diff, render, config as config_utils
from utils.state import RepoState, Modification, VCS_NAME

def debug(args, message): # Debug diagnostics go to stdout, not stderr
    if args.debug:
        print(f"vcprompt: {message}")

def collect_state(args, timeout, start='.'): # Builds the RepoState for the repository enclosing `start`
    repo_root = repository.find_repo_root(start)
    if not repo_root:
        debug(args, "no .git/ directory found")
        return RepoState.unavailable()

    try:
        branch, revision = repository.read_head(repo_root)
    except (OSError, ValueError) as e:
        debug(args, str(e))
        return RepoState(available=True, name=VCS_NAME)

    status = diff.working_tree_status(repo_root, timeout)
    if status is Modification.UNKNOWN:
        debug(args, f"could not run {' '.join(diff.DIFF_COMMAND)} in {repo_root}")

    return RepoState(
        available=True,
        name=VCS_NAME,
        branch=branch,
        revision=revision,
        status=status,
    )

def run(args):
    try:
        cfg = config_utils.read_config()
        fmt = args.format if args.format is not None else config_utils.get_format(cfg)
        timeout = config_utils.get_timeout(cfg, diff.DEFAULT_TIMEOUT)
    except ValueError as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(1)

    state = collect_state(args, timeout)
    sys.stdout.write(render.render(fmt, state))
    sys.stdout.flush()
