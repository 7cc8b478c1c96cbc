# What it does: Locates the enclosing git repository and reads what its HEAD points to
# How it does: `find_repo_root` walks up the directory tree one parent at a time looking for a `.git` directory, without ever changing the process working directory. `read_head` reads only the first line of `.git/HEAD` and splits it into a branch name (symbolic ref) or a raw revision (detached HEAD)
# What data structure it uses: Iteration over the chain of parent directories; a (branch, revision) tuple where exactly one side is non-empty

import os

MARKER_DIR = '.git'
HEAD_FILE = 'HEAD'
REF_PREFIX = 'ref: refs/heads/'

def find_repo_root(path='.'): # Searches upward for the .git directory, returns the repo root or None at the filesystem root
    path = os.path.abspath(path)
    while True:
        if os.path.isdir(os.path.join(path, MARKER_DIR)):
            return path
        parent_path = os.path.dirname(path)
        if parent_path == path:
            return None
        path = parent_path

def get_head_path(repo_root):
    return os.path.join(repo_root, MARKER_DIR, HEAD_FILE)

def read_first_line(filename): # Returns the first line of a file, stripped; raises OSError if unreadable, ValueError if empty or blank
    with open(filename, 'r') as f:
        line = f.readline().strip()
    if not line:
        raise ValueError(f"unable to read first line of {filename}")
    return line

def parse_head(line): # Splits a HEAD line into (branch, revision); raises ValueError for a ref with no branch name
    if line.startswith(REF_PREFIX):
        branch = line[len(REF_PREFIX):].strip()
        if not branch:
            raise ValueError(f"no branch name in HEAD reference {line!r}")
        return branch, ''
    return '', line.strip()

def read_head(repo_root): # Reads .git/HEAD and returns (branch, revision)
    return parse_head(read_first_line(get_head_path(repo_root)))
