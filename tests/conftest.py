# Shared pytest fixtures for vcprompt tests

import pytest
import os
import sys
import shutil
import tempfile

# Add vcprompt-project to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'vcprompt-project'))

from utils import config


@pytest.fixture(autouse=True)
def no_user_config(monkeypatch, tmp_path):
    # Points the config lookup at a file that does not exist so ~/.vcprompt never leaks into tests
    monkeypatch.setenv(config.CONFIG_ENV, str(tmp_path / 'no-such-vcprompt-config'))


@pytest.fixture
def temp_dir():
    # Creates a temporary directory that is cleaned up after the test
    # Also saves/restores cwd to prevent issues when tests change directories
    original_dir = os.getcwd()
    tmp = os.path.realpath(tempfile.mkdtemp())
    yield tmp
    os.chdir(original_dir)
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def temp_repo(temp_dir):
    # Creates a minimal .git skeleton (HEAD on master) in a temporary directory
    original_dir = os.getcwd()
    os.chdir(temp_dir)

    git_dir = os.path.join(temp_dir, '.git')
    os.makedirs(os.path.join(git_dir, 'refs', 'heads'))
    write_head(temp_dir, 'ref: refs/heads/master\n')

    yield temp_dir

    os.chdir(original_dir)


@pytest.fixture
def nested_dir(temp_repo):
    # A directory three levels below the repository root
    subdir = os.path.join(temp_repo, 'src', 'deep', 'nested')
    os.makedirs(subdir)
    return subdir


def write_head(repo_root, content):
    with open(os.path.join(repo_root, '.git', 'HEAD'), 'w') as f:
        f.write(content)
