# Shared pytest fixtures for Kit VCS tests

import pytest
import os
import sys
import shutil
import tempfile

# Add kit-project to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'kit-project'))

from utils.repository import Repository


def write_file(repo_root, rel_path, content):
    # Writes a file below the repo root, creating parent directories
    full_path = os.path.join(repo_root, *rel_path.split('/'))
    os.makedirs(os.path.dirname(full_path), exist_ok=True)
    with open(full_path, 'w') as f:
        f.write(content)
    return full_path


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
    # Creates an initialized Kit repository in a temporary directory and returns the engine
    original_dir = os.getcwd()
    os.chdir(temp_dir)

    yield Repository.init(temp_dir)

    os.chdir(original_dir)


@pytest.fixture
def repo_with_commit(temp_repo):
    # Creates a repo with one committed file
    file_path = write_file(temp_repo.root, 'README.md', '# Test Project\n')
    temp_repo.add(file_path)
    commit_hash = temp_repo.commit('Initial commit')
    return temp_repo, commit_hash


@pytest.fixture
def repo_with_branches(repo_with_commit):
    # Creates a repo with master and a feature branch at the initial commit
    repo, initial_commit = repo_with_commit
    repo.branch('feature')
    return repo, initial_commit


# Mock args object for command functions
class MockArgs:
    def __init__(self, **kwargs):
        for key, value in kwargs.items():
            setattr(self, key, value)


@pytest.fixture
def make_args():
    # Builds MockArgs for calling command modules directly
    return MockArgs


@pytest.fixture
def make_file():
    return write_file
