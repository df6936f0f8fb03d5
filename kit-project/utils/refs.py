# What it does: Manages the branch table: named pointers to commit hashes and the active branch
# How it does: Each branch is a file in `.kit/refs/heads` holding its head hash (empty while the branch is unborn). `HEAD` holds a symbolic reference to the active branch. Heads are only advanced through a compare-and-swap guarded by an exclusive lock file, so two writers cannot silently overwrite each other
# What data structure it uses: Map / Dictionary (the refs directory maps branch names to commit hashes) and pointers (HEAD and the branch files, like the links of a Linked List)

import logging
import os
from dataclasses import dataclass

from .errors import BranchNotFoundError, RefConflictError
from .objects import KIT_DIR

logger = logging.getLogger(__name__)

HEAD_PREFIX = 'ref: refs/heads/'
LOCK_SUFFIX = '.lock'


@dataclass
class Branch:
    name: str
    head: str = ''  # empty while unborn


def heads_dir(repo_root):
    return os.path.join(repo_root, KIT_DIR, 'refs', 'heads')


def branch_path(repo_root, name):
    return os.path.join(heads_dir(repo_root), name)


def head_path(repo_root):
    return os.path.join(repo_root, KIT_DIR, 'HEAD')


def is_valid_branch_name(name): # A name must map to one plain file directly inside refs/heads
    return bool(name and name.strip()) and not (
        '/' in name or os.sep in name or name.startswith('.') or name.endswith(LOCK_SUFFIX)
    )


def validate_branch_name(name):
    if not is_valid_branch_name(name):
        raise ValueError(f"'{name}' is not a valid branch name.")


def current_branch(repo_root): # Returns the name of the branch HEAD points to
    with open(head_path(repo_root), 'r') as f:
        head_content = f.read().strip()
    if not head_content.startswith(HEAD_PREFIX):
        raise ValueError(f"Malformed HEAD: '{head_content}'")
    return head_content[len(HEAD_PREFIX):]


def set_current_branch(repo_root, name):
    validate_branch_name(name)
    with open(head_path(repo_root), 'w') as f:
        f.write(f"{HEAD_PREFIX}{name}\n")


def get_branch(repo_root, name): # Returns the Branch, or None if no such ref exists
    validate_branch_name(name)
    path = branch_path(repo_root, name)
    if not os.path.isfile(path):
        return None
    with open(path, 'r') as f:
        return Branch(name, f.read().strip())


def list_branches(repo_root): # Produces every (name, Branch) pair, sorted by name
    directory = heads_dir(repo_root)
    if not os.path.isdir(directory):
        return []
    names = sorted(n for n in os.listdir(directory) if is_valid_branch_name(n))
    return [(name, get_branch(repo_root, name)) for name in names]


def write_branch(repo_root, name, head): # Creates or overwrites a branch with a point-in-time copy of a head
    validate_branch_name(name)
    os.makedirs(heads_dir(repo_root), exist_ok=True)
    path = branch_path(repo_root, name)
    tmp_path = path + LOCK_SUFFIX
    try:
        f = open(tmp_path, 'x')
    except FileExistsError:
        raise RefConflictError(f"Unable to lock branch '{name}': {tmp_path} exists.")

    try:
        with f:
            f.write(f"{head}\n" if head else '')
        os.replace(tmp_path, path)
    except Exception:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise
    return Branch(name, head)


def checkout(repo_root, name): # Switches the active branch; the working directory is left untouched
    if get_branch(repo_root, name) is None:
        raise BranchNotFoundError(name)
    set_current_branch(repo_root, name)


def update_head(repo_root, name, new_head, expected_old):
    """
    Atomically moves branch `name` from `expected_old` to `new_head`.
    Raises RefConflictError if another writer holds the lock or already moved the ref.
    """
    validate_branch_name(name)
    path = branch_path(repo_root, name)
    lock_path = path + LOCK_SUFFIX
    try:
        fd = os.open(lock_path, os.O_WRONLY | os.O_CREAT | os.O_EXCL, 0o644)
    except FileExistsError:
        raise RefConflictError(f"Unable to lock branch '{name}': {lock_path} exists.")

    try:
        with os.fdopen(fd, 'w') as f:
            current = get_branch(repo_root, name)
            current_head = current.head if current else ''
            if current_head != (expected_old or ''):
                raise RefConflictError(
                    f"Branch '{name}' moved to {current_head[:7] or '(unborn)'} "
                    f"while committing on top of {(expected_old or '')[:7] or '(unborn)'}."
                )
            f.write(f"{new_head}\n")
        os.replace(lock_path, path)
    except Exception:
        if os.path.exists(lock_path):
            os.remove(lock_path)
        raise

    logger.debug("Moved %s from %s to %s", name, expected_old or '(unborn)', new_head)
