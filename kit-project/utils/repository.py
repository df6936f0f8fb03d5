# What it does: Ties the object store, staging area, commit graph and branch table together into the repository engine the commands call
# How it does: `Repository.init` lays out `.kit/` (objects, refs/heads, HEAD), `Repository.discover` walks up the directory tree to find it. Opening a repository reloads every commit reachable from the persisted branch heads into the in-memory registry
# What data structure it uses: Uses recursion (linear recursion) to find the repo root; otherwise delegates to the Set, Dictionary and Merkle Tree structures of the modules below

import logging
import os
from datetime import datetime, timezone

from . import config, objects, refs
from .diff import compare_states, diff_texts
from .errors import InvariantViolationError, NotARepositoryError
from .history import CommitGraph
from .index import StagingArea, to_repo_path
from .objects import KIT_DIR

logger = logging.getLogger(__name__)

NOT_IN_PREVIOUS_COMMIT = "File not found in the previous commit"


def find_repo_root(path='.'): # Recursively searches for the .kit directory to find the repository root
    path = os.path.abspath(path)
    if os.path.isdir(os.path.join(path, KIT_DIR)):
        return path
    parent_path = os.path.dirname(path)
    if parent_path == path:
        return None
    return find_repo_root(parent_path)


class Repository:

    def __init__(self, root):
        self.root = os.path.abspath(root)
        self.staging = StagingArea(self.root)
        self.graph = CommitGraph(self.root)
        for _, branch in refs.list_branches(self.root):
            self.graph.load(branch.head)

    @classmethod
    def init(cls, path='.'):
        """
        Opens the repository at `path`, creating `.kit/` first if needed.
        An existing repository is left as it is.
        """
        root = os.path.abspath(path)
        kit_dir = os.path.join(root, KIT_DIR)
        os.makedirs(os.path.join(kit_dir, 'objects'), exist_ok=True)
        os.makedirs(os.path.join(kit_dir, 'refs', 'heads'), exist_ok=True)

        if not os.path.exists(refs.head_path(root)):
            default_branch = config.get_config_value(root, 'core.defaultbranch')
            refs.set_current_branch(root, default_branch)
            if refs.get_branch(root, default_branch) is None:
                refs.write_branch(root, default_branch, '')
            logger.debug("Initialized repository in %s on branch %s", kit_dir, default_branch)

        return cls(root)

    @classmethod
    def discover(cls, path='.'):
        root = find_repo_root(path)
        if root is None:
            raise NotARepositoryError(os.path.abspath(path))
        return cls(root)

    @property
    def current_branch(self):
        return refs.current_branch(self.root)

    def head(self): # Commit hash of the active branch, '' while it is unborn
        branch = refs.get_branch(self.root, self.current_branch)
        return branch.head if branch else ''

    def add(self, path):
        return self.staging.add(path)

    def commit(self, message):
        """
        Snapshots the staged files and advances the active branch.
        Nothing moves if a step fails before the head update; staging is
        cleared only once the branch points at the new commit.
        """
        timestamp = datetime.now(timezone.utc)
        branch_name = self.current_branch
        branch = refs.get_branch(self.root, branch_name)
        parent = branch.head if branch else ''

        tree_dict = objects.build_tree_from_paths(self.root, self.staging.paths())
        tree_hash = objects.write_tree(self.root, tree_dict)
        commit = self.graph.create(tree_hash, parent, message, timestamp)

        if branch is None:
            logger.error("Failed to find the current branch '%s' to update head; commit %s is orphaned",
                         branch_name, commit.id)
            raise InvariantViolationError(
                f"Active branch '{branch_name}' does not exist; commit {commit.id} was written but no branch points at it.",
                commit.id,
            )

        refs.update_head(self.root, branch_name, commit.id, parent)
        self.staging.clear()
        return commit.id

    def branch(self, name): # Point-in-time copy of the active head, not a live alias
        return refs.write_branch(self.root, name, self.head())

    def checkout(self, name):
        refs.checkout(self.root, name)

    def branches(self):
        return refs.list_branches(self.root)

    def log(self):
        return self.graph.walk(self.head())

    def show(self, sha):
        return self.graph.get(sha)

    def diff(self, path, mode=None):
        """
        Compares the file at `path` with the blob recorded for it in the tree
        of the active branch's head commit.
        """
        mode = mode or config.get_config_value(self.root, 'diff.mode')
        with open(path, 'r', encoding='utf-8', newline='') as f:
            current_text = f.read()

        head = self.head()
        if not head:
            return NOT_IN_PREVIOUS_COMMIT

        try:
            rel_path = to_repo_path(self.root, path)
        except ValueError:
            return NOT_IN_PREVIOUS_COMMIT

        tree_hash = self.graph.get(head).tree
        blob_hash = objects.find_blob(self.root, tree_hash, rel_path)
        if blob_hash is None:
            return NOT_IN_PREVIOUS_COMMIT

        old_text = objects.read_object(self.root, blob_hash).decode('utf-8', errors='replace')
        return diff_texts(old_text, current_text, mode, rel_path)

    def head_files(self): # {path: blob hash} recorded in the head commit's tree
        head = self.head()
        if not head:
            return {}
        return objects.get_tree_files(self.root, self.graph.get(head).tree)

    def status(self):
        head_files = self.head_files()
        working_files = {}
        for rel_path in head_files:
            full_path = os.path.join(self.root, *rel_path.split('/'))
            if os.path.isfile(full_path):
                with open(full_path, 'rb') as f:
                    working_files[rel_path] = objects.hash_object(self.root, f.read(), write=False)

        changes = compare_states(head_files, working_files)
        return {
            'branch': self.current_branch,
            'staged': self.staging.paths(),
            'modified': changes['modified'],
            'deleted': changes['deleted'],
        }
