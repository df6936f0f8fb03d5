# What it does: Holds the staging area, the set of files queued for the next commit
# How it does: Only paths are recorded, never content; the files are read again when the commit is made. The set is mirrored to `.kit/index` (one path per line) so separate invocations see the same staging area
# What data structure it uses: Set (duplicates collapse, order is irrelevant) and a Tree Traversal (os.walk) when a directory is staged

import logging
import os

from . import ignore
from .objects import KIT_DIR

logger = logging.getLogger(__name__)


def index_path(repo_root):
    return os.path.join(repo_root, KIT_DIR, 'index')


def read_index(repo_root): # Returns the staged paths recorded in the index file as a set
    path = index_path(repo_root)
    staged = set()
    if os.path.exists(path):
        with open(path, 'r') as f:
            for line in f:
                line = line.rstrip('\n')
                if line:
                    staged.add(line)
    return staged


def write_index(repo_root, paths):
    path = index_path(repo_root)
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, 'w') as f:
        for rel_path in sorted(paths):
            f.write(f"{rel_path}\n")


def to_repo_path(repo_root, path): # Converts a filesystem path into the '/'-separated path relative to the repository root
    abs_path = os.path.abspath(path)
    rel_path = os.path.relpath(abs_path, os.path.abspath(repo_root))
    if rel_path == os.pardir or rel_path.startswith(os.pardir + os.sep) or os.path.isabs(rel_path):
        raise ValueError(f"'{path}' is outside repository at '{repo_root}'")
    return rel_path.replace(os.sep, '/')


class StagingArea:

    def __init__(self, repo_root):
        self.repo_root = repo_root
        self._paths = read_index(repo_root)

    def __contains__(self, rel_path):
        return rel_path in self._paths

    def __len__(self):
        return len(self._paths)

    def paths(self):
        return sorted(self._paths)

    def add(self, path):
        """
        Stages a file, or every regular file below a directory.
        Returns the repository-relative paths that were staged by this call.
        """
        if os.path.isdir(path):
            added = self._expand_directory(path)
        elif os.path.isfile(path):
            rel_path = to_repo_path(self.repo_root, path)
            if ignore.is_ignored(rel_path, ignore.get_ignored_patterns(self.repo_root)):
                raise ValueError(f"'{rel_path}' is ignored (inside {KIT_DIR}/ or matched by .kitignore)")
            added = [rel_path]
        else:
            raise FileNotFoundError(f"pathspec '{path}' did not match any files")

        self._paths.update(added)
        write_index(self.repo_root, self._paths)
        logger.debug("Staged %d path(s) from '%s'", len(added), path)
        return added

    def clear(self):
        self._paths.clear()
        write_index(self.repo_root, self._paths)

    def _expand_directory(self, directory):
        ignore_patterns = ignore.get_ignored_patterns(self.repo_root)
        added = []
        for root, dirs, files in os.walk(directory):
            dirs[:] = [
                d for d in dirs
                if not ignore.is_ignored(to_repo_path(self.repo_root, os.path.join(root, d)), ignore_patterns)
            ]
            for file in files:
                file_path = os.path.join(root, file)
                if not os.path.isfile(file_path):
                    continue
                rel_path = to_repo_path(self.repo_root, file_path)
                if not ignore.is_ignored(rel_path, ignore_patterns):
                    added.append(rel_path)
        return added
