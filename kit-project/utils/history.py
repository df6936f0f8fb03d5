# What it does: Creates commit objects, keeps the in-memory commit registry and walks history
# How it does: A commit is stored as text (`tree`, `parent`, `message`, `timestamp` lines) through the object store and mirrored by a `Commit` record. Records missing from the registry are rebuilt by parsing the commit object, so history survives across sessions
# What data structure it uses: Hash Table / Dictionary (hash -> Commit registry) and a Graph Traversal (a linear walk up the parent chain of the commit tree)

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from . import objects
from .errors import CommitNotFoundError, NotFoundError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Commit:
    id: str
    message: str
    timestamp: datetime
    parent: Optional[str]
    tree: str


def serialize_commit(tree_hash, parent, message, timestamp):
    return (
        f"tree {tree_hash}\n"
        f"parent {parent or ''}\n"
        f"message {message}\n"
        f"timestamp {timestamp.isoformat()}"
    ).encode()


def parse_commit(sha, content):
    """
    Parses commit bytes back into a Commit record.
    The message is everything between the `parent` line and the last line,
    so multi-line messages survive. Raises ValueError for anything else.
    """
    try:
        lines = content.decode().split('\n')
    except UnicodeDecodeError as e:
        raise ValueError(f"Object {sha} is not a commit") from e

    if (len(lines) < 4 or not lines[0].startswith('tree ') or not lines[1].startswith('parent')
            or not lines[2].startswith('message ') or not lines[-1].startswith('timestamp ')):
        raise ValueError(f"Object {sha} is not a commit")

    tree_hash = lines[0][len('tree '):]
    parent = lines[1][len('parent'):].strip()
    message = '\n'.join(lines[2:-1])[len('message '):]
    timestamp = datetime.fromisoformat(lines[-1][len('timestamp '):])
    return Commit(sha, message, timestamp, parent or None, tree_hash)


class CommitGraph:

    def __init__(self, repo_root):
        self.repo_root = repo_root
        self.commits = {}

    def __contains__(self, sha):
        return sha in self.commits

    def __len__(self):
        return len(self.commits)

    def create(self, tree_hash, parent, message, timestamp=None): # Writes a commit object and registers its record
        timestamp = timestamp or datetime.now(timezone.utc)
        content = serialize_commit(tree_hash, parent, message, timestamp)
        commit_hash = objects.hash_object(self.repo_root, content)

        commit = Commit(commit_hash, message, timestamp, parent or None, tree_hash)
        self.commits[commit_hash] = commit
        logger.debug("Commit registered: %s", commit_hash)
        return commit

    def load(self, head): # Registers every commit reachable from `head`, returns how many were new
        loaded = 0
        current = head
        while current and current not in self.commits:
            try:
                commit = self._read(current)
            except NotFoundError:
                logger.warning("History of %s is truncated: commit %s is missing", head[:7], current[:7])
                break
            self.commits[current] = commit
            loaded += 1
            current = commit.parent
        return loaded

    def get(self, sha): # Looks a commit up by full or abbreviated hash
        if sha in self.commits:
            return self.commits[sha]

        if len(sha) < 64:
            try:
                sha = objects.resolve_prefix(self.repo_root, sha)
            except NotFoundError:
                raise CommitNotFoundError(sha)
            if sha in self.commits:
                return self.commits[sha]

        commit = self._read(sha)
        self.commits[sha] = commit
        return commit

    def walk(self, head):
        """
        Follows parent links from `head`, newest first. A parent that cannot be
        found stops the walk: the commits collected so far are returned and a
        warning is logged.
        """
        history = []
        if not head:
            return history

        logger.debug("Starting log traversal from head: %s", head)
        current = head
        while current:
            commit = self.commits.get(current)
            if commit is None:
                try:
                    commit = self._read(current)
                except NotFoundError:
                    logger.warning("History truncated: commit %s is missing", current[:7])
                    break
                self.commits[current] = commit
            history.append(commit)
            current = commit.parent
        return history

    def _read(self, sha):
        try:
            content = objects.read_object(self.repo_root, sha)
        except NotFoundError:
            raise CommitNotFoundError(sha)
        try:
            return parse_commit(sha, content)
        except ValueError:
            raise CommitNotFoundError(sha)
