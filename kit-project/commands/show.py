# The command: kit show <commit>
# What it does: Prints one commit: its hash, message, timestamp, parent and tree
# How it does: `Repository.show` looks the hash up in the commit registry, expanding an abbreviated hash against the object store and parsing the commit object when it is not registered yet
# What data structure it uses: Hash Table / Dictionary (the commit registry and the object store)

import sys
from utils.errors import KitError, NotARepositoryError, NotFoundError
from utils.repository import Repository

def run(args):
    try:
        repo = Repository.discover()
    except NotARepositoryError:
        print("fatal: not a kit repository", file=sys.stderr)
        sys.exit(1)

    try:
        commit = repo.show(args.commit_hash)
    except NotFoundError:
        print(f"Commit not found: {args.commit_hash}", file=sys.stderr)
        sys.exit(1)
    except (KitError, OSError) as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Commit: {commit.id}")
    print(f"Message: {commit.message}")
    print(f"Timestamp: {commit.timestamp.isoformat()}")
    print(f"Parent: {commit.parent or ''}")
    print(f"Tree: {commit.tree}")
