# The command: kit log
# What it does: Displays the commit history of the active branch, newest first
# How it does: `Repository.log` starts at the active branch's head and follows parent links through the commit registry, loading any commit it has not seen yet from the object store. A missing parent ends the walk
# What data structure it uses: A Graph Traversal (a linear walk up the parent chain)

import sys
from utils.errors import KitError, NotARepositoryError
from utils.repository import Repository

def run(args):
    try:
        repo = Repository.discover()
    except NotARepositoryError:
        print("fatal: not a kit repository", file=sys.stderr)
        sys.exit(1)

    try:
        history = repo.log()
    except (KitError, OSError) as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(1)

    if not history:
        print(f"fatal: your current branch '{repo.current_branch}' does not have any commits yet")
        return

    for commit in history:
        print(f"commit {commit.id}")
        print(f"Date: {commit.timestamp.isoformat()}")
        print()
        for line in commit.message.splitlines() or ['']:
            print(f"    {line}")
        print()
