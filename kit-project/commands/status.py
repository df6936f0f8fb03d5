# The command: kit status
# What it does: Provides a summary of the repository state: the active branch, the staged files, and tracked files that changed since the head commit
# How it does: `Repository.status` hashes (without storing) every file recorded in the head tree and compares the two {path: hash} dictionaries
# What data structure it uses: Hash Table / Dictionary (to represent both states), Sets (for efficient comparison of file lists)

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
        state = repo.status()
    except (KitError, OSError) as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"On branch {state['branch']}")

    if state['staged']:
        print("\nChanges to be committed:")
        for path in state['staged']:
            print(f"\tstaged:     {path}")

    unstaged = [('modified', path) for path in state['modified']] + [('deleted', path) for path in state['deleted']]
    if unstaged:
        print("\nChanges not staged for commit:")
        print("  (use \"kit add <file>...\" to update what will be committed)")
        for change_type, path in unstaged:
            print(f"\t{change_type}:   {path}")

    if not state['staged'] and not unstaged:
        print("nothing to commit, working tree clean")
