# The command: kit commit -m "<message>"
# What it does: Creates a permanent, uniquely identified snapshot (a commit object) of the currently staged files
# How it does: `Repository.commit` re-reads every staged file, writes the blobs and the tree of trees, writes a commit object pointing at that tree and at the current head, then moves the active branch to it with a compare-and-swap on the ref file
# What data structure it uses: Merkle Tree (the snapshot), a tree of commits linked by parent hashes, Hash Table / Dictionary (the underlying object store)

import sys
from utils.errors import InvariantViolationError, KitError, NotARepositoryError
from utils.repository import Repository

def run(args):
    try:
        repo = Repository.discover()
    except NotARepositoryError:
        print("fatal: not a kit repository", file=sys.stderr)
        sys.exit(1)

    try:
        commit_hash = repo.commit(args.message)
    except InvariantViolationError as e:
        print(f"error: {e}", file=sys.stderr)
        print(f"hint: commit {e.commit_hash} is stored but no branch points at it", file=sys.stderr)
        sys.exit(1)
    except (KitError, OSError, ValueError) as e:
        print(f"Error during commit: {e}", file=sys.stderr)
        sys.exit(1)

    first_line = args.message.splitlines()[0] if args.message else ''
    print(f"[{repo.current_branch} {commit_hash[:7]}] {first_line}")
