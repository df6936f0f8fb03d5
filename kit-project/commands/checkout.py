# The command: kit checkout [-b] <branch-name>
# What it does: Switches the active branch, optionally creating it first from the current head
# How it does: Validates that the branch exists, then overwrites `.kit/HEAD` with a symbolic ref to it. Files in the working directory are not touched: they stay exactly as they were, whichever branch is active
# What data structure it uses: Map / Dictionary (branch lookup in the refs directory)

import sys
from utils.errors import BranchNotFoundError, KitError, NotARepositoryError
from utils.repository import Repository

def run(args):
    try:
        repo = Repository.discover()
    except NotARepositoryError:
        print("fatal: not a kit repository", file=sys.stderr)
        sys.exit(1)

    target_name = args.branch_name
    try:
        if args.create:
            repo.branch(target_name)
        elif repo.current_branch == target_name:
            print(f"Already on '{target_name}'")
            return
        repo.checkout(target_name)
    except BranchNotFoundError:
        print(f"error: Branch not found: {target_name}", file=sys.stderr)
        sys.exit(1)
    except (KitError, OSError, ValueError) as e:
        print(f"Error switching branch: {e}", file=sys.stderr)
        sys.exit(1)

    if args.create:
        print(f"Switched to a new branch '{target_name}'")
    else:
        print(f"Switched to branch '{target_name}'")
