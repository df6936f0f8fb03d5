# The command: kit branch [<branch-name>]
# What it does: Creates a branch at the current head, or if no name is given, lists all existing branches
# How it does: To create a branch, it copies the active branch's head hash into a new file named `<branch-name>` inside `.kit/refs/heads` (an existing branch of that name is overwritten). The copy is a snapshot; later commits on the active branch do not move it
# To list branches, it reads the refs directory and prints the names, marking the active one with an asterisk
# What data structure it uses: Map / Dictionary (the `refs/heads` directory maps branch names to commit hashes), List (sorted branch names for display)

import sys
from utils.errors import KitError, NotARepositoryError
from utils.repository import Repository

def run(args):
#With no arguments, lists all branches.
#With an argument, creates a new branch.

    try:
        repo = Repository.discover()
    except NotARepositoryError:
        print("fatal: not a kit repository", file=sys.stderr)
        sys.exit(1)

    if args.name:
        try:
            branch = repo.branch(args.name)
        except (KitError, OSError, ValueError) as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        if branch.head:
            print(f"Branch '{branch.name}' created at commit {branch.head[:7]}")
        else:
            print(f"Branch '{branch.name}' created (no commits yet)")
    else:
        current_branch = repo.current_branch
        for name, _ in repo.branches():
            if name == current_branch:
                print(f"* {name}")
            else:
                print(f"  {name}")
