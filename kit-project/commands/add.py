# The command: kit add <path>...
# What it does: Queues files for the next commit by adding their paths to the staging area
# How it does: Each argument is passed to `Repository.add`. A directory is walked recursively and every regular file below it (minus ignored ones) is staged. Only the path is recorded; the content is read again when `kit commit` runs
# What data structure it uses: Set (the staging area) and a Tree Traversal (os.walk when a directory is given)

import sys
from utils.errors import NotARepositoryError
from utils.repository import Repository

def run(args):
    try:
        repo = Repository.discover()
    except NotARepositoryError:
        print("fatal: not a kit repository", file=sys.stderr)
        sys.exit(1)

    failed = False
    for path in args.files:
        try:
            for rel_path in repo.add(path):
                print(f"Added '{rel_path}' to the staging area.")
        except (OSError, ValueError) as e:
            print(f"fatal: {e}", file=sys.stderr)
            failed = True

    if failed:
        sys.exit(1)
