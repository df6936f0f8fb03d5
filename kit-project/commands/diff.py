# The command: kit diff [--unified] <file>
# What it does: Shows how a file in the working directory differs from the version recorded in the active branch's head commit
# How it does: `Repository.diff` reads the head commit, follows its `tree` field down to the blob recorded for the file's path, and compares the two texts. The default "paired" report compares lines by position; `--unified` (or `diff.mode = unified` in the config) prints a difflib unified diff instead
# What data structure it uses: Hash Table / Dictionary (object store lookups), Merkle Tree (walked one path component at a time), List / Array (of file lines passed to the diffing algorithm)

import sys
from utils.diff import UNIFIED
from utils.errors import KitError, NotARepositoryError
from utils.repository import Repository

def run(args):
    try:
        repo = Repository.discover()
    except NotARepositoryError:
        print("fatal: not a kit repository", file=sys.stderr)
        sys.exit(1)

    mode = UNIFIED if args.unified else None
    try:
        report = repo.diff(args.file, mode=mode)
    except (KitError, OSError, ValueError) as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(1)

    sys.stdout.write(report if report.endswith('\n') or not report else report + '\n')
