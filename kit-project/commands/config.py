# The command: kit config <key> [<value>]
# What it does: A user-facing command to read or set a configuration key (e.g., diff.mode)
# How it does: It acts as a simple dispatcher, passing the key (and value) to the functions in `utils/config.py`, which handle the file I/O and parsing logic
# What data structure it uses: None directly, but it provides the interface to the underlying Map / Dictionary structure managed by `utils/config.py`

import sys
from utils import config as config_utils
from utils.diff import DIFF_MODES
from utils.repository import find_repo_root

def run(args):
    repo_root = find_repo_root()
    if not repo_root:
        print("fatal: not a kit repository", file=sys.stderr)
        sys.exit(1)

    try:
        if args.value is None:
            value = config_utils.get_config_value(repo_root, args.key)
            if value is None:
                sys.exit(1)
            print(value)
            return

        if args.key == 'diff.mode' and args.value not in DIFF_MODES:
            raise ValueError(f"diff.mode must be one of: {', '.join(DIFF_MODES)}")
        config_utils.write_config(repo_root, args.key, args.value)
        print(f"Set {args.key} to '{args.value}'")
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
