# What it does: Implements the `.kitignore` rules applied whenever a path is staged
# What data structure it uses: Set (to store the ignore patterns for efficient, near O(1) average time complexity lookups)

import os
from fnmatch import fnmatch

from .objects import KIT_DIR


def get_ignored_patterns(repo_root):
    """
    Reads the .kitignore file and returns a set of glob patterns.
    The repository directory itself is always ignored.
    """
    ignore_file = os.path.join(repo_root, '.kitignore')
    patterns = {KIT_DIR, f'{KIT_DIR}/*'}

    if os.path.exists(ignore_file):
        with open(ignore_file, 'r') as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith('#'):
                    patterns.add(line)
    return patterns


def is_ignored(rel_path, ignore_patterns): # Returns True if the '/'-separated path or any of its components matches a pattern
    for pattern in ignore_patterns:
        if fnmatch(rel_path, pattern) or any(fnmatch(part, pattern) for part in rel_path.split('/')):
            return True
    return False
