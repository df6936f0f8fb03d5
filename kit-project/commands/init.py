# The command: kit init
# What it does: Initializes a new, empty repository (or reopens an existing one) in the current directory
# How it does: It hands the current directory to `Repository.init`, which creates the `objects` and `refs/heads` subdirectories, the `HEAD` file pointing at the default branch and an empty ref for that branch
# What data structure it uses: Tree (the file system directory structure is a tree). It also lays the foundation for a Hash Table (the object database) and the commit history

import os
import sys
from utils.errors import KitError
from utils.objects import KIT_DIR
from utils.repository import Repository

def run(args):

    try:
        repo_path = os.path.join(os.getcwd(), KIT_DIR)
        existed = os.path.isdir(repo_path)

        repo = Repository.init(os.getcwd())

        if existed:
            print(f"Reinitialized existing Kit repository in {repo_path}/")
        else:
            print(f"Initialized empty Kit repository in {repo_path}/ (branch '{repo.current_branch}')")

    except (KitError, OSError, ValueError) as e:
        print(f"Error initializing repository: {e}", file=sys.stderr)
        sys.exit(1)
