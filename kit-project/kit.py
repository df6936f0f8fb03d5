import argparse
import logging
from commands import (
    init, add, commit, log, show, status, config,
    branch, checkout, diff
)
# The main entry point for the Kit version control system
def main(argv=None):
    # The main parser
    parser = argparse.ArgumentParser(description="Kit: a minimal version control system.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Print debug messages from the engine.")
    subparsers = parser.add_subparsers(dest="command", help="Available commands", required=True)

    # Command: init
    init_parser = subparsers.add_parser("init", help="Initialize a new, empty repository.")
    init_parser.set_defaults(func=init.run)

    # Command: add
    add_parser = subparsers.add_parser("add", help="Stage files or directories for the next commit.")
    add_parser.add_argument("files", nargs="+", help="Files or directories to add.")
    add_parser.set_defaults(func=add.run)

    # Command: commit
    commit_parser = subparsers.add_parser("commit", help="Record the staged files in the repository.")
    commit_parser.add_argument("-m", "--message", required=True, help="Commit message.")
    commit_parser.set_defaults(func=commit.run)

    # Command: log
    log_parser = subparsers.add_parser("log", help="Show the history of the active branch.")
    log_parser.set_defaults(func=log.run)

    # Command: show
    show_parser = subparsers.add_parser("show", help="Show one commit.")
    show_parser.add_argument("commit_hash", help="The commit hash (may be abbreviated).")
    show_parser.set_defaults(func=show.run)

    # Command: status
    status_parser = subparsers.add_parser("status", help="Show the working tree status.")
    status_parser.set_defaults(func=status.run)

    # Command: config
    config_parser = subparsers.add_parser("config", help="Read or set a configuration value.")
    config_parser.add_argument("key", help="The configuration key (e.g., diff.mode).")
    config_parser.add_argument("value", nargs="?", help="The configuration value. Omit it to print the current value.")
    config_parser.set_defaults(func=config.run)

    # Command: branch
    branch_parser = subparsers.add_parser("branch", help="List or create branches.")
    branch_parser.add_argument("name", nargs="?", help="The name of the branch to create.")
    branch_parser.set_defaults(func=branch.run)

    # Command: checkout
    checkout_parser = subparsers.add_parser("checkout", help="Switch branches.")
    checkout_parser.add_argument("-b", dest="create", action="store_true", help="Create the branch from the current head first.")
    checkout_parser.add_argument("branch_name", help="The name of the branch to switch to.")
    checkout_parser.set_defaults(func=checkout.run)

    # Command: diff
    diff_parser = subparsers.add_parser("diff", help="Show changes between a file and the last commit.")
    diff_parser.add_argument("--unified", action="store_true", help="Print a unified diff instead of the line-by-line report.")
    diff_parser.add_argument("file", help="The file to compare.")
    diff_parser.set_defaults(func=diff.run)
    # Parse the arguments
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    # If a command was specified, run its function
    if hasattr(args, 'func'):
        args.func(args)
    else:
        parser.print_help()

if __name__ == "__main__":
    main()
