# What it does: Defines the exceptions raised by the Kit engine
# How it does: Every engine failure that is not a plain I/O error derives from `KitError`, so the command layer can catch one base class and report it
# What data structure it uses: Class hierarchy (a small tree of exception types)


class KitError(Exception):
    pass


class NotARepositoryError(KitError):
    def __init__(self, path):
        super().__init__(f"not a kit repository (or any of the parent directories): {path}")
        self.path = path


class NotFoundError(KitError):
    pass


class ObjectNotFoundError(NotFoundError):
    def __init__(self, sha):
        super().__init__(f"Object not found: {sha}")
        self.sha = sha


class CommitNotFoundError(NotFoundError):
    def __init__(self, sha):
        super().__init__(f"Commit not found: {sha}")
        self.sha = sha


class BranchNotFoundError(NotFoundError):
    def __init__(self, name):
        super().__init__(f"Branch not found: {name}")
        self.name = name


class AmbiguousObjectError(KitError):
    def __init__(self, prefix, candidates):
        super().__init__(f"short object ID {prefix} is ambiguous ({len(candidates)} candidates)")
        self.prefix = prefix
        self.candidates = candidates


class RefConflictError(KitError):
    # Raised when a branch head moved (or is locked) between reading and updating it
    pass


class InvariantViolationError(KitError):
    """
    The commit object was written but no branch could be advanced to it.
    `commit_hash` names the orphaned commit so the caller can recover it.
    """

    def __init__(self, message, commit_hash):
        super().__init__(message)
        self.commit_hash = commit_hash
