# What it does: Manages the low-level object database and the tree manifests built on top of it
# How it does: Objects are stored uncompressed and untagged under `.kit/objects/<first two hex chars>/<rest>`, keyed by the SHA-256 of their bytes. Trees are text manifests whose entries are tagged `blob` or `tree`, so a directory structure is stored as a tree of trees
# What data structure it uses: Hash Table (the object store is a content-addressed dictionary) and a Merkle Tree (nested tree objects), built and read recursively

import hashlib
import logging
import os
import tempfile

from .errors import AmbiguousObjectError, ObjectNotFoundError

logger = logging.getLogger(__name__)

KIT_DIR = '.kit'
MIN_PREFIX_LENGTH = 4


def objects_dir(repo_root):
    return os.path.join(repo_root, KIT_DIR, 'objects')


def object_path(repo_root, sha):
    return os.path.join(objects_dir(repo_root), sha[:2], sha[2:])


def hash_content(content): # Pure function of the bytes, no header is mixed in
    return hashlib.sha256(content).hexdigest()


def hash_object(repo_root, content, write=True): # Hashes content and optionally stores it, returning the hash
    sha = hash_content(content)

    if write:
        path = object_path(repo_root, sha)
        shard = os.path.dirname(path)
        os.makedirs(shard, exist_ok=True)

        # Always rewritten through a temp file; an existing copy may be a torn write
        fd, tmp_path = tempfile.mkstemp(dir=shard, prefix='.tmp-')
        try:
            with os.fdopen(fd, 'wb') as f:
                f.write(content)
            os.replace(tmp_path, path)
        except Exception:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise
        logger.debug("Wrote object %s (%d bytes)", sha, len(content))

    return sha


def object_exists(repo_root, sha):
    return bool(sha) and len(sha) > 2 and os.path.isfile(object_path(repo_root, sha))


def read_object(repo_root, sha): # Reads an object by its hash and returns its raw bytes
    if not sha or len(sha) <= 2:
        raise ObjectNotFoundError(sha)

    path = object_path(repo_root, sha)
    if not os.path.isfile(path):
        raise ObjectNotFoundError(sha)

    with open(path, 'rb') as f:
        return f.read()


def resolve_prefix(repo_root, prefix): # Expands an abbreviated hash to the one full hash it names
    prefix = prefix.strip().lower()
    if len(prefix) < MIN_PREFIX_LENGTH or any(c not in '0123456789abcdef' for c in prefix):
        raise ObjectNotFoundError(prefix)

    shard = os.path.join(objects_dir(repo_root), prefix[:2])
    if not os.path.isdir(shard):
        raise ObjectNotFoundError(prefix)

    rest = prefix[2:]
    candidates = [prefix[:2] + name for name in os.listdir(shard) if name.startswith(rest)]
    if not candidates:
        raise ObjectNotFoundError(prefix)
    if len(candidates) > 1:
        raise AmbiguousObjectError(prefix, sorted(candidates))
    return candidates[0]


def build_tree_from_paths(repo_root, paths):
    """
    Reads every staged path from disk *now*, stores it as a blob and nests the
    resulting hashes into a dictionary {name: hash | {name: ...}}.
    Paths are relative to the repository root and use '/' separators.
    """
    tree = {}
    for rel_path in sorted(paths):
        full_path = os.path.join(repo_root, *rel_path.split('/'))
        if not os.path.isfile(full_path):
            logger.warning("Staged file '%s' no longer exists, leaving it out of the snapshot", rel_path)
            continue

        with open(full_path, 'rb') as f:
            blob_hash = hash_object(repo_root, f.read())

        parts = rel_path.split('/')
        current_level = tree
        for part in parts[:-1]:
            current_level = current_level.setdefault(part, {})
        current_level[parts[-1]] = blob_hash
    return tree


def write_tree(repo_root, tree_dict): # Recursively writes a tree object from a nested dictionary and returns its hash
    entries = []
    for name, value in sorted(tree_dict.items()):
        if isinstance(value, dict):
            entries.append(f"tree {write_tree(repo_root, value)} {name}\n")
        else:
            entries.append(f"blob {value} {name}\n")

    return hash_object(repo_root, ''.join(entries).encode())


def read_tree(repo_root, tree_hash): # Returns the entries of one tree object as (kind, hash, name) tuples
    content = read_object(repo_root, tree_hash).decode()
    entries = []
    for line in content.splitlines():
        if not line:
            continue
        kind, sha, name = line.split(' ', 2)
        if kind not in ('blob', 'tree'):
            raise ValueError(f"Object {tree_hash} is not a tree (bad entry kind '{kind}')")
        entries.append((kind, sha, name))
    return entries


def get_tree_files(repo_root, tree_hash): # Flattens a tree of trees into {relative path: blob hash}
    files = {}

    def read_tree_recursive(sha, path_prefix=''):
        for kind, entry_hash, name in read_tree(repo_root, sha):
            current_path = f"{path_prefix}{name}"
            if kind == 'blob':
                files[current_path] = entry_hash
            else:
                read_tree_recursive(entry_hash, current_path + '/')

    if tree_hash:
        read_tree_recursive(tree_hash)
    return files


def find_blob(repo_root, tree_hash, rel_path): # Walks the tree one path component at a time, None if the path is not recorded
    parts = rel_path.split('/')
    current = tree_hash
    for depth, part in enumerate(parts):
        last = depth == len(parts) - 1
        match = None
        for kind, sha, name in read_tree(repo_root, current):
            if name == part and (kind == 'blob') == last:
                match = sha
                break
        if match is None:
            return None
        current = match
    return current
