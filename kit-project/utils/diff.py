# What it does: Compares two versions of a file's text and renders the change report shown by `kit diff`
# How it does: The default "paired" mode compares line i of the old text with line i of the new text and reports every mismatch, then reports the tail of the longer side as additions or deletions. The "unified" mode hands both texts to difflib for a longest-common-subsequence diff
# What data structure it uses: List / Array (of file lines walked by index) and a small record type per reported line
import difflib
from dataclasses import dataclass
from typing import Optional

PAIRED = 'paired'
UNIFIED = 'unified'
DIFF_MODES = (PAIRED, UNIFIED)

CHANGED = 'changed'
ADDED = 'added'
DELETED = 'deleted'


@dataclass(frozen=True)
class DiffRecord:
    line: int  # 1-based
    kind: str
    old: Optional[str] = None
    new: Optional[str] = None


def split_lines(text): # Splits on '\n' and '\r\n' only; other separators stay inside the line
    lines = text.split('\n')
    last = lines.pop()
    lines = [line[:-1] if line.endswith('\r') else line for line in lines]
    if last:
        lines.append(last)
    return lines


def paired_diff(old_lines, new_lines): # Line-by-line comparison by position, not a minimal edit script
    records = []
    for i, (old_line, new_line) in enumerate(zip(old_lines, new_lines)):
        if old_line != new_line:
            records.append(DiffRecord(i + 1, CHANGED, old_line, new_line))

    if len(old_lines) < len(new_lines):
        for i in range(len(old_lines), len(new_lines)):
            records.append(DiffRecord(i + 1, ADDED, new=new_lines[i]))
    elif len(old_lines) > len(new_lines):
        for i in range(len(new_lines), len(old_lines)):
            records.append(DiffRecord(i + 1, DELETED, old=old_lines[i]))

    return records


def format_report(records):
    parts = []
    for record in records:
        parts.append(f"Line {record.line}: \n")
        if record.kind in (CHANGED, DELETED):
            parts.append(f"- {record.old}\n")
        if record.kind in (CHANGED, ADDED):
            parts.append(f"+ {record.new}\n")
    return ''.join(parts)


def unified_diff_text(old_text, new_text, from_file, to_file): # Generates a unified diff between two texts
    diff = difflib.unified_diff(
        split_lines(old_text),
        split_lines(new_text),
        fromfile=from_file,
        tofile=to_file,
        lineterm=''
    )
    return ''.join(line + '\n' for line in diff)


def diff_texts(old_text, new_text, mode=PAIRED, path=''):
    if mode == PAIRED:
        return format_report(paired_diff(split_lines(old_text), split_lines(new_text)))
    if mode == UNIFIED:
        return unified_diff_text(old_text, new_text, f"a/{path}", f"b/{path}")
    raise ValueError(f"Unknown diff mode '{mode}' (expected one of: {', '.join(DIFF_MODES)})")


def compare_states(state1, state2): # Compares two {path: hash} dictionaries
    paths1 = set(state1.keys())
    paths2 = set(state2.keys())

    added = sorted(paths2 - paths1)
    deleted = sorted(paths1 - paths2)
    modified = sorted(path for path in paths1 & paths2 if state1[path] != state2[path])

    return {'added': added, 'deleted': deleted, 'modified': modified}
