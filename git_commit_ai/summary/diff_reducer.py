"""Diff Reducer - Line counts and short excerpts from unified diffs."""

from typing import NamedTuple

DEFAULT_EXCERPT_LINES = 10


class LineCounts(NamedTuple):
    added: int
    deleted: int


def is_changed_line(line: str) -> bool:
    """True for '+'/'-' content lines, False for '+++'/'---' file headers."""
    if line.startswith('+'):
        return not line.startswith('+++')
    if line.startswith('-'):
        return not line.startswith('---')
    return False


def count_changed_lines(diff: str) -> LineCounts:
    added = 0
    deleted = 0
    for line in diff.split('\n'):
        if not is_changed_line(line):
            continue
        if line.startswith('+'):
            added += 1
        else:
            deleted += 1
    return LineCounts(added, deleted)


def extract_excerpt(diff: str, max_lines: int = DEFAULT_EXCERPT_LINES) -> str:
    """First max_lines changed lines, with a notice for the rest."""
    changed = [line for line in diff.split('\n') if is_changed_line(line)]

    if len(changed) > max_lines:
        omitted = len(changed) - max_lines
        return '\n'.join(changed[:max_lines]) + f"\n... ({omitted} more changed lines)"

    return '\n'.join(changed)
