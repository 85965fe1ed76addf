"""Fallback Messages - Heuristic commit messages for when the LLM is unavailable.

The verb is picked at random from CHANGE_VERBS, so two runs over the same
changes may differ. Pass a seeded random.Random to pin the choice.
"""

import random
from collections import Counter

from git_commit_ai import FILE_TYPE_LABELS
from git_commit_ai.git import FileChange
from git_commit_ai.summary.classifier import file_stem

CHANGE_VERBS: dict[str, list[str]] = {
    'add': ['Add', 'Create', 'Implement'],
    'update': ['Update', 'Fix', 'Improve', 'Refactor'],
    'remove': ['Remove', 'Delete', 'Clean up'],
}

DEFAULT_FILE_LABEL = 'file'

# Up to this many files are named individually in the message
MAX_NAMED_FILES = 3


def dominant_change_type(changes: list[FileChange]) -> str:
    """'add' or 'remove' when that status strictly dominates, otherwise 'update'."""
    counts = Counter(c.status for c in changes)
    added, modified, deleted = counts['added'], counts['modified'], counts['deleted']

    if added > modified and added > deleted:
        return 'add'
    if deleted > added and deleted > modified:
        return 'remove'
    return 'update'


def dominant_extension(changes: list[FileChange]) -> str:
    """Most frequent non-empty extension; the first one seen wins ties."""
    counts = Counter(c.extension for c in changes if c.extension)
    if not counts:
        return ''
    # most_common keeps insertion order among equal counts
    return counts.most_common(1)[0][0]


def generate_fallback_message(changes: list[FileChange], rng: random.Random | None = None) -> str:
    rng = rng or random.Random()

    verb = rng.choice(CHANGE_VERBS[dominant_change_type(changes)])
    label = FILE_TYPE_LABELS.get(dominant_extension(changes), DEFAULT_FILE_LABEL)
    message = f"{verb}: {label}"

    if len(changes) == 1:
        message += f" {file_stem(changes[0].path)}"
    elif 1 < len(changes) <= MAX_NAMED_FILES:
        names = ", ".join(file_stem(c.path) for c in changes)
        message += f" ({names})"
    elif len(changes) > MAX_NAMED_FILES:
        message += f" ({len(changes)} files)"

    return message
