"""Change Summary Package"""

from git_commit_ai.summary.classifier import (
    EXCLUDE_DIRECTORIES,
    EXCLUDE_FILE_PATTERNS,
    describe_type,
    exclusion_reason,
    file_extension,
    file_stem,
    is_excluded,
)
from git_commit_ai.summary.diff_reducer import LineCounts, count_changed_lines, extract_excerpt
from git_commit_ai.summary.fallback import CHANGE_VERBS, generate_fallback_message
from git_commit_ai.summary.summarizer import describe_file, partition_changes, summarize

__all__ = [
    "EXCLUDE_DIRECTORIES",
    "EXCLUDE_FILE_PATTERNS",
    "describe_type",
    "exclusion_reason",
    "file_extension",
    "file_stem",
    "is_excluded",
    "LineCounts",
    "count_changed_lines",
    "extract_excerpt",
    "CHANGE_VERBS",
    "generate_fallback_message",
    "describe_file",
    "partition_changes",
    "summarize",
]
