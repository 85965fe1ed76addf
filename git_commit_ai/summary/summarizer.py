"""Change Summarizer - Turn staged file changes into an LLM-readable report."""

from git_commit_ai import CHANGE_STATUSES
from git_commit_ai.git import FileChange
from git_commit_ai.summary.classifier import describe_type, is_excluded
from git_commit_ai.summary.diff_reducer import count_changed_lines, extract_excerpt

STATUS_LABELS = {
    'added': 'Added',
    'modified': 'Modified',
    'deleted': 'Deleted',
}


def _count_files(n: int) -> str:
    return f"{n} file" if n == 1 else f"{n} files"


def partition_changes(changes: list[FileChange]) -> tuple[list[FileChange], list[FileChange]]:
    """Split changes into (kept, excluded), preserving order."""
    kept, excluded = [], []
    for change in changes:
        (excluded if is_excluded(change.path) else kept).append(change)
    return kept, excluded


def describe_file(change: FileChange) -> str:
    lines = [f"[{change.status}] {change.name} ({describe_type(change.path)})"]

    if change.directory:
        lines.append(f"  Location: {change.directory}")

    if change.diff and change.status != 'deleted':
        counts = count_changed_lines(change.diff)
        lines.append(f"  Changes: +{counts.added} lines, -{counts.deleted} lines")

        if counts.added or counts.deleted:
            excerpt = extract_excerpt(change.diff)
            if excerpt:
                lines.append("  Key changes:")
                lines.append(excerpt)

    return "\n".join(lines)


def summarize(changes: list[FileChange]) -> str:
    """Build the full change report: totals, per-type and per-status counts, file details."""
    kept, excluded = partition_changes(changes)

    by_extension: dict[str, list[FileChange]] = {}
    for change in kept:
        by_extension.setdefault(change.extension, []).append(change)

    total_line = f"{_count_files(len(kept))} changed in total."
    if excluded:
        total_line += f" ({len(excluded)} excluded)"

    lines = ["# Change Summary", total_line, "", "## Changes by File Type"]
    for ext, group in by_extension.items():
        label = describe_type(group[0].path) if ext else "Other"
        lines.append(f"- {label}: {_count_files(len(group))}")

    lines.extend(["", "## Changes by Status"])
    for status in CHANGE_STATUSES:
        count = sum(1 for c in kept if c.status == status)
        if count:
            lines.append(f"- {STATUS_LABELS[status]}: {_count_files(count)}")

    lines.extend(["", "# Detailed Changes"])
    for change in kept:
        lines.extend(["", describe_file(change)])

    return "\n".join(lines) + "\n"
