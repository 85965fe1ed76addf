"""Git Operations Package"""

from git_commit_ai.git.repository import GitRepository, GitError, FileChange, StagedStatus

__all__ = [
    "GitRepository",
    "GitError",
    "FileChange",
    "StagedStatus",
]
