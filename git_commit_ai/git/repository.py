"""Git Repository - Query staged changes and commit them through the git CLI."""

import posixpath
import subprocess
from dataclasses import dataclass, field

from git_commit_ai.output import print_error, print_info, print_success, print_warning


@dataclass(frozen=True)
class FileChange:
    """A single staged file. diff is None for deleted files."""
    path: str
    status: str
    diff: str | None = None

    @property
    def name(self) -> str:
        return posixpath.basename(self.path)

    @property
    def directory(self) -> str:
        """Parent directory, empty for files at the repository root."""
        return posixpath.dirname(self.path)

    @property
    def extension(self) -> str:
        """Lowercase extension without the dot, empty when there is none."""
        from git_commit_ai.summary.classifier import file_extension
        return file_extension(self.path)


@dataclass
class StagedStatus:
    """Path sets reported by git for the index."""
    staged: list[str] = field(default_factory=list)
    created: list[str] = field(default_factory=list)
    deleted: list[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return len(self.staged) == 0


class GitError(Exception):
    """Raised when git operations fail."""
    pass


class GitRepository:
    """Thin wrapper around the git commands the commit flow needs."""

    def __init__(self):
        self._verify_git_available()
        self._verify_in_repo()

    def _run_git(self, *args: str) -> str:
        """Run a git command and return stdout."""
        try:
            result = subprocess.run(
                ['git', *args],
                capture_output=True,
                text=True,
                check=True,
                encoding='utf-8',
                errors='replace'
            )
            return result.stdout
        except subprocess.CalledProcessError as e:
            raise GitError(f"Git command failed: git {' '.join(args)}\n{e.stderr}")
        except FileNotFoundError:
            raise GitError("Git is not installed or not in PATH")

    def _verify_git_available(self) -> None:
        """Fail fast if git isn't available."""
        try:
            self._run_git('--version')
        except GitError:
            raise GitError("Git is not installed or not in PATH")

    def _verify_in_repo(self) -> None:
        """Fail fast if we're not in a git repository."""
        try:
            self._run_git('rev-parse', '--git-dir')
        except GitError:
            raise GitError("Not inside a git repository")

    def status(self) -> StagedStatus:
        """Parse 'git diff --staged --name-status' into path sets."""
        output = self._run_git('diff', '--staged', '--name-status', '--no-renames', '-z')
        status = StagedStatus()

        tokens = [t for t in output.split('\0') if t]
        for code, path in zip(tokens[0::2], tokens[1::2]):
            status.staged.append(path)
            if code.startswith('A'):
                status.created.append(path)
            elif code.startswith('D'):
                status.deleted.append(path)

        return status

    def diff(self, *args: str) -> str:
        return self._run_git('diff', *args)

    def add(self, path: str = '.') -> None:
        self._run_git('add', path)

    def commit(self, message: str) -> None:
        self._run_git('commit', '-m', message)

    def push(self) -> None:
        self._run_git('push')

    def get_staged_files(self) -> list[FileChange]:
        """Staged files with their per-file diffs."""
        status = self.status()
        if status.is_empty:
            return []

        files = []
        for path in status.staged:
            if path in status.created:
                change_status = 'added'
            elif path in status.deleted:
                change_status = 'deleted'
            else:
                change_status = 'modified'

            diff = None
            if change_status != 'deleted':
                diff = self._get_file_diff(path)
            files.append(FileChange(path=path, status=change_status, diff=diff))

        return files

    def _get_file_diff(self, path: str) -> str:
        """Staged diff for one file; failures degrade to an empty diff."""
        try:
            return self.diff('--staged', '--', path)
        except GitError:
            print_warning(f"Could not read the diff for {path}")
            return ""

    def stage_all(self) -> bool:
        try:
            self.add('.')
        except GitError as e:
            print_error(f"Failed to stage changes: {e}")
            return False
        print_success("Staged all changes")
        return True

    def commit_changes(self, message: str, push: bool = False) -> bool:
        """Commit (and optionally push). Returns True when every step succeeded."""
        try:
            self.commit(message)
        except GitError as e:
            print_error(f"Commit failed: {e}")
            return False
        print_success(f'Committed: "{message}"')

        if push:
            print_info("Pushing changes...")
            try:
                self.push()
            except GitError as e:
                print_error(f"Push failed: {e}")
                return False
            print_success("Push complete")

        return True
