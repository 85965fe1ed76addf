"""CLI Main Entry Point"""

import random
import sys

from git_commit_ai.config import Config, SETUP_HINT, load_config
from git_commit_ai.git import FileChange, GitError, GitRepository
from git_commit_ai.llm import LLMError, get_client
from git_commit_ai.output import (
    Spinner, bold, colorize_status, dim, info, print_error, print_info, print_warning, success,
)
from git_commit_ai.prompts import PromptBuilder
from git_commit_ai.summary import generate_fallback_message, summarize

from git_commit_ai.cli.args import parse_args
from git_commit_ai.cli.commands import display_config, run_setup
from git_commit_ai.cli.utils import clean_commit_message, prompt_input


def check_config(config: Config | None) -> bool:
    """Make sure a backend and its credential are configured."""
    if config is None:
        print_error("No configuration found.")
        print(dim(SETUP_HINT))
        return False

    missing = config.missing_credential()
    if missing:
        print_error(missing)
        print(dim(SETUP_HINT))
        return False

    print_info(f"Using model: {config.model}")
    return True


def _display_staged_files(files: list[FileChange]) -> None:
    noun = "file is" if len(files) == 1 else "files are"
    print(success(f"{len(files)} {noun} staged:"))
    for file in files:
        print(f"  {colorize_status(file.status)} {file.path}")


def _display_summary(summary: str) -> None:
    print(f"\n{bold('Change summary:')}")
    print(dim(summary.rstrip()))


def _display_message(message: str) -> None:
    """Display the proposed commit message between horizontal rules."""
    width = max(len(message), 40)
    print(f"\n{bold('Proposed commit message:')}")
    print(dim('─' * width))
    print(info(message))
    print(dim('─' * width))


def _generate_message(config: Config, files: list[FileChange], summary: str,
                      debug: bool = False, rng: random.Random | None = None) -> str:
    """Ask the configured LLM for a message; fall back to the heuristic on any LLMError."""
    prompt = PromptBuilder().build(summary)

    if debug:
        print(dim("\nSystem prompt:"))
        print(dim(prompt.system))
        print(dim("\nUser prompt:"))
        print(dim(prompt.user))

    try:
        client = get_client(config)
        with Spinner(f"Generating commit message with {client.name}..."):
            response = client.generate(prompt.system, prompt.user)
    except LLMError as e:
        print_warning(f"AI generation failed: {e}")
        print_warning("Using a fallback message instead.")
        return generate_fallback_message(files, rng=rng)

    if debug:
        print(dim("\nRaw response:"))
        print(dim(response.content))
        print(dim(f"({response.tokens_used} tokens)"))

    return clean_commit_message(response.content)


def _confirm(message: str, summary: str, allow_detail: bool = True) -> str | None:
    """Ask the user what to do. Returns the message to commit, or None to cancel."""
    options = "y/n/edit/detail" if allow_detail else "y/n/edit"
    answer = prompt_input(f"\nCommit with this message? ({options}): ")
    if answer is None:
        return None

    answer = answer.strip().lower()
    if answer == 'y':
        return message

    if answer == 'edit':
        edited = (prompt_input("New commit message: ") or "").strip()
        if not edited:
            print_warning("Empty commit message.")
            return None
        return edited

    if answer == 'detail' and allow_detail:
        _display_summary(summary)
        _display_message(message)
        return _confirm(message, summary, allow_detail=False)

    return None


def run_commit_flow(args, config: Config | None, repo: GitRepository | None = None,
                    rng: random.Random | None = None) -> int:
    """Stage, summarize, generate, confirm and commit.

    Returns:
        int: Exit code
    """
    if not check_config(config):
        return 1

    print_info("Analyzing git changes...")
    try:
        repo = repo or GitRepository()
        if args.all:
            repo.stage_all()
        files = repo.get_staged_files()
    except GitError as e:
        print_error(str(e))
        return 1

    if not files:
        print_warning("No staged changes.")
        print(dim("Stage files with 'git add <file>' or pass --all."))
        return 0

    _display_staged_files(files)

    summary = summarize(files)
    message = _generate_message(config, files, summary, debug=args.debug, rng=rng)

    if args.verbose:
        _display_summary(summary)
    _display_message(message)

    final_message = _confirm(message, summary)
    if final_message is None:
        print_warning("Commit cancelled.")
        return 0

    return 0 if repo.commit_changes(final_message, push=args.push) else 1


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)

    if args.command == 'config':
        return run_setup()
    if args.command == 'config:show':
        return display_config()

    return run_commit_flow(args, load_config())


if __name__ == "__main__":
    sys.exit(main())
