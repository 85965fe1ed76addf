"""CLI Utility Functions"""

import re

PREAMBLE_PATTERN = re.compile(r"^(sure|okay|here'?s|here is|commit message)\b.*:$", re.IGNORECASE)
LABEL_PATTERN = re.compile(r'^(commit message|message)\s*:\s*', re.IGNORECASE)
QUOTE_PAIRS = [('"', '"'), ("'", "'"), ('`', '`'), ('“', '”'), ('「', '」')]


def _unquote(text: str) -> str:
    for left, right in QUOTE_PAIRS:
        if len(text) >= 2 and text.startswith(left) and text.endswith(right):
            return text[len(left):-len(right)].strip()
    return text


def clean_commit_message(text: str) -> str:
    """Reduce an LLM response to the single commit message line it contains."""
    for line in text.strip().split('\n'):
        line = line.strip()
        if not line or line.startswith('```') or PREAMBLE_PATTERN.match(line):
            continue
        line = LABEL_PATTERN.sub('', line)
        line = _unquote(line)
        if line:
            return line

    return text.strip()


def prompt_input(question: str) -> str | None:
    """Read one line from the terminal. None on Ctrl-C or end of input."""
    try:
        return input(question)
    except (KeyboardInterrupt, EOFError):
        print()
        return None
