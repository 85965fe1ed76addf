"""Prompt Builder - Construct LLM prompts for commit message generation."""

from dataclasses import dataclass

SYSTEM_PROMPT = (
    "You are an AI assistant that writes git commit messages. "
    "Write concise, clear commit messages that describe the staged changes."
)


@dataclass
class PromptConfig:
    """Knobs that shape the user prompt."""
    max_length: int = 100


@dataclass
class CommitPrompt:
    """System and user instructions for a single LLM call."""
    system: str
    user: str


class PromptBuilder:
    """Wraps a change summary into system and user instructions."""

    def build(self, summary: str, config: PromptConfig | None = None) -> CommitPrompt:
        config = config or PromptConfig()
        sections = [
            "Write a concise, clear commit message for the changes below.",
            self._build_changes_section(summary),
            self._build_rules_section(config),
            "Commit message:",
        ]
        return CommitPrompt(system=SYSTEM_PROMPT, user="\n\n".join(sections))

    def _build_changes_section(self, summary: str) -> str:
        return f"<changes>\n{summary.rstrip()}\n</changes>"

    def _build_rules_section(self, config: PromptConfig) -> str:
        return f"""The commit message must:
- Be at most {config.max_length} characters
- Make the kind of change clear (add, fix, update, remove, ...)
- Focus on the most important change
- Be a single line with no bullet points or explanation"""
