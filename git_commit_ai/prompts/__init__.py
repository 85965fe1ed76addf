"""Prompt Construction Package"""

from git_commit_ai.prompts.builder import PromptBuilder, PromptConfig, CommitPrompt, SYSTEM_PROMPT

__all__ = [
    "PromptBuilder",
    "PromptConfig",
    "CommitPrompt",
    "SYSTEM_PROMPT",
]
