"""LLM Client Package"""

from git_commit_ai.config import ANTHROPIC_MODEL, VERTEX_MODEL, Config
from git_commit_ai.llm.base import LLMClient, LLMResponse, LLMError
from git_commit_ai.llm.claude import ClaudeClient
from git_commit_ai.llm.vertex import VertexClient

PROVIDERS = {
    ANTHROPIC_MODEL: ClaudeClient,
    VERTEX_MODEL: VertexClient,
}


def get_client(config: Config) -> LLMClient:
    """Build the client for the configured model."""
    client_class = PROVIDERS.get(config.model)
    if client_class is None:
        raise LLMError(f"Unsupported model: {config.model}. Run 'git-commit-ai config'.")
    return client_class.from_config(config)


__all__ = [
    "LLMClient",
    "LLMResponse",
    "LLMError",
    "ClaudeClient",
    "VertexClient",
    "get_client",
    "PROVIDERS",
]
