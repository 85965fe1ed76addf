"""Claude (Anthropic) LLM Client"""

from git_commit_ai.config import ANTHROPIC_MODEL, Config
from git_commit_ai.llm.base import LLMClient, LLMResponse, LLMError


class ClaudeClient(LLMClient):
    """Claude API client authenticated with an Anthropic API key."""

    DEFAULT_MODEL = ANTHROPIC_MODEL
    MAX_TOKENS = 100
    TEMPERATURE = 0.7

    def __init__(self, api_key: str | None = None, model: str | None = None):
        self.api_key = api_key
        self.model = model or self.DEFAULT_MODEL

        if not self.api_key:
            raise LLMError(
                "No Anthropic API key configured. Run:\n"
                "  git-commit-ai config"
            )

        self._client = self._create_sdk_client()

    @classmethod
    def from_config(cls, config: Config) -> 'ClaudeClient':
        return cls(api_key=config.api_key, model=config.model)

    def _create_sdk_client(self):
        try:
            from anthropic import Anthropic
        except ImportError:
            raise LLMError(
                "Anthropic SDK not installed. Run:\n"
                "  pip install anthropic"
            )
        return Anthropic(api_key=self.api_key)

    @property
    def name(self) -> str:
        return f"Claude ({self.model})"

    def _describe_api_error(self, e) -> str:
        return f"Claude API error: {e.message}"

    def _auth_error_message(self) -> str:
        return "Invalid API key. Run 'git-commit-ai config' to update it."

    def generate(self, system_prompt: str, user_prompt: str) -> LLMResponse:
        from anthropic import APIError, AuthenticationError

        try:
            response = self._client.messages.create(
                model=self.model,
                max_tokens=self.MAX_TOKENS,
                temperature=self.TEMPERATURE,
                system=system_prompt,
                messages=[{"role": "user", "content": user_prompt}]
            )
        except AuthenticationError:
            raise LLMError(self._auth_error_message())
        except APIError as e:
            raise LLMError(self._describe_api_error(e))

        content = ""
        for block in response.content:
            if block.type == "text":
                content = block.text.strip()
                break

        if not content:
            raise LLMError(f"Empty response from {self.name}")

        return LLMResponse(
            content=content,
            model=self.model,
            tokens_used=response.usage.input_tokens + response.usage.output_tokens
        )
