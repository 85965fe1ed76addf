"""Claude on Google Cloud Vertex AI"""

import os

from git_commit_ai.config import Config
from git_commit_ai.llm.base import LLMError, LLMResponse
from git_commit_ai.llm.claude import ClaudeClient

ADC_HINT = "Run: gcloud auth application-default login"
REGION_ENV_VAR = "CLOUD_ML_REGION"


class VertexClient(ClaudeClient):
    """Claude through Vertex AI. Uses Application Default Credentials."""

    DEFAULT_MODEL = "claude-sonnet-4@20250514"
    DEFAULT_REGION = "us-east5"

    def __init__(self, project_name: str | None = None, region: str | None = None, model: str | None = None):
        self.project_name = project_name
        self.region = region or self.DEFAULT_REGION
        self.model = model or self.DEFAULT_MODEL

        if not self.project_name:
            raise LLMError(
                "No Google Cloud project configured. Run:\n"
                "  git-commit-ai config"
            )

        self._client = self._create_sdk_client()

    @classmethod
    def from_config(cls, config: Config) -> 'VertexClient':
        return cls(
            project_name=config.project_name,
            region=os.environ.get(REGION_ENV_VAR),
        )

    def _create_sdk_client(self):
        try:
            from anthropic import AnthropicVertex
            import google.auth  # noqa: F401
        except ImportError:
            raise LLMError(
                "Anthropic SDK not installed. Run:\n"
                "  pip install 'anthropic[vertex]'"
            )
        return AnthropicVertex(project_id=self.project_name, region=self.region)

    @property
    def name(self) -> str:
        return f"Vertex AI ({self.model}, {self.project_name})"

    def _auth_error_message(self) -> str:
        return f"Vertex AI authentication failed. {ADC_HINT}"

    def _describe_api_error(self, e) -> str:
        from anthropic import PermissionDeniedError, RateLimitError

        message = f"Vertex AI error: {e.message}"
        if isinstance(e, PermissionDeniedError):
            message += f"\n  Check that Vertex AI and Claude are enabled for project '{self.project_name}'."
        elif isinstance(e, RateLimitError):
            message += "\n  Quota exceeded. Check your Vertex AI usage limits."
        return message

    def generate(self, system_prompt: str, user_prompt: str) -> LLMResponse:
        from google.auth.exceptions import GoogleAuthError

        try:
            return super().generate(system_prompt, user_prompt)
        except GoogleAuthError as e:
            raise LLMError(f"Google Cloud credentials unavailable: {e}\n  {ADC_HINT}")
