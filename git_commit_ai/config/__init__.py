"""Configuration Management Package"""

import json
import os
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Optional

from git_commit_ai.output import print_warning

# Supported backends: direct Anthropic API (api_key) and Vertex AI (project_name)
ANTHROPIC_MODEL = "claude-sonnet-4-20250514"
VERTEX_MODEL = "vertex-claude-sonnet-4-20250514"
SUPPORTED_MODELS = (ANTHROPIC_MODEL, VERTEX_MODEL)

# camelCase keys written by earlier releases of the config file
LEGACY_KEYS = {"apiKey": "api_key", "projectName": "project_name"}

CONFIG_ENV_VAR = "GIT_COMMIT_AI_CONFIG"

SETUP_HINT = "Run 'git-commit-ai config' to set it up."


def redact(secret: str, visible: int = 8) -> str:
    """Show only the first few characters of a secret."""
    return f"{secret[:visible]}..."


@dataclass
class Config:
    """Backend selection and the one credential it needs."""
    model: str = ANTHROPIC_MODEL
    api_key: Optional[str] = None
    project_name: Optional[str] = None

    def to_dict(self) -> dict:
        return {k: v for k, v in asdict(self).items() if v is not None}

    def validate(self) -> list[str]:
        """Validate config values and return list of warnings.

        An unknown model is replaced with the default, and non-string
        credentials are dropped.
        """
        warnings = []
        defaults = Config()

        if self.model not in SUPPORTED_MODELS:
            warnings.append(f"Invalid model '{self.model}', using '{defaults.model}'")
            self.model = defaults.model

        for key in ("api_key", "project_name"):
            value = getattr(self, key)
            if value is not None and not isinstance(value, str):
                warnings.append(f"Invalid {key} (expected a string), ignoring it")
                setattr(self, key, None)

        return warnings

    def missing_credential(self) -> Optional[str]:
        """Describe the credential the selected model still needs, if any."""
        if self.model == ANTHROPIC_MODEL and not self.api_key:
            return "Anthropic API key is not set."
        if self.model == VERTEX_MODEL and not self.project_name:
            return "Google Cloud project name is not set."
        return None

    @classmethod
    def from_dict(cls, data: dict) -> 'Config':
        data = {LEGACY_KEYS.get(k, k): v for k, v in data.items()}
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        config = cls(**filtered)
        for warning in config.validate():
            print_warning(f"Config warning: {warning}")
        return config


class ConfigManager:
    """Loads and saves the user-scoped config file."""

    CONFIG_DIRNAME = ".git-commit-ai"
    CONFIG_FILENAME = "config.json"

    def __init__(self, path: Optional[Path] = None):
        self._path = path
        self._config: Optional[Config] = None

    @property
    def path(self) -> Path:
        if self._path is not None:
            return self._path
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if env_path:
            return Path(env_path).expanduser()
        return Path.home() / self.CONFIG_DIRNAME / self.CONFIG_FILENAME

    def load(self) -> Optional[Config]:
        """Return the saved config, or None when it is missing or unreadable."""
        if self._config is not None:
            return self._config

        path = self.path
        if not path.exists():
            return None

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (ValueError, OSError) as e:
            print_warning(f"Could not load {path}: {e}")
            return None

        if not isinstance(data, dict):
            print_warning(f"Could not load {path}: expected a JSON object")
            return None

        self._config = Config.from_dict(data)
        return self._config

    def save(self, config: Config) -> Path:
        path = self.path
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(config.to_dict(), f, indent=2)
        self._config = config
        return path


_manager = ConfigManager()


def load_config() -> Optional[Config]:
    return _manager.load()


def save_config(config: Config) -> Path:
    return _manager.save(config)


def get_config_path() -> Path:
    return _manager.path


__all__ = [
    "Config",
    "ConfigManager",
    "load_config",
    "save_config",
    "get_config_path",
    "redact",
    "ANTHROPIC_MODEL",
    "VERTEX_MODEL",
    "SUPPORTED_MODELS",
    "SETUP_HINT",
]
