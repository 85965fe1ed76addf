"""CLI Commands"""

from git_commit_ai.config import (
    ANTHROPIC_MODEL,
    SETUP_HINT,
    VERTEX_MODEL,
    Config,
    ConfigManager,
    redact,
)
from git_commit_ai.output import bold, dim, info, print_error, print_success, print_warning
from git_commit_ai.cli.utils import prompt_input

MODEL_CHOICES = {
    '1': (ANTHROPIC_MODEL, "Anthropic API"),
    '2': (VERTEX_MODEL, "Google Cloud Vertex AI"),
}


def _print_settings(config: Config) -> None:
    print(f"    model:          {info(config.model)}")
    if config.api_key:
        print(f"    api_key:        {info(redact(config.api_key))}")
    if config.project_name:
        print(f"    project_name:   {info(config.project_name)}")


def display_config(manager: ConfigManager | None = None) -> int:
    """Display current configuration with secrets redacted."""
    manager = manager or ConfigManager()
    config = manager.load()

    if config is None:
        print_warning(f"No configuration found at {manager.path}")
        print(dim(SETUP_HINT))
        return 0

    print(f"\n{bold('Current Configuration')}\n")
    print(f"  {dim('Loaded from:')} {manager.path}\n")
    _print_settings(config)
    print()
    return 0


def run_setup(manager: ConfigManager | None = None) -> int:
    """Interactive setup: pick a backend, then enter its credential."""
    manager = manager or ConfigManager()

    print(f"\n{bold('Git Commit AI Setup')}\n")
    print("Choose the model backend:\n")
    for key, (model, backend) in MODEL_CHOICES.items():
        print(f"  {key}. {model} ({backend})")
    print()

    choice = prompt_input("Select [1/2]: ")
    if choice is None or choice.strip() not in MODEL_CHOICES:
        print_error("Invalid choice. Setup aborted.")
        return 1

    model, _ = MODEL_CHOICES[choice.strip()]
    config = Config(model=model)

    if model == ANTHROPIC_MODEL:
        print(dim("\nGet an API key at https://console.anthropic.com/"))
        api_key = (prompt_input("Anthropic API key: ") or "").strip()
        if not api_key:
            print_error("No API key entered. Setup aborted.")
            return 1
        config.api_key = api_key
    else:
        print(dim("\nEnter the id of a Google Cloud project with Vertex AI enabled."))
        project_name = (prompt_input("Project name: ") or "").strip()
        if not project_name:
            print_error("No project name entered. Setup aborted.")
            return 1
        config.project_name = project_name

    try:
        path = manager.save(config)
    except OSError as e:
        print_error(f"Failed to save configuration: {e}")
        return 1

    print_success(f"Saved to {path}")
    _print_settings(config)
    return 0
