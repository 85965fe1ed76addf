"""
Tests for the commit flow, LLM clients and config commands.

Git and the Anthropic SDK are replaced with small fakes; nothing here touches
the network or a real repository.

Run with:
    pytest tests/test_flow.py -v
"""

import json
from types import SimpleNamespace

import anthropic
import httpx
import pytest
from google.auth.exceptions import DefaultCredentialsError

import git_commit_ai.cli.main as cli_main
from git_commit_ai.cli.args import parse_args
from git_commit_ai.cli.commands import display_config, run_setup
from git_commit_ai.config import ANTHROPIC_MODEL, VERTEX_MODEL, Config, ConfigManager
from git_commit_ai.git import FileChange, GitError
from git_commit_ai.llm import ClaudeClient, LLMClient, LLMError, LLMResponse, VertexClient, get_client


# ---------------------------------------------------------------------------
# Fakes and fixtures
# ---------------------------------------------------------------------------

class FirstChoice:
    def choice(self, seq):
        return seq[0]


class FakeRepo:
    """Records every call the flow makes."""

    def __init__(self, files=None, stage_ok=True, commit_ok=True, error=None):
        self.files = files or []
        self.stage_ok = stage_ok
        self.commit_ok = commit_ok
        self.error = error
        self.calls = []
        self.commits = []

    def stage_all(self):
        self.calls.append("stage_all")
        return self.stage_ok

    def get_staged_files(self):
        self.calls.append("get_staged_files")
        if self.error:
            raise self.error
        return list(self.files)

    def commit_changes(self, message, push=False):
        self.calls.append("commit_changes")
        self.commits.append((message, push))
        return self.commit_ok


class FakeClient(LLMClient):

    def __init__(self, content="Add login form", error=None):
        self.content = content
        self.error = error
        self.prompts = []

    @property
    def name(self):
        return "Fake"

    def generate(self, system_prompt, user_prompt):
        self.prompts.append((system_prompt, user_prompt))
        if self.error:
            raise self.error
        return LLMResponse(content=self.content, model="fake", tokens_used=12)


STAGED = [
    FileChange(path="src/login.ts", status="added", diff="+++ b/src/login.ts\n+export const x = 1"),
]


@pytest.fixture
def config():
    return Config(model=ANTHROPIC_MODEL, api_key="sk-ant-test-key")


@pytest.fixture
def answers(monkeypatch):
    """Feed scripted answers to input()."""
    def _set(*values):
        queue = list(values)

        def fake_input(prompt=""):
            if not queue:
                raise EOFError
            return queue.pop(0)
        monkeypatch.setattr("builtins.input", fake_input)
    return _set


@pytest.fixture
def client(monkeypatch):
    fake = FakeClient()
    monkeypatch.setattr(cli_main, "get_client", lambda config: fake)
    return fake


def run(args, config, repo):
    return cli_main.run_commit_flow(parse_args(args), config, repo=repo, rng=FirstChoice())


# ---------------------------------------------------------------------------
# Commit flow — config and staging
# ---------------------------------------------------------------------------

class TestFlowPreconditions:

    def test_missing_config_aborts_before_git(self, capsys):
        repo = FakeRepo(files=STAGED)
        assert run([], None, repo) == 1
        assert repo.calls == []
        assert "No configuration found" in capsys.readouterr().err

    def test_missing_credential_aborts_before_git(self, capsys):
        repo = FakeRepo(files=STAGED)
        assert run([], Config(model=VERTEX_MODEL), repo) == 1
        assert repo.calls == []
        assert "project name" in capsys.readouterr().err

    def test_empty_staged_list_halts(self, config, monkeypatch, capsys):
        def fail(*args, **kwargs):
            raise AssertionError("should not be called")
        monkeypatch.setattr(cli_main, "summarize", fail)
        monkeypatch.setattr(cli_main, "get_client", fail)
        monkeypatch.setattr(cli_main, "generate_fallback_message", fail)

        repo = FakeRepo(files=[])
        assert run([], config, repo) == 0
        assert repo.calls == ["get_staged_files"]
        assert "No staged changes" in capsys.readouterr().out

    def test_all_stages_first(self, config, client, answers):
        answers("y")
        repo = FakeRepo(files=STAGED)
        assert run(["--all"], config, repo) == 0
        assert repo.calls[:2] == ["stage_all", "get_staged_files"]

    def test_stage_failure_continues_with_index(self, config, client, answers):
        answers("y")
        repo = FakeRepo(files=STAGED, stage_ok=False)
        assert run(["--all"], config, repo) == 0
        assert repo.calls[:2] == ["stage_all", "get_staged_files"]
        assert len(repo.commits) == 1

    def test_git_error_reported(self, config, client, capsys):
        repo = FakeRepo(error=GitError("Not inside a git repository"))
        assert run([], config, repo) == 1
        assert "Not inside a git repository" in capsys.readouterr().err


# ---------------------------------------------------------------------------
# Commit flow — generation
# ---------------------------------------------------------------------------

class TestFlowGeneration:

    def test_commits_generated_message(self, config, client, answers, capsys):
        answers("y")
        repo = FakeRepo(files=STAGED)
        assert run([], config, repo) == 0
        assert repo.commits == [("Add login form", False)]
        assert "Add login form" in capsys.readouterr().out

    def test_prompt_carries_summary(self, config, client, answers):
        answers("n")
        run([], config, FakeRepo(files=STAGED))
        system, user = client.prompts[0]
        assert "commit messages" in system
        assert "[added] login.ts (TypeScript)" in user

    def test_push_flag_forwarded(self, config, client, answers):
        answers("y")
        repo = FakeRepo(files=STAGED)
        run(["--push"], config, repo)
        assert repo.commits == [("Add login form", True)]

    def test_response_is_cleaned(self, config, client, answers):
        client.content = "```\nAdd login form\n```"
        answers("y")
        repo = FakeRepo(files=STAGED)
        run([], config, repo)
        assert repo.commits[0][0] == "Add login form"

    def test_llm_failure_uses_fallback(self, config, client, answers, capsys):
        client.error = LLMError("Claude API error: overloaded")
        answers("y")
        repo = FakeRepo(files=STAGED)
        assert run([], config, repo) == 0
        assert repo.commits == [("Add: TypeScript login", False)]
        out = capsys.readouterr().out
        assert "overloaded" in out
        assert "fallback" in out

    def test_client_construction_failure_uses_fallback(self, config, answers, monkeypatch):
        def broken(config):
            raise LLMError("Anthropic SDK not installed")
        monkeypatch.setattr(cli_main, "get_client", broken)
        answers("y")
        repo = FakeRepo(files=STAGED)
        run([], config, repo)
        assert repo.commits[0][0] == "Add: TypeScript login"

    def test_debug_prints_prompts_and_raw_output(self, config, client, answers, capsys):
        answers("n")
        run(["--debug"], config, FakeRepo(files=STAGED))
        out = capsys.readouterr().out
        assert "System prompt:" in out
        assert "User prompt:" in out
        assert "Raw response:" in out

    def test_verbose_prints_summary(self, config, client, answers, capsys):
        answers("n")
        run(["--verbose"], config, FakeRepo(files=STAGED))
        assert "# Change Summary" in capsys.readouterr().out

    def test_summary_hidden_by_default(self, config, client, answers, capsys):
        answers("n")
        run([], config, FakeRepo(files=STAGED))
        assert "# Change Summary" not in capsys.readouterr().out

    def test_commit_failure_returns_error(self, config, client, answers):
        answers("y")
        assert run([], config, FakeRepo(files=STAGED, commit_ok=False)) == 1


# ---------------------------------------------------------------------------
# Commit flow — confirmation
# ---------------------------------------------------------------------------

class TestFlowConfirmation:

    def test_edit_commits_replacement(self, config, client, answers):
        answers("edit", "Wire up login form")
        repo = FakeRepo(files=STAGED)
        run([], config, repo)
        assert repo.commits == [("Wire up login form", False)]

    def test_edit_with_empty_message_cancels(self, config, client, answers):
        answers("edit", "   ")
        repo = FakeRepo(files=STAGED)
        assert run([], config, repo) == 0
        assert repo.commits == []

    def test_detail_shows_summary_then_commits(self, config, client, answers, capsys):
        answers("detail", "y")
        repo = FakeRepo(files=STAGED)
        run([], config, repo)
        assert "# Change Summary" in capsys.readouterr().out
        assert repo.commits == [("Add login form", False)]

    def test_detail_then_edit(self, config, client, answers):
        answers("DETAIL", "edit", "Custom")
        repo = FakeRepo(files=STAGED)
        run([], config, repo)
        assert repo.commits == [("Custom", False)]

    def test_second_detail_cancels(self, config, client, answers):
        answers("detail", "detail")
        repo = FakeRepo(files=STAGED)
        assert run([], config, repo) == 0
        assert repo.commits == []

    @pytest.mark.parametrize("answer", ["n", "no", "", "yes please"])
    def test_other_answers_cancel(self, config, client, answers, capsys, answer):
        answers(answer)
        repo = FakeRepo(files=STAGED)
        assert run([], config, repo) == 0
        assert repo.commits == []
        assert "cancelled" in capsys.readouterr().out

    def test_uppercase_y_commits(self, config, client, answers):
        answers("Y")
        repo = FakeRepo(files=STAGED)
        run([], config, repo)
        assert len(repo.commits) == 1

    def test_end_of_input_cancels(self, config, client, answers):
        answers()
        repo = FakeRepo(files=STAGED)
        assert run([], config, repo) == 0
        assert repo.commits == []


# ---------------------------------------------------------------------------
# main() dispatch
# ---------------------------------------------------------------------------

class TestMain:

    def test_config_command(self, monkeypatch):
        monkeypatch.setattr(cli_main, "run_setup", lambda: 7)
        assert cli_main.main(["config"]) == 7

    def test_config_show_command(self, monkeypatch):
        monkeypatch.setattr(cli_main, "display_config", lambda: 8)
        assert cli_main.main(["config:show"]) == 8

    def test_default_runs_flow(self, monkeypatch):
        seen = {}

        def fake_flow(args, config):
            seen["args"] = args
            seen["config"] = config
            return 0
        monkeypatch.setattr(cli_main, "run_commit_flow", fake_flow)
        monkeypatch.setattr(cli_main, "load_config", lambda: "cfg")
        assert cli_main.main(["-a", "-p"]) == 0
        assert seen["args"].all and seen["args"].push
        assert seen["config"] == "cfg"

    def test_unknown_command_rejected(self):
        with pytest.raises(SystemExit):
            parse_args(["deploy"])


# ---------------------------------------------------------------------------
# LLM clients
# ---------------------------------------------------------------------------

def _request():
    return httpx.Request("POST", "https://api.anthropic.com/v1/messages")


def _sdk_response(text):
    return SimpleNamespace(
        content=[SimpleNamespace(type="text", text=text)],
        usage=SimpleNamespace(input_tokens=40, output_tokens=8),
    )


class FakeMessages:

    def __init__(self, result):
        self.result = result
        self.kwargs = None

    def create(self, **kwargs):
        self.kwargs = kwargs
        if isinstance(self.result, Exception):
            raise self.result
        return self.result


def _fake_sdk(monkeypatch, client_class, result):
    messages = FakeMessages(result)
    monkeypatch.setattr(client_class, "_create_sdk_client", lambda self: SimpleNamespace(messages=messages))
    return messages


class TestClaudeClient:

    def test_requires_api_key(self):
        with pytest.raises(LLMError, match="API key"):
            ClaudeClient(api_key=None)

    def test_generate(self, monkeypatch):
        messages = _fake_sdk(monkeypatch, ClaudeClient, _sdk_response("  Add login form \n"))
        client = ClaudeClient(api_key="sk-test")
        response = client.generate("system text", "user text")

        assert response.content == "Add login form"
        assert response.tokens_used == 48
        assert messages.kwargs["model"] == ANTHROPIC_MODEL
        assert messages.kwargs["system"] == "system text"
        assert messages.kwargs["messages"] == [{"role": "user", "content": "user text"}]
        assert messages.kwargs["max_tokens"] == ClaudeClient.MAX_TOKENS

    def test_empty_response(self, monkeypatch):
        _fake_sdk(monkeypatch, ClaudeClient, _sdk_response("   "))
        with pytest.raises(LLMError, match="Empty response"):
            ClaudeClient(api_key="sk-test").generate("s", "u")

    def test_connection_error(self, monkeypatch):
        _fake_sdk(monkeypatch, ClaudeClient, anthropic.APIConnectionError(request=_request()))
        with pytest.raises(LLMError, match="Claude API error"):
            ClaudeClient(api_key="sk-test").generate("s", "u")

    def test_authentication_error(self, monkeypatch):
        error = anthropic.AuthenticationError(
            "bad key", response=httpx.Response(401, request=_request()), body=None
        )
        _fake_sdk(monkeypatch, ClaudeClient, error)
        with pytest.raises(LLMError, match="Invalid API key"):
            ClaudeClient(api_key="sk-test").generate("s", "u")


class TestVertexClient:

    def test_requires_project(self):
        with pytest.raises(LLMError, match="project"):
            VertexClient(project_name=None)

    def test_from_config_reads_region_from_environment(self, monkeypatch):
        _fake_sdk(monkeypatch, VertexClient, _sdk_response("x"))
        monkeypatch.setenv("CLOUD_ML_REGION", "europe-west1")
        client = VertexClient.from_config(Config(model=VERTEX_MODEL, project_name="proj"))
        assert client.region == "europe-west1"

    def test_explicit_region_ignores_environment(self, monkeypatch):
        _fake_sdk(monkeypatch, VertexClient, _sdk_response("x"))
        monkeypatch.setenv("CLOUD_ML_REGION", "europe-west1")
        assert VertexClient(project_name="proj", region="asia-east1").region == "asia-east1"

    def test_default_region(self, monkeypatch):
        _fake_sdk(monkeypatch, VertexClient, _sdk_response("x"))
        monkeypatch.delenv("CLOUD_ML_REGION", raising=False)
        client = VertexClient.from_config(Config(model=VERTEX_MODEL, project_name="proj"))
        assert client.region == VertexClient.DEFAULT_REGION

    def test_generate_uses_vertex_model(self, monkeypatch):
        messages = _fake_sdk(monkeypatch, VertexClient, _sdk_response("Fix parser"))
        response = VertexClient(project_name="proj").generate("s", "u")
        assert response.content == "Fix parser"
        assert messages.kwargs["model"] == VertexClient.DEFAULT_MODEL

    def test_quota_hint(self, monkeypatch):
        error = anthropic.RateLimitError(
            "rate limited", response=httpx.Response(429, request=_request()), body=None
        )
        _fake_sdk(monkeypatch, VertexClient, error)
        with pytest.raises(LLMError, match="Quota"):
            VertexClient(project_name="proj").generate("s", "u")

    def test_missing_credentials(self, monkeypatch):
        _fake_sdk(monkeypatch, VertexClient, DefaultCredentialsError("no credentials"))
        with pytest.raises(LLMError, match="application-default login"):
            VertexClient(project_name="proj").generate("s", "u")


class TestGetClient:

    def test_direct_backend(self, monkeypatch):
        _fake_sdk(monkeypatch, ClaudeClient, _sdk_response("x"))
        client = get_client(Config(model=ANTHROPIC_MODEL, api_key="k"))
        assert type(client) is ClaudeClient

    def test_vertex_backend(self, monkeypatch):
        _fake_sdk(monkeypatch, VertexClient, _sdk_response("x"))
        client = get_client(Config(model=VERTEX_MODEL, project_name="proj"))
        assert isinstance(client, VertexClient)
        assert client.project_name == "proj"

    def test_unsupported_model(self):
        with pytest.raises(LLMError, match="Unsupported model"):
            get_client(Config(model="gpt-4", api_key="k"))


# ---------------------------------------------------------------------------
# config / config:show commands
# ---------------------------------------------------------------------------

class TestConfigCommands:

    @pytest.fixture
    def manager(self, tmp_path):
        return ConfigManager(path=tmp_path / "home" / "config.json")

    def test_setup_direct_backend(self, manager, answers, capsys):
        answers("1", "  sk-ant-12345678abcdef  ")
        assert run_setup(manager) == 0

        saved = json.loads(manager.path.read_text())
        assert saved == {"model": ANTHROPIC_MODEL, "api_key": "sk-ant-12345678abcdef"}
        out = capsys.readouterr().out
        assert "sk-ant-1..." in out
        assert "sk-ant-12345678abcdef" not in out

    def test_setup_vertex_backend(self, manager, answers):
        answers("2", "my-project")
        assert run_setup(manager) == 0
        saved = json.loads(manager.path.read_text())
        assert saved == {"model": VERTEX_MODEL, "project_name": "my-project"}

    def test_setup_invalid_choice(self, manager, answers):
        answers("3")
        assert run_setup(manager) == 1
        assert not manager.path.exists()

    def test_setup_empty_credential(self, manager, answers):
        answers("1", "")
        assert run_setup(manager) == 1
        assert not manager.path.exists()

    def test_show_missing(self, manager, capsys):
        assert display_config(manager) == 0
        assert "No configuration found" in capsys.readouterr().out

    def test_show_redacts_key(self, manager, capsys):
        manager.save(Config(model=ANTHROPIC_MODEL, api_key="sk-ant-supersecretvalue"))
        assert display_config(ConfigManager(path=manager.path)) == 0
        out = capsys.readouterr().out
        assert ANTHROPIC_MODEL in out
        assert "sk-ant-s..." in out
        assert "supersecretvalue" not in out

    def test_show_ignores_non_string_key(self, manager, capsys):
        manager.path.parent.mkdir(parents=True)
        manager.path.write_text(json.dumps({"model": ANTHROPIC_MODEL, "api_key": 12345678901}))
        assert display_config(manager) == 0
        out = capsys.readouterr().out
        assert "Invalid api_key" in out
        assert "12345678" not in out

    def test_show_project(self, manager, capsys):
        manager.save(Config(model=VERTEX_MODEL, project_name="my-project"))
        display_config(ConfigManager(path=manager.path))
        assert "my-project" in capsys.readouterr().out
