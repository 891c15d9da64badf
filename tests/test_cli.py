"""
Tests for argument parsing and the main entry point's exit codes.
"""

import json

import pytest

from auto_commit_msg.cli import main as cli_main
from auto_commit_msg.cli.args import parse_args
from auto_commit_msg.git import EmptyInputError
from auto_commit_msg.llm import TransportError


@pytest.fixture(autouse=True)
def isolated(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("pathlib.Path.home", lambda: tmp_path / "fakehome")
    for name in ("TRACE", "BASE_URL", "API_KEY", "SHORT_MODEL", "LONG_MODEL", "THRESHOLD"):
        monkeypatch.delenv(f"AUTO_COMMIT_MSG_{name}", raising=False)


class RecordingWorkflow:
    """Replaces CommitMessageWorkflow inside cli.main."""
    instances = []
    error = None

    def __init__(self, config):
        self.config = config
        self.runs = []
        RecordingWorkflow.instances.append(self)

    def run(self, destination, commit_source=None):
        self.runs.append((destination, commit_source))
        if RecordingWorkflow.error is not None:
            raise RecordingWorkflow.error
        return "feat: x"


@pytest.fixture
def workflow(monkeypatch):
    RecordingWorkflow.instances = []
    RecordingWorkflow.error = None
    monkeypatch.setattr(cli_main, "CommitMessageWorkflow", RecordingWorkflow)
    return RecordingWorkflow


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------

class TestParseArgs:
    """parse_args() positionals and flags."""

    def test_no_arguments(self):
        args = parse_args([])
        assert args.commit_msg_file is None
        assert args.commit_source is None
        assert args.trace is False

    def test_hook_arguments(self):
        args = parse_args([".git/COMMIT_EDITMSG", "commit", "abc123"])
        assert args.commit_msg_file == ".git/COMMIT_EDITMSG"
        assert args.commit_source == "commit"
        assert args.commit_sha == "abc123"

    def test_flags(self):
        args = parse_args(["--trace", "--config", "cfg.json"])
        assert args.trace is True
        assert args.config == "cfg.json"


# ---------------------------------------------------------------------------
# main()
# ---------------------------------------------------------------------------

class TestMain:
    """main() exit codes and config wiring."""

    def test_success_returns_zero(self, workflow, tmp_path):
        assert cli_main.main(["out.txt"]) == 0
        destination, source = workflow.instances[0].runs[0]
        assert destination.name == "out.txt"
        assert source is None

    def test_stdout_when_no_file(self, workflow):
        assert cli_main.main([]) == 0
        assert workflow.instances[0].runs[0][0] is None

    def test_commit_source_forwarded(self, workflow):
        cli_main.main(["msg", "merge"])
        assert workflow.instances[0].runs[0][1] == "merge"

    def test_trace_flag_overrides_config(self, workflow):
        cli_main.main(["--trace"])
        assert workflow.instances[0].config.trace is True

    def test_config_file_is_loaded(self, workflow, tmp_path):
        (tmp_path / ".auto-commit-msg.json").write_text(json.dumps({"threshold": 500}))
        cli_main.main([])
        assert workflow.instances[0].config.threshold == 500

    @pytest.mark.parametrize("error", [
        EmptyInputError("No staged changes. Run 'git add' first."),
        TransportError("Chat completion failed with status 500", status=500, body="oops"),
        OSError("read-only file system"),
    ])
    def test_errors_exit_non_zero(self, workflow, capsys, error):
        workflow.error = error
        assert cli_main.main(["msg"]) == 1
        assert capsys.readouterr().err.strip() != ""

    def test_bad_config_exits_non_zero(self, workflow, tmp_path, capsys):
        (tmp_path / ".auto-commit-msg.json").write_text("{broken")
        assert cli_main.main([]) == 1
        assert workflow.instances == []
        assert "Could not parse" in capsys.readouterr().err

    def test_display_config(self, workflow, capsys):
        assert cli_main.main(["--display-config"]) == 0
        out = capsys.readouterr().out
        assert "threshold" in out
        assert "gemini-2.5-flash-lite" in out
        assert workflow.instances == []

    def test_install_completion(self, capsys):
        assert cli_main.main(["--install-completion"]) == 0
        assert "register-python-argcomplete" in capsys.readouterr().out
