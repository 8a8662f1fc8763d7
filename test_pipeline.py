"""End-to-end runs of the pipeline and CLI with prompts and GitHub mocked."""

from unittest.mock import Mock, patch

import pytest

from multipr.cli import main
from multipr.errors import PromptIOError, ValidationError
from multipr.models import RunConfig, UserSelection
from multipr.pipeline import run_pipeline

CONFIG = RunConfig(
    access_token="t",
    repository_owner="acme",
    selectable_repositories=("svc-a", "svc-b"),
    selectable_branches=("main", "feature-x"),
)


class ScriptedSession:
    def __init__(self, selection, answer):
        self.selection = selection
        self.answer = answer

    def collect_selection(self, config):
        return self.selection

    def read_line(self, message=""):
        return self.answer


def _selection(repos=("svc-a", "svc-b")):
    return UserSelection(
        selected_repositories=tuple(repos),
        base_branch="main",
        compare_branch="feature-x",
        pr_title="Release 1.2",
    )


def _gh():
    gh = Mock()
    gh.repos = {}

    def get_repo(full_name):
        repo = gh.repos.setdefault(full_name, Mock())
        repo.create_pull.return_value = Mock(html_url=f"https://github.com/{full_name}/pull/1")
        return repo

    gh.get_repo.side_effect = get_repo
    return gh


def test_confirmed_run_creates_one_pr_per_repository(capsys):
    gh = _gh()
    code = run_pipeline(CONFIG, ScriptedSession(_selection(), "yes"), gh)

    assert code == 0
    assert [c.args[0] for c in gh.get_repo.call_args_list] == ["acme/svc-a", "acme/svc-b"]
    for full_name in ("acme/svc-a", "acme/svc-b"):
        gh.repos[full_name].create_pull.assert_called_once_with(
            title="Release 1.2",
            head="feature-x",
            base="main",
            maintainer_can_modify=True,
        )
    out = capsys.readouterr().out
    first = out.index("PR created: https://github.com/acme/svc-a/pull/1")
    second = out.index("PR created: https://github.com/acme/svc-b/pull/1")
    assert first < second


def test_decline_creates_nothing(capsys):
    gh = _gh()
    code = run_pipeline(CONFIG, ScriptedSession(_selection(), "no"), gh)

    assert code == 0
    gh.get_repo.assert_not_called()
    assert "Operation cancelled by the user." in capsys.readouterr().out


def test_no_repositories_raises_before_any_call():
    gh = _gh()
    with pytest.raises(ValidationError, match="no repositories selected"):
        run_pipeline(CONFIG, ScriptedSession(_selection(repos=()), "yes"), gh)
    gh.get_repo.assert_not_called()


def test_cli_validation_failure_exits_nonzero(capsys):
    with patch("multipr.cli.load_config", return_value=CONFIG), \
            patch("multipr.pipeline.PromptSession", return_value=ScriptedSession(_selection(repos=()), "yes")), \
            patch("multipr.pipeline.get_github_client") as get_client:
        code = main([])

    assert code == 1
    get_client.assert_not_called()
    assert "no repositories selected" in capsys.readouterr().err


def test_cli_cancel_exits_zero():
    with patch("multipr.cli.load_config", return_value=CONFIG), \
            patch("multipr.pipeline.PromptSession", return_value=ScriptedSession(_selection(), "nope")), \
            patch("multipr.pipeline.get_github_client") as get_client:
        assert main([]) == 0
    get_client.assert_not_called()


def test_cli_config_error_exits_nonzero(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    for key in ("GITHUB_ACCESS_TOKEN", "REPOSITORY_OWNER", "SELECTABLE_REPOSITORIES", "SELECTABLE_BRANCHES"):
        monkeypatch.delenv(key, raising=False)
    with patch("multipr.pipeline.PromptSession") as session_cls:
        code = main([])
    assert code == 1
    session_cls.assert_not_called()
    assert "GITHUB_ACCESS_TOKEN" in capsys.readouterr().err


def test_cli_passes_env_file(tmp_path):
    with patch("multipr.cli.load_config", return_value=CONFIG) as load, \
            patch("multipr.cli.run_pipeline", return_value=0):
        assert main(["--env-file", str(tmp_path / "x.env")]) == 0
    load.assert_called_once_with(str(tmp_path / "x.env"))


class FailingSession:
    def __init__(self, exc):
        self.exc = exc

    def collect_selection(self, config):
        raise self.exc

    def read_line(self, message=""):
        raise AssertionError("confirmation must not be reached")


def test_cli_interrupt_exits_130(capsys):
    with patch("multipr.cli.load_config", return_value=CONFIG), \
            patch("multipr.pipeline.PromptSession", return_value=FailingSession(KeyboardInterrupt())), \
            patch("multipr.pipeline.get_github_client") as get_client:
        code = main([])

    assert code == 130
    get_client.assert_not_called()
    assert "interrupted" in capsys.readouterr().err


def test_cli_prompt_failure_exits_nonzero(capsys):
    error = PromptIOError("Error reading input: stdin closed")
    with patch("multipr.cli.load_config", return_value=CONFIG), \
            patch("multipr.pipeline.PromptSession", return_value=FailingSession(error)), \
            patch("multipr.pipeline.get_github_client") as get_client:
        code = main([])

    assert code == 1
    get_client.assert_not_called()
    assert "stdin closed" in capsys.readouterr().err
