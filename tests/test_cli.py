import json

from agents import changelog_agent
from configs.config import Config

from conftest import FakeGithub, make_pr_payload


def _patch_client(monkeypatch, gh):
    monkeypatch.setattr("utils.github_client.GithubClient", lambda: gh)
    monkeypatch.setattr(Config, "ERROR_FEEDBACK_ENABLED", True)


def test_main_dry_run_prints_json(monkeypatch, capsys):
    gh = FakeGithub(pr=make_pr_payload("## Changelog\n- feat: add dark mode\n"))
    _patch_client(monkeypatch, gh)
    code = changelog_agent.main(["--owner", "octo", "--repo", "app", "--pr", "12", "--dry-run", "--json"])
    assert code == 0
    out = json.loads(capsys.readouterr().out)
    assert out["status"] == "validated"
    assert out["entry_map"]["feat"].startswith("Add dark mode")
    assert gh.closed is True


def test_main_reports_validation_error(monkeypatch, capsys):
    gh = FakeGithub(pr=make_pr_payload("## Changelog\nfeat: add dark mode\n"))
    _patch_client(monkeypatch, gh)
    code = changelog_agent.main(["--owner", "octo", "--repo", "app", "--pr", "12"])
    assert code == 1
    assert "ChangelogEntryMissingHyphenError" in capsys.readouterr().err
    assert len(gh.comments) == 1


def test_main_without_event_context_fails(monkeypatch, capsys):
    monkeypatch.delenv("GITHUB_REPOSITORY", raising=False)
    monkeypatch.delenv("GITHUB_EVENT_PATH", raising=False)
    code = changelog_agent.main([])
    assert code == 1
    assert "PullRequestDataExtractionError" in capsys.readouterr().err
