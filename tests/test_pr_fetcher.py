import json

import pytest

from utils.changelog_errors import PullRequestDataExtractionError
from utils.pr_fetcher import PRFetcher, load_event_context
from utils.pr_labels import is_autocut

from conftest import FakeGithub, make_pr_payload


def test_extract_pull_request_data():
    gh = FakeGithub(pr=make_pr_payload("## Changelog\n- feat: x\n"))
    pr = PRFetcher(gh).extract_pull_request_data("octo", "app", 12)
    assert pr.number == 12
    assert pr.description.startswith("## Changelog")
    assert pr.link == "https://github.com/octo/app/pull/12"
    assert pr.branch_ref == "feature/dark-mode"
    assert pr.is_fork is False


def test_null_body_becomes_empty_description():
    gh = FakeGithub(pr=make_pr_payload(None))
    assert PRFetcher(gh).extract_pull_request_data("octo", "app", 12).description == ""


def test_fork_detection():
    gh = FakeGithub(pr=make_pr_payload("", head_repo="someone/app"))
    pr = PRFetcher(gh).extract_pull_request_data("octo", "app", 12)
    assert pr.is_fork is True
    assert (pr.commit_owner, pr.commit_repo) == ("someone", "app")


def test_incomplete_payload_fails():
    payload = make_pr_payload("body")
    del payload["html_url"]
    with pytest.raises(PullRequestDataExtractionError):
        PRFetcher(FakeGithub(pr=payload)).extract_pull_request_data("octo", "app", 12)


def test_api_failure_fails():
    gh = FakeGithub()
    gh.fail.add("get_pull_request")
    with pytest.raises(PullRequestDataExtractionError):
        PRFetcher(gh).extract_pull_request_data("octo", "app", 12)


def test_load_event_context(tmp_path):
    event = tmp_path / "event.json"
    event.write_text(json.dumps({"pull_request": {"number": 42}}), encoding="utf-8")
    env = {"GITHUB_REPOSITORY": "octo/app", "GITHUB_EVENT_PATH": str(event)}
    assert load_event_context(env) == ("octo", "app", 42)


def test_load_event_context_outside_pull_request(tmp_path):
    event = tmp_path / "event.json"
    event.write_text(json.dumps({"push": {}}), encoding="utf-8")
    with pytest.raises(PullRequestDataExtractionError):
        load_event_context({"GITHUB_REPOSITORY": "octo/app", "GITHUB_EVENT_PATH": str(event)})
    with pytest.raises(PullRequestDataExtractionError):
        load_event_context({})


def test_is_autocut_treats_lookup_failure_as_false():
    gh = FakeGithub(pr=make_pr_payload(""), labels=["autocut"])
    pr = PRFetcher(gh).extract_pull_request_data("octo", "app", 12)
    assert is_autocut(gh, pr) is True
    gh.fail.add("list_labels")
    assert is_autocut(gh, pr) is False
