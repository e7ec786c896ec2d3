from utils.changelog_errors import (
    EntryTooLongError,
    MissingChangelogPullRequestBridgeApiKeyError,
    UpdatePRLabelError,
)
from utils.pr_commenter import COMMENT_MARKER, PRCommenter, get_error_comment

from conftest import FakeGithub


def test_comment_text_uses_error_name_and_message():
    error = EntryTooLongError(120, 100)
    assert get_error_comment(error) == f"EntryTooLongError: {error}"


def test_operator_errors_are_not_commented():
    assert get_error_comment(MissingChangelogPullRequestBridgeApiKeyError()) is None
    assert get_error_comment(UpdatePRLabelError()) is None
    assert get_error_comment(ValueError("plain")) is None


def test_post_error_comment_adds_marker():
    gh = FakeGithub()
    assert PRCommenter(gh).post_error_comment("octo", "app", 12, EntryTooLongError(120, 100)) is True
    assert gh.comments[0].startswith(COMMENT_MARKER)
    assert "EntryTooLongError" in gh.comments[0]


def test_post_error_comment_skips_operator_errors():
    gh = FakeGithub()
    assert PRCommenter(gh).post_error_comment("octo", "app", 12, UpdatePRLabelError()) is False
    assert gh.comments == []


def test_post_failure_is_swallowed():
    gh = FakeGithub()
    gh.fail.add("create_comment")
    assert PRCommenter(gh).post_error_comment("octo", "app", 12, EntryTooLongError(120, 100)) is False
