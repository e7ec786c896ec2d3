import pytest

from utils.changelog_errors import CategoryWithSkipOptionError, UpdatePRLabelError
from utils.pr_models import PullRequestData
from utils.skip_policy import apply_skip_label, handle_skip_option, resolve_skip

from conftest import FakeGithub

SKIP_LABEL = "Skip-Changelog"


def _pr():
    return PullRequestData(
        owner="octo", repo="app", number=12, link="https://github.com/octo/app/pull/12", branch_ref="feature"
    )


def test_resolve_skip_with_only_skip_entry():
    assert resolve_skip({"skip": ""}) is True


@pytest.mark.parametrize("entry_map", [None, {}, {"feat": "Add dark mode ([#12](url))"}])
def test_resolve_skip_without_skip_entry(entry_map):
    assert resolve_skip(entry_map) is False


def test_resolve_skip_rejects_skip_with_other_categories():
    with pytest.raises(CategoryWithSkipOptionError) as exc:
        resolve_skip({"skip": "", "fix": "Fix crash ([#12](url))"})
    assert exc.value.should_comment is True


def test_handle_skip_option_adds_label_when_skipping():
    gh = FakeGithub()
    assert handle_skip_option(gh, _pr(), {"skip": ""}, SKIP_LABEL) is True
    assert gh.label_names == [SKIP_LABEL]


def test_handle_skip_option_removes_label_when_proceeding():
    gh = FakeGithub(labels=["bug", SKIP_LABEL])
    assert handle_skip_option(gh, _pr(), {"feat": "Add x ([#12](url))"}, SKIP_LABEL) is False
    assert gh.label_names == ["bug"]


def test_handle_skip_option_does_not_touch_labels_on_conflict():
    gh = FakeGithub(labels=[SKIP_LABEL])
    with pytest.raises(CategoryWithSkipOptionError):
        handle_skip_option(gh, _pr(), {"skip": "", "feat": "Add x"}, SKIP_LABEL)
    assert gh.label_names == [SKIP_LABEL]


def test_existing_label_matches_case_insensitively():
    gh = FakeGithub(labels=["skip-changelog"])
    apply_skip_label(gh, _pr(), True, SKIP_LABEL)
    assert gh.label_names == ["skip-changelog"]


def test_label_failure_is_reported_as_io_error():
    gh = FakeGithub()
    gh.fail.add("add_label")
    with pytest.raises(UpdatePRLabelError) as exc:
        apply_skip_label(gh, _pr(), True, SKIP_LABEL)
    assert exc.value.should_comment is False
