import pytest

from utils.entry_models import ValidatorConfig
from utils.entry_validator import EntryValidator
from utils.github_client import GithubApiError

PREFIXES = ["breaking", "chore", "deprecate", "doc", "feat", "fix", "infra", "refactor", "security", "skip", "test"]
PATTERN = r"^\s*(\S*?)\s*([A-Za-z][\w-]*)\s*:\s*(.*)$"


class FakeGithub:
    """In-memory code-host client recording every write."""

    def __init__(self, pr=None, labels=None, files=None):
        self.pr = pr
        self.labels = [{"name": name} for name in (labels or [])]
        self.files = dict(files or {})
        self.comments = []
        self.puts = []
        self.fail = set()
        self.closed = False

    def _maybe_fail(self, op):
        if op in self.fail:
            raise GithubApiError(f"{op} failed", status_code=500)

    def get_pull_request(self, owner, repo, number):
        self._maybe_fail("get_pull_request")
        return self.pr

    def list_labels(self, owner, repo, issue_number):
        self._maybe_fail("list_labels")
        return list(self.labels)

    def add_label(self, owner, repo, issue_number, label):
        self._maybe_fail("add_label")
        self.labels.append({"name": label})

    def remove_label(self, owner, repo, issue_number, label):
        self._maybe_fail("remove_label")
        self.labels = [l for l in self.labels if l["name"].lower() != label.lower()]

    def get_file(self, owner, repo, path, ref):
        self._maybe_fail("get_file")
        return self.files.get(path)

    def put_file(self, owner, repo, path, content, message, branch, sha=None):
        self._maybe_fail("put_file")
        self.puts.append({
            "owner": owner,
            "repo": repo,
            "path": path,
            "content": content,
            "message": message,
            "branch": branch,
            "sha": sha,
        })
        self.files[path] = {"sha": "new-sha"}
        return {"content": {"path": path}}

    def create_comment(self, owner, repo, issue_number, body):
        self._maybe_fail("create_comment")
        self.comments.append(body)
        return {"id": len(self.comments)}

    def close(self):
        self.closed = True

    @property
    def label_names(self):
        return [l["name"] for l in self.labels]


def make_pr_payload(body, number=12, labels=(), head_repo="octo/app", head_ref="feature/dark-mode"):
    return {
        "number": number,
        "body": body,
        "html_url": f"https://github.com/octo/app/pull/{number}",
        "labels": [{"name": name} for name in labels],
        "head": {"ref": head_ref, "repo": {"full_name": head_repo}},
    }


@pytest.fixture
def validator_config():
    return ValidatorConfig(max_entry_length=100, prefixes=PREFIXES, entry_pattern=PATTERN)


@pytest.fixture
def validator(validator_config):
    return EntryValidator(validator_config)


@pytest.fixture
def fake_github():
    return FakeGithub()
