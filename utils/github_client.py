#!/usr/bin/env python3
"""GitHub REST API client for the changelog bot.

Implements the narrow code-host capability the bot depends on: fetch a pull
request, read and toggle labels, read and write repository files, and post
issue comments. Calls are not retried; failures raise immediately.
"""

import logging
from typing import Any, Dict, List, Optional, Protocol
from urllib.parse import quote

import requests

from configs.config import Config

# Set up logging
logger = logging.getLogger(__name__)


class GithubAuthError(Exception):
    """Raised when GitHub API authentication fails."""
    pass


class GithubApiError(Exception):
    """Raised when GitHub API operations fail."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class CodeHostClient(Protocol):
    """Operations the changelog bot needs from the code host."""

    def get_pull_request(self, owner: str, repo: str, number: int) -> Dict[str, Any]: ...

    def list_labels(self, owner: str, repo: str, issue_number: int) -> List[Dict[str, Any]]: ...

    def add_label(self, owner: str, repo: str, issue_number: int, label: str) -> None: ...

    def remove_label(self, owner: str, repo: str, issue_number: int, label: str) -> None: ...

    def get_file(self, owner: str, repo: str, path: str, ref: str) -> Optional[Dict[str, Any]]: ...

    def put_file(
        self,
        owner: str,
        repo: str,
        path: str,
        content: str,
        message: str,
        branch: str,
        sha: Optional[str] = None,
    ) -> Dict[str, Any]: ...

    def create_comment(self, owner: str, repo: str, issue_number: int, body: str) -> Dict[str, Any]: ...


class GithubClient:
    """requests-based implementation of CodeHostClient."""

    def __init__(self, token: Optional[str] = None, timeout_s: Optional[int] = None, base_url: Optional[str] = None):
        """Initialize GitHub client.

        Args:
            token: GitHub token (defaults to Config.GITHUB_TOKEN)
            timeout_s: Request timeout in seconds (defaults to Config.HTTP_TIMEOUT_S)
            base_url: API root (defaults to Config.GITHUB_API_URL)

        Raises:
            GithubAuthError: If no valid token is provided
        """
        github_config = Config.get_github_config()
        self.token = token or github_config["token"]
        self.timeout_s = timeout_s or github_config["timeout_s"]
        self.base_url = (base_url or github_config["base_url"]).rstrip("/")

        if not self.token:
            raise GithubAuthError("GitHub token is required (GITHUB_TOKEN or GITHUB_PAT env var)")

        self.session = requests.Session()
        self.session.headers.update({
            'Authorization': f'token {self.token}',
            'Accept': 'application/vnd.github+json',
            'X-GitHub-Api-Version': '2022-11-28',
            'User-Agent': 'changelog-pr-bot/1.0'
        })

        logger.info("GitHub client initialized")

    def _url(self, owner: str, repo: str, suffix: str) -> str:
        return f"{self.base_url}/repos/{owner}/{repo}/{suffix}"

    def _request(self, method: str, url: str, *, what: str, **kwargs) -> requests.Response:
        try:
            response = self.session.request(method, url, timeout=self.timeout_s, **kwargs)
        except requests.RequestException as e:
            raise GithubApiError(f"Failed to {what}: {e}") from e

        if response.status_code == 401:
            raise GithubAuthError("Invalid GitHub token or insufficient permissions")
        if response.status_code >= 400:
            raise GithubApiError(
                f"Failed to {what}: HTTP {response.status_code}",
                status_code=response.status_code,
            )
        return response

    def get_pull_request(self, owner: str, repo: str, number: int) -> Dict[str, Any]:
        """Fetch pull request metadata.

        Raises:
            GithubApiError: If API request fails
        """
        logger.info(f"Fetching PR metadata: {owner}/{repo}#{number}")
        response = self._request("GET", self._url(owner, repo, f"pulls/{number}"), what=f"fetch PR {owner}/{repo}#{number}")
        data = response.json()
        logger.debug(f"✓ Retrieved PR: #{data.get('number')}")
        return data

    def list_labels(self, owner: str, repo: str, issue_number: int) -> List[Dict[str, Any]]:
        url = self._url(owner, repo, f"issues/{issue_number}/labels")
        response = self._request("GET", url, what=f"list labels on {owner}/{repo}#{issue_number}", params={"per_page": 100})
        return response.json()

    def add_label(self, owner: str, repo: str, issue_number: int, label: str) -> None:
        url = self._url(owner, repo, f"issues/{issue_number}/labels")
        self._request("POST", url, what=f"add label {label!r}", json={"labels": [label]})

    def remove_label(self, owner: str, repo: str, issue_number: int, label: str) -> None:
        url = self._url(owner, repo, f"issues/{issue_number}/labels/{quote(label, safe='')}")
        self._request("DELETE", url, what=f"remove label {label!r}")

    def get_file(self, owner: str, repo: str, path: str, ref: str) -> Optional[Dict[str, Any]]:
        """Fetch file metadata; None when the file does not exist at ref."""
        logger.debug(f"Fetching file content: {owner}/{repo}/{path} @ {ref}")
        try:
            response = self._request(
                "GET", self._url(owner, repo, f"contents/{path}"), what=f"fetch file {path}", params={"ref": ref}
            )
        except GithubApiError as e:
            if e.status_code == 404:
                return None
            raise
        return response.json()

    def put_file(
        self,
        owner: str,
        repo: str,
        path: str,
        content: str,
        message: str,
        branch: str,
        sha: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Create or update a file; content must be base64 encoded."""
        payload: Dict[str, Any] = {"message": message, "content": content, "branch": branch}
        if sha:
            payload["sha"] = sha
        response = self._request("PUT", self._url(owner, repo, f"contents/{path}"), what=f"write file {path}", json=payload)
        return response.json()

    def create_comment(self, owner: str, repo: str, issue_number: int, body: str) -> Dict[str, Any]:
        url = self._url(owner, repo, f"issues/{issue_number}/comments")
        response = self._request("POST", url, what=f"comment on {owner}/{repo}#{issue_number}", json={"body": body})
        return response.json()

    def close(self) -> None:
        """Close the GitHub client session."""
        if self.session:
            self.session.close()
            logger.debug("GitHub client session closed")
