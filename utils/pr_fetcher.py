#!/usr/bin/env python3
"""PR data fetcher for the changelog bot.

This module wraps the code-host client to fetch and normalize the pull
request fields needed for changelog validation, and resolves which pull
request to process from the GitHub Actions environment.
"""

import json
import logging
import os
from typing import Optional, Tuple

from utils.changelog_errors import PullRequestDataExtractionError
from utils.github_client import CodeHostClient
from utils.pr_models import PullRequestData

# Set up logging
logger = logging.getLogger(__name__)


class PRFetcher:
    """Fetches and normalizes pull request data."""

    def __init__(self, client: CodeHostClient):
        """Initialize PR fetcher.

        Args:
            client: Code-host client used for the API calls
        """
        self.client = client

    def extract_pull_request_data(self, owner: str, repo: str, pr_number: int) -> PullRequestData:
        """Fetch and normalize pull request metadata.

        Args:
            owner: Repository owner
            repo: Repository name
            pr_number: Pull request number

        Returns:
            Normalized PullRequestData object

        Raises:
            PullRequestDataExtractionError: If fetching fails or the payload is incomplete
        """
        logger.info(f"Extracting data for PR #{pr_number} in {owner}/{repo}")
        try:
            pr_data = self.client.get_pull_request(owner, repo, pr_number)
            if not pr_data or not isinstance(pr_data, dict):
                raise ValueError("empty pull request payload")
            if "body" not in pr_data or "html_url" not in pr_data:
                raise ValueError("pull request payload lacks body or html_url")
            return PullRequestData.from_api(owner, repo, pr_number, pr_data)
        except Exception as e:
            logger.error(f"Error extracting data from pull request: {e}")
            raise PullRequestDataExtractionError() from e


def load_event_context(env: Optional[dict] = None) -> Tuple[str, str, int]:
    """Resolve (owner, repo, pr_number) from the GitHub Actions environment.

    Reads GITHUB_REPOSITORY ("owner/repo") and the pull_request.number field of
    the event payload at GITHUB_EVENT_PATH.

    Raises:
        PullRequestDataExtractionError: If the environment is not a PR event
    """
    env = os.environ if env is None else env
    repository = env.get("GITHUB_REPOSITORY", "")
    event_path = env.get("GITHUB_EVENT_PATH", "")
    owner, _, repo = repository.partition("/")
    if not owner or not repo or not event_path:
        logger.error("GITHUB_REPOSITORY or GITHUB_EVENT_PATH is not set")
        raise PullRequestDataExtractionError()
    try:
        with open(event_path, "r", encoding="utf-8") as f:
            payload = json.load(f)
        number = int(payload["pull_request"]["number"])
    except (OSError, ValueError, KeyError, TypeError) as e:
        logger.error(f"Error reading pull request event payload: {e}")
        raise PullRequestDataExtractionError() from e
    return owner, repo, number
