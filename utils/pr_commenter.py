#!/usr/bin/env python3
"""PR comment utilities for changelog validation failures.

Only errors flagged ``should_comment`` produce a comment; configuration and
I/O failures are logged for operators instead.
"""

from __future__ import annotations

import logging
from typing import Optional

from utils.github_client import CodeHostClient


logger = logging.getLogger(__name__)

COMMENT_MARKER = "<!-- CHANGELOG_PR_BOT -->"
MAX_GH_COMMENT_CHARS = 65000


def get_error_comment(error: BaseException) -> Optional[str]:
    """Return the comment text for an error, or None if it is not comment-worthy."""
    if getattr(error, "should_comment", False):
        name = getattr(error, "name", type(error).__name__)
        return f"{name}: {error}"
    return None


class PRCommenter:
    def __init__(self, client: CodeHostClient, *, marker: str = COMMENT_MARKER):
        self.client = client
        self.marker = marker

    def _with_marker(self, body: str) -> str:
        body = f"{self.marker}\n{body}" if self.marker else body
        return body[:MAX_GH_COMMENT_CHARS]

    def post_error_comment(self, owner: str, repo: str, pr_number: int, error: BaseException) -> bool:
        """Post a comment describing a validation error.

        Failures to post are logged and swallowed so the original error stays
        the reported cause.

        Returns:
            True if a comment was posted
        """
        comment = get_error_comment(error)
        if not comment:
            logger.info(f"No comment posted to PR #{pr_number} due to error type: {type(error).__name__}")
            return False
        try:
            self.client.create_comment(owner, repo, pr_number, self._with_marker(comment))
        except Exception as e:
            logger.error(f"Error posting comment to PR #{pr_number}: {e}")
            return False
        logger.info(f'Comment posted to PR #{pr_number}: "{comment}"')
        return True
