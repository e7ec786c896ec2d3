#!/usr/bin/env python3
"""Pydantic models for pull request data structures.

This module defines the data models used for representing the pull request
metadata the changelog bot needs, normalized from GitHub REST payloads.
"""

from typing import Any, Dict, Optional
from pydantic import BaseModel, Field


class PullRequestData(BaseModel):
    """Pull request fields used to validate and commit changelog entries."""

    owner: str = Field(..., description="Base repository owner")
    repo: str = Field(..., description="Base repository name")
    number: int = Field(..., description="Pull request number")
    description: str = Field("", description="Pull request body, empty if unset")
    link: str = Field(..., description="GitHub URL for the PR")
    branch_ref: str = Field(..., description="Head branch name")
    head_owner: Optional[str] = Field(None, description="Head repository owner")
    head_repo: Optional[str] = Field(None, description="Head repository name")

    model_config = {"extra": "ignore"}

    @property
    def is_fork(self) -> bool:
        """True when the head branch lives in a different repository."""
        if not self.head_owner or not self.head_repo:
            return False
        return (self.head_owner, self.head_repo) != (self.owner, self.repo)

    @property
    def commit_owner(self) -> str:
        return self.head_owner or self.owner

    @property
    def commit_repo(self) -> str:
        return self.head_repo or self.repo

    @classmethod
    def from_api(cls, owner: str, repo: str, number: int, data: Dict[str, Any]) -> "PullRequestData":
        """Create PullRequestData from a GET /pulls/{number} payload.

        Args:
            owner: Base repository owner
            repo: Base repository name
            number: Pull request number
            data: Raw pull request JSON

        Returns:
            Normalized PullRequestData
        """
        head_repo_full = safe_extract(data, "head", "repo", "full_name", default="") or ""
        head_owner, _, head_repo = head_repo_full.partition("/")
        return cls(
            owner=owner,
            repo=repo,
            number=number,
            description=data.get("body") or "",
            link=data.get("html_url") or "",
            branch_ref=safe_extract(data, "head", "ref", default="") or "",
            head_owner=head_owner or None,
            head_repo=head_repo or None,
        )


def safe_extract(data: Dict, *keys, default=None):
    """Safely extract nested dictionary values.

    Args:
        data: Dictionary to extract from
        *keys: Sequence of keys to traverse
        default: Default value if path doesn't exist

    Returns:
        Value at the nested path or default

    Example:
        safe_extract(pr_data, "head", "ref", default="main")
        # Equivalent to pr_data.get("head", {}).get("ref", "main")
    """
    current = data
    for key in keys:
        if not isinstance(current, dict) or key not in current:
            return default
        current = current[key]
    return current
