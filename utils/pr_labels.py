#!/usr/bin/env python3
"""Label helpers for changelog pull requests."""

from __future__ import annotations

import logging

from utils.changelog_errors import UpdatePRLabelError
from utils.github_client import CodeHostClient
from utils.pr_models import PullRequestData


logger = logging.getLogger(__name__)


def _has_label(labels, label: str) -> bool:
    wanted = label.strip().lower()
    return any((item.get("name") or "").lower() == wanted for item in labels or [])


def update_pr_label(client: CodeHostClient, owner: str, repo: str, pr_number: int, label: str, add: bool) -> None:
    """Assert a label present (add=True) or absent (add=False) on a PR.

    Raises:
        UpdatePRLabelError: If listing, adding or removing the label fails
    """
    try:
        labels = client.list_labels(owner, repo, pr_number)
        exists = _has_label(labels, label)
        if add and not exists:
            client.add_label(owner, repo, pr_number, label)
            logger.info(f'Label "{label}" added to PR #{pr_number}')
        elif not add and exists:
            client.remove_label(owner, repo, pr_number, label)
            logger.info(f'Label "{label}" removed from PR #{pr_number}')
        else:
            state = "present" if add else "absent"
            logger.info(f'Label "{label}" is already {state} on PR #{pr_number}. No action taken.')
    except Exception as e:
        logger.error(f'Error updating label "{label}" for PR #{pr_number}: {e}')
        raise UpdatePRLabelError() from e


def is_autocut(client: CodeHostClient, pr: PullRequestData, label: str = "autocut") -> bool:
    """Return True if the PR carries the autocut label.

    Lookup failures are logged and treated as "not autocut".
    """
    try:
        labels = client.list_labels(pr.owner, pr.repo, pr.number)
    except Exception as e:
        logger.error(f"Error checking for '{label}' label: {e}")
        return False
    found = _has_label(labels, label)
    if found:
        logger.info(f"Detected '{label}' label, skipping changelog parsing process.")
    return found
