#!/usr/bin/env python3
"""Skip-entry policy for changelog entry maps.

A ``skip`` entry means no changeset file is produced for the pull request. It
must be the only category in the entry map; this module is the single place
that rule is enforced over the aggregated entries.
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional

from utils.changelog_errors import CategoryWithSkipOptionError
from utils.entry_models import SKIP_PREFIX
from utils.github_client import CodeHostClient
from utils.pr_labels import update_pr_label
from utils.pr_models import PullRequestData


logger = logging.getLogger(__name__)


def resolve_skip(entry_map: Optional[Mapping[str, str]]) -> bool:
    """Return True if the entry map asks to skip the changeset.

    Raises:
        CategoryWithSkipOptionError: If skip is combined with other categories
    """
    if not entry_map or SKIP_PREFIX not in entry_map:
        return False
    if len(entry_map) > 1:
        raise CategoryWithSkipOptionError()
    logger.info("Skip option found. No changeset files required for this pull request.")
    return True


def apply_skip_label(client: CodeHostClient, pr: PullRequestData, skip: bool, label: str) -> None:
    """Assert the skip label present when skipping and absent otherwise."""
    update_pr_label(client, pr.owner, pr.repo, pr.number, label, skip)


def handle_skip_option(client: CodeHostClient, pr: PullRequestData, entry_map: Mapping[str, str], label: str) -> bool:
    """Resolve the skip decision and sync the PR label with it.

    Returns:
        True if the run should stop without writing a changeset file
    """
    skip = resolve_skip(entry_map)
    apply_skip_label(client, pr, skip, label)
    if skip:
        logger.info("No changeset file created or updated.")
    return skip
