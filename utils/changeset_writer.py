#!/usr/bin/env python3
"""Commit changeset fragments to the pull request branch.

Looks up the existing file sha to decide between create and update, then
writes the base64 content through the code-host client with typed errors.
"""

from __future__ import annotations

import logging
from typing import Optional

from utils.changelog_errors import CreateChangesetFileError, GetGithubContentError, UpdateChangesetFileError
from utils.github_client import CodeHostClient


logger = logging.getLogger(__name__)


def get_file_sha(client: CodeHostClient, owner: str, repo: str, path: str, ref: str) -> Optional[str]:
    """Return the sha of path at ref, or None if the file does not exist.

    Raises:
        GetGithubContentError: If the lookup fails for any other reason
    """
    try:
        data = client.get_file(owner, repo, path, ref)
    except Exception as e:
        logger.error(f"Error retrieving {path} at {ref}: {e}")
        raise GetGithubContentError() from e
    if data is None:
        logger.info("Changeset file not found. Proceeding to create a new one.")
        return None
    return data.get("sha")


def create_or_update_file(
    client: CodeHostClient,
    owner: str,
    repo: str,
    path: str,
    content: str,
    message: str,
    branch: str,
) -> bool:
    """Create or update a file on a branch.

    Args:
        content: Base64 encoded file content

    Returns:
        True if an existing file was updated, False if it was created

    Raises:
        GetGithubContentError: Looking up the current file failed
        CreateChangesetFileError: Creating the file failed
        UpdateChangesetFileError: Updating the file failed
    """
    sha = get_file_sha(client, owner, repo, path, branch)
    try:
        client.put_file(owner, repo, path, content, message, branch, sha=sha)
    except Exception as e:
        logger.error(f"Error writing {path} on {owner}/{repo}@{branch}: {e}")
        if sha:
            raise UpdateChangesetFileError() from e
        raise CreateChangesetFileError() from e
    logger.info(f"File: {path} {'updated' if sha else 'created'} successfully.")
    return bool(sha)
