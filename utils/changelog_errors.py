#!/usr/bin/env python3
"""Typed errors raised while validating changelog entries and writing changesets.

Every error carries a short ``code`` and a ``should_comment`` flag. Content
errors caused by the PR author are commented on the pull request; configuration
and GitHub I/O failures are only logged.
"""

from __future__ import annotations

from typing import Iterable


ENTRY_FORMAT_HINT = (
    "Please use the format `- <prefix>: <description>` for each entry "
    "in the `## Changelog` section of the pull request description."
)


class ChangelogError(Exception):
    """Base class for all changelog bot failures."""

    should_comment = True

    def __init__(self, message: str, code: str = "UNKNOWN"):
        super().__init__(message)
        self.code = code

    @property
    def name(self) -> str:
        return type(self).__name__


# ---- Entry content errors (commented on the PR) ----

class ChangelogEntryMissingHyphenError(ChangelogError):
    def __init__(self):
        super().__init__(
            "The changelog entry is missing a leading hyphen (-). " + ENTRY_FORMAT_HINT,
            code="MISSING_MARKER",
        )


class MalformedEntryError(ChangelogError):
    def __init__(self, entry: str):
        super().__init__(
            f"The changelog entry `{entry.strip()}` could not be parsed. " + ENTRY_FORMAT_HINT,
            code="MALFORMED_ENTRY",
        )
        self.entry = entry


class InvalidPrefixError(ChangelogError):
    def __init__(self, prefix: str, valid_prefixes: Iterable[str] = ()):
        allowed = ", ".join(f"`{p}`" for p in valid_prefixes)
        suffix = f" Valid prefixes are: {allowed}." if allowed else ""
        super().__init__(
            f"Invalid description prefix. Found `{prefix}`.{suffix}",
            code="INVALID_PREFIX",
        )
        self.prefix = prefix


class InvalidPrefixForManualChangesetCreationError(ChangelogError):
    def __init__(self, prefix: str):
        super().__init__(
            f"Invalid description prefix `{prefix}`. When the changeset file is created manually, "
            "only the `skip` entry option is allowed in the changelog section.",
            code="INVALID_PREFIX_MANUAL",
        )
        self.prefix = prefix


class InvalidAdditionalPrefixWithSkipEntryOptionError(ChangelogError):
    def __init__(self):
        super().__init__(
            "The changelog section contains the `skip` entry option together with other entries. "
            "When `skip` is used it must be the only entry.",
            code="SKIP_NOT_SOLE_ENTRY",
        )


class CategoryWithSkipOptionError(ChangelogError):
    def __init__(self):
        super().__init__(
            "If your pull request does not need a changelog entry, use `- skip:` as the only entry. "
            "Remove the other categories or the `skip` option.",
            code="CATEGORY_WITH_SKIP",
        )


class EmptyEntryDescriptionError(ChangelogError):
    def __init__(self, prefix: str):
        super().__init__(
            f"The description for the `{prefix}` entry is empty. Please add a short description of the change.",
            code="EMPTY_DESCRIPTION",
        )
        self.prefix = prefix


class EntryTooLongError(ChangelogError):
    def __init__(self, length: int, max_length: int):
        super().__init__(
            f"The changelog entry is {length} characters long, which exceeds the maximum of "
            f"{max_length} characters. Please shorten the description.",
            code="ENTRY_TOO_LONG",
        )
        self.length = length
        self.max_length = max_length


class MissingChangelogSectionError(ChangelogError):
    def __init__(self):
        super().__init__(
            "The pull request description does not contain a `## Changelog` section. "
            "Add one, or use `- skip:` if no changelog entry is needed.",
            code="MISSING_SECTION",
        )


class EmptyChangelogSectionError(ChangelogError):
    def __init__(self):
        super().__init__(
            "The `## Changelog` section of the pull request description is empty. " + ENTRY_FORMAT_HINT,
            code="EMPTY_SECTION",
        )


# ---- Configuration errors (operator faults, not commented) ----

class MissingConfigurationError(ChangelogError):
    should_comment = False

    def __init__(self, setting: str):
        super().__init__(
            f"The {setting} setting is not configured. "
            "Please configure it in your repository as a GitHub Secret.",
            code="MISSING_CONFIGURATION",
        )
        self.setting = setting


class MissingChangelogPullRequestBridgeUrlDomainError(MissingConfigurationError):
    def __init__(self):
        super().__init__("CHANGELOG_PR_BRIDGE_URL_DOMAIN")


class MissingChangelogPullRequestBridgeApiKeyError(MissingConfigurationError):
    def __init__(self):
        super().__init__("CHANGELOG_PR_BRIDGE_API_KEY")


# ---- GitHub I/O errors (logged, run aborts) ----

class GithubIOError(ChangelogError):
    should_comment = False

    def __init__(self, message: str):
        super().__init__(message, code="IO")


class PullRequestDataExtractionError(GithubIOError):
    def __init__(self):
        super().__init__("Error extracting data from the pull request.")


class UpdatePRLabelError(GithubIOError):
    def __init__(self):
        super().__init__("Error updating the label of the pull request.")


class GetGithubContentError(GithubIOError):
    def __init__(self):
        super().__init__("Error retrieving the changeset file content from the repository.")


class CreateChangesetFileError(GithubIOError):
    def __init__(self):
        super().__init__("Error creating the changeset file.")


class UpdateChangesetFileError(GithubIOError):
    def __init__(self):
        super().__init__("Error updating the changeset file.")
