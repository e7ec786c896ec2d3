#!/usr/bin/env python3
"""Validation and formatting of single changelog entry lines.

A changelog entry looks like ``- <prefix>: <description>``. Checks run in a
fixed order so the author sees the most actionable problem first: structure
(marker), then semantics (prefix), then content (empty or too long).
"""

from __future__ import annotations

import re
from typing import Optional, Pattern, Union

from utils.changelog_errors import (
    ChangelogEntryMissingHyphenError,
    EmptyEntryDescriptionError,
    EntryTooLongError,
    InvalidAdditionalPrefixWithSkipEntryOptionError,
    InvalidPrefixError,
    InvalidPrefixForManualChangesetCreationError,
    MalformedEntryError,
)
from utils.entry_models import (
    SKIP_PREFIX,
    CreationMode,
    ParsedEntry,
    ValidatedEntry,
    ValidatorConfig,
)

ENTRY_MARKER = "-"


def match_entry(line: str, pattern: Union[str, Pattern[str]]) -> Optional[ParsedEntry]:
    """Decompose a line with the entry grammar; None when it does not match."""
    regex = re.compile(pattern) if isinstance(pattern, str) else pattern
    m = regex.match(line or "")
    if m is None:
        return None
    marker, prefix, description = m.group(1, 2, 3)
    return ParsedEntry(marker=marker or "", prefix=prefix, description=description)


def capitalize_first(text: str) -> str:
    if not text:
        return text
    return text[0].upper() + text[1:]


def format_entry(description: str, pr_number: int, pr_link: str) -> str:
    """Format a validated description linked to its pull request."""
    return f"{capitalize_first(description)} ([#{pr_number}]({pr_link}))"


class EntryValidator:
    """Validates changelog lines against a fixed prefix taxonomy."""

    def __init__(self, config: ValidatorConfig):
        self.config = config
        self._pattern = re.compile(config.entry_pattern)
        self._prefixes = frozenset(config.prefixes)

    def parse(self, line: str) -> ParsedEntry:
        parsed = match_entry(line, self._pattern)
        if parsed is None:
            raise MalformedEntryError(line or "")
        return parsed

    def validate(self, line: str, total_entries: int, mode: CreationMode = CreationMode.AUTOMATIC) -> ValidatedEntry:
        """Validate one changelog line.

        Args:
            line: Raw line from the changelog section
            total_entries: Number of lines in the whole changelog section
            mode: Changeset creation mode

        Returns:
            ValidatedEntry with the lowercase prefix and trimmed description

        Raises:
            ChangelogError: The first violated rule, see utils.changelog_errors
        """
        parsed = self.parse(line)
        prefix = parsed.prefix.lower()

        if mode == CreationMode.MANUAL:
            if parsed.marker != ENTRY_MARKER:
                raise ChangelogEntryMissingHyphenError()
            if prefix != SKIP_PREFIX:
                raise InvalidPrefixForManualChangesetCreationError(parsed.prefix)
            return ValidatedEntry(prefix=SKIP_PREFIX, trimmed_description="")

        if parsed.marker != ENTRY_MARKER:
            raise ChangelogEntryMissingHyphenError()
        if prefix not in self._prefixes:
            raise InvalidPrefixError(parsed.prefix, self.config.prefixes)
        if prefix == SKIP_PREFIX and total_entries > 1:
            # Early exit only; resolve_skip is the authoritative exclusivity check.
            raise InvalidAdditionalPrefixWithSkipEntryOptionError()

        trimmed = (parsed.description or "").strip()
        if prefix != SKIP_PREFIX and not trimmed:
            raise EmptyEntryDescriptionError(parsed.prefix)
        if len(trimmed) > self.config.max_entry_length:
            raise EntryTooLongError(len(trimmed), self.config.max_entry_length)
        if prefix == SKIP_PREFIX:
            return ValidatedEntry(prefix=SKIP_PREFIX, trimmed_description="")
        return ValidatedEntry(prefix=prefix, trimmed_description=trimmed)
