#!/usr/bin/env python3
"""Parser for the changelog section of pull request descriptions.

Finds the ``## Changelog`` heading, ignoring HTML comments and code fences,
and folds the validated lines of that section into an entry map.
"""

from __future__ import annotations

import logging
import re
from typing import List, Sequence

from utils.changelog_errors import EmptyChangelogSectionError, MissingChangelogSectionError
from utils.entry_models import CreationMode, EntryMap
from utils.entry_validator import EntryValidator, format_entry


logger = logging.getLogger(__name__)

SECTION_TITLE = "changelog"

_HTML_COMMENT = re.compile(r"<!--.*?-->", re.DOTALL)
_HEADING = re.compile(r"^\s{0,3}#{1,6}\s+(.*?)\s*#*\s*$")


def _strip_html_comments(body: str) -> str:
    """Remove HTML comments, including multi-line template hints."""
    return _HTML_COMMENT.sub("", body)


def extract_changelog_entries(description: str) -> List[str]:
    """Return the non-empty lines of the changelog section.

    Rules:
      - Section starts at the first heading titled 'Changelog' (any level, case-insensitive)
      - Section ends at the next heading
      - HTML comments, fenced code blocks and blank lines are dropped

    Raises:
        MissingChangelogSectionError: No changelog heading in the description
        EmptyChangelogSectionError: The heading is present but has no entries
    """
    body = _strip_html_comments(description or "")

    found = False
    in_fence = False
    entries: List[str] = []
    for raw in body.splitlines():
        stripped = raw.strip()

        if stripped.startswith("```"):
            in_fence = not in_fence
            continue
        if in_fence:
            continue

        heading = _HEADING.match(raw)
        if heading:
            if found:
                break
            found = heading.group(1).strip().casefold() == SECTION_TITLE
            continue

        if found and stripped:
            entries.append(stripped)

    if not found:
        raise MissingChangelogSectionError()
    if not entries:
        raise EmptyChangelogSectionError()
    logger.debug(f"Found {len(entries)} changelog entries")
    return entries


def build_entry_map(
    lines: Sequence[str],
    validator: EntryValidator,
    mode: CreationMode,
    pr_number: int,
    pr_link: str,
) -> EntryMap:
    """Validate lines in order and map each prefix to its formatted entry.

    The first invalid line aborts the whole run. A repeated prefix keeps the
    last entry. The skip entry maps to an empty string.
    """
    total = len(lines)
    entry_map: EntryMap = {}
    for line in lines:
        entry = validator.validate(line, total, mode)
        if entry.prefix in entry_map:
            logger.warning(f"Duplicate '{entry.prefix}' entry in changelog section; keeping the last one")
        if entry.is_skip:
            entry_map[entry.prefix] = ""
        else:
            entry_map[entry.prefix] = format_entry(entry.trimmed_description, pr_number, pr_link)
    return entry_map
