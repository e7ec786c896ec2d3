#!/usr/bin/env python3
from __future__ import annotations

import base64
from typing import Dict, List, Optional, Sequence

import yaml

from utils.entry_models import EntryMap


def changeset_path(pr_number: int, root: str = "changelogs/fragments") -> str:
	return f"{root.rstrip('/')}/{pr_number}.yml"


def _ordered_prefixes(entry_map: EntryMap, order: Optional[Sequence[str]]) -> List[str]:
	rank = {p: i for i, p in enumerate(order or [])}
	return sorted(entry_map, key=lambda p: (rank.get(p, len(rank)), p))


def render_changeset(entry_map: EntryMap, order: Optional[Sequence[str]] = None) -> str:
	"""Render an entry map as the YAML changeset fragment.

	Each prefix maps to a one-item list holding its formatted entry, e.g.

		feat:
		- Add dark mode ([#12](https://github.com/o/r/pull/12))
	"""
	data: Dict[str, List[str]] = {p: [entry_map[p]] for p in _ordered_prefixes(entry_map, order)}
	return yaml.safe_dump(data, sort_keys=False, allow_unicode=True, default_flow_style=False, width=1000)


def encode_content(text: str) -> str:
	return base64.b64encode(text.encode("utf-8")).decode("ascii")
