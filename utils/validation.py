#!/usr/bin/env python3
from __future__ import annotations

import logging
from typing import Optional

from configs.config import Config
from utils.changelog_errors import (
	MissingChangelogPullRequestBridgeApiKeyError,
	MissingChangelogPullRequestBridgeUrlDomainError,
)


logger = logging.getLogger(__name__)


def _is_blank(value: Optional[str]) -> bool:
	return not value or not value.strip()


def check_bridge_url_domain_configured(url_domain: Optional[str] = None) -> None:
	value = Config.get_bridge_config()["url_domain"] if url_domain is None else url_domain
	if _is_blank(value):
		logger.error("CHANGELOG_PR_BRIDGE_URL_DOMAIN constant is not configured.")
		raise MissingChangelogPullRequestBridgeUrlDomainError()


def check_bridge_api_key_configured(api_key: Optional[str] = None) -> None:
	value = Config.get_bridge_config()["api_key"] if api_key is None else api_key
	if _is_blank(value):
		logger.error("CHANGELOG_PR_BRIDGE_API_KEY constant is not configured.")
		raise MissingChangelogPullRequestBridgeApiKeyError()
