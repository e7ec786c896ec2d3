import os
from typing import Dict, Any, List

class Config:
	"""Configuration for the changelog PR bot."""

	# Changelog entry grammar
	MAX_ENTRY_LENGTH = int(os.getenv("MAX_ENTRY_LENGTH", "100"))
	CHANGELOG_ENTRY_PREFIXES = os.getenv(
		"CHANGELOG_ENTRY_PREFIXES",
		"breaking,chore,deprecate,doc,feat,fix,infra,refactor,security,skip,test",
	)
	# marker, prefix, description
	ENTRY_FORMATTING_PATTERN = os.getenv(
		"ENTRY_FORMATTING_PATTERN",
		r"^\s*(\S*?)\s*([A-Za-z][\w-]*)\s*:\s*(.*)$",
	)
	CHANGESET_CREATION_MODE = os.getenv("CHANGESET_CREATION_MODE", "automatic")

	# Labels
	SKIP_LABEL = os.getenv("SKIP_LABEL", "Skip-Changelog")
	AUTOCUT_LABEL = os.getenv("AUTOCUT_LABEL", "autocut")

	# Changeset fragments
	CHANGESET_ROOT = os.getenv("CHANGESET_ROOT", "changelogs/fragments").rstrip("/")
	CHANGESET_COMMIT_MESSAGE = os.getenv("CHANGESET_COMMIT_MESSAGE", "Changeset file for PR #{number} created/updated")

	# GitHub REST Configuration
	GITHUB_API_URL = os.getenv("GITHUB_API_URL", "https://api.github.com").rstrip('/')
	GITHUB_TOKEN = os.getenv("GITHUB_TOKEN") or os.getenv("GITHUB_PAT")
	HTTP_TIMEOUT_S = int(os.getenv("HTTP_TIMEOUT_S", "30"))

	# Changelog PR bridge (forked repositories)
	CHANGELOG_PR_BRIDGE_URL_DOMAIN = os.getenv("CHANGELOG_PR_BRIDGE_URL_DOMAIN", "")
	CHANGELOG_PR_BRIDGE_API_KEY = os.getenv("CHANGELOG_PR_BRIDGE_API_KEY", "")

	ERROR_FEEDBACK_ENABLED = bool(int(os.getenv("ERROR_FEEDBACK_ENABLED", "1")))

	@classmethod
	def entry_prefixes(cls) -> List[str]:
		parts = [p.strip().lower() for p in cls.CHANGELOG_ENTRY_PREFIXES.split(",") if p.strip()]
		return list(dict.fromkeys(parts))

	@classmethod
	def get_validator_config(cls) -> Dict[str, Any]:
		"""Get changelog entry validator configuration.

		Returns:
			Mapping with max entry length, prefix taxonomy and entry pattern.
		"""
		return {
			"max_entry_length": cls.MAX_ENTRY_LENGTH,
			"prefixes": cls.entry_prefixes(),
			"entry_pattern": cls.ENTRY_FORMATTING_PATTERN,
		}

	@classmethod
	def get_github_config(cls) -> Dict[str, Any]:
		"""Get GitHub configuration for the REST client."""
		return {
			"base_url": cls.GITHUB_API_URL,
			"token": cls.GITHUB_TOKEN,
			"timeout_s": cls.HTTP_TIMEOUT_S
		}

	@classmethod
	def get_bridge_config(cls) -> Dict[str, Any]:
		return {
			"url_domain": cls.CHANGELOG_PR_BRIDGE_URL_DOMAIN,
			"api_key": cls.CHANGELOG_PR_BRIDGE_API_KEY,
		}

	@classmethod
	def get_changeset_config(cls) -> Dict[str, Any]:
		return {
			"root": cls.CHANGESET_ROOT,
			"commit_message": cls.CHANGESET_COMMIT_MESSAGE,
			"skip_label": cls.SKIP_LABEL,
			"autocut_label": cls.AUTOCUT_LABEL,
		}
