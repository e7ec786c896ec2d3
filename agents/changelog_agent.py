#!/usr/bin/env python3
"""Changelog agent for pull request changelog validation.

This agent reads the changelog section of a pull request description,
validates every entry, keeps the skip label in sync and commits the
changeset fragment to the pull request branch.
"""

import json
import logging
import sys
from dataclasses import dataclass, field
from typing import Optional

from configs.config import Config
from utils.changelog_errors import ChangelogError, EmptyChangelogSectionError, MissingChangelogSectionError
from utils.changelog_parser import build_entry_map, extract_changelog_entries
from utils.changeset_renderer import changeset_path, encode_content, render_changeset
from utils.changeset_writer import create_or_update_file
from utils.entry_models import CreationMode, EntryMap, ValidatorConfig
from utils.entry_validator import EntryValidator
from utils.github_client import CodeHostClient
from utils.pr_commenter import PRCommenter
from utils.pr_fetcher import PRFetcher
from utils.pr_labels import is_autocut
from utils.pr_models import PullRequestData
from utils.skip_policy import handle_skip_option, resolve_skip
from utils.validation import check_bridge_api_key_configured, check_bridge_url_domain_configured

# Set up logging
logger = logging.getLogger(__name__)


@dataclass
class RunResult:
	status: str
	pr_number: int
	entry_map: EntryMap = field(default_factory=dict)
	path: Optional[str] = None
	updated: bool = False

	def to_dict(self) -> dict:
		return {
			"status": self.status,
			"pr_number": self.pr_number,
			"entry_map": dict(self.entry_map),
			"path": self.path,
			"updated": self.updated,
		}


class ChangelogAgent:
	"""Agent for validating changelog entries and writing changeset files."""

	def __init__(self, client: CodeHostClient, validator_config: Optional[ValidatorConfig] = None):
		"""Initialize the changelog agent.

		Args:
			client: Code-host client used for every API call
			validator_config: Optional validator settings. If None, built from Config.
		"""
		self.client = client
		self.validator_config = validator_config or ValidatorConfig(**Config.get_validator_config())
		self.validator = EntryValidator(self.validator_config)
		self.fetcher = PRFetcher(client)
		self.commenter = PRCommenter(client)
		self.settings = Config.get_changeset_config()
		logger.info("Changelog agent initialized")

	def run(self, owner: str, repo: str, pr_number: int, mode: CreationMode = CreationMode.AUTOMATIC, dry_run: bool = False) -> RunResult:
		"""Process one pull request.

		Args:
			owner: Repository owner (user or organization)
			repo: Repository name
			pr_number: Pull request number
			mode: Changeset creation mode
			dry_run: Validate only; no labels, files or comments are written

		Returns:
			RunResult describing what happened

		Raises:
			ChangelogError: Any validation, configuration or GitHub failure
		"""
		logger.info(f"Validating changelog for {owner}/{repo}#{pr_number} (mode={mode.value})")
		pr = self.fetcher.extract_pull_request_data(owner, repo, pr_number)
		try:
			return self._process(pr, mode, dry_run)
		except ChangelogError as e:
			logger.error(f"{e.name}: {e}")
			if Config.ERROR_FEEDBACK_ENABLED and not dry_run:
				self.commenter.post_error_comment(pr.owner, pr.repo, pr.number, e)
			raise

	def _process(self, pr: PullRequestData, mode: CreationMode, dry_run: bool) -> RunResult:
		"""Validate, sync the skip label and commit the changeset for one PR.

		For fork PRs the bridge guards only check that the bridge settings exist;
		the bridge itself is not called. The fragment is committed to the head
		repository with the configured token, which therefore needs push rights
		there.
		"""
		if is_autocut(self.client, pr, self.settings["autocut_label"]):
			return RunResult(status="autocut", pr_number=pr.number)

		if pr.is_fork and mode == CreationMode.AUTOMATIC:
			check_bridge_url_domain_configured()
			check_bridge_api_key_configured()
			logger.warning(
				f"PR #{pr.number} comes from fork {pr.commit_owner}/{pr.commit_repo}; "
				"committing the changeset requires a token with push rights to that repository."
			)

		try:
			lines = extract_changelog_entries(pr.description)
		except (MissingChangelogSectionError, EmptyChangelogSectionError):
			if mode != CreationMode.MANUAL:
				raise
			# Manual changesets are maintained by the author.
			lines = []

		entry_map = build_entry_map(lines, self.validator, mode, pr.number, pr.link)

		if dry_run:
			skip = resolve_skip(entry_map)
		else:
			skip = handle_skip_option(self.client, pr, entry_map, self.settings["skip_label"])
		if skip:
			return RunResult(status="skip", pr_number=pr.number, entry_map=entry_map)

		if mode == CreationMode.MANUAL:
			logger.info("Manual changeset creation mode; changeset file is left to the author.")
			return RunResult(status="manual", pr_number=pr.number, entry_map=entry_map)

		path = changeset_path(pr.number, self.settings["root"])
		content = render_changeset(entry_map, self.validator_config.prefixes)
		if dry_run:
			logger.info(f"Dry run; would write {path}:\n{content}")
			return RunResult(status="validated", pr_number=pr.number, entry_map=entry_map, path=path)

		message = self.settings["commit_message"].format(number=pr.number)
		updated = create_or_update_file(
			self.client,
			pr.commit_owner,
			pr.commit_repo,
			path,
			encode_content(content),
			message,
			pr.branch_ref,
		)
		return RunResult(status="written", pr_number=pr.number, entry_map=entry_map, path=path, updated=updated)


def main(argv=None):
	"""CLI entry point for the changelog agent."""
	import argparse

	from dotenv import load_dotenv

	from utils.github_client import GithubAuthError, GithubClient
	from utils.pr_fetcher import load_event_context

	parser = argparse.ArgumentParser(
		description="Changelog PR bot - validate changelog entries and write changeset files",
		formatter_class=argparse.RawDescriptionHelpFormatter,
		epilog="""
Examples:
  python -m agents.changelog_agent
  python -m agents.changelog_agent --owner opensearch-project --repo OpenSearch-Dashboards --pr 1234 --dry-run
  python -m agents.changelog_agent --owner o --repo r --pr 1 --mode manual --json
		"""
	)
	parser.add_argument("--owner", required=False, help="Repository owner (defaults to GITHUB_REPOSITORY)")
	parser.add_argument("--repo", required=False, help="Repository name (defaults to GITHUB_REPOSITORY)")
	parser.add_argument("--pr", type=int, required=False, help="Pull request number (defaults to the event payload)")
	parser.add_argument("--mode", choices=[m.value for m in CreationMode], default=None, help="Changeset creation mode")
	parser.add_argument("--dry-run", action="store_true", help="Validate only; do not touch labels, files or comments")
	parser.add_argument("--json", action="store_true", help="Print the run result as JSON")
	parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

	args = parser.parse_args(argv)
	load_dotenv()

	# Set up logging
	log_level = logging.DEBUG if args.verbose else logging.INFO
	logging.basicConfig(
		level=log_level,
		format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
	)

	# Suppress verbose logs from libraries unless in debug mode
	if not args.verbose:
		logging.getLogger("utils.github_client").setLevel(logging.WARNING)

	mode = CreationMode.parse(args.mode or Config.CHANGESET_CREATION_MODE)
	client = None
	try:
		if args.owner and args.repo and args.pr:
			owner, repo, pr_number = args.owner, args.repo, args.pr
		else:
			owner, repo, pr_number = load_event_context()
		client = GithubClient()
		agent = ChangelogAgent(client)
		result = agent.run(owner, repo, pr_number, mode=mode, dry_run=args.dry_run)
	except ChangelogError as e:
		print(f"Error: {e.name}: {e}", file=sys.stderr)
		return 1
	except GithubAuthError as e:
		print(f"Error: {e}", file=sys.stderr)
		return 1
	finally:
		if client is not None:
			client.close()

	if args.json:
		print(json.dumps(result.to_dict(), indent=2))
	else:
		print(f"PR #{result.pr_number}: {result.status}")
		if result.path:
			print(f"Changeset: {result.path}")
	return 0


if __name__ == "__main__":
	sys.exit(main())
