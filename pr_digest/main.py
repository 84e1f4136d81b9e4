"""Command-line entry point for PR Digest."""

import sys
from pathlib import Path

from pr_digest.config import Settings, load_settings
from pr_digest.exceptions import ConfigurationError
from pr_digest.github.client import GitHubAPIClient
from pr_digest.services.comment_collector import CommentCollector
from pr_digest.services.pr_collector import PullRequestCollector
from pr_digest.services.report_renderer import ReportRenderer
from pr_digest.utils import get_logger

logger = get_logger(__name__)


def run(settings: Settings, github_client: GitHubAPIClient | None = None) -> Path:
    """Collect pull requests and comments, then append the digest.

    Args:
    ----
        settings: Application settings
        github_client: Client to use instead of a freshly configured one

    Returns:
    -------
        Path of the report file

    """
    github_client = github_client or GitHubAPIClient(settings)
    owner, repo = settings.owner, settings.repository

    logger.info("Starting digest for %s/%s", owner, repo)

    pull_requests = PullRequestCollector(github_client, settings).fetch_all_pull_requests(owner, repo)
    CommentCollector(github_client, settings).collect(pull_requests)
    report_file = ReportRenderer(settings).render(pull_requests)

    logger.info("Digest appended to %s", report_file)
    return report_file


def main() -> int:
    """Run the digest with settings from the environment."""
    try:
        settings = load_settings()
    except ConfigurationError as e:
        logger.error("%s", e)
        return 1

    run(settings)
    return 0


if __name__ == "__main__":
    sys.exit(main())
