"""Collection of closed pull requests for a repository."""

from ..config import Settings
from ..exceptions import DecodeError, TransportError
from ..github.client import GitHubAPIClient
from ..github.decoding import decode_pull_requests
from ..models import PullRequest
from ..utils import ExchangeDump, get_logger

logger = get_logger(__name__)


class PullRequestCollector:
    """Service paginating the closed pull request listing."""

    def __init__(self, github_client: GitHubAPIClient, settings: Settings) -> None:
        """Initialize pull request collector.

        Args:
        ----
            github_client: Client used for every page request
            settings: Application settings (page bound, page size, dump file)

        """
        self.github_client = github_client
        self.settings = settings
        self.dump = ExchangeDump(settings.pr_dump_file)

    def fetch_all_pull_requests(self, owner: str, repo: str) -> list[PullRequest]:
        """Collect closed pull requests page by page.

        Pages that fail to decode are skipped. A transport error stops
        pagination; pages decoded before it are kept.

        Args:
        ----
            owner: Repository owner
            repo: Repository name

        Returns:
        -------
            Pull requests in listing order

        """
        pull_requests: list[PullRequest] = []

        for page in range(1, self.settings.page_limit + 1):
            try:
                response = self.github_client.get_closed_pull_requests(
                    owner,
                    repo,
                    page,
                    per_page=self.settings.per_page,
                    dump=self.dump,
                )
            except TransportError as e:
                logger.error("Stopping pagination at page %d: %s", page, e)
                break

            try:
                page_results = decode_pull_requests(response)
            except DecodeError as e:
                logger.error("Skipping page %d: %s", page, e)
                continue

            logger.info("Page %d: %d pull requests", page, len(page_results))
            pull_requests.extend(page_results)

        logger.info("Collected %d closed pull requests for %s/%s", len(pull_requests), owner, repo)
        return pull_requests
