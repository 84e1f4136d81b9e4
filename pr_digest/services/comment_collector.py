"""Collection of issue comments for pull requests."""

from ..config import Settings
from ..exceptions import DecodeError, TransportError
from ..github.client import GitHubAPIClient
from ..github.decoding import decode_comments
from ..models import Comment, PullRequest
from ..utils import ExchangeDump, get_logger

logger = get_logger(__name__)


class CommentCollector:
    """Service fetching the comment thread of each pull request."""

    def __init__(self, github_client: GitHubAPIClient, settings: Settings) -> None:
        self.github_client = github_client
        self.settings = settings
        self.dump = ExchangeDump(settings.comment_dump_file)

    def fetch_comments(self, pull_request: PullRequest) -> list[Comment]:
        """Fetch the issue comments of one pull request.

        A decode error is logged and the comments read before it are
        returned.

        Raises
        ------
            TransportError: If the request could not be completed

        """
        response = self.github_client.get_issue_comments(
            self.settings.owner,
            self.settings.repository,
            pull_request.number,
            dump=self.dump,
        )

        comments: list[Comment] = []
        try:
            decode_comments(response, comments)
        except DecodeError as e:
            logger.error("Comments of PR #%d truncated to %d: %s", pull_request.number, len(comments), e)

        return comments

    def collect(self, pull_requests: list[PullRequest]) -> int:
        """Attach comments to every pull request, in order.

        A transport error stops the stage: the remaining pull requests keep
        an empty comment thread.

        Returns
        -------
            Number of pull requests whose comments were fetched

        """
        processed = 0
        for pull_request in pull_requests:
            try:
                comments = self.fetch_comments(pull_request)
            except TransportError as e:
                logger.error(
                    "Stopping comment collection at PR #%d, %d pull requests left: %s",
                    pull_request.number,
                    len(pull_requests) - processed,
                    e,
                )
                break

            pull_request.attach_comments(comments)
            processed += 1

        logger.info("Fetched comments for %d of %d pull requests", processed, len(pull_requests))
        return processed
