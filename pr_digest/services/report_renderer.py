"""Markdown digest rendering for collected pull requests."""

import os
from collections.abc import Iterable, Iterator
from pathlib import Path

from ..config import Settings
from ..models import Comment, PullRequest, User
from ..utils import get_logger

logger = get_logger(__name__)

# Author -> pull requests, in order of the author's first pull request
Digest = dict[User, list[PullRequest]]


def group_by_author(pull_requests: Iterable[PullRequest]) -> Digest:
    """Group pull requests by author, keeping first-occurrence order."""
    digest: Digest = {}
    for pull_request in pull_requests:
        digest.setdefault(pull_request.user, []).append(pull_request)
    return digest


def escape_headings(body: str) -> str:
    """Push PR body headings below the digest's own heading levels."""
    return body.replace("#", "#####")


class ReportRenderer:
    """Service rendering the digest and appending it to the report file."""

    def __init__(self, settings: Settings) -> None:
        """Initialize report renderer.

        Args:
        ----
            settings: Application settings (threshold, skip list, report file)

        """
        self.settings = settings
        self.report_file = Path(settings.report_file)

    def pull_request_url(self, pull_request: PullRequest) -> str:
        """Build the web URL of a pull request."""
        return (
            f"https://{self.settings.html_host}/{self.settings.owner}/"
            f"{self.settings.repository}/pull/{pull_request.number}"
        )

    def should_render(self, pull_request: PullRequest) -> bool:
        """Check if a pull request has enough comments to be rendered."""
        return pull_request.comment_count >= self.settings.min_comments

    def should_skip_comment(self, comment: Comment) -> bool:
        """Check if a comment author is on the skip list."""
        return comment.user.login in self.settings.skip_comment_users

    def iter_sections(self, digest: Digest) -> Iterator[str]:
        """Yield the digest as a sequence of markdown fragments."""
        for user, pull_requests in digest.items():
            yield f"## User\n{user.login}\n"

            for pull_request in pull_requests:
                if not self.should_render(pull_request):
                    continue

                yield (
                    f"### Title\n{pull_request.title}\n"
                    f"### URL\n{self.pull_request_url(pull_request)}\n"
                    f"### Body\n{escape_headings(pull_request.body)}\n"
                    "#### Comments\n"
                )

                for comment in pull_request.comments:
                    if self.should_skip_comment(comment):
                        continue
                    yield f"##### User\n{comment.user.login}\n{comment.body}\n"

    def render_markdown(self, digest: Digest) -> str:
        """Render the digest to a markdown string."""
        return "".join(self.iter_sections(digest))

    def render(self, pull_requests: Iterable[PullRequest]) -> Path:
        """Group pull requests and append the digest to the report file.

        Failing to open or close the file raises; individual write failures
        are logged and dropped.

        Returns
        -------
            Path of the report file

        """
        digest = group_by_author(pull_requests)
        logger.info("Rendering digest for %d authors to %s", len(digest), self.report_file)

        dropped = 0
        fp = self.report_file.open("a", encoding="utf-8")
        try:
            for section in self.iter_sections(digest):
                try:
                    fp.write(section)
                except OSError as e:
                    dropped += 1
                    logger.error("Failed to write digest section: %s", e)

            try:
                fp.flush()
                os.fsync(fp.fileno())
            except OSError as e:
                logger.error("Failed to sync %s: %s", self.report_file, e)
        finally:
            fp.close()

        if dropped:
            logger.warning("%d digest sections were not written", dropped)
        return self.report_file
