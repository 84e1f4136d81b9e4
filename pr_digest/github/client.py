"""GitHub API client for collecting pull request data."""

from typing import Any
from urllib.parse import urljoin

import requests

from pr_digest.config import Settings, get_github_headers
from pr_digest.exceptions import TransportError
from pr_digest.utils import ExchangeDump, Throttle, get_logger
from pr_digest.utils.dump import format_request

logger = get_logger(__name__)


class GitHubAPIClient:
    """GitHub API client with fixed-delay throttling.

    Non-2xx responses are returned to the caller like any other response;
    only failures to complete the exchange raise.
    """

    def __init__(
        self,
        settings: Settings,
        throttle: Throttle | None = None,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize GitHub API client.

        Args:
        ----
            settings: Application settings holding the token and API base URL
            throttle: Throttle shared by every request of this client
            session: Preconfigured HTTP session

        """
        self.settings = settings
        self.base_url = settings.github_api_base_url.rstrip("/") + "/"
        self.throttle = throttle or Throttle(settings.request_delay)
        self.session = session or requests.Session()
        self.session.headers.update(get_github_headers(settings))

    def _make_request(
        self,
        method: str,
        url: str,
        dump: ExchangeDump | None = None,
        **kwargs: Any,  # noqa: ANN401
    ) -> requests.Response:
        """Make HTTP request after waiting for the throttle.

        Args:
        ----
            method: HTTP method (GET, POST, etc.)
            url: Request URL, absolute or relative to the API base URL
            dump: Dump file receiving the raw exchange
            **kwargs: Additional request parameters

        Returns:
        -------
            requests.Response: Response object

        Raises:
        ------
            TransportError: If the request could not be completed

        """
        self.throttle.wait()

        # Ensure URL is complete
        if not url.startswith(("http://", "https://")):
            url = urljoin(self.base_url, url.lstrip("/"))

        logger.debug("Making %s request to %s", method, url)

        try:
            response = self.session.request(method, url, **kwargs)
        except requests.RequestException as e:
            logger.error("Request to %s failed: %s", url, e)
            raise TransportError(url, e) from e

        logger.debug("Request dump:\n%s", format_request(response.request))
        logger.info("%s %s -> %d", method, response.url, response.status_code)

        if dump is not None:
            dump.record(response)

        return response

    def get_closed_pull_requests(
        self,
        owner: str,
        repo: str,
        page: int,
        per_page: int = 100,
        dump: ExchangeDump | None = None,
    ) -> requests.Response:
        """Get one page of closed pull requests.

        Args:
        ----
            owner: Repository owner
            repo: Repository name
            page: 1-based page number
            per_page: Number of results per page
            dump: Dump file receiving the raw exchange

        Returns:
        -------
            Raw response for the page

        """
        url = f"/repos/{owner}/{repo}/pulls"
        params = {"state": "closed", "per_page": per_page, "page": page}

        return self._make_request("GET", url, dump=dump, params=params)

    def get_issue_comments(
        self,
        owner: str,
        repo: str,
        issue_number: int,
        dump: ExchangeDump | None = None,
    ) -> requests.Response:
        """Get issue comments for a pull request (treated as issue).

        Args:
        ----
            owner: Repository owner
            repo: Repository name
            issue_number: Issue/PR number
            dump: Dump file receiving the raw exchange

        Returns:
        -------
            Raw response for the comment listing

        """
        url = f"/repos/{owner}/{repo}/issues/{issue_number}/comments"

        return self._make_request("GET", url, dump=dump)
