"""Unit tests for GitHub API client."""

from unittest.mock import Mock
from urllib.parse import parse_qs, urlsplit

import pytest
import requests
import responses

from pr_digest.exceptions import TransportError
from pr_digest.github.client import GitHubAPIClient
from pr_digest.utils import ExchangeDump

from factories import make_comment, make_pr

PULLS_URL = "https://api.github.com/repos/octo/widgets/pulls"
COMMENTS_URL = "https://api.github.com/repos/octo/widgets/issues/7/comments"


class TestGitHubAPIClient:
    """Test GitHub API client."""

    @pytest.fixture(autouse=True)
    def _client(self, settings) -> None:
        self.settings = settings
        self.client = GitHubAPIClient(settings)

    def test_initialization_sets_headers(self) -> None:
        """Test the session authenticates with a bearer token."""
        assert self.client.session.headers["Authorization"] == "Bearer test_token"
        assert self.client.session.headers["Accept"] == "application/vnd.github.v3+json"
        assert self.client.throttle.interval == 0

    @responses.activate
    def test_get_closed_pull_requests(self) -> None:
        """Test a listing page is requested with state, page size and page number."""
        responses.add(responses.GET, PULLS_URL, json=[make_pr(1, "alice")], status=200)

        response = self.client.get_closed_pull_requests("octo", "widgets", 2)

        assert response.json()[0]["number"] == 1
        query = parse_qs(urlsplit(responses.calls[0].request.url).query)
        assert query == {"state": ["closed"], "per_page": ["100"], "page": ["2"]}

    @responses.activate
    def test_get_issue_comments(self) -> None:
        """Test comments are read from the issue comments endpoint."""
        responses.add(responses.GET, COMMENTS_URL, json=[make_comment("bob", "LGTM")], status=200)

        response = self.client.get_issue_comments("octo", "widgets", 7)

        assert response.json()[0]["body"] == "LGTM"
        assert responses.calls[0].request.headers["Authorization"] == "Bearer test_token"

    @responses.activate
    def test_error_status_is_returned(self) -> None:
        """Test HTTP error statuses are not transport errors."""
        responses.add(responses.GET, COMMENTS_URL, json={"message": "Server Error"}, status=502)

        response = self.client.get_issue_comments("octo", "widgets", 7)

        assert response.status_code == 502

    @responses.activate
    def test_connection_error_raises_transport_error(self) -> None:
        """Test connection failures are wrapped in TransportError."""
        responses.add(responses.GET, COMMENTS_URL, body=requests.ConnectionError("connection reset"))

        with pytest.raises(TransportError) as exc_info:
            self.client.get_issue_comments("octo", "widgets", 7)

        assert isinstance(exc_info.value.cause, requests.ConnectionError)
        assert exc_info.value.url == COMMENTS_URL

    @responses.activate
    def test_every_request_waits_for_throttle(self) -> None:
        """Test the throttle is consulted before each request."""
        throttle = Mock()
        client = GitHubAPIClient(self.settings, throttle=throttle)
        responses.add(responses.GET, PULLS_URL, json=[], status=200)
        responses.add(responses.GET, COMMENTS_URL, json=[], status=200)

        client.get_closed_pull_requests("octo", "widgets", 1)
        client.get_issue_comments("octo", "widgets", 7)

        assert throttle.wait.call_count == 2

    @responses.activate
    def test_exchange_is_dumped(self, tmp_path) -> None:
        """Test request and response are appended to the dump file."""
        dump = ExchangeDump(tmp_path / "pr.txt")
        responses.add(responses.GET, PULLS_URL, json=[make_pr(1, "alice")], status=200)

        self.client.get_closed_pull_requests("octo", "widgets", 1, dump=dump)
        self.client.get_closed_pull_requests("octo", "widgets", 2, dump=dump)

        text = (tmp_path / "pr.txt").read_text(encoding="utf-8")
        assert "GET /repos/octo/widgets/pulls?state=closed&per_page=100&page=1 HTTP/1.1" in text
        assert "GET /repos/octo/widgets/pulls?state=closed&per_page=100&page=2 HTTP/1.1" in text
        assert "Host: api.github.com" in text
        assert "HTTP/1.1 200" in text
        assert '"login": "alice"' in text
        assert "Authorization: [REDACTED]" in text
        assert "test_token" not in text

    @responses.activate
    def test_dump_failure_is_not_fatal(self, tmp_path) -> None:
        """Test an unwritable dump file does not fail the request."""
        dump = ExchangeDump(tmp_path)
        responses.add(responses.GET, PULLS_URL, json=[], status=200)

        response = self.client.get_closed_pull_requests("octo", "widgets", 1, dump=dump)

        assert response.status_code == 200
        assert dump.record(response) is False
