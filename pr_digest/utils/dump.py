"""Raw HTTP exchange dumps for troubleshooting."""

from pathlib import Path
from urllib.parse import urlsplit

import requests

from .logging import get_logger

REDACTED_HEADERS = frozenset({"authorization"})

logger = get_logger(__name__)


def format_request(request: requests.PreparedRequest) -> str:
    """Render a prepared request as raw HTTP text, secrets redacted."""
    parts = urlsplit(request.url)
    target = parts.path or "/"
    if parts.query:
        target = f"{target}?{parts.query}"

    lines = [f"{request.method} {target} HTTP/1.1", f"Host: {parts.netloc}"]
    for name, value in request.headers.items():
        if name.lower() in REDACTED_HEADERS:
            value = "[REDACTED]"
        lines.append(f"{name}: {value}")

    body = request.body or ""
    if isinstance(body, bytes):
        body = body.decode("utf-8", errors="replace")
    return "\r\n".join(lines) + "\r\n\r\n" + body


def format_response(response: requests.Response) -> str:
    """Render a response as raw HTTP text."""
    lines = [f"HTTP/1.1 {response.status_code} {response.reason or ''}".rstrip()]
    lines.extend(f"{name}: {value}" for name, value in response.headers.items())
    return "\r\n".join(lines) + "\r\n\r\n" + response.text


class ExchangeDump:
    """Appends request/response pairs to a dump file.

    Write failures are logged and dropped; they never interrupt collection.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def record(self, response: requests.Response) -> bool:
        """Append the response and the request that produced it.

        Returns
        -------
            True when the exchange was written

        """
        text = format_request(response.request) + "\n" + format_response(response) + "\n"
        try:
            with self.path.open("a", encoding="utf-8") as fp:
                fp.write(text)
        except OSError as e:
            logger.warning("Failed to save dump to %s: %s", self.path, e)
            return False
        return True
