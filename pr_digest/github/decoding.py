"""Decoding of GitHub API payloads into models."""

from typing import Any

import requests
from pydantic import ValidationError

from ..exceptions import DecodeError
from ..models import Comment, PullRequest


def _json_array(response: requests.Response) -> list[Any]:
    """Parse the response body, requiring a JSON array."""
    try:
        payload = response.json()
    except ValueError as e:
        msg = f"Malformed JSON payload: {e}"
        raise DecodeError(msg, response.status_code) from e

    if not isinstance(payload, list):
        message = payload.get("message") if isinstance(payload, dict) else None
        msg = f"Expected a JSON array, got {type(payload).__name__}"
        if message:
            msg = f"{msg}: {message}"
        raise DecodeError(msg, response.status_code)

    return payload


def decode_pull_requests(response: requests.Response) -> list[PullRequest]:
    """Decode a pull request listing page.

    The page is all or nothing: a single invalid record rejects it.

    Raises
    ------
        DecodeError: If the payload is malformed or a record is invalid

    """
    pull_requests = []
    for index, item in enumerate(_json_array(response)):
        try:
            pull_requests.append(PullRequest.from_github_data(item))
        except (ValidationError, TypeError, AttributeError) as e:
            msg = f"Invalid pull request record at index {index}: {e}"
            raise DecodeError(msg, response.status_code) from e
    return pull_requests


def decode_comments(response: requests.Response, into: list[Comment]) -> list[Comment]:
    """Decode a comment listing, appending to ``into`` as records are read.

    Records decoded before a failure stay in ``into``.

    Raises
    ------
        DecodeError: If the payload is malformed or a record is invalid

    """
    for index, item in enumerate(_json_array(response)):
        try:
            into.append(Comment.from_github_data(item))
        except (ValidationError, TypeError, AttributeError) as e:
            msg = f"Invalid comment record at index {index}: {e}"
            raise DecodeError(msg, response.status_code) from e
    return into
