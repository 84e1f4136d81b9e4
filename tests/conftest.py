"""Test configuration and fixtures."""

import os
from collections.abc import Generator
from pathlib import Path

import pytest

from pr_digest.config import Settings

# Set environment variables immediately when this module is imported
# This ensures they're available before any other modules try to load Settings
test_env_vars = {
    "TOKEN": "test_github_token_123",
    "OWNER": "octo",
    "REPOSITORY": "widgets",
    "GITHUB_API_BASE_URL": "https://api.github.com",
    "REQUEST_DELAY": "0",
    "LOG_LEVEL": "DEBUG",
}

for key, value in test_env_vars.items():
    os.environ[key] = value


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment() -> Generator[None, None, None]:
    """Set up test environment variables."""
    yield

    for key in test_env_vars:
        os.environ.pop(key, None)


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings writing every output file under a temporary directory."""
    return Settings(
        token="test_token",
        owner="octo",
        repository="widgets",
        github_api_base_url="https://api.github.com",
        page_limit=3,
        request_delay=0,
        pr_dump_file=tmp_path / "pr.txt",
        comment_dump_file=tmp_path / "comment.txt",
        report_file=tmp_path / "year_end_review.md",
    )
