"""
Application configuration management
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from . import __version__
from .exceptions import ConfigurationError


class LoggingSettings(BaseSettings):
    """Logging settings, loadable without credentials"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field("INFO")
    log_format: str = Field("%(asctime)s - %(name)s - %(levelname)s - %(message)s")


class Settings(LoggingSettings):
    """Application settings"""

    # Required credentials and target repository
    token: str = Field(..., min_length=1)
    owner: str = Field(..., min_length=1)
    repository: str = Field(..., min_length=1)

    # GitHub API Configuration
    github_api_base_url: str = Field("https://api.github.com")
    html_host: str = Field("github.com")
    accept_header: str = "application/vnd.github.v3+json"

    # Data Collection Configuration
    page_limit: int = Field(14, ge=1)
    per_page: int = Field(100, ge=1, le=100)
    request_delay: float = Field(5.0, ge=0)

    # Report Configuration
    min_comments: int = Field(3, ge=0)
    skip_comment_users: frozenset[str] = Field(frozenset({"github-actions[bot]"}))

    # Output files
    pr_dump_file: Path = Field(Path("pr.txt"))
    comment_dump_file: Path = Field(Path("comment.txt"))
    report_file: Path = Field(Path("year_end_review.md"))


@lru_cache()
def get_logging_settings() -> LoggingSettings:
    """Get cached logging settings instance"""
    return LoggingSettings()


def load_settings(**overrides) -> Settings:
    """Build settings from the environment.

    Every missing required variable is reported in a single
    ConfigurationError.
    """
    try:
        return Settings(**overrides)
    except ValidationError as e:
        missing = sorted(
            str(error["loc"][0]).upper()
            for error in e.errors()
            if error["type"] in ("missing", "string_too_short")
        )
        if missing:
            raise ConfigurationError(missing) from e
        raise


def get_github_headers(settings: Settings) -> dict:
    """Get GitHub API headers with authentication"""
    return {
        "Authorization": f"Bearer {settings.token}",
        "Accept": settings.accept_header,
        "User-Agent": f"pr-digest/{__version__}",
    }
