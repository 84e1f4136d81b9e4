"""Comment data model."""

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from .user import User


class Comment(BaseModel):
    """Issue comment left on a pull request."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    user: User
    body: str = ""
    url: str | None = None
    html_url: str | None = None

    @field_validator("body", mode="before")
    @classmethod
    def _null_body(cls, value: Any) -> Any:
        return "" if value is None else value

    def __repr__(self) -> str:
        """Return a string representation of the Comment object."""
        return f"<Comment(author='{self.user.login}', body='{self.body[:50]}...')>"

    @classmethod
    def from_github_data(cls, github_data: dict[str, Any]) -> "Comment":
        """Create instance from GitHub API data."""
        return cls.model_validate(github_data)

    @property
    def author_login(self) -> str:
        """Login of the comment author."""
        return self.user.login
