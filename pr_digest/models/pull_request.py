"""Pull Request data model."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator

from .comment import Comment
from .user import User


class PullRequest(BaseModel):
    """Pull Request model representing a closed GitHub pull request.

    Every field is fixed once decoded except ``comments``, which is filled
    exactly once by :meth:`attach_comments`.
    """

    model_config = ConfigDict(extra="ignore")

    number: int
    title: str
    body: str = ""
    user: User
    url: str | None = None
    html_url: str | None = None
    comments: list[Comment] = Field(default_factory=list)

    _comments_attached: bool = PrivateAttr(default=False)

    @field_validator("body", mode="before")
    @classmethod
    def _null_body(cls, value: Any) -> Any:
        return "" if value is None else value

    def __repr__(self) -> str:
        return f"<PullRequest(number={self.number}, title='{self.title[:50]}...')>"

    @classmethod
    def from_github_data(cls, github_data: dict[str, Any]) -> "PullRequest":
        """Create instance from GitHub API data.

        Comments embedded in the listing payload are ignored; they are
        fetched separately.
        """
        data = {key: value for key, value in github_data.items() if key != "comments"}
        return cls.model_validate(data)

    def attach_comments(self, comments: list[Comment]) -> None:
        """Populate the comment thread.

        Raises
        ------
            RuntimeError: If comments were already attached

        """
        if self._comments_attached:
            msg = f"Comments already attached to PR #{self.number}"
            raise RuntimeError(msg)
        self.comments = list(comments)
        self._comments_attached = True

    @property
    def comments_attached(self) -> bool:
        """Check if the comment thread has been populated."""
        return self._comments_attached

    @property
    def comment_count(self) -> int:
        """Get total number of comments."""
        return len(self.comments)

    @property
    def author(self) -> User:
        """Author of the pull request."""
        return self.user
