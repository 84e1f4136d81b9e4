"""User data model."""

from pydantic import BaseModel, ConfigDict


class User(BaseModel):
    """GitHub account that authored a pull request or comment."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    login: str

    def __str__(self) -> str:
        return self.login
