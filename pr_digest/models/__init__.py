"""
Data models for PR Digest
"""

from .comment import Comment
from .pull_request import PullRequest
from .user import User

__all__ = [
    "Comment",
    "PullRequest",
    "User",
]
