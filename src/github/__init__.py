"""
GitHubモジュール。

通知で参照するWebhookペイロードの型定義を提供する。
"""

from src.github.models import (
    Comment,
    HookBody,
    Issue,
    PullRequest,
    Repo,
    Review,
    User,
)

__all__ = [
    "Comment",
    "HookBody",
    "Issue",
    "PullRequest",
    "Repo",
    "Review",
    "User",
]
