"""
ユーザーモジュール。

GitHubログイン名からSlackユーザー名・メンションへの変換を提供する。
"""

from src.users.config import (
    UserConfig,
    UserInfo,
    create_user_config,
    load_users_config,
    mention,
)

__all__ = [
    "UserConfig",
    "UserInfo",
    "create_user_config",
    "load_users_config",
    "mention",
]
