"""
ユーザー設定モジュール。

GitHubのログイン名をSlackのユーザー名に変換する。
設定ファイルはGitHubホストごとに「ログイン名 -> Slackユーザー情報」を持つJSON:

    {"github.com": {"joe-smith": {"slack": "joe"}}}
"""

import logging
from pathlib import Path
from urllib.parse import urlparse

from pydantic import BaseModel, TypeAdapter

from src.config.settings import Settings
from src.github.models import Repo

logger = logging.getLogger(__name__)


class UserInfo(BaseModel):
    """Slackユーザー情報。

    Attributes:
        slack: Slackのユーザー名
    """

    slack: str


# GitHubホスト -> (ログイン名 -> ユーザー情報)
UserHostMap = dict[str, dict[str, UserInfo]]

_USER_HOST_MAP_ADAPTER: TypeAdapter[UserHostMap] = TypeAdapter(UserHostMap)


def mention(username: str) -> str:
    """Slackのメンション文字列を返す。

    Args:
        username: ユーザー名

    Returns:
        "@" を先頭に付けたメンション文字列
    """
    return "@" + username


class UserConfig:
    """GitHubログイン名とSlackユーザー名の対応表。

    Attributes:
        _users: GitHubホストごとのユーザー対応表
    """

    def __init__(self, users: UserHostMap | None = None) -> None:
        self._users: UserHostMap = users or {}

    def slack_user_name(self, login: str, repo: Repo) -> str:
        """GitHubログイン名に対応するSlackユーザー名を返す。

        対応表にない場合は、GitHubが "." を "-" に置き換える慣習に合わせて
        "-" を "." に戻した名前を返す。

        Args:
            login: GitHubのログイン名
            repo: ホストの判定に使うリポジトリ

        Returns:
            Slackのユーザー名
        """
        info = self._lookup_info(login, repo)
        if info is not None:
            return info.slack
        return login.replace("-", ".")

    def slack_user_ref(self, login: str, repo: Repo) -> str:
        """GitHubログイン名に対応するSlackメンション文字列を返す。"""
        return mention(self.slack_user_name(login, repo))

    def _lookup_info(self, login: str, repo: Repo) -> UserInfo | None:
        try:
            host = urlparse(repo.html_url).hostname
        except ValueError:
            return None
        if not host:
            return None
        return self._users.get(host, {}).get(login)


def load_users_config(path: str | Path) -> UserConfig:
    """JSONファイルからユーザー設定を読み込む。

    Args:
        path: 設定ファイルのパス

    Returns:
        UserConfig: 読み込んだユーザー設定

    Raises:
        OSError: ファイルを読み込めない場合
        pydantic.ValidationError: JSONの形式が不正な場合
    """
    contents = Path(path).read_text(encoding="utf-8")
    users = _USER_HOST_MAP_ADAPTER.validate_json(contents)
    logger.info("Loaded users config from %s (%d hosts)", path, len(users))
    return UserConfig(users)


def create_user_config(settings: Settings) -> UserConfig:
    """設定からユーザー設定を生成する。

    users_config_pathが未設定の場合は空の対応表を返す。

    Args:
        settings: アプリケーション設定

    Returns:
        UserConfig: 生成したユーザー設定
    """
    if settings.users_config_path is None:
        logger.info("No users config path set; using login names as Slack names")
        return UserConfig()
    return load_users_config(settings.users_config_path)
