"""
Pytest設定と共有フィクスチャ。

プロジェクト全体で共有されるフィクスチャと設定を定義します。
"""

from unittest.mock import MagicMock

import pytest
from src.github.models import Repo
from src.slack.client import SlackClient


@pytest.fixture
def mock_slack() -> MagicMock:
    """SlackClientのモックを生成する。"""
    slack = MagicMock(spec=SlackClient)
    slack.send = MagicMock(return_value=None)
    return slack


@pytest.fixture
def attachments() -> list[str]:
    """そのまま渡される添付を提供。"""
    return ["a", "b"]


@pytest.fixture
def repo() -> Repo:
    """テスト用のリポジトリを提供。"""
    return Repo(
        html_url="http://git.company.com/some-user/the-repo",
        full_name="some-user/the-repo",
    )
