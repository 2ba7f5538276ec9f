"""
通知送信モジュール。

Issue/PRの担当者(またはオーナー)宛てにSlackメッセージを送信する:
- assignees: Issue/PRからメンション先のリストを作成
- send_to_all: デフォルトチャンネルと各メンション先にメッセージを送信
"""

import logging
from collections.abc import Sequence
from typing import Any

from src.github.models import Issue, Repo, User
from src.slack.client import SlackClient
from src.slack.models import SlackMessage
from src.users.config import UserConfig, mention

logger = logging.getLogger(__name__)


def make_link(url: str, text: str) -> str:
    """Slack形式のリンクを返す。

    Args:
        url: リンク先URL
        text: 表示テキスト

    Returns:
        "<url|text>" 形式の文字列
    """
    return f"<{url}|{text}>"


def _user_ref(user: User, users: UserConfig | None, repo: Repo | None) -> str:
    if users is not None and repo is not None:
        return users.slack_user_ref(user.login, repo)
    return mention(user.login)


def assignees(
    issue: Issue | None,
    users: UserConfig | None = None,
    repo: Repo | None = None,
) -> list[str]:
    """Issue/PRの担当者のメンション文字列を返す。

    assignees(複数)があればそれを優先し、空リストであってもassignee(単数)は参照しない。

    Args:
        issue: Issue/PR。Noneの場合は空リストを返す。
        users: Slackユーザー名の対応表(repoと併せて指定した場合のみ使用)
        repo: ホスト判定用のリポジトリ

    Returns:
        担当者の順序を保ったメンション文字列のリスト
    """
    if issue is None:
        return []
    if issue.assignees is not None:
        return [_user_ref(a, users, repo) for a in issue.assignees]
    if issue.assignee is not None:
        return [_user_ref(issue.assignee, users, repo)]
    return []


def send_to_all(
    slack: SlackClient,
    text: str,
    attachments: Sequence[Any],
    issue: Issue | None,
    repo: Repo | None,
    users: UserConfig | None = None,
) -> None:
    """デフォルトチャンネルと担当者(いなければオーナー)にメッセージを送信する。

    送信順序:
    1. デフォルトチャンネル(channelなし)に1回
    2. 担当者ごとに1回
    3. assignees/assigneeがともに未設定の場合のみ、オーナーに1回
       (assigneesが空リストの場合はオーナーにも送信しない)

    slack.sendが送出した例外はそのまま呼び出し元に伝播する。

    Args:
        slack: Slackクライアント
        text: メッセージ本文
        attachments: 添付(そのまま渡す)
        issue: 宛先を決めるIssue/PR
        repo: リポジトリ。指定した場合は本文末尾にリンクを付与する。
        users: Slackユーザー名の対応表
    """
    if repo is not None:
        text = f"{text} ({make_link(repo.html_url, repo.full_name)})"

    slack.send(SlackMessage(text=text, attachments=attachments))

    mentions = assignees(issue, users, repo)
    if (
        issue is not None
        and issue.assignees is None
        and issue.assignee is None
        and issue.user is not None
    ):
        mentions = [_user_ref(issue.user, users, repo)]

    for channel in mentions:
        slack.send(SlackMessage(text=text, attachments=attachments, channel=channel))

    logger.debug("Sent message to default channel and %d recipients", len(mentions))
