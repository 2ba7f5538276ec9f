"""
コメント・レビュー通知モジュール。

GitHub Webhookペイロードからメッセージと添付を組み立て、send_to_allで送信する。
各関数は通知を送信した場合にTrueを返す。
"""

import logging

from src.github.models import HookBody, Issue, PullRequest, User
from src.messages.messenger import make_link, send_to_all
from src.slack.client import SlackClient
from src.slack.models import SlackAttachment
from src.users.config import UserConfig

logger = logging.getLogger(__name__)

SHORT_SHA_LENGTH = 7

# レビュー状態 -> (動作, 状態表示, 色)
REVIEW_STATE_MAP: dict[str, tuple[str, str, str]] = {
    "approved": ("approved", "Approved", "good"),
    "changes_requested": ("requested changes to", "Changes Requested", "danger"),
}


def _comment_attachment(
    body: str,
    commenter: User,
    comment_url: str,
    data: HookBody,
    users: UserConfig,
) -> SlackAttachment:
    slack_user = users.slack_user_name(commenter.login, data.repository)
    return SlackAttachment(
        text=body,
        title=f"{slack_user} said:",
        title_link=comment_url,
    )


def _notify_item_comment(
    slack: SlackClient,
    item: Issue,
    commenter: User,
    body: str,
    comment_url: str,
    data: HookBody,
    users: UserConfig,
) -> bool:
    msg = f'Comment on "{make_link(item.html_url, item.title)}"'
    attachments = [_comment_attachment(body, commenter, comment_url, data, users)]
    send_to_all(slack, msg, attachments, item, data.repository, users)
    return True


def _notify_pull_request_comment(
    slack: SlackClient,
    pull_request: PullRequest,
    commenter: User,
    body: str,
    comment_url: str,
    data: HookBody,
    users: UserConfig,
) -> bool:
    if not body.strip():
        logger.info("Skipping empty comment on %s", pull_request.html_url)
        return False
    return _notify_item_comment(
        slack, pull_request, commenter, body, comment_url, data, users
    )


def notify_issue_comment(slack: SlackClient, data: HookBody, users: UserConfig) -> bool:
    """issue_commentイベントを通知する。

    Args:
        slack: Slackクライアント
        data: Webhookペイロード
        users: Slackユーザー名の対応表

    Returns:
        通知を送信した場合はTrue
    """
    if data.action != "created" or data.issue is None or data.comment is None:
        return False
    comment = data.comment
    return _notify_item_comment(
        slack, data.issue, comment.user, comment.body, comment.html_url, data, users
    )


def notify_pr_review_comment(slack: SlackClient, data: HookBody, users: UserConfig) -> bool:
    """pull_request_review_commentイベントを通知する。

    空白のみのコメントは送信しない。

    Args:
        slack: Slackクライアント
        data: Webhookペイロード
        users: Slackユーザー名の対応表

    Returns:
        通知を送信した場合はTrue
    """
    if data.action != "created" or data.pull_request is None or data.comment is None:
        return False
    comment = data.comment
    return _notify_pull_request_comment(
        slack, data.pull_request, comment.user, comment.body, comment.html_url, data, users
    )


def notify_pr_review(slack: SlackClient, data: HookBody, users: UserConfig) -> bool:
    """pull_request_reviewイベントを通知する。

    commentedは通常のPRコメントとして扱う(空白のみの本文は送信しない)。
    approved/changes_requested以外の状態は無視する。

    Args:
        slack: Slackクライアント
        data: Webhookペイロード
        users: Slackユーザー名の対応表

    Returns:
        通知を送信した場合はTrue
    """
    if data.action != "submitted" or data.pull_request is None or data.review is None:
        return False

    pull_request = data.pull_request
    review = data.review
    body = review.body or ""

    if review.state == "commented":
        return _notify_pull_request_comment(
            slack, pull_request, review.user, body, review.html_url, data, users
        )

    state = REVIEW_STATE_MAP.get(review.state)
    if state is None:
        logger.info("Ignoring review state: %s", review.state)
        return False
    action_msg, state_msg, color = state

    slack_user = users.slack_user_name(review.user.login, data.repository)
    msg = (
        f"{slack_user} {action_msg} PR "
        f'"{make_link(pull_request.html_url, pull_request.title)}"'
    )
    attachments = [
        SlackAttachment(
            text=body,
            title=f"Review: {state_msg}",
            title_link=review.html_url,
            color=color,
        )
    ]
    send_to_all(slack, msg, attachments, pull_request, data.repository, users)
    return True


def notify_commit_comment(slack: SlackClient, data: HookBody, users: UserConfig) -> bool:
    """commit_commentイベントを通知する。

    コミットには担当者がいないため、デフォルトチャンネルにのみ送信する。
    commit_idがない場合は送信しない。

    Args:
        slack: Slackクライアント
        data: Webhookペイロード
        users: Slackユーザー名の対応表

    Returns:
        通知を送信した場合はTrue
    """
    if data.action != "created" or data.comment is None:
        return False

    comment = data.comment
    if not comment.commit_id:
        logger.info("Skipping commit comment without commit_id: %s", comment.html_url)
        return False

    commit = comment.commit_id[:SHORT_SHA_LENGTH]
    commit_url = f"{data.repository.html_url}/commit/{comment.commit_id}"
    commit_path = comment.path or commit

    msg = f'Comment on "{commit_path}" ({make_link(commit_url, commit)})'
    attachments = [
        _comment_attachment(comment.body, comment.user, comment.html_url, data, users)
    ]
    send_to_all(slack, msg, attachments, None, data.repository, users)
    return True
