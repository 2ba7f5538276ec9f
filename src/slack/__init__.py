"""
Slackモジュール。

Slackメッセージの型定義とIncoming Webhookクライアントを提供する。
"""

from src.slack.client import (
    SlackClient,
    SlackSendError,
    WebhookSlackClientImpl,
    create_slack_client,
)
from src.slack.models import SlackAttachment, SlackMessage

__all__ = [
    "SlackAttachment",
    "SlackClient",
    "SlackMessage",
    "SlackSendError",
    "WebhookSlackClientImpl",
    "create_slack_client",
]
