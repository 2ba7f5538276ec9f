"""
Slackクライアントモジュール。

- Protocol型でSlackClientインターフェースを定義
- slack_sdkのIncoming Webhookクライアントを使用した実装
- 依存性注入パターン(WebhookClientは引数で注入)
"""

import logging
from typing import Any, Protocol

from pydantic import BaseModel
from slack_sdk.webhook import WebhookClient

from src.config.settings import Settings
from src.slack.models import SlackMessage

logger = logging.getLogger(__name__)


class SlackSendError(RuntimeError):
    """Webhookが200以外のステータスを返した場合のエラー。

    Attributes:
        status_code: HTTPステータスコード
        body: レスポンス本文
    """

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"Slack webhook returned {status_code}: {body}")


class SlackClient(Protocol):
    """Slack送信のプロトコル型。"""

    def send(self, message: SlackMessage) -> None:
        """メッセージを送信する。

        Args:
            message: 送信するペイロード
        """
        ...


def _attachment_to_dict(attachment: Any) -> Any:
    if isinstance(attachment, BaseModel):
        return attachment.model_dump(exclude_none=True)
    return attachment


def _attachments_to_json(attachments: Any) -> Any:
    if isinstance(attachments, (list, tuple)):
        return [_attachment_to_dict(a) for a in attachments]
    return _attachment_to_dict(attachments)


class WebhookSlackClientImpl:
    """SlackClientプロトコルのIncoming Webhook実装。

    Attributes:
        _webhook: slack_sdkのWebhookClient
    """

    def __init__(self, webhook: WebhookClient) -> None:
        """WebhookSlackClientImplを初期化する。

        Args:
            webhook: slack_sdkのWebhookClient
        """
        self._webhook = webhook

    def send(self, message: SlackMessage) -> None:
        """メッセージをWebhookに送信する。

        Args:
            message: 送信するペイロード

        Raises:
            SlackSendError: Webhookが200以外のステータスを返した場合
        """
        body: dict[str, Any] = {
            "text": message.text,
            "attachments": _attachments_to_json(message.attachments),
        }
        if message.channel is not None:
            body["channel"] = message.channel

        response = self._webhook.send_dict(body)
        if response.status_code != 200:
            logger.warning(
                "Slack webhook rejected message: status=%d, body=%s",
                response.status_code,
                response.body,
            )
            raise SlackSendError(response.status_code, response.body)

        logger.debug("Sent Slack message: channel=%s", message.channel)


def create_slack_client(settings: Settings) -> WebhookSlackClientImpl:
    """設定からWebhook実装のSlackクライアントを生成する。

    Args:
        settings: アプリケーション設定

    Returns:
        WebhookSlackClientImpl: 生成したクライアント
    """
    webhook = WebhookClient(
        url=settings.slack_webhook_url,
        timeout=settings.slack_timeout_seconds,
    )
    logger.info("Slack webhook client initialized")
    return WebhookSlackClientImpl(webhook)
