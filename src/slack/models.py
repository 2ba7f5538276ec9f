"""
Slackメッセージの型定義モジュール。

- SlackAttachment: メッセージ添付(text/title/title_link/color)
- SlackMessage: Slackクライアントに渡す送信ペイロード
"""

from typing import Any

from pydantic import BaseModel


class SlackAttachment(BaseModel):
    """Slackのメッセージ添付。

    Noneのフィールドは送信時に省略される。

    Attributes:
        text: 添付の本文
        title: 添付のタイトル
        title_link: タイトルのリンク先URL
        color: 添付の色(good/warning/danger または #RRGGBB)
    """

    text: str
    title: str | None = None
    title_link: str | None = None
    color: str | None = None


class SlackMessage(BaseModel):
    """Slack送信ペイロード。

    attachmentsは中身も型も解釈せず、渡されたオブジェクトをそのまま保持する。
    channelがNoneの場合はWebhookのデフォルトチャンネルに送信される。

    Attributes:
        text: メッセージ本文
        attachments: 添付(通常は添付のリスト)
        channel: 送信先(例: "@username", "#channel")
    """

    text: str
    attachments: Any
    channel: str | None = None
