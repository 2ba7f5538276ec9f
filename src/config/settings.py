"""
設定管理モジュール。

pydantic-settings を使用して環境変数を型安全に管理する。
os.environ の直接参照は禁止し、このモジュール経由で取得する。
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """アプリケーション設定。

    環境変数から設定を読み込み、型安全に管理する。
    必須環境変数が欠けている場合や形式が不正な場合は ValidationError を発生させる。
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    slack_webhook_url: str = Field(
        ...,
        pattern=r"^https://hooks\.slack\.com/.+$",
        description="Slack Incoming Webhook URL",
    )
    users_config_path: str | None = Field(
        default=None,
        description="Path to the JSON file mapping GitHub logins to Slack names",
    )
    slack_timeout_seconds: int = Field(
        default=30,
        ge=1,
        description="Timeout for Slack webhook requests (seconds)",
    )


@lru_cache
def get_settings() -> Settings:
    """Settingsインスタンスをキャッシュして返す。

    アプリケーション全体で同一のSettingsインスタンスを共有するために使用する。

    Returns:
        Settings: キャッシュされた設定インスタンス
    """
    return Settings()
