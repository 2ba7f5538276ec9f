"""
設定管理モジュール。

環境変数からSlack Webhookとユーザー設定ファイルの設定を読み込む。
"""

from src.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
