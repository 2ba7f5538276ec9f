"""
通知モジュール。

Issue/PRの担当者・オーナー宛てのSlack通知を提供する。
"""

from src.messages.comments import (
    notify_commit_comment,
    notify_issue_comment,
    notify_pr_review,
    notify_pr_review_comment,
)
from src.messages.messenger import assignees, make_link, send_to_all

__all__ = [
    "assignees",
    "make_link",
    "notify_commit_comment",
    "notify_issue_comment",
    "notify_pr_review",
    "notify_pr_review_comment",
    "send_to_all",
]
