"""
GitHubペイロード型定義のテスト。

Webhookペイロードの読み込みと、欠けたフィールドの扱いを検証する。
"""

from src.github.models import HookBody, Issue, PullRequest


class TestIssue:
    """Issueモデルのテスト。"""

    def test_all_fields_are_optional(self) -> None:
        """空のペイロードでは全フィールドが未設定となる。"""
        issue = Issue.model_validate({})

        assert issue.assignees is None
        assert issue.assignee is None
        assert issue.user is None

    def test_empty_assignees_are_kept(self) -> None:
        """空のassigneesはNoneではなく空リストとして保持される。"""
        issue = Issue.model_validate({"assignees": []})

        assert issue.assignees == []

    def test_null_fields_are_accepted(self) -> None:
        """nullのフィールドはNoneとして扱う。"""
        issue = Issue.model_validate({"assignees": None, "assignee": None, "user": None})

        assert issue.assignees is None

    def test_unknown_keys_are_ignored(self) -> None:
        """未知のキーは無視される。"""
        issue = Issue.model_validate(
            {"number": 1, "user": {"login": "bob", "id": 42, "type": "User"}}
        )

        assert issue.user is not None
        assert issue.user.login == "bob"


class TestHookBody:
    """HookBodyモデルのテスト。"""

    def test_parses_pull_request_payload(self) -> None:
        """pull_requestペイロードを読み込む。"""
        data = HookBody.model_validate(
            {
                "action": "submitted",
                "repository": {
                    "html_url": "https://github.com/org/repo",
                    "full_name": "org/repo",
                },
                "sender": {"login": "a"},
                "pull_request": {
                    "title": "Fix",
                    "html_url": "https://github.com/org/repo/pull/1",
                    "assignee": {"login": "b"},
                },
                "review": {"user": {"login": "a"}, "body": None, "state": "approved"},
            }
        )

        assert isinstance(data.pull_request, PullRequest)
        assert data.pull_request.assignee is not None
        assert data.pull_request.assignee.login == "b"
        assert data.review is not None
        assert data.review.body is None
        assert data.issue is None
        assert data.comment is None
