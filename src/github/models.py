"""
GitHubペイロードの型定義モジュール。

Webhookペイロードのうち、通知で参照するフィールドだけをPydanticモデルとして定義する。
未知のキーは無視し、欠けているフィールドはNoneとして扱う:
- User: GitHubユーザー
- Repo: リポジトリ
- Issue: Issue/PR共通の宛先情報(assignees/assignee/user)
- PullRequest: プルリクエスト
- Comment: Issue/PR/コミットへのコメント
- Review: プルリクエストのレビュー
- HookBody: Webhookペイロード全体
"""

from pydantic import BaseModel, ConfigDict


class User(BaseModel):
    """GitHubユーザー。

    Attributes:
        login: GitHubのログイン名
    """

    model_config = ConfigDict(extra="ignore")

    login: str


class Repo(BaseModel):
    """リポジトリ。

    Attributes:
        html_url: リポジトリのURL(例: https://github.com/owner/repo)
        full_name: 表示用のリポジトリ名(例: owner/repo)
    """

    model_config = ConfigDict(extra="ignore")

    html_url: str
    full_name: str


class Issue(BaseModel):
    """Issue/PR共通の宛先情報。

    全フィールドが任意。assigneesは空リストでも「存在する」とみなす。

    Attributes:
        assignees: 担当者のリスト
        assignee: 単一の担当者
        user: 作成者(オーナー)
        title: タイトル
        html_url: IssueのURL
    """

    model_config = ConfigDict(extra="ignore")

    assignees: list[User] | None = None
    assignee: User | None = None
    user: User | None = None
    title: str = ""
    html_url: str = ""


class PullRequest(Issue):
    """プルリクエスト。"""


class Comment(BaseModel):
    """Issue/PR/コミットへのコメント。

    Attributes:
        user: コメント投稿者
        body: コメント本文
        html_url: コメントのURL
        commit_id: コミットコメントの場合の対象コミットSHA
        path: コミットコメントの場合の対象ファイルパス
    """

    model_config = ConfigDict(extra="ignore")

    user: User
    body: str = ""
    html_url: str = ""
    commit_id: str = ""
    path: str | None = None


class Review(BaseModel):
    """プルリクエストのレビュー。

    Attributes:
        user: レビュアー
        body: レビュー本文
        html_url: レビューのURL
        state: レビュー状態(approved/changes_requested/commented等)
    """

    model_config = ConfigDict(extra="ignore")

    user: User
    body: str | None = ""
    html_url: str = ""
    state: str


class HookBody(BaseModel):
    """GitHub Webhookペイロード。"""

    model_config = ConfigDict(extra="ignore")

    action: str | None = None
    repository: Repo
    sender: User | None = None
    issue: Issue | None = None
    pull_request: PullRequest | None = None
    comment: Comment | None = None
    review: Review | None = None
