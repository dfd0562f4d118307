"""ポートフォリオサービスのデータモデル"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from sps_pagination import PageData


@dataclass
class Comment:
    """コメント。"""

    email: str
    comment: str
    date: str = ""
    id: int | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Comment:
        """API レスポンス辞書から Comment を生成する。"""
        raw_id = data.get("id")
        return cls(
            email=data.get("email", ""),
            comment=data.get("comment", ""),
            date=data.get("date", data.get("time", "")),
            id=int(raw_id) if raw_id is not None else None,
        )


@dataclass
class CommentPage(PageData[Comment]):
    """コメント一覧の 1 ページ分。"""

    page: int = 1
    per_page: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any], page: int, per_page: int) -> CommentPage:
        return cls(
            items=[Comment.from_dict(c) for c in data.get("comments", [])],
            last_page=int(data.get("lastPage", 0)),
            page=page,
            per_page=per_page,
        )


@dataclass
class AuthStatus:
    """ログイン状態。"""

    is_logged_in: bool
    login_url: str = ""
    logout_url: str = ""
    user_email: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AuthStatus:
        return cls(
            is_logged_in=bool(data.get("isUserLoggedIn", False)),
            login_url=data.get("loginUrl", ""),
            logout_url=data.get("logoutUrl", ""),
            user_email=data.get("userEmail", ""),
        )

    @property
    def nav_link(self) -> tuple[str, str]:
        """ナビゲーションバーに表示するリンク (href, ラベル)。"""
        if self.is_logged_in:
            return (self.logout_url, "Logout")
        return (self.login_url, "Login")


@dataclass
class Marker:
    """地図マーカー。"""

    lat: float
    lng: float
    content: str = ""


@dataclass(frozen=True)
class WordCount:
    """単語出現数 (グラフの 1 行)。"""

    word: str
    count: int


def top_word_counts(counts: dict[str, int], limit: int | None = None) -> list[WordCount]:
    """出現数の降順 (同数は単語順) でグラフ用の行を返す。"""
    rows = sorted(
        (WordCount(word=w, count=c) for w, c in counts.items() if w and c > 0),
        key=lambda row: (-row.count, row.word),
    )
    if limit is not None:
        rows = rows[:limit]
    return rows


@dataclass
class ClientConfig:
    """ポートフォリオクライアント設定。"""

    base_url: str
    timeout_seconds: float = 10.0
    headers: dict[str, str] = field(default_factory=dict)
