"""インメモリのポートフォリオクライアント (テスト用)"""

from __future__ import annotations

import math
import re
from collections import Counter
from datetime import datetime, timezone

from sps_pagination import PageRangeError, validate_per_page

from .client import PortfolioClient
from .exceptions import PortfolioClientError, PortfolioClientErrorCodes
from .models import AuthStatus, Comment, CommentPage, Marker

_NON_LETTERS = re.compile(r"[^a-zA-Z ]")
_DATE_FORMAT = "%b %d,%Y %H:%M"


def split_words(comment: str) -> list[str]:
    """単語出現数の集計対象となる単語へ分割する。"""
    return [w for w in _NON_LETTERS.sub("", comment).lower().split() if w]


class InMemoryPortfolioClient(PortfolioClient):
    """サーバーの振る舞いをメモリ上で再現するクライアント。"""

    def __init__(
        self,
        current_user: str | None = None,
        login_url: str = "/login",
        logout_url: str = "/logout",
    ) -> None:
        self._current_user = current_user
        self._login_url = login_url
        self._logout_url = logout_url
        self._comments: list[Comment] = []
        self._word_counts: Counter[str] = Counter()
        self._markers: list[Marker] = []
        self._next_id = 1

    @property
    def markers(self) -> list[Marker]:
        return list(self._markers)

    def login(self, email: str) -> None:
        self._current_user = email

    def logout(self) -> None:
        self._current_user = None

    async def list_comments(self, page: int = 1, per_page: int = 5) -> CommentPage:
        validate_per_page(per_page)
        if page < 1:
            raise PageRangeError(page)
        # 新しい順
        ordered = list(reversed(self._comments))
        start = (page - 1) * per_page
        return CommentPage(
            items=ordered[start : start + per_page],
            last_page=math.ceil(len(ordered) / per_page),
            page=page,
            per_page=per_page,
        )

    async def post_comment(self, email: str, comment: str) -> None:
        self._comments.append(
            Comment(
                email=email,
                comment=comment,
                date=datetime.now(timezone.utc).strftime(_DATE_FORMAT),
                id=self._next_id,
            )
        )
        self._next_id += 1
        self._word_counts.update(split_words(comment))

    async def delete_comment(self, comment_id: int) -> None:
        target = next((c for c in self._comments if c.id == comment_id), None)
        if target is None:
            raise PortfolioClientError(
                code=PortfolioClientErrorCodes.NOT_FOUND,
                message=f"delete_comment({comment_id}): not found",
            )
        if self._current_user is None or self._current_user != target.email:
            raise PortfolioClientError(
                code=PortfolioClientErrorCodes.UNAUTHORIZED,
                message=f"delete_comment({comment_id}): unauthorized",
            )
        self._word_counts.subtract(split_words(target.comment))
        self._comments.remove(target)

    async def delete_all_comments(self) -> None:
        self._comments.clear()

    async def get_auth_status(self) -> AuthStatus:
        if self._current_user is None:
            return AuthStatus(is_logged_in=False, login_url=self._login_url)
        return AuthStatus(
            is_logged_in=True,
            logout_url=self._logout_url,
            user_email=self._current_user,
        )

    async def get_word_counts(self) -> dict[str, int]:
        return {w: c for w, c in self._word_counts.items() if c > 0}

    async def create_marker(self, lat: float, lng: float) -> None:
        self._markers.append(Marker(lat=lat, lng=lng))
