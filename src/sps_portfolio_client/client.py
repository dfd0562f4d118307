"""PortfolioClient 抽象基底クラス"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Awaitable, Callable

from sps_pagination import validate_per_page

from .models import AuthStatus, CommentPage


class PortfolioClient(ABC):
    """ポートフォリオサービスクライアント抽象基底クラス。"""

    @abstractmethod
    async def list_comments(self, page: int = 1, per_page: int = 5) -> CommentPage:
        """コメント一覧の指定ページを取得する。"""
        ...

    @abstractmethod
    async def post_comment(self, email: str, comment: str) -> None:
        """コメントを投稿する。"""
        ...

    @abstractmethod
    async def delete_comment(self, comment_id: int) -> None:
        """コメントを削除する (投稿者本人のみ)。"""
        ...

    @abstractmethod
    async def delete_all_comments(self) -> None:
        """全コメントを削除する。"""
        ...

    @abstractmethod
    async def get_auth_status(self) -> AuthStatus:
        """ログイン状態を取得する。"""
        ...

    @abstractmethod
    async def get_word_counts(self) -> dict[str, int]:
        """コメント中の単語出現数を取得する。"""
        ...

    @abstractmethod
    async def create_marker(self, lat: float, lng: float) -> None:
        """地図マーカーを登録する。"""
        ...


def comment_page_fetcher(
    client: PortfolioClient, per_page: int
) -> Callable[[int], Awaitable[CommentPage]]:
    """PaginationController に渡すページ取得関数を返す。"""
    validate_per_page(per_page)

    async def fetch_page(page: int) -> CommentPage:
        return await client.list_comments(page=page, per_page=per_page)

    return fetch_page
