"""ポートフォリオ HTTP クライアント実装"""

from __future__ import annotations

from typing import Any, Callable, TypeVar

import httpx
import structlog

from sps_pagination import PageRangeError, validate_per_page

from .client import PortfolioClient
from .exceptions import PortfolioClientError, PortfolioClientErrorCodes
from .models import AuthStatus, ClientConfig, CommentPage

logger = structlog.get_logger(__name__)

T = TypeVar("T")


def _as_count(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"count must be a number, got {value!r}")
    return int(value)


class HttpPortfolioClient(PortfolioClient):
    """httpx を使ったポートフォリオ HTTP クライアント。"""

    def __init__(self, config: ClientConfig) -> None:
        self._config = config
        self._headers = dict(config.headers)

    def _make_client(self) -> httpx.AsyncClient:
        # フォーム送信はリダイレクトで応答されるため追従しない
        return httpx.AsyncClient(
            base_url=self._config.base_url,
            headers=self._headers,
            timeout=self._config.timeout_seconds,
            follow_redirects=False,
        )

    def _handle_error(self, resp: httpx.Response, context: str) -> None:
        if resp.status_code == 401:
            raise PortfolioClientError(
                code=PortfolioClientErrorCodes.UNAUTHORIZED,
                message=f"{context}: unauthorized",
            )
        if resp.status_code == 404:
            raise PortfolioClientError(
                code=PortfolioClientErrorCodes.NOT_FOUND,
                message=f"{context}: not found",
            )
        if resp.status_code >= 400:
            raise PortfolioClientError(
                code=PortfolioClientErrorCodes.HTTP_ERROR,
                message=f"{context}: HTTP {resp.status_code}: {resp.text}",
            )

    def _json(self, resp: httpx.Response, context: str) -> Any:
        try:
            return resp.json()
        except ValueError as e:
            raise PortfolioClientError(
                code=PortfolioClientErrorCodes.INVALID_RESPONSE,
                message=f"{context}: invalid JSON body",
                cause=e,
            ) from e

    def _parse(self, context: str, parse: Callable[[], T]) -> T:
        # 型の合わない値 (null の lastPage、オブジェクトでないコメント等) は不正レスポンス扱い
        try:
            return parse()
        except (TypeError, ValueError, KeyError, AttributeError) as e:
            raise PortfolioClientError(
                code=PortfolioClientErrorCodes.INVALID_RESPONSE,
                message=f"{context}: malformed response: {e}",
                cause=e,
            ) from e

    async def list_comments(self, page: int = 1, per_page: int = 5) -> CommentPage:
        validate_per_page(per_page)
        if page < 1:
            raise PageRangeError(page)
        try:
            async with self._make_client() as client:
                resp = await client.get(
                    "/data",
                    params={"comments_per_page": per_page, "pg_number": page},
                )
            self._handle_error(resp, "list_comments")
            data = self._json(resp, "list_comments")
            if not isinstance(data, dict):
                raise PortfolioClientError(
                    code=PortfolioClientErrorCodes.INVALID_RESPONSE,
                    message="list_comments: expected JSON object",
                )
            result = self._parse(
                "list_comments",
                lambda: CommentPage.from_dict(data, page=page, per_page=per_page),
            )
            logger.debug(
                "comments_fetched", page=page, items=len(result.items), last_page=result.last_page
            )
            return result
        except PortfolioClientError:
            raise
        except Exception as e:
            raise PortfolioClientError(
                code=PortfolioClientErrorCodes.HTTP_ERROR,
                message=f"Failed to list comments: {e}",
                cause=e,
            ) from e

    async def post_comment(self, email: str, comment: str) -> None:
        try:
            async with self._make_client() as client:
                resp = await client.post(
                    "/data",
                    data={"user_email": email, "user_comment": comment},
                )
            self._handle_error(resp, "post_comment")
        except PortfolioClientError:
            raise
        except Exception as e:
            raise PortfolioClientError(
                code=PortfolioClientErrorCodes.HTTP_ERROR,
                message=f"Failed to post comment: {e}",
                cause=e,
            ) from e

    async def delete_comment(self, comment_id: int) -> None:
        try:
            async with self._make_client() as client:
                resp = await client.delete("/delete-data", params={"id": comment_id})
            self._handle_error(resp, f"delete_comment({comment_id})")
            logger.info("comment_deleted", comment_id=comment_id)
        except PortfolioClientError:
            raise
        except Exception as e:
            raise PortfolioClientError(
                code=PortfolioClientErrorCodes.HTTP_ERROR,
                message=f"Failed to delete comment: {e}",
                cause=e,
            ) from e

    async def delete_all_comments(self) -> None:
        try:
            async with self._make_client() as client:
                resp = await client.post("/visualize-comments")
            self._handle_error(resp, "delete_all_comments")
        except PortfolioClientError:
            raise
        except Exception as e:
            raise PortfolioClientError(
                code=PortfolioClientErrorCodes.HTTP_ERROR,
                message=f"Failed to delete all comments: {e}",
                cause=e,
            ) from e

    async def get_auth_status(self) -> AuthStatus:
        try:
            async with self._make_client() as client:
                resp = await client.get("/authenticate")
            self._handle_error(resp, "get_auth_status")
            data = self._json(resp, "get_auth_status")
            if not isinstance(data, dict):
                raise PortfolioClientError(
                    code=PortfolioClientErrorCodes.INVALID_RESPONSE,
                    message="get_auth_status: expected JSON object",
                )
            return self._parse("get_auth_status", lambda: AuthStatus.from_dict(data))
        except PortfolioClientError:
            raise
        except Exception as e:
            raise PortfolioClientError(
                code=PortfolioClientErrorCodes.HTTP_ERROR,
                message=f"Failed to get auth status: {e}",
                cause=e,
            ) from e

    async def get_word_counts(self) -> dict[str, int]:
        try:
            async with self._make_client() as client:
                resp = await client.get("/visualize-comments")
            self._handle_error(resp, "get_word_counts")
            data = self._json(resp, "get_word_counts")
            if not isinstance(data, dict):
                raise PortfolioClientError(
                    code=PortfolioClientErrorCodes.INVALID_RESPONSE,
                    message="get_word_counts: expected JSON object",
                )
            return self._parse(
                "get_word_counts",
                lambda: {str(word): _as_count(count) for word, count in data.items()},
            )
        except PortfolioClientError:
            raise
        except Exception as e:
            raise PortfolioClientError(
                code=PortfolioClientErrorCodes.HTTP_ERROR,
                message=f"Failed to get word counts: {e}",
                cause=e,
            ) from e

    async def create_marker(self, lat: float, lng: float) -> None:
        try:
            async with self._make_client() as client:
                resp = await client.post("/markers", data={"lat": str(lat), "lng": str(lng)})
            self._handle_error(resp, "create_marker")
        except PortfolioClientError:
            raise
        except Exception as e:
            raise PortfolioClientError(
                code=PortfolioClientErrorCodes.HTTP_ERROR,
                message=f"Failed to create marker: {e}",
                cause=e,
            ) from e
