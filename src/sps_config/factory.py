"""PortfolioConfig からクライアント・ロガー・コントローラを組み立てる"""

from __future__ import annotations

from typing import Any

from sps_pagination import PaginationController
from sps_pagination.controller import ErrorHook, RenderControls, RenderItems
from sps_portfolio_client import (
    Comment,
    HttpPortfolioClient,
    PortfolioClient,
    comment_page_fetcher,
)
from sps_telemetry import logger_from_config

from .models import PortfolioConfig


def build_client(config: PortfolioConfig) -> HttpPortfolioClient:
    """client セクションから HTTP クライアントを生成する。"""
    return HttpPortfolioClient(config.client.to_client_config())


def build_logger(config: PortfolioConfig) -> Any:
    """observability.log セクションからアプリ名付きロガーを生成する。"""
    logger = logger_from_config(config.observability.log.to_log_config())
    return logger.bind(app=config.app.name, environment=config.app.environment)


def controller_from_config(
    config: PortfolioConfig,
    render_items: RenderItems[Comment],
    render_controls: RenderControls,
    *,
    client: PortfolioClient | None = None,
    on_error: ErrorHook | None = None,
) -> PaginationController[Comment]:
    """コメント一覧用の PaginationController を生成する。

    client を省略した場合は client セクションの HTTP クライアントを使う。
    1 ページの件数は comments.per_page、初期表示ページは comments.first_page。
    """
    if client is None:
        client = build_client(config)
    return PaginationController(
        comment_page_fetcher(client, config.comments.per_page),
        render_items,
        render_controls,
        on_error=on_error,
        logger=build_logger(config),
        first_page=config.comments.first_page,
    )
