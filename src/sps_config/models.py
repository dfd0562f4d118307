"""設定型定義（pydantic BaseModel）"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from sps_pagination import MAX_PER_PAGE, MIN_PER_PAGE
from sps_portfolio_client import ClientConfig
from sps_telemetry import LogConfig


class AppSection(BaseModel):
    """アプリケーション基本設定。"""

    name: str
    version: str = "0.1.0"
    environment: str = "development"


class ClientSection(BaseModel):
    """ポートフォリオサービス接続設定。"""

    base_url: str = "http://localhost:8080"
    timeout_seconds: float = Field(default=10.0, gt=0)

    def to_client_config(self) -> ClientConfig:
        return ClientConfig(base_url=self.base_url, timeout_seconds=self.timeout_seconds)


class CommentsSection(BaseModel):
    """コメント一覧の表示設定。"""

    per_page: int = Field(default=5, ge=MIN_PER_PAGE, le=MAX_PER_PAGE)
    first_page: int = Field(default=1, ge=1)


class LogSection(BaseModel):
    """ログ設定。"""

    level: str = "INFO"
    format: Literal["json", "text"] = "json"

    def to_log_config(self) -> LogConfig:
        return LogConfig(level=self.level, format=self.format)


class ObservabilitySection(BaseModel):
    """可観測性設定。"""

    log: LogSection = Field(default_factory=LogSection)


class PortfolioConfig(BaseModel):
    """設定全体。"""

    app: AppSection
    client: ClientSection = Field(default_factory=ClientSection)
    comments: CommentsSection = Field(default_factory=CommentsSection)
    observability: ObservabilitySection = Field(default_factory=ObservabilitySection)
