"""structlog ベースのロガー設定"""

from __future__ import annotations

import logging
import sys

import structlog

from .models import LogConfig

FORMATS = ("json", "text")


def _renderers(format: str) -> list[structlog.types.Processor]:
    if format == "json":
        return [
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    return [structlog.dev.ConsoleRenderer()]


def new_logger(
    level: str = "INFO", format: str = "json", name: str | None = None
) -> structlog.stdlib.BoundLogger:
    """設定済みの structlog ロガーを返す。

    Args:
        level: ログレベル ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")。
            不明な値は INFO として扱う。
        format: 出力形式 ("json" or "text")
        name: 標準 logging 側のロガー名。省略時はルートロガー。

    Raises:
        ValueError: format が "json" / "text" 以外の場合
    """
    if format not in FORMATS:
        raise ValueError(f"unknown log format: {format!r} (expected one of {FORMATS})")

    logging.basicConfig(format="%(message)s", stream=sys.stdout)
    logging.getLogger(name).setLevel(getattr(logging, level.upper(), logging.INFO))

    # レベル判定は標準 logging 側に任せる
    shared: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    structlog.configure(
        processors=shared + _renderers(format),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    if name is None:
        return structlog.stdlib.get_logger()
    return structlog.stdlib.get_logger(name)


def logger_from_config(config: LogConfig, name: str | None = None) -> structlog.stdlib.BoundLogger:
    """LogConfig からロガーを生成する。"""
    return new_logger(level=config.level, format=config.format, name=name)


def _drop_event(logger: object, method_name: str, event_dict: object) -> object:
    raise structlog.DropEvent


def noop_logger() -> structlog.types.BindableLogger:
    """全イベントを破棄するロガーを返す。"""
    return structlog.wrap_logger(structlog.ReturnLogger(), processors=[_drop_event])
