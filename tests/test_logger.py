"""ロガー設定のユニットテスト"""

from sps_telemetry import LogConfig, logger_from_config, new_logger, noop_logger


def test_new_logger_json_format() -> None:
    """JSON フォーマットのロガーが作成できること。"""
    logger = new_logger(level="INFO", format="json")
    assert logger is not None


def test_new_logger_text_format() -> None:
    """テキストフォーマットのロガーが作成できること。"""
    logger = new_logger(level="DEBUG", format="text")
    assert logger is not None


def test_logger_from_config() -> None:
    """LogConfig からロガーが作成できること。"""
    logger = logger_from_config(LogConfig(level="WARNING", format="json"))
    bound = logger.bind(page=1)
    assert bound is not None


def test_noop_logger_discards_events() -> None:
    """noop_logger は例外を出さずにイベントを破棄すること。"""
    logger = noop_logger()
    assert logger.bind(page=2).info("page_rendered") is None
    assert logger.warning("page_fetch_failed", error="x") is None


def test_new_logger_rejects_unknown_format() -> None:
    """未知の出力形式で ValueError が発生すること。"""
    import pytest

    with pytest.raises(ValueError, match="unknown log format"):
        new_logger(format="xml")


def test_new_logger_named() -> None:
    """名前付きロガーが作成できること。"""
    logger = new_logger(level="INFO", format="json", name="sps.portfolio")
    assert logger.bind(page=1) is not None
