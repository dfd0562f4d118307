"""設定ローダーのユニットテスト"""

from pathlib import Path

import pytest

from sps_config import ConfigError, ConfigErrorCodes, load


def test_load_minimal_config(tmp_path: Path) -> None:
    """最小設定ファイルの読み込み。"""
    config_file = tmp_path / "config.yaml"
    config_file.write_text("app:\n  name: portfolio\n")
    config = load(config_file)
    assert config.app.name == "portfolio"
    assert config.comments.per_page == 5
    assert config.comments.first_page == 1
    assert config.observability.log.format == "json"


def test_load_with_env_override(tmp_path: Path) -> None:
    """環境別設定のマージ確認。"""
    base_file = tmp_path / "base.yaml"
    base_file.write_text(
        "app:\n  name: base\nclient:\n  base_url: http://localhost:8080\ncomments:\n  per_page: 5\n"
    )
    env_file = tmp_path / "prod.yaml"
    env_file.write_text("client:\n  base_url: https://portfolio.example.com\ncomments:\n")
    config = load(base_file, env_file)
    assert config.app.name == "base"
    assert config.client.base_url == "https://portfolio.example.com"
    assert config.comments.per_page == 5


def test_load_env_not_exists(tmp_path: Path) -> None:
    """env_path が存在しない場合は base のみ使用。"""
    base_file = tmp_path / "base.yaml"
    base_file.write_text("app:\n  name: fallback\n")
    config = load(base_file, tmp_path / "nonexistent.yaml")
    assert config.app.name == "fallback"


def test_load_file_not_found(tmp_path: Path) -> None:
    """存在しないファイルで ConfigError(READ_FILE_ERROR) が発生すること。"""
    missing = tmp_path / "missing.yaml"
    with pytest.raises(ConfigError) as exc_info:
        load(missing)
    assert exc_info.value.code == ConfigErrorCodes.READ_FILE
    assert exc_info.value.path == missing


def test_load_invalid_yaml(tmp_path: Path) -> None:
    """不正 YAML で ConfigError(PARSE_YAML_ERROR) が発生すること。"""
    bad_file = tmp_path / "bad.yaml"
    bad_file.write_text("app: {invalid: yaml: content:\n")
    with pytest.raises(ConfigError) as exc_info:
        load(bad_file)
    assert exc_info.value.code == ConfigErrorCodes.PARSE_YAML


def test_load_non_mapping_yaml(tmp_path: Path) -> None:
    """トップレベルがマッピングでない場合も PARSE_YAML_ERROR。"""
    bad_file = tmp_path / "list.yaml"
    bad_file.write_text("- a\n- b\n")
    with pytest.raises(ConfigError) as exc_info:
        load(bad_file)
    assert exc_info.value.code == ConfigErrorCodes.PARSE_YAML


@pytest.mark.parametrize(
    "body",
    [
        "comments:\n  per_page: 5\n",
        "app:\n  name: x\ncomments:\n  per_page: 0\n",
        "app:\n  name: x\ncomments:\n  per_page: 101\n",
        "app:\n  name: x\nclient:\n  timeout_seconds: 0\n",
        "app:\n  name: x\nobservability:\n  log:\n    format: xml\n",
    ],
)
def test_load_validation_error(tmp_path: Path, body: str) -> None:
    """バリデーション失敗で ConfigError(VALIDATION_ERROR) が発生すること。"""
    bad_config = tmp_path / "bad_config.yaml"
    bad_config.write_text(body)
    with pytest.raises(ConfigError) as exc_info:
        load(bad_config)
    assert exc_info.value.code == ConfigErrorCodes.VALIDATION


def test_sections_convert_to_runtime_configs(tmp_path: Path) -> None:
    """各セクションがクライアント・ログ設定へ変換できること。"""
    config_file = tmp_path / "config.yaml"
    config_file.write_text(
        "app:\n  name: p\nclient:\n  base_url: http://svc\n  timeout_seconds: 2.5\n"
        "observability:\n  log:\n    level: DEBUG\n    format: text\n"
    )
    config = load(config_file)
    client_config = config.client.to_client_config()
    assert client_config.base_url == "http://svc"
    assert client_config.timeout_seconds == 2.5
    log_config = config.observability.log.to_log_config()
    assert log_config.level == "DEBUG"
    assert log_config.format == "text"
