"""ログ設定モデル"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class LogConfig:
    """ログ設定。"""

    level: str = "INFO"
    format: str = "json"  # "json" or "text"
