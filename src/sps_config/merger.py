"""YAML ディープマージユーティリティ"""

from __future__ import annotations

from typing import Any


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """base と override をディープマージして新しい辞書を返す。

    override の値が優先される。リストは置換（マージしない）。
    override 側の空セクション (None) は base の値を消さない。
    """
    result: dict[str, Any] = dict(base)
    for key, value in override.items():
        if value is None and key in result:
            continue
        current = result.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            result[key] = deep_merge(current, value)
        else:
            result[key] = value
    return result
