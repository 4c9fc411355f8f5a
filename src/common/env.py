"""
どこで: `common.env`
何を: 環境変数の軽量パースヘルパ（int/str）。
なぜ: 各所に散在する `os.getenv` + 例外/境界ガードを簡素化するため。
"""

from __future__ import annotations

import os
from typing import Optional


def env_int(
    name: str, default: Optional[int] = None, *, min_value: Optional[int] = None
) -> Optional[int]:
    """整数環境変数を読む。

    - 未設定/空文字/整数でない値は `default`（`None` 可）。
    - `min_value` 指定時は下限に丸める（HDL_FPS=0 → 1 など）。
    """
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        val = int(raw.strip())
    except ValueError:
        return default
    if min_value is not None and val < min_value:
        val = min_value
    return val


def env_str(name: str, default: Optional[str] = None) -> Optional[str]:
    """文字列環境変数を取得（空文字は未設定扱い）。"""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()
