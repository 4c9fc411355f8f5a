"""
プロジェクト向けの軽量ロギングユーティリティ。

要点:
- 各モジュールは `logging.getLogger(__name__)` でロガーを取得する。
- アプリ側で設定が無い場合でも、妥当な最小構成を 1 度だけ適用するヘルパーを提供する。
"""

from __future__ import annotations

import logging


def resolve_level(level: int | str) -> int:
    """レベル名/数値を `logging` の数値レベルへ変換する（不明な名前は INFO）。"""
    if isinstance(level, str):
        lvl = logging.getLevelName(level.strip().upper())
        return lvl if isinstance(lvl, int) else logging.INFO
    return int(level)


def setup_default_logging(level: int | str = "INFO") -> None:
    """最小限のロギング設定を 1 度だけ適用する。

    - ルートロガーにハンドラが既にあればレベルだけ合わせる
    - CLI/ランナーから呼び出す想定
    """
    lvl = resolve_level(level)
    root = logging.getLogger()
    if root.handlers:
        root.setLevel(lvl)
        return
    logging.basicConfig(
        level=lvl,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


__all__ = ["resolve_level", "setup_default_logging"]
