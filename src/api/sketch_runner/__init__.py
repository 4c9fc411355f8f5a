"""
内部ヘルパ群（API 非公開）。

どこで: `api.sketch_runner`
何を: `api.sketch` の補助（設定解決・ウィンドウ/レンダラ初期化・フレームループ制御）を分離した内部モジュール群。
なぜ: `run_stripes` 本体を薄く保ち、GL を使わずにテストできる部分を切り出すため。
"""

from __future__ import annotations

__all__: list[str] = []
