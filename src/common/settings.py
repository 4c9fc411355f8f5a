"""
どこで: `common.settings`
何を: 実行時の環境変数（HDL_*）を型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` の散在を解消し、既定値/型の一貫性とテスト容易性を高めるため。

対象:
- HDL_SEED: 乱数シード（未設定なら毎回異なる構図）
- HDL_FPS: フレームレート（未設定なら YAML/既定 60）
- HDL_LOG_LEVEL: ログレベル名（既定 INFO）
- HDL_MSAA_SAMPLES: キャンバスの MSAA サンプル数（既定 4、0 で無効）
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_int, env_str


@dataclass
class _Settings:
    SEED: int | None = None
    FPS: int | None = None
    LOG_LEVEL: str = "INFO"
    MSAA_SAMPLES: int = 4


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - 数値は下限丸め（FPS は 1、MSAA は 0）。
    - 不正値は既定値へフォールバック。
    """
    _settings.SEED = env_int("HDL_SEED", None, min_value=0)
    _settings.FPS = env_int("HDL_FPS", None, min_value=1)
    _settings.LOG_LEVEL = (env_str("HDL_LOG_LEVEL", "INFO") or "INFO").upper()
    _settings.MSAA_SAMPLES = env_int("HDL_MSAA_SAMPLES", 4, min_value=0) or 0


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
