"""
どこで: `api.sketch_runner.utils`（純粋関数/小ヘルパ）。
何を: FPS・ウィンドウサイズ・乱数シード・MSAA の解決と、解決結果 `RunConfig`。
なぜ: 「明示引数 > 環境変数 > YAML > 既定値」の優先順位を 1 箇所で扱い、テスト容易性を上げるため。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from common.settings import get as get_settings
from util.utils import config_section, load_config

DEFAULT_FPS = 60
DEFAULT_WINDOW_SIZE: tuple[int, int] = (1280, 800)


@dataclass(frozen=True)
class RunConfig:
    """`run_stripes` が実際に使う解決済みの実行設定。"""

    width: int
    height: int
    fps: int
    seed: int | None
    msaa_samples: int


def _positive_int(value: Any, name: str) -> int:
    try:
        v = int(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"{name} must be an integer, got {value!r}") from e
    if v <= 0:
        raise ValueError(f"{name} must be > 0, got {v}")
    return v


def resolve_fps(
    requested_fps: int | None,
    *,
    cfg: Mapping[str, Any] | None = None,
    default: int = DEFAULT_FPS,
) -> int:
    """FPS を解決して 1 以上の int を返す。

    - 明示指定は検証して優先（<=0 や数値化できない値は ValueError）。
    - 次に `HDL_FPS`、次に設定ファイルの `canvas_controller.fps`、最後に既定値。
    """
    if requested_fps is not None:
        return _positive_int(requested_fps, "fps")
    env_fps = get_settings().FPS
    if env_fps is not None:
        return max(1, int(env_fps))
    ccfg = config_section(dict(cfg or {}), "canvas_controller")
    try:
        return max(1, int(ccfg.get("fps", default)))
    except (TypeError, ValueError):
        return max(1, int(default))


def resolve_window_size(
    width: int | None,
    height: int | None,
    *,
    cfg: Mapping[str, Any] | None = None,
) -> tuple[int, int]:
    """ウィンドウの論理サイズを解決する。

    - 明示指定は検証して優先（<=0 は ValueError）。
    - 未指定の辺は設定ファイルの `canvas.width/height`、最後に既定値 1280x800。
    """
    canvas = config_section(dict(cfg or {}), "canvas")
    out: list[int] = []
    for name, value, fallback in (
        ("width", width, DEFAULT_WINDOW_SIZE[0]),
        ("height", height, DEFAULT_WINDOW_SIZE[1]),
    ):
        if value is not None:
            out.append(_positive_int(value, name))
            continue
        try:
            out.append(_positive_int(canvas.get(name, fallback), name))
        except ValueError:
            out.append(fallback)
    return out[0], out[1]


def resolve_seed(seed: int | None) -> int | None:
    """乱数シードを解決する（明示 > `HDL_SEED` > None）。負のシードは ValueError。"""
    if seed is not None:
        s = int(seed)
        if s < 0:
            raise ValueError(f"seed must be >= 0, got {s}")
        return s
    return get_settings().SEED


def resolve_run_config(
    *,
    width: int | None = None,
    height: int | None = None,
    fps: int | None = None,
    seed: int | None = None,
    cfg: Mapping[str, Any] | None = None,
) -> RunConfig:
    """全項目を解決して `RunConfig` を返す。`cfg` 省略時は YAML を読み込む。"""
    cfg_all = dict(cfg) if cfg is not None else load_config()
    w, h = resolve_window_size(width, height, cfg=cfg_all)
    return RunConfig(
        width=w,
        height=h,
        fps=resolve_fps(fps, cfg=cfg_all),
        seed=resolve_seed(seed),
        msaa_samples=int(get_settings().MSAA_SAMPLES),
    )


__all__ = [
    "DEFAULT_FPS",
    "DEFAULT_WINDOW_SIZE",
    "RunConfig",
    "resolve_fps",
    "resolve_window_size",
    "resolve_seed",
    "resolve_run_config",
]
