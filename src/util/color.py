"""
どこで: `util.color`。
何を: 色指定（RGB/RGBA, 0–1 または 0–255）を RGBA 0–1 のタプルへ正規化する。
なぜ: 色定数（0–255 表記）とシェーダ uniform（0–1 float）の間の変換を一箇所にまとめるため。
"""

from __future__ import annotations

from typing import Sequence


def _clamp01(x: float) -> float:
    return 0.0 if x < 0.0 else 1.0 if x > 1.0 else float(x)


def normalize_color(value: Sequence[float | int]) -> tuple[float, float, float, float]:
    """色を RGBA(0–1) へ正規化する。

    - 受理: (r, g, b) / (r, g, b, a)。全要素が 0..1 ならそのまま、それ以外は 0–255 とみなす。
    - 不正な長さ/型は ValueError。
    """
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise ValueError(f"unsupported color type: {type(value)!r}")
    if len(value) not in (3, 4):
        raise ValueError("color tuple/list must be length 3 or 4")
    try:
        comps = [float(c) for c in value]
    except (TypeError, ValueError) as e:
        raise ValueError(f"invalid color tuple/list: {value!r}") from e
    if len(comps) == 3:
        comps.append(1.0 if all(0.0 <= c <= 1.0 for c in comps) else 255.0)

    if all(0.0 <= c <= 1.0 for c in comps):
        r, g, b, a = comps
        return (_clamp01(r), _clamp01(g), _clamp01(b), _clamp01(a))
    r, g, b, a = (max(0, min(255, int(round(c)))) / 255.0 for c in comps)
    return (r, g, b, a)


__all__ = ["normalize_color"]
