"""共通フィクスチャ。

- 乱数シード固定の Generator
- 記録用描画面
- HDL_* 環境変数の隔離（設定を読むテストモジュールで usefixtures 指定）
"""

from __future__ import annotations

from typing import Iterator

import numpy as np
import pytest

from common import settings
from tests._utils.dummies import RecordingSurface


@pytest.fixture()
def rng() -> np.random.Generator:
    """シード固定の NumPy Generator。"""
    return np.random.default_rng(12345)


@pytest.fixture()
def surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture()
def clean_hdl_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in ("HDL_SEED", "HDL_FPS", "HDL_LOG_LEVEL", "HDL_MSAA_SAMPLES"):
        monkeypatch.delenv(name, raising=False)
    settings.reload_from_env()
    yield
    monkeypatch.undo()
    settings.reload_from_env()
