"""
どこで: `util.utils`。
何を: YAML 構成（`configs/default.yaml` + ルート `config.yaml`）のフェイルソフト読み込み。
なぜ: ウィンドウサイズ/FPS の既定値をコード外で調整できるようにしつつ、設定不備で起動を止めないため。
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict

import yaml

logger = logging.getLogger(__name__)


def _safe_load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError):
        logger.warning("failed to read config: %s", path, exc_info=True)
        return {}
    return data if isinstance(data, dict) else {}


_ROOT_MARKERS = ("pyproject.toml", "configs", ".git")


def _find_project_root(start: Path) -> Path:
    """`start` から上位へ辿り、ルート目印（pyproject.toml / configs / .git）を持つ最初のディレクトリを返す。

    目印が無ければ `start` の 2 階層上（<repo>/src/util → <repo> を想定）。
    """
    cur = start.resolve()
    for candidate in (cur, *cur.parents):
        if any((candidate / marker).exists() for marker in _ROOT_MARKERS):
            return candidate
    return cur.parent.parent


def load_config(project_root: Path | None = None) -> Dict[str, Any]:
    """`configs/default.yaml` にルートの `config.yaml` を重ねた辞書を返す。

    - 上書きはトップレベルのキー単位（`canvas` 節を丸ごと差し替える）。
    - ファイルが無い/壊れている場合はその分を空として扱う。
    """
    root = project_root if project_root is not None else _find_project_root(Path(__file__).parent)
    merged: Dict[str, Any] = {}
    for path in (root / "configs" / "default.yaml", root / "config.yaml"):
        if path.exists():
            merged.update(_safe_load_yaml(path))
    return merged


def config_section(cfg: Dict[str, Any], name: str) -> Dict[str, Any]:
    """トップレベルの節を辞書として返す（欠落/型不一致は空辞書）。"""
    section = cfg.get(name) if isinstance(cfg, dict) else None
    return section if isinstance(section, dict) else {}
