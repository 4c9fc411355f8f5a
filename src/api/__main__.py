"""
どこで: `api.__main__`（CLI 入口）。
何を: `python -m api` / `hiddenline` コマンドで `run_stripes()` を起動する argparse ラッパ。
なぜ: ウィンドウサイズ/FPS/シード/ログレベルをコマンドラインから指定できるようにするため。
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from common.logging import setup_default_logging
from common.settings import get as get_settings

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hiddenline",
        description="Animate procedurally generated line stripes with a hidden erasing line.",
    )
    parser.add_argument("--width", type=int, default=None, help="initial window width (px)")
    parser.add_argument("--height", type=int, default=None, help="initial window height (px)")
    parser.add_argument("--fps", type=int, default=None, help="frames per second")
    parser.add_argument("--seed", type=int, default=None, help="random seed (reproducible run)")
    parser.add_argument(
        "--log-level",
        default=None,
        help="logging level name (default: HDL_LOG_LEVEL or INFO)",
    )
    parser.add_argument(
        "--init-only",
        action="store_true",
        help="resolve settings and exit without opening a window",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_default_logging(args.log_level or get_settings().LOG_LEVEL)

    from api.sketch import run_stripes

    try:
        run_stripes(
            width=args.width,
            height=args.height,
            fps=args.fps,
            seed=args.seed,
            init_only=args.init_only,
        )
    except ValueError as e:
        logger.error("invalid argument: %s", e)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
