"""
どこで: `api.sketch`（実行ランナー）。
何を: ストライプアニメーションをウィンドウで実行する `run_stripes()`。ウィンドウ/GL・シーケンサ・フレームループを結線する。
なぜ: 状態（シーケンサ）・描画面（CanvasRenderer）・駆動（AnimationLoop）を明示的に受け渡し、プロセス大域の状態を持たないため。

実行フロー（概要）:
1) 設定解決: 明示引数 > 環境変数（HDL_*）> `configs/default.yaml` > 既定値。
2) ウィンドウ/GL: `RenderWindow` と ModernGL コンテキスト、保持型キャンバス `CanvasRenderer` を生成。
3) 中核: `StripeSequencer`（乱数は `numpy.random.default_rng(seed)`）を描画面に結線。
4) フレーム駆動: `FrameClock` → `AnimationLoop` を `pyglet.clock` で駆動。全ストライプ描画後は停止。
5) リサイズ: キャンバスを作り直し、列を再生成して再開。
6) 終了: ウィンドウを閉じるとループ停止・GL リソース解放。

注意/制限:
- ヘッドレス/仮想環境では `pyglet`/`ModernGL` の初期化に失敗する場合がある。
- 描画は累積型。キャンバスは再生成時にだけ背景色で消去される。
"""

from __future__ import annotations

import logging

import numpy as np

from engine.core.frame_clock import FrameClock
from stripes.sequencer import StripeSequencer

from .sketch_runner.loop import AnimationLoop
from .sketch_runner.utils import RunConfig, resolve_run_config

logger = logging.getLogger(__name__)


def run_stripes(
    *,
    width: int | None = None,
    height: int | None = None,
    fps: int | None = None,
    seed: int | None = None,
    init_only: bool = False,
) -> RunConfig:
    """ストライプアニメーションを実行する。

    Parameters
    ----------
    width, height : int | None
        初期ウィンドウの論理サイズ。None で設定/既定（1280x800）。
    fps : int | None
        フレームレート。None で環境変数/設定/既定（60）。
    seed : int | None
        乱数シード。None で環境変数、未設定なら毎回異なる構図。
    init_only : bool, default False
        True で設定解決のみ行い、ウィンドウを作らずに返す。

    Returns
    -------
    RunConfig
        実際に使用した設定。
    """
    run_cfg = resolve_run_config(width=width, height=height, fps=fps, seed=seed)
    logger.info(
        "run config: %dx%d @ %d fps, seed=%s, msaa=%d",
        run_cfg.width,
        run_cfg.height,
        run_cfg.fps,
        run_cfg.seed,
        run_cfg.msaa_samples,
    )
    if init_only:
        return run_cfg

    # 遅延インポート（ヘッドレス環境でのウィンドウ生成を避ける）
    import pyglet

    from .sketch_runner.render import create_window_and_renderer

    rendering_window, _mgl_ctx, canvas = create_window_and_renderer(
        run_cfg.width, run_cfg.height, msaa_samples=run_cfg.msaa_samples
    )

    sequencer = StripeSequencer(canvas, rng=np.random.default_rng(run_cfg.seed))
    frame_clock = FrameClock([sequencer])

    def _resize_canvas(w: int, h: int) -> None:
        canvas.resize(w, h, rendering_window.get_pixel_size())

    loop = AnimationLoop(frame_clock, sequencer, run_cfg.fps, resize_surface=_resize_canvas)

    rendering_window.add_draw_callback(canvas.present)
    rendering_window.add_resize_callback(loop.on_resize)

    closed = False

    @rendering_window.event
    def on_close():  # noqa: ANN001
        # 冪等なクリーンアップ
        nonlocal closed
        if closed:
            return
        closed = True
        loop.pause()
        canvas.release()
        logger.info("window closed after %d frames", frame_clock.frame_count)
        pyglet.app.exit()

    loop.start(rendering_window.width, rendering_window.height)
    pyglet.app.run()
    return run_cfg


__all__ = ["run_stripes"]
