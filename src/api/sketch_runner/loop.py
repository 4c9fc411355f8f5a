"""
どこで: `api.sketch_runner.loop`。
何を: フレームスケジューラ（既定は `pyglet.clock`）とシーケンサを結ぶ `AnimationLoop`。完了で停止し、リサイズで再生成して再開する。
なぜ: ループの一時停止/再開をウィンドウ生成から切り離し、スケジューラを差し替えて GL 無しで検証できるようにするため。
"""

from __future__ import annotations

import logging
from typing import Callable

from engine.core.frame_clock import FrameClock
from stripes.sequencer import StripeSequencer

logger = logging.getLogger(__name__)

TickCallback = Callable[[float], None]


class AnimationLoop:
    """シーケンサを一定間隔で進めるフレームループ。

    - `start()` で最初の列を生成してスケジュール開始。
    - シーケンサが FINISHED になった tick でスケジュール解除（描画済みの絵はキャンバスに残る）。
    - `on_resize()` で描画面を作り直し、列を再生成して再開。
    """

    def __init__(
        self,
        clock: FrameClock,
        sequencer: StripeSequencer,
        fps: int,
        *,
        resize_surface: Callable[[int, int], None] | None = None,
        schedule: Callable[[TickCallback, float], None] | None = None,
        unschedule: Callable[[TickCallback], None] | None = None,
    ):
        if fps <= 0:
            raise ValueError(f"fps must be > 0, got {fps}")
        if schedule is None or unschedule is None:
            # 遅延 import（ヘッドレス環境で import だけは通す）
            import pyglet

            schedule = schedule or pyglet.clock.schedule_interval
            unschedule = unschedule or pyglet.clock.unschedule
        self._clock = clock
        self._sequencer = sequencer
        self._interval = 1.0 / float(fps)
        self._resize_surface = resize_surface
        self._schedule = schedule
        self._unschedule = unschedule
        self._size: tuple[int, int] | None = None
        self.running = False

    def start(self, width: int, height: int) -> None:
        self._size = (int(width), int(height))
        self._sequencer.regenerate(width, height)
        self._clock.reset()
        self.resume()

    def resume(self) -> None:
        if self.running:
            return
        self._schedule(self.on_tick, self._interval)
        self.running = True

    def pause(self) -> None:
        if not self.running:
            return
        self._unschedule(self.on_tick)
        self.running = False

    def on_tick(self, dt: float) -> None:
        self._clock.tick(dt)
        if self._sequencer.is_finished:
            self.pause()
            logger.info("animation finished after %d frames; loop paused", self._clock.frame_count)

    def on_resize(self, width: int, height: int) -> None:
        """描画サイズ変更で全状態を作り直す。同一サイズの通知は無視する。"""
        size = (int(width), int(height))
        if size == self._size:
            logger.debug("resize to unchanged size %dx%d ignored", *size)
            return
        self._size = size
        if self._resize_surface is not None:
            self._resize_surface(*size)
        self._sequencer.regenerate(*size)
        self._clock.reset()
        self.resume()


__all__ = ["AnimationLoop"]
