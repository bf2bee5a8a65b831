"""FrameLoop - fixed-rate frame counting, system dispatch, and lifecycle hooks."""

import logging
import time
from typing import Callable

from glide.types import ConfigError, FrameContext, System

logger = logging.getLogger(__name__)


class FrameLoop:
    """Runs a list of systems once per frame at a fixed rate.

    Loop time is derived from the frame count (``elapsed = frame_number * dt``)
    rather than the wall clock, so it stays exact however the frames are
    paced. Systems run in registration order on the calling thread. Any
    system may call ``ctx.request_stop()``; the remaining systems of that
    frame are skipped and the run ends.
    """

    def __init__(self, fps: int = 60) -> None:
        if fps <= 0:
            raise ConfigError("fps must be positive")
        self._fps = fps
        self._dt = 1.0 / fps
        self._frame_number = 0
        self._systems: list[System] = []
        self._start_hooks: list[Callable[[FrameContext], None]] = []
        self._stop_hooks: list[Callable[[FrameContext], None]] = []
        self._stop_requested: bool = False

    @property
    def fps(self) -> int:
        return self._fps

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def frame_number(self) -> int:
        return self._frame_number

    @property
    def elapsed(self) -> float:
        return self._frame_number * self._dt

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def on_start(self, hook: Callable[[FrameContext], None]) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Callable[[FrameContext], None]) -> None:
        self._stop_hooks.append(hook)

    def _request_stop(self) -> None:
        self._stop_requested = True

    def _context(self) -> FrameContext:
        return FrameContext(
            frame_number=self._frame_number,
            dt=self._dt,
            elapsed=self.elapsed,
            request_stop=self._request_stop,
        )

    def _frame(self) -> None:
        self._frame_number += 1
        ctx = self._context()
        for system in self._systems:
            system(ctx)
            if self._stop_requested:
                break

    def _start(self) -> None:
        self._stop_requested = False
        logger.debug("frame loop starting at frame %d (%d fps)",
                     self._frame_number, self._fps)
        ctx = self._context()
        for hook in self._start_hooks:
            hook(ctx)

    def _stop(self) -> None:
        logger.debug("frame loop stopped at frame %d", self._frame_number)
        ctx = self._context()
        for hook in self._stop_hooks:
            hook(ctx)

    def step(self) -> None:
        self._stop_requested = False
        self._frame()

    def run(self, n: int) -> None:
        self._start()
        for _ in range(n):
            self._frame()
            if self._stop_requested:
                break
        self._stop()

    def run_forever(self) -> None:
        self._start()
        while not self._stop_requested:
            start = time.monotonic()
            self._frame()
            if self._stop_requested:
                break
            sleep_time = self._dt - (time.monotonic() - start)
            if sleep_time > 0:
                time.sleep(sleep_time)
        self._stop()
