"""Arrow Path - an arrowhead riding a figure-eight with its trail behind it.

Exercises glide (frame loop), glide-tween (repeating animation) and
glide-path (sampling, trimming, stroking, glyph placement).

Controls:
  Esc     Quit
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from glide import FrameContext, FrameLoop
from glide_path import Rect

from game.scene import Scene
from ui.constants import (
    ARROW_COLOR,
    BG_COLOR,
    CURVE_COLOR,
    DURATION,
    FPS,
    PADDING,
    SCREEN_H,
    SCREEN_W,
    STATUS_H,
    TRAIL_COLOR,
)
from ui.render import fill_path, stroke_path
from ui.status import draw_status_bar

logger = logging.getLogger("arrow_path")


def _size(text: str) -> tuple[int, int]:
    try:
        w, h = (int(part) for part in text.lower().split("x"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected WxH, got {text!r}") from None
    if w <= 2 * PADDING or h <= 2 * PADDING:
        raise argparse.ArgumentTypeError(f"stage {text} is smaller than its padding")
    return w, h


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Arrow Path - glide demo")
    p.add_argument("--duration", type=float, default=DURATION,
                   help=f"Seconds per lap (default: {DURATION:g})")
    p.add_argument("--fps", type=int, default=FPS, help=f"Frames per second (default: {FPS})")
    p.add_argument("--size", type=_size, default=(SCREEN_W, SCREEN_H), metavar="WxH",
                   help=f"Stage size in pixels (default: {SCREEN_W}x{SCREEN_H})")
    p.add_argument("--on-path", action="store_true",
                   help="Draw trail and arrowhead as one shape, animating the arrow spread")
    p.add_argument("--frames", type=int, default=None, metavar="N",
                   help="Run N frames then quit")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return p.parse_args()


class GameState:
    """Holds the window, the scene and the frame loop."""

    def __init__(self, args: argparse.Namespace) -> None:
        width, height = args.size
        self.screen = pygame.display.set_mode((width, height + STATUS_H))
        pygame.display.set_caption("Arrow Path - glide demo")
        self.font = pygame.font.SysFont("monospace", 13)
        self.stage = Rect(PADDING, PADDING, width - 2 * PADDING, height - 2 * PADDING)

        self.scene = Scene(args.duration, mode="on-path" if args.on_path else "effect")
        self.loop = FrameLoop(fps=args.fps)

        # Wire systems (order matters)
        self.loop.on_start(self.scene.on_appear)
        self.loop.add_system(self.scene.driver)
        self.loop.add_system(self.scene.sync_system)
        self.loop.add_system(self._event_system)
        self.loop.add_system(self._render_system)
        self.loop.on_stop(self._on_stop)

    def _event_system(self, ctx: FrameContext) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                ctx.request_stop()
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                ctx.request_stop()

    def _render_system(self, ctx: FrameContext) -> None:
        frame = self.scene.frame(self.stage)

        self.screen.fill(BG_COLOR)
        stroke_path(self.screen, CURVE_COLOR, frame.outline)
        fill_path(self.screen, TRAIL_COLOR, frame.trail)
        fill_path(self.screen, ARROW_COLOR, frame.arrow)
        draw_status_bar(self.screen, self.font, frame.offset, frame.angle, self.scene.mode)

        pygame.display.flip()

    def _on_stop(self, ctx: FrameContext) -> None:
        logger.info("stopped after %d frames (%.2f s)", ctx.frame_number, ctx.elapsed)


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    pygame.init()
    state = GameState(args)
    logger.info("running %s mode, %.1f s per lap at %d fps",
                state.scene.mode, args.duration, args.fps)

    if args.frames is not None:
        state.loop.run(args.frames)
    else:
        state.loop.run_forever()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
