"""Snapshots of the arrow animation written as SVG files.

Demonstrates:
- Building the figure-eight in a rectangle
- Sampling point and heading at an offset
- Trimming and stroking the trail behind the arrow
- Placing a glyph with follow_transform
- Exporting paths with Path.svg_data()

Run: python -m examples.svg_frames [OUT_DIR]
"""

import sys
from pathlib import Path as FsPath

from glide_path import ArrowHead, Eight, Rect, Trail, place_glyph, point_and_angle

WIDTH, HEIGHT = 320, 180
FRAMES = 8


def render(offset: float) -> str:
    stage = Rect(10, 10, WIDTH - 20, HEIGHT - 20)
    outline = Eight().path(stage)
    point, angle = point_and_angle(outline, offset)
    head = place_glyph(ArrowHead().path(Rect.of_size(16, 16)), point, angle)
    trail = Trail(Eight(), offset).path(stage)
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{WIDTH}" height="{HEIGHT}">\n'
        f'  <path d="{outline.svg_data()}" fill="none" stroke="gray"/>\n'
        f'  <path d="{trail.svg_data()}" fill="teal"/>\n'
        f'  <path d="{head.svg_data()}" fill="black"/>\n'
        "</svg>\n"
    )


def main() -> None:
    out_dir = FsPath(sys.argv[1] if len(sys.argv) > 1 else "frames")
    out_dir.mkdir(parents=True, exist_ok=True)

    for i in range(FRAMES):
        offset = i / FRAMES
        target = out_dir / f"frame_{i:02d}.svg"
        target.write_text(render(offset))
        print(f"  offset {offset:.3f} -> {target}")

    print(f"\nDone. Wrote {FRAMES} frames to {out_dir}/.")


if __name__ == "__main__":
    main()
