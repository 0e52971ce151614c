from __future__ import annotations

import sys
from typing import Optional, Sequence, Tuple

from PIL import Image, ImageDraw

from touchsynth.core.types import Bounds, Phase, Sample

"""
TouchSynth Path Preview
Draws a sample sequence onto an image: the path as a line, DOWN green,
MOVE white, UP red.

    python -m touchsynth.tools.path_preview preview.png
"""

_COLORS = {
    Phase.DOWN: (40, 200, 90, 255),
    Phase.MOVE: (255, 255, 255, 255),
    Phase.UP: (230, 60, 60, 255),
}
_DOT = 3


def _frame(samples: Sequence[Sample]) -> Bounds:
    xs = [s.position.x for s in samples]
    ys = [s.position.y for s in samples]
    return Bounds(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))


def render_samples(
    samples: Sequence[Sample],
    size: Tuple[int, int] = (256, 256),
    frame: Optional[Bounds] = None,
    margin: int = 8,
) -> Image.Image:
    """
    Map `frame` (default: the samples' bounding box) onto the image,
    keeping the aspect ratio, and draw the samples on it.
    """
    img = Image.new("RGBA", size, (0, 0, 0, 255))
    if not samples:
        return img

    frame = frame or _frame(samples)
    w, h = size
    span = max(frame.width, frame.height) or 1.0
    scale = min(w - 2 * margin, h - 2 * margin) / span

    def to_px(s: Sample) -> Tuple[float, float]:
        return (
            margin + (s.position.x - frame.left) * scale,
            margin + (s.position.y - frame.top) * scale,
        )

    d = ImageDraw.Draw(img)
    points = [to_px(s) for s in samples]
    if len(points) > 1:
        d.line(points, fill=(120, 120, 120, 255), width=1)
    for s, (x, y) in zip(samples, points):
        d.ellipse((x - _DOT, y - _DOT, x + _DOT, y + _DOT), fill=_COLORS[s.phase])
    return img


if __name__ == "__main__":
    from touchsynth.core.config import DEFAULT_PRESET
    from touchsynth.core.curves import create_velocity_path
    from touchsynth.core.types import Position
    from touchsynth.dispatcher.input_dispatcher import sample_path

    out = sys.argv[1] if len(sys.argv) > 1 else "preview.png"
    path = create_velocity_path(Position(0, 0), Position(100, 40), 200, 1200)
    samples = sample_path(path, 200, DEFAULT_PRESET.timing.event_period_ms)
    render_samples(samples).save(out)
    print(f"[PathPreview] wrote {len(samples)} samples to {out}")
