"""Viewport transform and canvas constants."""
from typing import Iterable, NamedTuple

from .types import Point
from .constants import EMPTY_EXTENT

# Preview canvas, wider than tall to leave room for side labels
W, H = 640, 400

# Margin kept clear around the parcel for its outer labels
PAD_X, PAD_Y = 80, 40


class Viewport(NamedTuple):
    """Uniform scale + translate + y-flip from parcel coordinates to canvas."""
    scale: float
    math_cx: float; math_cy: float
    svg_cx: float; svg_cy: float

    def to_svg(self, p: Point) -> Point:
        return (self.svg_cx + (p[0]-self.math_cx)*self.scale,
                self.svg_cy - (p[1]-self.math_cy)*self.scale)

    def apply(self, pts: Iterable[Point]) -> tuple[Point, ...]:
        return tuple(self.to_svg(p) for p in pts)


def bounding_box(verts: Iterable[Point]) -> tuple[float, float, float, float]:
    """(min_x, min_y, max_x, max_y) of the vertices."""
    verts = list(verts)
    xs = [p[0] for p in verts]; ys = [p[1] for p in verts]
    return min(xs), min(ys), max(xs), max(ys)


def make_svg_transform(
    verts: Iterable[Point], width: float = W, height: float = H,
    pad_x: float = PAD_X, pad_y: float = PAD_Y,
) -> Viewport:
    """Fit the vertices' bounding box, centred, inside the padded canvas.

    One scale serves both axes so the parcel keeps its proportions. A box
    that is flat in one axis uses EMPTY_EXTENT for that axis.
    """
    min_x, min_y, max_x, max_y = bounding_box(verts)
    w = (max_x - min_x) or EMPTY_EXTENT
    h = (max_y - min_y) or EMPTY_EXTENT
    scale = min((width - 2*pad_x)/w, (height - 2*pad_y)/h)
    return Viewport(scale, min_x + w/2, min_y + h/2, width/2, height/2)
