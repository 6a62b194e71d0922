"""Scene assembly: lengths + cuts + partitions -> drawable canvas scene."""
import logging
from typing import Iterable

from .types import EdgeLengths, Direction, Cut, Partition, Scene, CutLine
from .geometry import reconstruct_quadrilateral
from .lengths import is_complete, safe_length, safe_lengths
from .cuts import normalize_direction, project_cuts, build_partition_polygons
from .svg import make_svg_transform, W, H
from .constants import (
    PLACEHOLDER_LEFT, PLACEHOLDER_RIGHT, PLACEHOLDER_TOP, PLACEHOLDER_BOTTOM,
)

logger = logging.getLogger(__name__)


def placeholder_scene(width: float = W, height: float = H) -> Scene:
    """Fixed rectangle shown until every side has a usable length."""
    tl = (PLACEHOLDER_LEFT, PLACEHOLDER_TOP); tr = (PLACEHOLDER_RIGHT, PLACEHOLDER_TOP)
    br = (PLACEHOLDER_RIGHT, PLACEHOLDER_BOTTOM); bl = (PLACEHOLDER_LEFT, PLACEHOLDER_BOTTOM)
    return Scene(outline=(tl, tr, br, bl), width=width, height=height,
                 is_valid=False, cut_lines=(), partition_polygons=(), scale=1.0)


def build_scene(
    lengths: EdgeLengths,
    measure_from: Direction = "left",
    cuts: Iterable[Cut] = (),
    partitions: Iterable[Partition] = (),
    editing: bool = False,
    width: float = W, height: float = H,
) -> Scene:
    """Reconstruct the parcel and map it, its cuts and partitions onto the canvas.

    Incomplete lengths give the placeholder rectangle unless editing, in
    which case missing sides fall back to DEFAULT_SIDE so the shape stays
    visible while the user types. Never raises for numeric input; an
    impossible parcel comes back with is_valid=False.
    """
    cuts, partitions = normalize_direction(
        cuts, partitions, measure_from,
        safe_length(lengths.bottom), safe_length(lengths.top),
    )
    if not is_complete(lengths) and not editing:
        return placeholder_scene(width, height)

    quad = reconstruct_quadrilateral(safe_lengths(lengths))
    local_lines = project_cuts(cuts, quad)

    vp = make_svg_transform([quad.p0, quad.p1, quad.p2, quad.p3], width, height)
    p0, p1, p2, p3 = vp.apply([quad.p0, quad.p1, quad.p2, quad.p3])
    cut_lines = tuple(CutLine(vp.to_svg(ln.start), vp.to_svg(ln.end)) for ln in local_lines)
    polys = build_partition_polygons(p0, p1, p2, p3, cut_lines, partitions)

    return Scene(outline=(p3, p2, p1, p0), width=width, height=height,
                 is_valid=quad.is_valid, cut_lines=cut_lines,
                 partition_polygons=polys, scale=vp.scale, diagonal=quad.diagonal)


class SceneCache:
    """Memoizes build_scene on its exact arguments, keeping only the latest.

    NaN lengths never compare equal, so they always rebuild.
    """

    def __init__(self):
        self._key = None
        self._scene: Scene | None = None
        self.hits = 0; self.misses = 0

    def get(self, lengths: EdgeLengths, measure_from: Direction = "left",
            cuts: Iterable[Cut] = (), partitions: Iterable[Partition] = (),
            editing: bool = False, width: float = W, height: float = H) -> Scene:
        cuts = tuple(cuts); partitions = tuple(partitions)
        key = (tuple(lengths), measure_from, cuts, partitions, editing, width, height)
        if self._scene is not None and key == self._key:
            self.hits += 1
            logger.debug("Scene cache hit for %s", lengths)
            return self._scene
        self.misses += 1
        self._scene = build_scene(lengths, measure_from, cuts, partitions, editing, width, height)
        self._key = key
        return self._scene

    def clear(self):
        self._key = None; self._scene = None
