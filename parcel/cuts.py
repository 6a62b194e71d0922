"""Cut and partition handling: direction normalization, projection, partition polygons."""
import logging
from typing import Iterable

from .types import Point, Direction, Cut, Partition, Quad, CutLine, PartitionPolygon
from .geometry import dist, lerp, midpoint, centroid
from .constants import TOP_EDGE_MIN, MEASURE_FROM

logger = logging.getLogger(__name__)

# ============================================================
# Direction Normalization
# ============================================================
def normalize_direction(
    cuts: Iterable[Cut], partitions: Iterable[Partition],
    measure_from: Direction, bottom: float, top: float,
) -> tuple[tuple[Cut, ...], tuple[Partition, ...]]:
    """Re-express cuts measured from the right side in left-based coordinates.

    For measure_from="right" the partition order is reversed and each cut
    becomes (bottom - x, top - y), sorted by the new x. Cut numbers k are
    kept. "left" returns the inputs unchanged. Raises ValueError for any
    other direction.
    """
    if measure_from not in MEASURE_FROM:
        raise ValueError(f"measure_from must be one of {MEASURE_FROM}, got {measure_from!r}")
    cuts = tuple(cuts); partitions = tuple(partitions)
    if measure_from == "left":
        return cuts, partitions
    flipped = sorted((c._replace(x=bottom-c.x, y=top-c.y) for c in cuts),
                     key=lambda c: c.x)
    return tuple(flipped), tuple(reversed(partitions))

# ============================================================
# Cut-Line Projection
# ============================================================
def project_cut(cut: Cut, quad: Quad) -> CutLine:
    """Cut from (x, 0) on the bottom edge to distance y along the top edge P3 -> P2."""
    top_len = dist(quad.p3, quad.p2)
    frac = cut.y/top_len if top_len > TOP_EDGE_MIN else 0.0
    return CutLine((cut.x, 0.0), lerp(quad.p3, quad.p2, frac))

def project_cuts(cuts: Iterable[Cut], quad: Quad) -> tuple[CutLine, ...]:
    return tuple(project_cut(c, quad) for c in cuts)

# ============================================================
# Partition Polygons
# ============================================================
def partition_polygon(part: Partition, bl: Point, br: Point, tr: Point, tl: Point) -> PartitionPolygon:
    return PartitionPolygon(
        partition=part, bl=bl, br=br, tr=tr, tl=tl,
        center=centroid([bl, br, tr, tl]),
        mid_left=midpoint(bl, tl), mid_right=midpoint(br, tr),
        mid_bottom=midpoint(bl, br), mid_top=midpoint(tl, tr),
    )

def build_partition_polygons(
    p0: Point, p1: Point, p2: Point, p3: Point,
    cut_lines: list[CutLine] | tuple[CutLine, ...],
    partitions: list[Partition] | tuple[Partition, ...],
) -> tuple[PartitionPolygon, ...]:
    """Quadrilateral for each partition, bounded by consecutive cut lines.

    Partition i runs from cut i-1 (or the left side P0-P3) to cut i (or the
    right side P1-P2). Points may be in any frame as long as all share it.
    A partition whose bounding cut does not exist is left out.
    """
    n = len(partitions); polys = []
    for i, part in enumerate(partitions):
        if i == 0:
            bl, tl = p0, p3
        elif i-1 < len(cut_lines):
            bl, tl = cut_lines[i-1]
        else:
            bl = tl = None
        if i == n-1:
            br, tr = p1, p2
        elif i < len(cut_lines):
            br, tr = cut_lines[i]
        else:
            br = tr = None
        if bl is None or br is None:
            logger.debug("Dropping partition %d: %d cut lines for %d partitions",
                         part.partition_index, len(cut_lines), n)
            continue
        polys.append(partition_polygon(part, bl, br, tr, tl))
    return tuple(polys)
