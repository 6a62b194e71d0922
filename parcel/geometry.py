"""Pure geometry functions and quadrilateral reconstruction from four side lengths."""
import logging
import math

from .types import Point, EdgeLengths, Quad
from .constants import DIAG_MARGIN

logger = logging.getLogger(__name__)

# ============================================================
# Error Type
# ============================================================
class GeometryError(ValueError):
    """Raised for impossible geometry operations."""

# ============================================================
# Geometry Utilities
# ============================================================
def dist(p1: Point, p2: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(p2[0]-p1[0], p2[1]-p1[1])

def lerp(p1: Point, p2: Point, t: float) -> Point:
    """Point at fraction t of the way from p1 to p2."""
    return (p1[0]+t*(p2[0]-p1[0]), p1[1]+t*(p2[1]-p1[1]))

def midpoint(p1: Point, p2: Point) -> Point:
    return ((p1[0]+p2[0])/2, (p1[1]+p2[1])/2)

def centroid(verts: list[Point]) -> Point:
    """Arithmetic mean of the vertices (label anchor, not the area centroid)."""
    n = len(verts)
    return (sum(p[0] for p in verts)/n, sum(p[1] for p in verts)/n)

def signed_area(verts: list[Point]) -> float:
    """Shoelace area, positive for counter-clockwise winding."""
    nxt = verts[1:] + verts[:1]
    return sum(x0*y1 - x1*y0 for (x0, y0), (x1, y1) in zip(verts, nxt))/2

def poly_area(verts: list[Point]) -> float:
    """Polygon area via the shoelace formula. Works for either winding order."""
    return abs(signed_area(verts))

def _cross(o: Point, a: Point, b: Point) -> float:
    return (a[0]-o[0])*(b[1]-o[1])-(a[1]-o[1])*(b[0]-o[0])

def segments_cross(a1: Point, a2: Point, b1: Point, b2: Point) -> bool:
    """True if the open segments a1-a2 and b1-b2 properly intersect."""
    d1 = _cross(b1, b2, a1); d2 = _cross(b1, b2, a2)
    d3 = _cross(a1, a2, b1); d4 = _cross(a1, a2, b2)
    return d1*d2 < 0 and d3*d4 < 0

def is_simple(verts: list[Point]) -> bool:
    """True if no two non-adjacent edges of the closed polygon intersect."""
    n = len(verts)
    for i in range(n):
        for j in range(i+2, n):
            if i == 0 and j == n-1:
                continue  # adjacent via the closing edge
            if segments_cross(verts[i], verts[(i+1)%n], verts[j], verts[(j+1)%n]):
                return False
    return True

# ============================================================
# Triangle Relations
# ============================================================
def triangle_range(s1: float, s2: float) -> tuple[float, float]:
    """Feasible range of a triangle's third side given the other two."""
    return abs(s1-s2), s1+s2

def angle_from_sides(adj1: float, adj2: float, opp: float) -> float:
    """Angle between sides adj1 and adj2 opposite side opp (law of cosines).

    The cosine is clamped to [-1, 1] to absorb floating-point overshoot.
    Raises GeometryError if an adjacent side is zero.
    """
    if adj1 == 0 or adj2 == 0:
        raise GeometryError(f"Zero-length side: adj1={adj1}, adj2={adj2}")
    cos_a = (adj1**2+adj2**2-opp**2)/(2*adj1*adj2)
    return math.acos(max(-1.0, min(1.0, cos_a)))

# ============================================================
# Quadrilateral Reconstruction
# ============================================================
def diagonal_range(lengths: EdgeLengths) -> tuple[float, float]:
    """Range of the P0-P2 diagonal allowed by both triangles it splits the parcel into.

    Triangle P0-P1-P2 has sides (bottom, right, d); triangle P0-P2-P3 has
    sides (left, top, d). The range is empty when lower >= upper.
    """
    min_d1, max_d1 = triangle_range(lengths.bottom, lengths.right)
    min_d2, max_d2 = triangle_range(lengths.left, lengths.top)
    return max(min_d1, min_d2), min(max_d1, max_d2)

def choose_diagonal(lengths: EdgeLengths, lo: float, hi: float,
                    margin: float = DIAG_MARGIN) -> float:
    """Average of the two right-angle diagonals, clamped margin inside [lo, hi]."""
    L, b, a, l = lengths.bottom, lengths.right, lengths.left, lengths.top
    d = (math.sqrt(L*L+b*b) + math.sqrt(a*a+l*l))/2
    if hi - lo <= 2*margin:
        return (lo+hi)/2
    return max(lo+margin, min(hi-margin, d))

def reconstruct_quadrilateral(lengths: EdgeLengths) -> Quad:
    """Place the four corners of a parcel with the given side lengths.

    P0 sits at the origin with the bottom edge along +x. The diagonal P0-P2
    is chosen by choose_diagonal, then P2 and P3 follow from the law of
    cosines so that P0 -> P1 -> P2 -> P3 winds counter-clockwise.

    Lengths must already be positive (see lengths.safe_lengths). Infeasible
    sides never raise: the result has is_valid=False and a right-angled
    best-effort shape.
    """
    a, b, L, l = lengths
    p0 = (0.0, 0.0); p1 = (L, 0.0)
    lo, hi = diagonal_range(lengths)
    if lo >= hi:
        logger.debug("No feasible diagonal for %s: range [%.4f, %.4f]", lengths, lo, hi)
        return Quad(p0, p1, (L, b), (0.0, a), math.sqrt(L*L+a*a), False)

    d = choose_diagonal(lengths, lo, hi)
    ang_a = angle_from_sides(L, d, b)   # bottom edge -> diagonal
    ang_b = angle_from_sides(d, a, l)   # diagonal -> left edge
    p2 = (d*math.cos(ang_a), d*math.sin(ang_a))
    p3 = (a*math.cos(ang_a+ang_b), a*math.sin(ang_a+ang_b))
    return Quad(p0, p1, p2, p3, d, True)

def edge_lengths(quad: Quad) -> EdgeLengths:
    """Measured side lengths of a reconstructed parcel."""
    return EdgeLengths(
        left=dist(quad.p3, quad.p0), right=dist(quad.p1, quad.p2),
        bottom=dist(quad.p0, quad.p1), top=dist(quad.p2, quad.p3),
    )
