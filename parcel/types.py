"""Shared type definitions for the parcel preview engine."""
from typing import Literal, NamedTuple

Point = tuple[float, float]

Side = Literal["left", "right", "bottom", "top"]
Direction = Literal["left", "right"]

class EdgeLengths(NamedTuple):
    left: float; right: float; bottom: float; top: float

class Area(NamedTuple):
    sq_ft: float; guntha: float

class Cut(NamedTuple):
    k: int; x: float; y: float; length: float
    initiated_from: str
    section_area: Area | None = None

class Partition(NamedTuple):
    partition_index: int
    left_side: float; right_side: float
    bottom_side: float; top_side: float
    area: Area

class Quad(NamedTuple):
    """Reconstructed parcel: P0 bottom-left, P1 bottom-right, P2 top-right, P3 top-left."""
    p0: Point; p1: Point; p2: Point; p3: Point
    diagonal: float
    is_valid: bool

class CutLine(NamedTuple):
    start: Point; end: Point

class PartitionPolygon(NamedTuple):
    partition: Partition
    bl: Point; br: Point; tr: Point; tl: Point
    center: Point
    mid_left: Point; mid_right: Point; mid_bottom: Point; mid_top: Point

    @property
    def vertices(self) -> tuple[Point, Point, Point, Point]:
        return (self.bl, self.br, self.tr, self.tl)

    @property
    def points(self) -> str:
        """Vertex list in SVG ``points`` attribute form."""
        return " ".join(f"{x:.1f},{y:.1f}" for x, y in self.vertices)

class Scene(NamedTuple):
    """Drawable scene in canvas coordinates.

    ``outline`` runs TL, TR, BR, BL, the order the outline path is drawn in.
    """
    outline: tuple[Point, Point, Point, Point]
    width: float; height: float
    is_valid: bool
    cut_lines: tuple[CutLine, ...]
    partition_polygons: tuple[PartitionPolygon, ...]
    scale: float
    diagonal: float | None = None

    @property
    def p_tl(self) -> Point: return self.outline[0]
    @property
    def p_tr(self) -> Point: return self.outline[1]
    @property
    def p_br(self) -> Point: return self.outline[2]
    @property
    def p_bl(self) -> Point: return self.outline[3]

    @property
    def path(self) -> str:
        (x0, y0), *rest = self.outline
        return f"M {x0:.1f} {y0:.1f} " + " ".join(f"L {x:.1f} {y:.1f}" for x, y in rest) + " Z"

    @property
    def viewbox(self) -> str:
        return f"0 0 {self.width:g} {self.height:g}"

class CalculationResults(NamedTuple):
    total_area: Area
    cuts: tuple[Cut, ...]
    partitions: tuple[Partition, ...]
