"""Parcel reconstruction, cut projection, viewport transform, and scene assembly."""

from .types import (
    Point, Side, Direction, EdgeLengths, Area, Cut, Partition,
    Quad, CutLine, PartitionPolygon, Scene, CalculationResults,
)
from .geometry import (
    GeometryError,
    dist, lerp, midpoint, centroid, signed_area, poly_area,
    segments_cross, is_simple,
    triangle_range, angle_from_sides,
    diagonal_range, choose_diagonal, reconstruct_quadrilateral, edge_lengths,
)
from .lengths import parse_length, lengths_from_raw, is_complete, safe_length, safe_lengths
from .cuts import normalize_direction, project_cut, project_cuts, build_partition_polygons
from .svg import Viewport, make_svg_transform, W, H, PAD_X, PAD_Y
from .scene import build_scene, placeholder_scene, SceneCache
from .results import (
    ResultsError, calculation_request, results_from_json, load_results,
)
