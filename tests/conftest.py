"""Shared test fixtures for parcel preview tests."""
import numpy as np
import pytest
from parcel.types import EdgeLengths, Area, Cut, Partition
from parcel.geometry import reconstruct_quadrilateral, diagonal_range
from parcel.cuts import project_cuts, build_partition_polygons
from parcel.scene import build_scene


# Sample parcel: left a=220, right b=170, bottom L=180, top l=200
SAMPLE = EdgeLengths(left=220.0, right=170.0, bottom=180.0, top=200.0)


@pytest.fixture(scope="session")
def lengths():
    return SAMPLE


@pytest.fixture(scope="session")
def quad(lengths):
    """Reconstructed sample parcel in local coordinates."""
    return reconstruct_quadrilateral(lengths)


@pytest.fixture(scope="session")
def cuts():
    """Three cuts splitting the sample into four partitions, measured from the left."""
    return (
        Cut(k=1, x=45.0, y=50.0, length=205.0, initiated_from="left"),
        Cut(k=2, x=90.0, y=100.0, length=192.5, initiated_from="left"),
        Cut(k=3, x=135.0, y=150.0, length=180.1, initiated_from="left"),
    )


@pytest.fixture(scope="session")
def partitions():
    sides = [220.0, 205.0, 192.5, 180.1, 170.0]
    return tuple(
        Partition(partition_index=i+1, left_side=sides[i], right_side=sides[i+1],
                  bottom_side=45.0, top_side=50.0, area=Area(sq_ft=8750.0, guntha=8.03))
        for i in range(4)
    )


@pytest.fixture(scope="session")
def local_lines(cuts, quad):
    return project_cuts(cuts, quad)


@pytest.fixture(scope="session")
def scene(lengths, cuts, partitions):
    """Scene measured from the left."""
    return build_scene(lengths, "left", cuts, partitions)


@pytest.fixture(scope="session")
def results_payload():
    """Service response for the sample parcel, as decoded JSON."""
    return {
        "totalArea": {"sqFt": 35000.0, "guntha": 32.13},
        "cuts": [
            {"k": 1, "x": 45, "y": 50, "length": 205.0,
             "sectionArea": {"sqFt": 8750.0, "guntha": 8.03}, "initiatedFrom": "left"},
            {"k": 2, "x": 90, "y": 100, "length": 192.5,
             "sectionArea": {"sqFt": 8750.0, "guntha": 8.03}, "initiatedFrom": "left"},
            {"k": 3, "x": 135, "y": 150, "length": 180.1,
             "sectionArea": {"sqFt": 8750.0, "guntha": 8.03}, "initiatedFrom": "left"},
        ],
        "partitions": [
            {"partitionIndex": i+1, "leftSide": l, "rightSide": r,
             "bottomSide": 45, "topSide": 50, "area": {"sqFt": 8750.0, "guntha": 8.03}}
            for i, (l, r) in enumerate([(220, 205), (205, 192.5), (192.5, 180.1), (180.1, 170)])
        ],
    }


@pytest.fixture(scope="session")
def local_polys(quad, local_lines, partitions):
    """Sample partitions as polygons in local coordinates."""
    return build_partition_polygons(quad.p0, quad.p1, quad.p2, quad.p3, local_lines, partitions)


@pytest.fixture(scope="session")
def random_parcels():
    """300 random parcels whose diagonal range is wider than the clamp margins."""
    rng = np.random.default_rng(20240601)
    out = []
    while len(out) < 300:
        a, b, L, l = rng.uniform(5.0, 500.0, size=4)
        lens = EdgeLengths(float(a), float(b), float(L), float(l))
        lo, hi = diagonal_range(lens)
        if hi - lo > 1.0:
            out.append(lens)
    return out
