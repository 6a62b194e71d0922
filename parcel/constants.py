"""Named constants for parcel reconstruction and the placeholder scene.

Lengths are in the caller's survey unit (feet for the calculation service);
placeholder coordinates are canvas units.
"""

# Edit-time substitute for a missing/zero/NaN side, keeps a shape on screen
DEFAULT_SIDE = 100.0

# Keep the chosen diagonal this far inside its feasible range (no flat triangles)
DIAG_MARGIN = 0.5

# Top edges shorter than this project every cut end onto P3
TOP_EDGE_MIN = 0.001

# Bounding-box extent used when the shape is flat in one axis
EMPTY_EXTENT = 100.0

# Placeholder rectangle shown until all four sides are entered
PLACEHOLDER_LEFT = 190.0
PLACEHOLDER_RIGHT = 450.0
PLACEHOLDER_TOP = 120.0
PLACEHOLDER_BOTTOM = 280.0

MEASURE_FROM = ("left", "right")
SIDES = ("left", "right", "bottom", "top")
