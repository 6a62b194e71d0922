"""Styling constants for the parcel preview SVG.

Offsets are canvas units relative to the anchor they label.
"""

FONT = "Arial"

# Outline
OUTLINE_STROKE = "#6366f1"
OUTLINE_FILL = "rgba(99,102,241,0.1)"
PLACEHOLDER_STROKE = "#cbd5e1"
PLACEHOLDER_FILL = "rgba(226,232,240,0.5)"
OUTLINE_WIDTH = 2

# Cut lines
CUT_STROKE = "rgba(168,85,247,0.7)"
CUT_WIDTH = 1.5
CUT_DASH = "4,2"

# Partition highlight
HOVER_FILL = "rgba(99,102,241,0.2)"

# Partition side labels
PART_LABEL_SIZE = 9
PART_LABEL_COLOR = "#374151"
PART_SIDE_DX = 5          # left/right labels, away from the cut line
PART_EDGE_DY = 12         # bottom label below, top label above

# Outer side labels
SIDE_LABEL_SIZE = 10
SIDE_LABEL_COLOR = "#111827"
BASE_LABEL_DY = 35
TOP_LABEL_DY = -25
LEFT_LABEL_DX = -70
RIGHT_LABEL_DX = 55

# Edit-mode dimension boxes (centre offsets from the same anchors)
EDIT_BASE_DY = 20
EDIT_TOP_DY = -25
EDIT_LEFT_DX = -30
EDIT_RIGHT_DX = 30
EDIT_BOX_W = 64
EDIT_BOX_H = 18
EDIT_STROKE = "#6366f1"

# Area tooltip
TOOLTIP_W = 100
TOOLTIP_H = 36
TOOLTIP_FILL = "rgba(15,23,42,0.9)"
TOOLTIP_AREA_COLOR = "#34d399"
TOOLTIP_TEXT_COLOR = "#e2e8f0"

PLACEHOLDER_TEXT = "Enter dimensions to preview"
PLACEHOLDER_TEXT_COLOR = "#9ca3af"
