"""User-editable side names and number formatting for preview labels."""
from typing import NamedTuple


class ShapeLabels(NamedTuple):
    left: str = "Left"
    right: str = "Right"
    base: str = "Base"
    top: str = "Top"


DEFAULT_LABELS = ShapeLabels()

# The bottom side is labelled "base" on screen
_SIDE_KEYS = {"left": "left", "right": "right", "bottom": "base", "base": "base", "top": "top"}


def label_for(labels: ShapeLabels, side: str) -> str:
    """Display name of a side. Raises KeyError for an unknown side."""
    return getattr(labels, _SIDE_KEYS[side])


def parse_labels(text: str) -> ShapeLabels:
    """Parse "left,right,base,top"; blank entries keep their default."""
    parts = [p.strip() for p in text.split(",")]
    if len(parts) != 4:
        raise ValueError(f"Expected 4 comma-separated labels, got {len(parts)}: {text!r}")
    return ShapeLabels(*(p or d for p, d in zip(parts, DEFAULT_LABELS)))


def fmt_num(v: float) -> str:
    """Compact number: at most two decimals, no trailing zeros, e.g. 180, 45.5."""
    s = f"{v:.2f}".rstrip('0').rstrip('.')
    return "0" if s == "-0" else s


def escape(text: str) -> str:
    """Escape text for SVG character data."""
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")
