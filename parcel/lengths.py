"""Side-length parsing and completeness checks."""
import math

from .types import EdgeLengths
from .constants import DEFAULT_SIDE

def parse_length(raw) -> float:
    """Convert a raw side value (None, str, int, float) to a float.

    Empty or unparseable input becomes NaN rather than raising, so a
    half-typed form still renders. Other types (bytes included) and
    underscore digit grouping such as "1_000" are unparseable.
    """
    if isinstance(raw, bool) or not isinstance(raw, (str, int, float)):
        return math.nan
    if isinstance(raw, str):
        raw = raw.strip()
        if not raw or "_" in raw:
            return math.nan
    try:
        return float(raw)
    except (ValueError, OverflowError):
        return math.nan

def lengths_from_raw(left, right, bottom, top) -> EdgeLengths:
    return EdgeLengths(parse_length(left), parse_length(right),
                       parse_length(bottom), parse_length(top))

def is_usable(value: float) -> bool:
    return math.isfinite(value) and value > 0

def is_complete(lengths: EdgeLengths) -> bool:
    """All four sides finite and positive."""
    return all(is_usable(v) for v in lengths)

def safe_length(value: float, default: float = DEFAULT_SIDE) -> float:
    """value if usable, else the edit-time default."""
    return value if is_usable(value) else default

def safe_lengths(lengths: EdgeLengths, default: float = DEFAULT_SIDE) -> EdgeLengths:
    return EdgeLengths(*(safe_length(v, default) for v in lengths))
