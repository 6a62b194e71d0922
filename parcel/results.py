"""JSON payloads exchanged with the cut calculation service.

The service takes the four sides, the partition count and the measuring
side, and answers with the total area, the cut lines and the partitions.
Only the payload shapes live here; sending the request is the caller's job.
"""
import json

from .types import EdgeLengths, Direction, Area, Cut, Partition, CalculationResults
from .constants import MEASURE_FROM


class ResultsError(ValueError):
    """Raised for error responses and malformed result payloads."""


def calculation_request(lengths: EdgeLengths, number_of_partitions: int,
                        measure_from: Direction = "left") -> dict:
    """Request body for ``POST /calculate-cuts``."""
    if measure_from not in MEASURE_FROM:
        raise ValueError(f"measure_from must be one of {MEASURE_FROM}, got {measure_from!r}")
    return {
        "leftSideLength": lengths.left,
        "rightSideLength": lengths.right,
        "bottomBaseLength": lengths.bottom,
        "topSlantLength": lengths.top,
        "numberOfPartitions": int(number_of_partitions),
        "measureFrom": measure_from,
    }


def _field(obj: dict, key: str, kind: str):
    try:
        value = obj[key]
    except (KeyError, TypeError):
        raise ResultsError(f"{kind} missing '{key}': {obj!r}") from None
    if value is None:
        raise ResultsError(f"{kind} has null '{key}': {obj!r}")
    return value


def _number(obj: dict, key: str, kind: str, conv=float):
    value = _field(obj, key, kind)
    try:
        return conv(value)
    except (TypeError, ValueError):
        raise ResultsError(f"{kind} '{key}' is not a number: {value!r}") from None


def _list(payload: dict, key: str) -> list:
    items = payload.get(key) or []
    if not isinstance(items, list):
        raise ResultsError(f"results '{key}' must be a list, got {type(items).__name__}")
    return items


def area_from_json(obj: dict) -> Area:
    return Area(_number(obj, "sqFt", "area"), _number(obj, "guntha", "area"))


def cut_from_json(obj: dict) -> Cut:
    section = obj.get("sectionArea") if isinstance(obj, dict) else None
    return Cut(
        k=_number(obj, "k", "cut", int),
        x=_number(obj, "x", "cut"),
        y=_number(obj, "y", "cut"),
        length=_number(obj, "length", "cut"),
        initiated_from=str(_field(obj, "initiatedFrom", "cut")),
        section_area=area_from_json(section) if section is not None else None,
    )


def partition_from_json(obj: dict) -> Partition:
    return Partition(
        partition_index=_number(obj, "partitionIndex", "partition", int),
        left_side=_number(obj, "leftSide", "partition"),
        right_side=_number(obj, "rightSide", "partition"),
        bottom_side=_number(obj, "bottomSide", "partition"),
        top_side=_number(obj, "topSide", "partition"),
        area=area_from_json(_field(obj, "area", "partition")),
    )


def results_from_json(payload: dict) -> CalculationResults:
    """Parse a service response. An ``error`` key raises ResultsError with its message.

    Null ``cuts`` or ``partitions`` read as empty; any other malformed field
    raises ResultsError.
    """
    if not isinstance(payload, dict):
        raise ResultsError(f"Expected a JSON object, got {type(payload).__name__}")
    if payload.get("error"):
        raise ResultsError(payload["error"])
    return CalculationResults(
        total_area=area_from_json(_field(payload, "totalArea", "results")),
        cuts=tuple(cut_from_json(c) for c in _list(payload, "cuts")),
        partitions=tuple(partition_from_json(p) for p in _list(payload, "partitions")),
    )


def load_results(path: str) -> CalculationResults:
    with open(path) as f:
        return results_from_json(json.load(f))
