#!/usr/bin/env python3
"""
Data utilities.

Provides the DataPoint record and aggregate/filter helpers over sequences of
data points.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Mapping, Sequence


@dataclass(frozen=True)
class DataPoint:
    """A labeled numeric sample."""

    id: int
    value: float
    label: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DataPoint":
        """
        Build a DataPoint from a mapping with ``id``, ``value`` and ``label``.

        Raises:
            ValueError: If a key is missing or has the wrong type
        """
        try:
            point_id = data['id']
            value = data['value']
            label = data['label']
        except (KeyError, TypeError) as e:
            raise ValueError(f"Invalid data point, missing field: {e}") from e

        # bool is an int subclass
        if isinstance(point_id, bool) or not isinstance(point_id, int):
            raise ValueError(f"Data point id must be an integer, got: {point_id!r}")
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"Data point value must be a number, got: {value!r}")
        if not isinstance(label, str):
            raise ValueError(f"Data point label must be a string, got: {label!r}")

        return cls(id=point_id, value=float(value), label=label)


def process_data_points(points: Sequence[DataPoint]) -> float:
    """
    Return the mean ``value`` of ``points``.

    An empty sequence yields 0.0.
    """
    if not points:
        return 0.0
    # Plain left-to-right accumulation, no compensated summation
    total = 0.0
    for p in points:
        total += p.value
    return total / len(points)


def filter_by_threshold(points: Sequence[DataPoint], threshold: float) -> List[DataPoint]:
    """Return the points whose value is >= ``threshold``, in their original order."""
    return [p for p in points if p.value >= threshold]
