# collection_client/metric.py
from __future__ import annotations
from enum import Enum


class MetricType(str, Enum):
    """Similarity/distance metric a collection is indexed with."""

    L2 = "L2"
    IP = "IP"
    HAMMING = "HAMMING"
    JACCARD = "JACCARD"
    TANIMOTO = "TANIMOTO"
    SUBSTRUCTURE = "SUBSTRUCTURE"
    SUPERSTRUCTURE = "SUPERSTRUCTURE"

    @property
    def display_name(self) -> str:
        return self.name

    @property
    def is_binary(self) -> bool:
        return self is not MetricType.L2 and self is not MetricType.IP

    @classmethod
    def parse(cls, value: "MetricType | str") -> "MetricType":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                pass
        raise ValueError(f"Unknown metric type: {value!r}")

    def __str__(self) -> str:
        return self.name
