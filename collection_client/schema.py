# collection_client/schema.py
from __future__ import annotations
from dataclasses import dataclass

from .exceptions import SchemaValidationError
from .metric import MetricType

DEFAULT_SEGMENT_FILE_SIZE_MB = 1024
DEFAULT_METRIC_TYPE = MetricType.L2


@dataclass(frozen=True)
class CollectionSchema:
    """Shape and storage settings of a collection, submitted once at creation.

    Instances come from ``CollectionSchemaBuilder`` and are read-only values.
    ``segment_file_size`` is in megabytes.
    """
    name: str
    dimension: int
    segment_file_size: int = DEFAULT_SEGMENT_FILE_SIZE_MB
    metric_type: MetricType = DEFAULT_METRIC_TYPE

    @staticmethod
    def builder(name: str, dimension: int) -> "CollectionSchemaBuilder":
        return CollectionSchemaBuilder(name, dimension)

    def validate(self) -> "CollectionSchema":
        """Fail fast on values the server would reject. Not run by default."""
        if not isinstance(self.name, str) or not self.name.strip():
            raise SchemaValidationError("Collection name must be a non-empty string")
        if not _is_positive_int(self.dimension):
            raise SchemaValidationError(f"dimension must be a positive integer, got {self.dimension!r}")
        if not _is_positive_int(self.segment_file_size):
            raise SchemaValidationError(
                f"segment_file_size must be a positive integer, got {self.segment_file_size!r}"
            )
        if not isinstance(self.metric_type, MetricType):
            raise SchemaValidationError(f"Unknown metric type: {self.metric_type!r}")
        return self

    def __str__(self) -> str:
        return (
            f"CollectionSchema = {{name = {self.name}, dimension = {self.dimension}, "
            f"segment_file_size = {self.segment_file_size}, metric_type = {str(self.metric_type)}}}"
        )


def _is_positive_int(v) -> bool:
    return isinstance(v, int) and not isinstance(v, bool) and v > 0


class CollectionSchemaBuilder:
    def __init__(self, name: str, dimension: int):
        # required
        self.name = name
        self.dimension = dimension
        # optional, defaulted
        self.segment_file_size: int = DEFAULT_SEGMENT_FILE_SIZE_MB
        self.metric_type: MetricType = DEFAULT_METRIC_TYPE

    def with_segment_file_size(self, segment_file_size: int) -> "CollectionSchemaBuilder":
        """Optional. Size in MB at which the server starts a new segment file (default 1024)."""
        self.segment_file_size = segment_file_size
        return self

    def with_metric_type(self, metric_type: MetricType) -> "CollectionSchemaBuilder":
        """Optional. Defaults to ``MetricType.L2``."""
        self.metric_type = metric_type
        return self

    def build(self, *, strict: bool = False) -> CollectionSchema:
        schema = CollectionSchema(
            name=self.name,
            dimension=self.dimension,
            segment_file_size=self.segment_file_size,
            metric_type=self.metric_type,
        )
        return schema.validate() if strict else schema
