# collection_client/models.py
from __future__ import annotations
from pydantic import BaseModel, ConfigDict

from .metric import MetricType
from .schema import CollectionSchema, DEFAULT_METRIC_TYPE, DEFAULT_SEGMENT_FILE_SIZE_MB

# -------- Collections --------
class CreateCollectionIn(BaseModel):
    name: str
    dimension: int
    segment_file_size: int = DEFAULT_SEGMENT_FILE_SIZE_MB
    metric_type: MetricType = DEFAULT_METRIC_TYPE

    @classmethod
    def from_schema(cls, schema: CollectionSchema) -> "CreateCollectionIn":
        return cls(
            name=schema.name,
            dimension=schema.dimension,
            segment_file_size=schema.segment_file_size,
            metric_type=schema.metric_type,
        )

class Collection(BaseModel):
    # tolerate extra server-side fields (index state, timestamps, ...)
    model_config = ConfigDict(extra="ignore")

    name: str
    dimension: int
    segment_file_size: int = DEFAULT_SEGMENT_FILE_SIZE_MB
    metric_type: MetricType = DEFAULT_METRIC_TYPE
    row_count: int = 0

    def to_schema(self) -> CollectionSchema:
        return CollectionSchema(
            name=self.name,
            dimension=self.dimension,
            segment_file_size=self.segment_file_size,
            metric_type=self.metric_type,
        )

class RowCountOut(BaseModel):
    count: int
