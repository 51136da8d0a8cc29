# collection_client/__init__.py
from .config import ClientConfig, ClientSettings
from .client import VectorDBClient
from .logging_config import configure_logging
from .metric import MetricType
from .schema import CollectionSchema, CollectionSchemaBuilder
from . import models
from . import exceptions

__all__ = [
    "ClientConfig",
    "ClientSettings",
    "VectorDBClient",
    "configure_logging",
    "MetricType",
    "CollectionSchema",
    "CollectionSchemaBuilder",
    "models",
    "exceptions",
]
