# collection_client/exceptions.py
from __future__ import annotations


class VectorDBError(Exception):
    """Base class for everything the client raises."""


class TransportError(VectorDBError):
    pass


class ServerError(VectorDBError):
    pass


class NotFound(VectorDBError):
    pass


class Conflict(VectorDBError):
    pass


class BadRequest(VectorDBError):
    pass


class SchemaValidationError(BadRequest, ValueError):
    """Raised by strict-mode schema checks before anything is sent."""


class Unauthorized(VectorDBError):
    """401/403 from the server, usually a missing or wrong api_key."""
