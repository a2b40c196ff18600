"""JSON protocol, validation and error types for the grid solver worker."""

from .errors import (
    InputReadError,
    ParseError,
    SerializationError,
    SolverError,
    ValidationCategory,
    ValidationError,
)
from .messages import (
    GridRequest,
    GridResponse,
    parse_request,
    read_request_text,
    serialize_response,
)
from .validation import validate_request

__all__ = [
    "SolverError",
    "InputReadError",
    "ParseError",
    "SerializationError",
    "ValidationCategory",
    "ValidationError",
    "GridRequest",
    "GridResponse",
    "parse_request",
    "read_request_text",
    "serialize_response",
    "validate_request",
]
