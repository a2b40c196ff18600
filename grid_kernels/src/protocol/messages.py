"""Request/response envelope for the grid solver worker.

A request is a single JSON object::

    {"grid": [[0, 1, ...], ...], "start": [row, col], "goal": [row, col]}

where ``0`` marks a free cell and any other value a wall. The response is
``{"length": <int> | null}``.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import IO, Any, Dict, List, Optional, Tuple

from .errors import InputReadError, ParseError, SerializationError

MAX_CELL_VALUE = 255


@dataclass(frozen=True)
class GridRequest:
    grid: List[List[int]]
    start: Tuple[int, int]
    goal: Tuple[int, int]


@dataclass
class GridResponse:
    length: Optional[int] = None
    error: Optional[str] = None

    def to_dict(self, include_error: bool = False) -> Dict[str, Any]:
        out: Dict[str, Any] = {"length": self.length}
        if include_error and self.error is not None:
            out["error"] = self.error
        return out


def read_request_text(stream: IO[str]) -> str:
    """Return the whole of ``stream`` as text."""
    try:
        return stream.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise InputReadError(f"Error reading stdin: {exc}") from exc


def _is_uint(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _parse_position(obj: Dict[str, Any], key: str) -> Tuple[int, int]:
    value = obj[key]
    if not isinstance(value, list) or len(value) != 2:
        raise ParseError(f"'{key}' must be an array of two integers")
    if not all(_is_uint(v) for v in value):
        raise ParseError(f"'{key}' must contain non-negative integers")
    return value[0], value[1]


def _parse_grid(value: Any) -> List[List[int]]:
    if not isinstance(value, list):
        raise ParseError("'grid' must be an array of rows")
    rows: List[List[int]] = []
    for i, row in enumerate(value):
        if not isinstance(row, list):
            raise ParseError(f"grid row {i} must be an array")
        for cell in row:
            if not _is_uint(cell) or cell > MAX_CELL_VALUE:
                raise ParseError(f"grid row {i} contains invalid cell {cell!r}")
        rows.append(list(row))
    return rows


def parse_request(text: str) -> GridRequest:
    """Decode ``text`` into a :class:`GridRequest`.

    Raises :class:`ParseError` for malformed JSON or a schema mismatch. Extra
    top-level keys are ignored.
    """
    try:
        obj = json.loads(text)
    except (ValueError, RecursionError) as exc:
        # ValueError also covers integer literals past the int digit limit
        raise ParseError(f"Error parsing JSON: {exc}") from exc

    if not isinstance(obj, dict):
        raise ParseError("Request must be a JSON object")
    for key in ("grid", "start", "goal"):
        if key not in obj:
            raise ParseError(f"missing field `{key}`")

    return GridRequest(
        grid=_parse_grid(obj["grid"]),
        start=_parse_position(obj, "start"),
        goal=_parse_position(obj, "goal"),
    )


def serialize_response(response: GridResponse, include_error: bool = False) -> str:
    """Encode ``response`` as compact JSON without a trailing newline."""
    try:
        return json.dumps(
            response.to_dict(include_error=include_error),
            separators=(",", ":"),
            allow_nan=False,
        )
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"Error serializing response: {exc}") from exc


__all__ = [
    "GridRequest",
    "GridResponse",
    "read_request_text",
    "parse_request",
    "serialize_response",
]
