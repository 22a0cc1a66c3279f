"""Base aliases and enums for longest-path search."""

from __future__ import annotations

from enum import IntEnum
from typing import Tuple, Union

#: Vertex identifier. Vertices carry no payload.
Vertex = int

#: Edge weight (distance). Any finite real value.
Weight = Union[int, float]

#: Accumulated path distance.
Distance = float

#: A parsed edge record: ``(source, destination, weight)``.
EdgeRecord = Tuple[Vertex, Vertex, Weight]


class _NamedEnum(IntEnum):
    @classmethod
    def from_string(cls, value: str):
        """Parse a case-insensitive name (``-`` and ``_`` are interchangeable).

        Raises:
            ValueError: If the string doesn't match any enum member.
        """
        try:
            return cls[value.strip().upper().replace("-", "_")]
        except KeyError:
            valid = ", ".join(e.name.lower().replace("_", "-") for e in cls)
            raise ValueError(
                f"Invalid {cls.__name__} '{value}'. Valid values are: {valid}"
            ) from None


class ClosurePolicy(_NamedEnum):
    """Which frontier states count as complete candidate paths."""

    #: Only dead ends (no outgoing edge to an unvisited vertex) are candidates.
    DEAD_END = 1
    #: Dead ends, plus any edge that closes back onto the start vertex.
    RETURN_TO_START = 2


class ParseMode(_NamedEnum):
    """Handling of malformed edge lines."""

    LENIENT = 1  # Drop silently
    STRICT = 2  # Raise EdgeParseError


class Traversal(_NamedEnum):
    """Depth-first traversal engine."""

    ITERATIVE = 1  # Explicit frame stack, no recursion-depth limit
    RECURSIVE = 2
