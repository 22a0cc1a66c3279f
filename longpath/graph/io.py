"""Edge-list text input and path text output.

Input lines have the form ``<source>, <destination>, <weight>``. Blank lines
are ignored. Malformed lines are dropped in lenient mode and rejected with
`EdgeParseError` in strict mode.
"""

from __future__ import annotations

import math
import re
from typing import Iterable, List, Optional, Sequence

from longpath.graph.edge_graph import EdgeGraph
from longpath.logging import get_logger
from longpath.types import EdgeRecord, ParseMode, Vertex

logger = get_logger(__name__)

#: Separator between the output vertex ids.
OUTPUT_SEPARATOR = "\r\n"


class EdgeParseError(ValueError):
    """Raised in strict mode for a line that is not a valid edge record.

    Attributes:
        line_no: 1-based line number within the input.
        line: The offending line, stripped.
    """

    def __init__(self, line_no: int, line: str, reason: str) -> None:
        super().__init__(f"line {line_no}: {reason}: {line!r}")
        self.line_no = line_no
        self.line = line


_ID_RE = re.compile(r"[+-]?[0-9]+", re.ASCII)
_WEIGHT_RE = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?", re.ASCII
)


def _parse_fields(line: str) -> EdgeRecord:
    fields = [part.strip() for part in line.split(",")]
    # Extra trailing fields make the line malformed; they are not ignored.
    if len(fields) != 3:
        raise ValueError(f"expected 3 comma-separated fields, got {len(fields)}")
    src_str, dst_str, weight_str = fields
    if not src_str or not dst_str or not weight_str:
        raise ValueError("empty field")
    # int() and float() also accept underscores and non-ASCII digits.
    if not _ID_RE.fullmatch(src_str) or not _ID_RE.fullmatch(dst_str):
        raise ValueError("vertex id is not an integer")
    if not _WEIGHT_RE.fullmatch(weight_str):
        raise ValueError("weight is not a decimal number")
    weight = float(weight_str)
    if not math.isfinite(weight):
        raise ValueError("weight is not finite")
    return int(src_str), int(dst_str), weight


def parse_edge_line(line: str) -> Optional[EdgeRecord]:
    """Parse one edge line.

    Returns:
        ``(source, destination, weight)``, or None for a blank or malformed line.
    """
    if not line.strip():
        return None
    try:
        return _parse_fields(line)
    except ValueError:
        return None


def parse_edge_lines(
    lines: Iterable[str], mode: ParseMode = ParseMode.LENIENT
) -> List[EdgeRecord]:
    """Parse edge lines into records, preserving input order.

    Args:
        lines: Text lines; trailing newlines and surrounding whitespace are ignored.
        mode: LENIENT drops malformed lines, STRICT raises on them.

    Returns:
        Parsed records.

    Raises:
        EdgeParseError: In STRICT mode, on the first malformed non-blank line.
    """
    records: List[EdgeRecord] = []
    dropped = 0
    for line_no, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line:
            continue
        try:
            records.append(_parse_fields(line))
        except ValueError as exc:
            if mode == ParseMode.STRICT:
                raise EdgeParseError(line_no, line, str(exc)) from exc
            dropped += 1
            logger.debug(f"Dropping malformed line {line_no}: {line!r} ({exc})")

    if dropped:
        logger.debug(f"Dropped {dropped} malformed line(s)")
    return records


def edgelist_to_graph(
    lines: Iterable[str], mode: ParseMode = ParseMode.LENIENT
) -> EdgeGraph:
    """Parse edge lines and build the graph."""
    graph = EdgeGraph.from_records(parse_edge_lines(lines, mode=mode))
    logger.debug(
        f"Built graph with {graph.number_of_nodes()} vertices"
        f" and {graph.number_of_edges()} edges"
    )
    return graph


def format_path(path: Sequence[Vertex]) -> str:
    """Join vertex ids with CRLF. An empty path gives an empty string."""
    return OUTPUT_SEPARATOR.join(str(vertex) for vertex in path)
