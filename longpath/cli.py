"""Command-line interface for longpath."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from time import perf_counter
from typing import List, Optional

from longpath.config import SearchConfig
from longpath.graph.io import EdgeParseError, OUTPUT_SEPARATOR, format_path
from longpath.logging import (
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    set_global_log_level,
)
from longpath.solver import solve_lines

logger = get_logger(__name__)


def _format_duration(seconds: float) -> str:
    """Return a concise human-readable duration string.

    Examples:
        0.123 -> "123.0 ms"; 1.234 -> "1.23 s"; 75.2 -> "1m 15.2s".
    """
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    if seconds < 60.0:
        return f"{seconds:.2f} s"
    minutes = int(seconds // 60)
    rem = seconds - minutes * 60
    return f"{minutes}m {rem:.1f}s"


def _read_lines(source: str) -> List[str]:
    # Undecodable bytes become U+FFFD instead of aborting the read.
    if source == "-":
        return sys.stdin.buffer.read().decode("utf-8", "replace").splitlines()
    return Path(source).read_text(encoding="utf-8", errors="replace").splitlines()


def _run(source: str, config: SearchConfig) -> None:
    """Read edges from ``source`` and write the longest path to stdout."""
    start_time = perf_counter()
    try:
        lines = _read_lines(source)
        logger.debug(f"Read {len(lines)} line(s) from {source}")
        result = solve_lines(lines, config)
    except FileNotFoundError:
        logger.error(f"Input file not found: {source}")
        print(f"ERROR: Input file not found: {source}", file=sys.stderr)
        sys.exit(1)
    except EdgeParseError as e:
        logger.error(f"Invalid edge record: {e}")
        print(f"ERROR: Invalid edge record: {e}", file=sys.stderr)
        sys.exit(1)

    if result.found:
        sys.stdout.write(format_path(result.path) + OUTPUT_SEPARATOR)
        sys.stdout.flush()

    stats = result.stats
    logger.info(
        f"Search completed in {_format_duration(perf_counter() - start_time)}"
        f" (expanded {stats.expanded}, pruned {stats.pruned})"
    )


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``longpath`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="longpath",
        description=(
            "Find a longest simple path in a weighted directed graph given as"
            " '<source>, <destination>, <weight>' lines."
        ),
    )
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="Edge list file (default: read standard input)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject malformed lines instead of skipping them",
    )
    parser.add_argument(
        "--closure",
        choices=["dead-end", "return-to-start"],
        default="dead-end",
        help="Which path ends count as complete candidates (default: dead-end)",
    )
    parser.add_argument(
        "--traversal",
        choices=["iterative", "recursive"],
        default="iterative",
        help="Depth-first search engine (default: iterative)",
    )
    parser.add_argument(
        "--no-prune",
        action="store_true",
        help="Disable upper-bound pruning (exhaustive enumeration)",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    verbosity.add_argument(
        "--quiet", "-q", action="store_true", help="Only log warnings and errors"
    )

    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    if args.verbose:
        enable_debug_logging()
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        disable_debug_logging()

    config = SearchConfig.from_names(
        closure=args.closure,
        parse_mode="strict" if args.strict else "lenient",
        traversal=args.traversal,
        prune=not args.no_prune,
    )
    _run(args.input, config)
