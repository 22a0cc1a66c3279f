"""Configuration for the longest-path pipeline."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from longpath.types import ClosurePolicy, ParseMode, Traversal


@dataclass(frozen=True)
class SearchConfig:
    """Options controlling parsing and search.

    Attributes:
        closure: Which frontier states count as complete candidate paths.
        parse_mode: Whether malformed edge lines are dropped or rejected.
        traversal: Depth-first engine (explicit stack or recursion).
        prune: Apply upper-bound pruning. Disabling it gives brute-force
            enumeration with the same result.
    """

    closure: ClosurePolicy = ClosurePolicy.DEAD_END
    parse_mode: ParseMode = ParseMode.LENIENT
    traversal: Traversal = Traversal.ITERATIVE
    prune: bool = True

    @classmethod
    def from_names(
        cls,
        closure: Optional[str] = None,
        parse_mode: Optional[str] = None,
        traversal: Optional[str] = None,
        prune: bool = True,
    ) -> SearchConfig:
        """Build a config from string option names, keeping defaults for ``None``.

        Raises:
            ValueError: If any name does not match an enum member.
        """
        config = cls(prune=prune)
        if closure is not None:
            config = replace(config, closure=ClosurePolicy.from_string(closure))
        if parse_mode is not None:
            config = replace(config, parse_mode=ParseMode.from_string(parse_mode))
        if traversal is not None:
            config = replace(config, traversal=Traversal.from_string(traversal))
        return config


# Global default configuration instance
DEFAULT_CONFIG = SearchConfig()
