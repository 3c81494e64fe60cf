"""FacetSearch Query Options - Filter Selection.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Dict, Iterable, Tuple


class FilterCase(Enum):
    """Which filters a query has set."""

    NONE = auto()  # No filters, whole catalog
    COLOR = auto()  # Color filter only
    SIZE = auto()  # Size filter only
    COLOR_AND_SIZE = auto()  # Both filters


def _normalize(name: str, values: Iterable[Any]) -> Tuple[Any, ...]:
    if values is None:
        return ()
    if isinstance(values, (str, bytes)):
        raise TypeError(f"{name} must be a collection of values, not {type(values).__name__}")
    seen = set()
    unique = []
    for value in values:
        if value not in seen:
            seen.add(value)
            unique.append(value)
    return tuple(unique)


@dataclass(frozen=True)
class SearchOptions:
    """Inclusion filters for a search.

    An empty filter means "match any". Duplicates are dropped, keeping the
    first occurrence, so filter order stays as the caller supplied it.

    Attributes:
        colors: Requested colors
        sizes: Requested sizes
    """

    colors: Tuple[Any, ...] = ()
    sizes: Tuple[Any, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "colors", _normalize("colors", self.colors))
        object.__setattr__(self, "sizes", _normalize("sizes", self.sizes))

    @property
    def filter_case(self) -> FilterCase:
        if self.colors and self.sizes:
            return FilterCase.COLOR_AND_SIZE
        if self.colors:
            return FilterCase.COLOR
        if self.sizes:
            return FilterCase.SIZE
        return FilterCase.NONE

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "colors": [getattr(c, "value", c) for c in self.colors],
            "sizes": [getattr(s, "value", s) for s in self.sizes],
        }

__all__ = ["SearchOptions", "FilterCase"]
