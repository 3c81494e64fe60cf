"""FacetSearch Query Results.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Generator, List, Tuple

from facetsearch_core.catalog.shirt import Shirt
from facetsearch_core.facets.builder import FacetResult, FacetValue


@dataclass
class SearchResults:
    """Search result container.

    Attributes:
        shirts: Matching items
        color_facet: Drill-down counts per color
        size_facet: Drill-down counts per size
        took_ms: Query execution time in milliseconds (ignored by equality)
    """

    shirts: List[Shirt] = field(default_factory=list)
    color_facet: FacetResult = field(default_factory=lambda: FacetResult(name="color"))
    size_facet: FacetResult = field(default_factory=lambda: FacetResult(name="size"))
    took_ms: float = field(default=0.0, compare=False)

    @property
    def color_counts(self) -> Tuple[FacetValue, ...]:
        return self.color_facet.values

    @property
    def size_counts(self) -> Tuple[FacetValue, ...]:
        return self.size_facet.values

    @property
    def facets(self) -> Dict[str, FacetResult]:
        """Facets keyed by name."""
        return {
            self.color_facet.name: self.color_facet,
            self.size_facet.name: self.size_facet,
        }

    @property
    def total_hits(self) -> int:
        return len(self.shirts)

    def __len__(self) -> int:
        """Return number of hits."""
        return len(self.shirts)

    def __iter__(self) -> Generator[Shirt, None, None]:
        """Iterate over hits."""
        yield from self.shirts

    def __getitem__(self, index: int) -> Shirt:
        """Get hit by index."""
        return self.shirts[index]

    def to_dict(self, include_timing: bool = False) -> Dict[str, Any]:
        """Convert to dictionary.

        Args:
            include_timing: Add ``took_ms``; off by default so identical
                queries render identically
        """
        data = {
            "shirts": [shirt.to_dict() for shirt in self.shirts],
            "total_hits": self.total_hits,
            "facets": {name: facet.to_dict() for name, facet in self.facets.items()},
        }
        if include_timing:
            data["took_ms"] = self.took_ms
        return data

__all__ = ["SearchResults"]
