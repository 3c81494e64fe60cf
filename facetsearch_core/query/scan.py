"""FacetSearch Scan Engine - Unindexed Reference Engine.

Answers the same queries as the indexed engine by walking the catalog:
one pass to filter and one pass per domain value for each facet. Results
come back in catalog order. Useful as a cross-check and as a baseline when
measuring the indexed engine.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations
from typing import Any, List, Sequence, Tuple

from facetsearch_core.catalog.shirt import Shirt
from facetsearch_core.facets.builder import FacetBuilder, FacetResult
from facetsearch_core.query.base import QueryEngine

class ScanQueryEngine(QueryEngine):
    """Query engine that scans the catalog on every query."""

    def _filter(self, color_filter: Sequence[Any], size_filter: Sequence[Any]) -> List[Shirt]:
        return [
            s for s in self._shirts
            if (not color_filter or s.color in color_filter)
            and (not size_filter or s.size in size_filter)
        ]

    def _facets(
        self,
        color_filter: Sequence[Any],
        size_filter: Sequence[Any],
    ) -> Tuple[FacetResult, FacetResult]:
        colors = FacetBuilder(self.colors, selected=color_filter)
        for color in self.colors:
            colors.add(color, sum(
                1 for s in self._shirts
                if s.color == color and (not size_filter or s.size in size_filter)
            ))

        sizes = FacetBuilder(self.sizes, selected=size_filter)
        for size in self.sizes:
            sizes.add(size, sum(
                1 for s in self._shirts
                if s.size == size and (not color_filter or s.color in color_filter)
            ))

        return colors.build(), sizes.build()

__all__ = ["ScanQueryEngine"]
