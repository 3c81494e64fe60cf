"""FacetSearch Core Engine - Indexed Faceted Query Engine.

The FacetedQueryEngine is the primary interface for faceted search. It
indexes the catalog once on construction and answers every query from
index buckets, so query cost depends on the number of selected filter
values and domain values rather than on catalog size.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from facetsearch_core.catalog.attributes import COLORS, SIZES, AttributeDomain
from facetsearch_core.catalog.shirt import Shirt
from facetsearch_core.config import SearchConfig
from facetsearch_core.facets.aggregations import color_facet, size_facet
from facetsearch_core.facets.builder import FacetResult
from facetsearch_core.index.multikey import IndexStats, MultiKeyIndex
from facetsearch_core.query.base import QueryEngine
from facetsearch_core.query.options import SearchOptions
from facetsearch_core.query.results import SearchResults

logger = logging.getLogger(__name__)


class FacetedQueryEngine(QueryEngine):
    """Faceted search engine backed by a multi-key index.

    Result order depends on which filters are set:

    - no filters: the whole catalog, in catalog order
    - colors only: grouped by color in filter order, catalog order within
    - sizes only: grouped by size in filter order, catalog order within
    - both: grouped by color, then size, both in filter order, catalog
      order within each pair

    Facet counts use drill-down semantics: the color facet ignores the color
    filter but honours the size filter, and vice versa.
    """

    def __init__(
        self,
        shirts: Iterable[Shirt],
        colors: AttributeDomain = COLORS,
        sizes: AttributeDomain = SIZES,
        config: Optional[SearchConfig] = None,
    ):
        super().__init__(shirts, colors=colors, sizes=sizes, config=config)
        self._index = MultiKeyIndex(self._shirts)
        logger.info(
            f"Initialized faceted engine '{self.config.index_name}' with {len(self._shirts)} shirts"
        )

    def _filter(self, color_filter: Sequence[Any], size_filter: Sequence[Any]) -> List[Shirt]:
        if color_filter and size_filter:
            shirts: List[Shirt] = []
            for color in color_filter:
                for size in size_filter:
                    shirts.extend(self._index.by_pair(color, size))
            return shirts

        if color_filter:
            shirts = []
            for color in color_filter:
                shirts.extend(self._index.by_color(color))
            return shirts

        if size_filter:
            shirts = []
            for size in size_filter:
                shirts.extend(self._index.by_size(size))
            return shirts

        return list(self._shirts)

    def _facets(
        self,
        color_filter: Sequence[Any],
        size_filter: Sequence[Any],
    ) -> Tuple[FacetResult, FacetResult]:
        return (
            color_facet(self._index, self.colors, color_filter, size_filter),
            size_facet(self._index, self.sizes, size_filter, color_filter),
        )

    def stats(self) -> IndexStats:
        """Get index statistics."""
        return self._index.stats()


__all__ = [
    "FacetedQueryEngine",
    "SearchConfig",
    "SearchOptions",
    "SearchResults",
]
