"""FacetSearch Query Engine Base - Shared Query Contract.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from facetsearch_core.catalog.attributes import COLORS, SIZES, AttributeDomain
from facetsearch_core.catalog.shirt import Shirt
from facetsearch_core.config import SearchConfig
from facetsearch_core.facets.builder import FacetResult
from facetsearch_core.query.options import SearchOptions
from facetsearch_core.query.results import SearchResults

logger = logging.getLogger(__name__)


class QueryEngine(ABC):
    """Base class for engines answering faceted queries over a fixed catalog.

    The catalog is copied into a tuple on construction and never changes,
    so a constructed engine may be queried from any number of threads.
    """

    def __init__(
        self,
        shirts: Iterable[Shirt],
        colors: AttributeDomain = COLORS,
        sizes: AttributeDomain = SIZES,
        config: Optional[SearchConfig] = None,
    ):
        """Initialize engine.

        Args:
            shirts: Catalog items, in catalog order
            colors: Color domain reported by the color facet
            sizes: Size domain reported by the size facet
            config: Engine configuration
        """
        if shirts is None:
            raise TypeError("shirts must not be None")
        if colors is None or sizes is None:
            raise TypeError("attribute domains must not be None")

        self.config = config or SearchConfig()
        self.colors = colors
        self.sizes = sizes
        self._shirts: Tuple[Shirt, ...] = tuple(shirts)

    @property
    def catalog(self) -> Tuple[Shirt, ...]:
        return self._shirts

    def __len__(self) -> int:
        return len(self._shirts)

    def search(
        self,
        options: Optional[SearchOptions] = None,
        *,
        colors: Optional[Iterable[Any]] = None,
        sizes: Optional[Iterable[Any]] = None,
    ) -> SearchResults:
        """Run a faceted search.

        Args:
            options: Filters to apply; built from ``colors``/``sizes`` when omitted
            colors: Color filter, when no options object is given
            sizes: Size filter, when no options object is given

        Returns:
            Matching shirts plus drill-down counts for every color and size
        """
        if options is None:
            options = SearchOptions(colors=colors, sizes=sizes)
        elif colors is not None or sizes is not None:
            raise TypeError("pass either options or colors/sizes, not both")

        start_time = time.perf_counter()

        shirts = self._filter(options.colors, options.sizes)
        color_facet, size_facet = self._facets(options.colors, options.sizes)

        took_ms = (time.perf_counter() - start_time) * 1000
        self._log_query(options, len(shirts), took_ms)

        return SearchResults(
            shirts=shirts,
            color_facet=color_facet,
            size_facet=size_facet,
            took_ms=took_ms,
        )

    def _log_query(self, options: SearchOptions, hits: int, took_ms: float) -> None:
        if self.config.log_queries:
            logger.debug(
                f"[{self.config.index_name}] {options.filter_case.name} query "
                f"returned {hits} hits in {took_ms:.3f}ms"
            )
        if self.config.slow_query_ms and took_ms > self.config.slow_query_ms:
            logger.warning(
                f"[{self.config.index_name}] Slow query ({took_ms:.1f}ms): {options.to_dict()}"
            )

    @abstractmethod
    def _filter(self, color_filter: Sequence[Any], size_filter: Sequence[Any]) -> List[Shirt]:
        pass

    @abstractmethod
    def _facets(
        self,
        color_filter: Sequence[Any],
        size_filter: Sequence[Any],
    ) -> Tuple[FacetResult, FacetResult]:
        pass

__all__ = ["QueryEngine"]
