"""FacetSearch Aggregations - Drill-Down Facet Counts.

A facet reports, for each value of its own attribute, how many items that
value would select given every *other* active filter. The facet's own filter
is never applied to its counts, so selecting one color still shows how many
items every other color would yield.

Counts come from index bucket sizes; no routine here walks the catalog.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations
from typing import Any, Sequence

from facetsearch_core.catalog.attributes import AttributeDomain
from facetsearch_core.facets.builder import FacetBuilder, FacetResult
from facetsearch_core.index.multikey import MultiKeyIndex

def color_facet(
    index: MultiKeyIndex,
    colors: AttributeDomain,
    color_filter: Sequence[Any],
    size_filter: Sequence[Any],
) -> FacetResult:
    """Count items per color among items matching the size filter.

    Args:
        index: Catalog index
        colors: Color domain to report
        color_filter: Active color filter, only used to mark selected values
        size_filter: Active size filter; empty means all sizes
    """
    builder = FacetBuilder(colors, selected=color_filter)
    size_filter = tuple(dict.fromkeys(size_filter))
    for color in colors:
        if size_filter:
            builder.add(color, sum(index.count_pair(color, size) for size in size_filter))
        else:
            builder.add(color, index.count_color(color))
    return builder.build()

def size_facet(
    index: MultiKeyIndex,
    sizes: AttributeDomain,
    size_filter: Sequence[Any],
    color_filter: Sequence[Any],
) -> FacetResult:
    """Count items per size among items matching the color filter."""
    builder = FacetBuilder(sizes, selected=size_filter)
    color_filter = tuple(dict.fromkeys(color_filter))
    for size in sizes:
        if color_filter:
            builder.add(size, sum(index.count_pair(color, size) for color in color_filter))
        else:
            builder.add(size, index.count_size(size))
    return builder.build()

__all__ = ["color_facet", "size_facet"]
