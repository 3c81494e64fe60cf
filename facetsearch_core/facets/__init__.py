"""FacetSearch Faceted Search Components.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from facetsearch_core.facets.builder import (
    FacetBuilder,
    FacetValue,
    FacetResult,
)
from facetsearch_core.facets.aggregations import (
    color_facet,
    size_facet,
)

__all__ = [
    "FacetBuilder",
    "FacetValue",
    "FacetResult",
    "color_facet",
    "size_facet",
]
