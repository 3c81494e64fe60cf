"""FacetSearch - Faceted Catalog Search for BlackRoad OS.

An in-memory faceted search engine over a fixed catalog of shirts, each
classified by one color and one size. A query filters by any set of colors
and sizes and returns the matching shirts together with drill-down counts
for every color and every size.

Architecture:
┌─────────────────────────────────────────────────────────────────────────────┐
│                          FacetedQueryEngine                                 │
├─────────────────────────────────────────────────────────────────────────────┤
│                                                                             │
│   ┌─────────────────────────────────────────────────────────────────────┐   │
│   │                        Query Pipeline                               │   │
│   │  ┌────────────┐  ┌────────────┐  ┌────────────┐                    │   │
│   │  │  Options   │→ │   Filter   │→ │   Facets   │                    │   │
│   │  └────────────┘  └────────────┘  └────────────┘                    │   │
│   └─────────────────────────────────────────────────────────────────────┘   │
│                                                                             │
│   ┌─────────────────────────────────────────────────────────────────────┐   │
│   │                       Multi-Key Index                               │   │
│   │  ┌────────────┐  ┌────────────┐  ┌────────────┐                    │   │
│   │  │Color × Size│  │   Color    │  │    Size    │                    │   │
│   │  │  Buckets   │  │  Buckets   │  │  Buckets   │                    │   │
│   │  └────────────┘  └────────────┘  └────────────┘                    │   │
│   └─────────────────────────────────────────────────────────────────────┘   │
│                                                                             │
└─────────────────────────────────────────────────────────────────────────────┘

Key Features:
- Index built once at load time, no per-query catalog scans
- Drill-down facet counts for every domain value, zeros included
- Deterministic result and facet ordering
- Lock-free concurrent queries over an immutable catalog
- Unindexed scan engine with the same contract for cross-checking

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

__version__ = "1.0.0"
__author__ = "BlackRoad OS"
__license__ = "Proprietary"

# Core engine
from facetsearch_core.engine import FacetedQueryEngine
from facetsearch_core.config import SearchConfig

# Catalog
from facetsearch_core.catalog.attributes import (
    Color,
    Size,
    AttributeDomain,
    COLORS,
    SIZES,
)
from facetsearch_core.catalog.shirt import Shirt
from facetsearch_core.catalog.sample import generate_shirts

# Index
from facetsearch_core.index.multikey import MultiKeyIndex, IndexStats

# Query
from facetsearch_core.query.options import SearchOptions, FilterCase
from facetsearch_core.query.results import SearchResults
from facetsearch_core.query.base import QueryEngine
from facetsearch_core.query.scan import ScanQueryEngine

# Facets
from facetsearch_core.facets.builder import FacetBuilder, FacetValue, FacetResult
from facetsearch_core.facets.aggregations import color_facet, size_facet

__all__ = [
    # Version
    "__version__",
    "__author__",
    "__license__",
    # Core
    "FacetedQueryEngine",
    "SearchConfig",
    # Catalog
    "Color",
    "Size",
    "AttributeDomain",
    "COLORS",
    "SIZES",
    "Shirt",
    "generate_shirts",
    # Index
    "MultiKeyIndex",
    "IndexStats",
    # Query
    "SearchOptions",
    "FilterCase",
    "SearchResults",
    "QueryEngine",
    "ScanQueryEngine",
    # Facets
    "FacetBuilder",
    "FacetValue",
    "FacetResult",
    "color_facet",
    "size_facet",
]
