"""FacetSearch Query Components.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from facetsearch_core.query.options import SearchOptions, FilterCase
from facetsearch_core.query.results import SearchResults
from facetsearch_core.query.base import QueryEngine
from facetsearch_core.query.scan import ScanQueryEngine

__all__ = ["SearchOptions", "FilterCase", "SearchResults", "QueryEngine", "ScanQueryEngine"]
