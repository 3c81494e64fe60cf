"""FacetSearch Index Components.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from facetsearch_core.index.multikey import MultiKeyIndex, IndexStats

__all__ = ["MultiKeyIndex", "IndexStats"]
