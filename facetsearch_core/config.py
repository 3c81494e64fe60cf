"""FacetSearch Configuration.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations
from dataclasses import dataclass


@dataclass
class SearchConfig:
    """Query engine configuration.

    Attributes:
        index_name: Name of the catalog index, used in log messages
        slow_query_ms: Log a warning for queries slower than this; 0 disables
        log_queries: Log every query at debug level
    """

    index_name: str = "default"
    slow_query_ms: float = 50.0
    log_queries: bool = False

__all__ = ["SearchConfig"]
