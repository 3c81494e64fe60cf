"""FacetSearch Catalog Components.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from facetsearch_core.catalog.attributes import (
    Color,
    Size,
    AttributeDomain,
    COLORS,
    SIZES,
)
from facetsearch_core.catalog.shirt import Shirt
from facetsearch_core.catalog.sample import generate_shirts

__all__ = ["Color", "Size", "AttributeDomain", "COLORS", "SIZES", "Shirt", "generate_shirts"]
