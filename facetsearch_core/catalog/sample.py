"""FacetSearch Sample Catalog - Random Catalog Generation.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations
import logging
import random
from typing import List, Optional

from facetsearch_core.catalog.attributes import COLORS, SIZES, AttributeDomain
from facetsearch_core.catalog.shirt import Shirt

logger = logging.getLogger(__name__)

def generate_shirts(
    count: int,
    seed: Optional[int] = None,
    colors: AttributeDomain = COLORS,
    sizes: AttributeDomain = SIZES,
) -> List[Shirt]:
    """Generate shirts with uniformly random color and size.

    Args:
        count: Number of shirts
        seed: Random seed for a reproducible catalog
        colors: Domain to draw colors from
        sizes: Domain to draw sizes from

    Returns:
        List of shirts named "Shirt 0", "Shirt 1", ...
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")

    rng = random.Random(seed)
    color_values = list(colors)
    size_values = list(sizes)
    shirts = [
        Shirt(
            color=rng.choice(color_values),
            size=rng.choice(size_values),
            name=f"Shirt {n}",
            id=f"shirt-{n}",
        )
        for n in range(count)
    ]
    logger.debug(f"Generated {count} sample shirts (seed={seed})")
    return shirts

__all__ = ["generate_shirts"]
