"""FacetSearch Multi-Key Index - Attribute Bucket Index.

The multi-key index groups catalog items into ordered buckets keyed by
(color, size), by color alone and by size alone. Buckets are built in a
single pass at load time and never rebuilt, since the catalog is immutable.

Each item lands in exactly one bucket per key, so the index holds three
references per item and preserves catalog order inside every bucket.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Sequence, Tuple

from facetsearch_core.catalog.shirt import Shirt

logger = logging.getLogger(__name__)

_EMPTY: Tuple[Shirt, ...] = ()


@dataclass(frozen=True)
class IndexStats:
    """Index statistics.

    Attributes:
        doc_count: Total indexed items
        pair_buckets: Non-empty (color, size) buckets
        color_buckets: Non-empty color buckets
        size_buckets: Non-empty size buckets
    """

    doc_count: int = 0
    pair_buckets: int = 0
    color_buckets: int = 0
    size_buckets: int = 0

    def to_dict(self) -> Dict[str, int]:
        """Convert to dictionary."""
        return {
            "doc_count": self.doc_count,
            "pair_buckets": self.pair_buckets,
            "color_buckets": self.color_buckets,
            "size_buckets": self.size_buckets,
        }


def _freeze(buckets: Dict[Any, List[Shirt]]) -> Dict[Any, Tuple[Shirt, ...]]:
    return {key: tuple(items) for key, items in buckets.items()}


class MultiKeyIndex:
    """Read-only index of items by (color, size), color and size."""

    def __init__(self, shirts: Iterable[Shirt]):
        """Build all three bucket maps in one pass.

        Args:
            shirts: Catalog items in catalog order
        """
        by_pair: Dict[Tuple[Any, Any], List[Shirt]] = defaultdict(list)
        by_color: Dict[Any, List[Shirt]] = defaultdict(list)
        by_size: Dict[Any, List[Shirt]] = defaultdict(list)
        count = 0

        for shirt in shirts:
            by_pair[(shirt.color, shirt.size)].append(shirt)
            by_color[shirt.color].append(shirt)
            by_size[shirt.size].append(shirt)
            count += 1

        self._by_pair = _freeze(by_pair)
        self._by_color = _freeze(by_color)
        self._by_size = _freeze(by_size)
        self._count = count

        logger.debug(
            f"Built multi-key index: {count} items, {len(self._by_pair)} pair buckets"
        )

    def by_pair(self, color: Any, size: Any) -> Sequence[Shirt]:
        """Items with this color and size, in catalog order."""
        return self._by_pair.get((color, size), _EMPTY)

    def by_color(self, color: Any) -> Sequence[Shirt]:
        """Items with this color, in catalog order."""
        return self._by_color.get(color, _EMPTY)

    def by_size(self, size: Any) -> Sequence[Shirt]:
        """Items with this size, in catalog order."""
        return self._by_size.get(size, _EMPTY)

    def count_pair(self, color: Any, size: Any) -> int:
        return len(self.by_pair(color, size))

    def count_color(self, color: Any) -> int:
        return len(self.by_color(color))

    def count_size(self, size: Any) -> int:
        return len(self.by_size(size))

    def __len__(self) -> int:
        return self._count

    def stats(self) -> IndexStats:
        """Get index statistics."""
        return IndexStats(
            doc_count=self._count,
            pair_buckets=len(self._by_pair),
            color_buckets=len(self._by_color),
            size_buckets=len(self._by_size),
        )

__all__ = ["MultiKeyIndex", "IndexStats"]
