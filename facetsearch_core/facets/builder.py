"""FacetSearch Facet Builder - Faceted Search Results.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Tuple

from facetsearch_core.catalog.attributes import AttributeDomain

@dataclass(frozen=True)
class FacetValue:
    """A single facet value with count."""
    value: Any
    count: int = 0
    selected: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "value": getattr(self.value, "value", self.value),
            "count": self.count,
            "selected": self.selected,
        }

@dataclass(frozen=True)
class FacetResult:
    """Result of facet computation."""
    name: str
    values: Tuple[FacetValue, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "values", tuple(self.values))

    @property
    def total(self) -> int:
        return sum(v.count for v in self.values)

    def count_of(self, value: Any) -> int:
        for facet_value in self.values:
            if facet_value.value == value:
                return facet_value.count
        return 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "values": [v.to_dict() for v in self.values],
            "total": self.total,
        }

class FacetBuilder:
    """Builds a facet over a fixed domain, reporting every value in domain order."""

    def __init__(self, domain: AttributeDomain, selected: Iterable[Any] = ()):
        self.domain = domain
        self._selected = set(selected)
        self._counts: Dict[Any, int] = {value: 0 for value in domain}

    def add(self, value: Any, count: int = 1) -> None:
        # Values outside the domain are not reported
        if value in self._counts:
            self._counts[value] += count

    def build(self) -> FacetResult:
        return FacetResult(
            name=self.domain.name,
            values=tuple(
                FacetValue(value=v, count=self._counts[v], selected=v in self._selected)
                for v in self.domain
            ),
        )

__all__ = ["FacetBuilder", "FacetValue", "FacetResult"]
