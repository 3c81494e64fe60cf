"""FacetSearch Attributes - Enumerated Attribute Domains.

Every catalog item carries exactly one value from each attribute domain.
Domains are small, closed and known at startup; their definition order is
the canonical order in which facet counts are reported.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Iterator, Tuple, Type


class Color(Enum):
    """Shirt colors, in canonical facet order."""

    RED = "Red"
    BLUE = "Blue"
    YELLOW = "Yellow"
    WHITE = "White"
    BLACK = "Black"


class Size(Enum):
    """Shirt sizes, in canonical facet order."""

    SMALL = "Small"
    MEDIUM = "Medium"
    LARGE = "Large"


@dataclass(frozen=True)
class AttributeDomain:
    """Ordered, duplicate-free set of values an attribute may take.

    Attributes:
        name: Facet name used in results (e.g. "color")
        values: All domain values in canonical order
    """

    name: str
    values: Tuple[Any, ...]

    def __post_init__(self):
        values = tuple(self.values)
        if len(set(values)) != len(values):
            raise ValueError(f"Duplicate values in attribute domain '{self.name}'")
        object.__setattr__(self, "values", values)

    @classmethod
    def of(cls, enum_cls: Type[Enum], name: str = "") -> "AttributeDomain":
        """Build a domain from an enum, defaulting the name to the lowercased class name."""
        return cls(name=name or enum_cls.__name__.lower(), values=tuple(enum_cls))

    def __iter__(self) -> Iterator[Any]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def __contains__(self, value: object) -> bool:
        return value in self.values

    def subset(self, values: Iterable[Any]) -> "AttributeDomain":
        """Restrict the domain to the given values, keeping canonical order."""
        wanted = set(values)
        return AttributeDomain(self.name, tuple(v for v in self.values if v in wanted))


COLORS = AttributeDomain.of(Color)
SIZES = AttributeDomain.of(Size)

__all__ = ["Color", "Size", "AttributeDomain", "COLORS", "SIZES"]
