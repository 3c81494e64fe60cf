"""FacetSearch Shirt - Catalog Item.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations
import uuid
from dataclasses import dataclass, field
from typing import Any, Dict

from facetsearch_core.catalog.attributes import Color, Size


@dataclass(frozen=True)
class Shirt:
    """A catalog item classified by one color and one size.

    Attributes:
        color: Color value
        size: Size value
        name: Display name
        id: Unique identifier, generated when omitted
    """

    color: Color
    size: Size
    name: str = ""
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "color": self.color.value,
            "size": self.size.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Shirt":
        """Create from dictionary."""
        kwargs = {
            "color": Color(data["color"]),
            "size": Size(data["size"]),
            "name": data.get("name", ""),
        }
        if data.get("id"):
            kwargs["id"] = data["id"]
        return cls(**kwargs)

__all__ = ["Shirt"]
