"""Request-scoped value types shared by the builder, transformer and serializer."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

__all__ = [
    'Record',
    'OrderDirection',
    'FieldMap',
    'CircleConfig',
    'CircleOverlay',
    'MarkerDescriptor',
    'ADDRESS_LABELS',
    'is_blank',
]

Record = Dict[str, Any]

# Fixed label set, in output order.
ADDRESS_LABELS: Tuple[str, ...] = ('Street', 'City', 'State', 'PostalCode', 'Country')


def is_blank(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


class OrderDirection(Enum):
    ASC = 'ASC'
    DESC = 'DESC'


@dataclass(frozen=True)
class FieldMap:
    """Caller-supplied mapping from marker parts to record fields.

    Any entry may be blank, meaning the part is not requested.
    """
    description: Optional[str] = None
    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postcode: Optional[str] = None
    country: Optional[str] = None

    def address_pairs(self) -> List[Tuple[str, str]]:
        """(label, field) pairs for the address parts that were supplied."""
        sources = (self.street, self.city, self.state, self.postcode, self.country)
        return [(label, src) for label, src in zip(ADDRESS_LABELS, sources) if not is_blank(src)]

    def optional_fields(self) -> List[str]:
        """Non-blank fields in projection order: description first, then address."""
        out: List[str] = []
        if not is_blank(self.description):
            out.append(self.description)  # type: ignore[arg-type]
        out.extend(src for _, src in self.address_pairs())
        return out


@dataclass(frozen=True)
class CircleConfig:
    radius_meters: int


@dataclass(frozen=True)
class CircleOverlay:
    # Styling is fixed in this version; only the radius comes from the caller.
    radius: int
    stroke_color: str = '#FF0000'
    stroke_opacity: float = 0.8
    stroke_weight: int = 2
    fill_color: str = '#FF0000'
    fill_opacity: float = 0.35

    def to_dict(self) -> Dict[str, Any]:
        return {
            'type': 'circle',
            'radius': self.radius,
            'strokeColor': self.stroke_color,
            'strokeOpacity': self.stroke_opacity,
            'strokeWeight': self.stroke_weight,
            'fillColor': self.fill_color,
            'fillOpacity': self.fill_opacity,
        }


@dataclass
class MarkerDescriptor:
    title: Any
    value: Any
    location: Dict[str, Any] = field(default_factory=dict)
    description: Any = None
    has_description: bool = False
    geometry: Optional[CircleOverlay] = None

    def to_dict(self) -> Dict[str, Any]:
        """Plain-dict form with a stable key order; absent optional keys are omitted."""
        out: Dict[str, Any] = {'title': self.title}
        if self.has_description:
            out['description'] = self.description
        if self.geometry is not None:
            out['geometry'] = self.geometry.to_dict()
        out['value'] = self.value
        out['location'] = dict(self.location)
        return out
