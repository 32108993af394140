"""Reshape fetched records into map-marker descriptors.

The transformer is a pure 1:1 mapping: one marker per input record, in input
order. Missing or null field values are passed through as ``None``; it never
fails on missing data and never drops records.

Note on the rendering surface: the map component that consumes these markers
renders at most the first 10 markers unless each marker also carries precise
geocoordinates. That limit belongs to the renderer. This module must not
truncate its output to match it.
"""
from __future__ import annotations

from typing import Iterable, List, Optional

from .models import CircleConfig, CircleOverlay, FieldMap, MarkerDescriptor, Record, is_blank

__all__ = ['MarkerTransformer', 'build_markers']


class MarkerTransformer:
    def __init__(self, name_field: str, field_map: FieldMap, circle_config: Optional[CircleConfig] = None):
        self.name_field = name_field
        self.field_map = field_map
        self.circle_config = circle_config
        # Resolved once per request; the blank checks do not depend on the record.
        self._address_pairs = field_map.address_pairs()
        self._with_description = not is_blank(field_map.description)

    def marker_for(self, record: Record) -> MarkerDescriptor:
        geometry = None
        if self.circle_config is not None:
            geometry = CircleOverlay(radius=int(self.circle_config.radius_meters))
        description = None
        if self._with_description:
            description = record.get(self.field_map.description)  # type: ignore[arg-type]
        return MarkerDescriptor(
            title=record.get(self.name_field),
            value=record.get('Id'),
            location={label: record.get(src) for label, src in self._address_pairs},
            description=description,
            has_description=self._with_description,
            geometry=geometry,
        )

    def build(self, records: Iterable[Record]) -> List[MarkerDescriptor]:
        return [self.marker_for(r) for r in records]


def build_markers(
    records: Iterable[Record],
    name_field: str,
    field_map: FieldMap,
    circle_config: Optional[CircleConfig] = None,
) -> List[MarkerDescriptor]:
    """Functional shorthand for ``MarkerTransformer(...).build(records)``."""
    return MarkerTransformer(name_field, field_map, circle_config).build(records)
