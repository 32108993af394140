"""Display-name field resolution.

Several record types substitute a formatted sequence number for the generic
``Name`` field. The override table below is the single place to register them.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

__all__ = ['DEFAULT_NAME_FIELD', 'NAME_FIELD_OVERRIDES', 'NameFieldResolver', 'resolve_name_field']

DEFAULT_NAME_FIELD = 'Name'

NAME_FIELD_OVERRIDES: Mapping[str, str] = MappingProxyType({
    'Case': 'CaseNumber',
    'WorkOrder': 'WorkOrderNumber',
    'WorkOrderLineItem': 'LineItemNumber',
    'ServiceAppointment': 'AppointmentNumber',
    'KnowledgeArticle': 'ArticleNumber',
})


class NameFieldResolver:
    """Map an entity name to its canonical display-name field.

    Lookups are exact (case-sensitive). Unknown entities fall back to ``Name``.
    ``extra`` entries are layered over the built-in table.
    """

    def __init__(self, extra: Optional[Mapping[str, str]] = None):
        table = dict(NAME_FIELD_OVERRIDES)
        if extra:
            table.update(extra)
        self._table: Mapping[str, str] = MappingProxyType(table)

    def resolve(self, entity: str) -> str:
        return self._table.get(entity, DEFAULT_NAME_FIELD)

    __call__ = resolve


_default_resolver = NameFieldResolver()


def resolve_name_field(entity: str) -> str:
    """Return the display-name field for ``entity`` using the built-in table."""
    return _default_resolver.resolve(entity)
