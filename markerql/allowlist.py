"""Allowlist of (entity, field) identifiers that may be interpolated into queries.

Structural identifiers cannot be bound as parameters, so when an allowlist is
configured the query builder validates every entity and field against it
before any text is assembled. Entries must come from trusted configuration.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, FrozenSet, Iterable, Mapping, Union

from .errors import InvalidFieldError, QueryBuildError

logger = logging.getLogger(__name__)

__all__ = ['FieldAllowlist', 'ALWAYS_ALLOWED_FIELDS']

# The record id is part of every query shape.
ALWAYS_ALLOWED_FIELDS: FrozenSet[str] = frozenset({'Id'})


class FieldAllowlist:
    def __init__(self, entries: Mapping[str, Iterable[str]]):
        self._entries: Dict[str, FrozenSet[str]] = {
            str(entity): frozenset(str(f) for f in fields) for entity, fields in entries.items()
        }

    @classmethod
    def from_mapping(cls, entries: Mapping[str, Iterable[str]]) -> 'FieldAllowlist':
        return cls(entries)

    @classmethod
    def from_json_file(cls, path: Union[str, Path]) -> 'FieldAllowlist':
        """Load ``{"Entity": ["Field", ...]}`` from a JSON file."""
        p = Path(path)
        with p.open('r', encoding='utf-8') as fh:
            data = json.load(fh)
        if not isinstance(data, dict):
            raise QueryBuildError(f"Allowlist file {p} must contain a JSON object")
        for entity, fields in data.items():
            if not isinstance(fields, list):
                raise QueryBuildError(f"Allowlist entry for '{entity}' must be a list of field names")
        logger.info(f"Loaded field allowlist for {len(data)} entities from {p}")
        return cls(data)

    @property
    def entities(self) -> FrozenSet[str]:
        return frozenset(self._entries)

    def is_allowed(self, entity: str, field: str) -> bool:
        if entity not in self._entries:
            return False
        return field in ALWAYS_ALLOWED_FIELDS or field in self._entries[entity]

    def check(self, entity: str, fields: Iterable[str] = ()) -> None:
        """Raise :class:`InvalidFieldError` for the first unknown identifier."""
        if entity not in self._entries:
            raise InvalidFieldError(entity)
        for f in fields:
            if not self.is_allowed(entity, f):
                raise InvalidFieldError(entity, f)

    def __contains__(self, entity: object) -> bool:
        return entity in self._entries

    def __repr__(self) -> str:
        return f"FieldAllowlist(entities={sorted(self._entries)!r})"
