from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional, Union

from .models import FieldMap, OrderDirection, Record
from .sql.builders import ID_SET_PARAM, QueryBuilder
from .store import RecordStore

logger = logging.getLogger(__name__)

__all__ = ['RecordFetcher']


class RecordFetcher:
    """Run the two supported query shapes against a record store.

    Results come back in store order. For ``fetch_by_ids`` that order is not
    tied to the order of the requested ids, so callers must match records by
    ``Id`` rather than by position. Store failures propagate as
    :class:`~markerql.errors.RecordStoreError`.
    """

    def __init__(self, store: RecordStore, builder: Optional[QueryBuilder] = None):
        self.store = store
        self.builder = builder or QueryBuilder()

    async def fetch_children(
        self,
        entity: str,
        relationship_field: str,
        parent_id: Any,
        order_field: str,
        direction: Union[OrderDirection, str, None] = OrderDirection.ASC,
    ) -> List[Record]:
        built = self.builder.child_by_parent(entity, relationship_field, parent_id, order_field, direction)
        rows = await self.store.query(built)
        logger.debug(f"{entity}: {len(rows)} child records for parent {parent_id!r}")
        return rows

    async def fetch_by_ids(self, entity: str, id_set: Iterable[Any], field_map: FieldMap) -> List[Record]:
        built = self.builder.projection_by_ids(entity, id_set, field_map)
        if not built.params[ID_SET_PARAM]:
            # Nothing to look up; skip the round trip.
            return []
        rows = await self.store.query(built)
        logger.debug(f"{entity}: {len(rows)} of {len(built.params[ID_SET_PARAM])} requested records found")
        return rows
