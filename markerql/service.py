"""Read-only entry points backing the timeline/map widget.

Both operations are pure queries: neither mutates the record store, and
repeated calls with the same inputs return the same result, so responses are
safe for the calling layer to cache.

The field-name arguments are identifiers, not values. They are interpolated
into query text and must come from the widget's trusted configuration (ideally
checked against a :class:`~markerql.allowlist.FieldAllowlist`), never from
free-form user input.
"""
from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional, Union

from sqlalchemy.ext.asyncio import AsyncSession

from .allowlist import FieldAllowlist
from .config import DEFAULT_RADIUS_METERS
from .fetcher import RecordFetcher
from .markers import MarkerTransformer
from .models import CircleConfig, FieldMap, OrderDirection, Record
from .naming import NameFieldResolver
from .serializer import ResponseSerializer
from .sql.builders import QueryBuilder
from .store import RecordStore, SQLAlchemyRecordStore

logger = logging.getLogger(__name__)

__all__ = ['MapDataService']


class MapDataService:
    def __init__(
        self,
        store: RecordStore,
        *,
        allowlist: Optional[FieldAllowlist] = None,
        name_resolver: Optional[NameFieldResolver] = None,
        default_radius_meters: int = DEFAULT_RADIUS_METERS,
        serializer: Optional[ResponseSerializer] = None,
    ):
        self.builder = QueryBuilder(allowlist=allowlist, name_resolver=name_resolver)
        self.fetcher = RecordFetcher(store, self.builder)
        self.serializer = serializer or ResponseSerializer()
        self.default_radius_meters = default_radius_meters

    @classmethod
    def for_session(cls, session: AsyncSession, **kwargs: Any) -> 'MapDataService':
        return cls(SQLAlchemyRecordStore(session), **kwargs)

    async def get_records(
        self,
        from_entity: str,
        relationship_field: str,
        parent_id: Any,
        order_field: str,
        order_direction: Union[OrderDirection, str, None] = OrderDirection.ASC,
    ) -> List[Record]:
        """Child records of ``parent_id``; only ``Id`` is projected."""
        return await self.fetcher.fetch_children(
            from_entity, relationship_field, parent_id, order_field, order_direction
        )

    async def get_address_data(
        self,
        record_ids: Iterable[Any],
        from_entity: str,
        street_field: Optional[str] = None,
        city_field: Optional[str] = None,
        state_field: Optional[str] = None,
        postcode_field: Optional[str] = None,
        country_field: Optional[str] = None,
        description_field: Optional[str] = None,
        enable_circle: bool = False,
        radius_meters: Optional[int] = None,
    ) -> str:
        """JSON array of marker descriptors for ``record_ids``.

        Markers follow store order, which need not match ``record_ids``.
        """
        field_map = FieldMap(
            description=description_field,
            street=street_field,
            city=city_field,
            state=state_field,
            postcode=postcode_field,
            country=country_field,
        )
        records = await self.fetcher.fetch_by_ids(from_entity, record_ids, field_map)
        circle = None
        if enable_circle:
            radius = self.default_radius_meters if radius_meters is None else radius_meters
            circle = CircleConfig(radius_meters=int(radius))
        name_field = self.builder.name_resolver.resolve(from_entity)
        markers = MarkerTransformer(name_field, field_map, circle).build(records)
        logger.debug(f"{from_entity}: built {len(markers)} markers (circle={enable_circle})")
        return self.serializer.serialize(markers)
