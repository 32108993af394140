"""Strawberry GraphQL surface for the map widget.

Resolvers read the request-scoped ``AsyncSession`` from the GraphQL context
under ``db_session`` (same convention as BerryQL schemas). Optional context
keys: ``allowlist`` (a :class:`FieldAllowlist`) and ``settings``
(:class:`~markerql.config.Settings`).

Example::

    await schema.execute(query, context_value={'db_session': session})
"""
from __future__ import annotations

from typing import Any, List, Optional

import strawberry
from strawberry.scalars import JSON
from strawberry.types import Info

from .config import DEFAULT_RADIUS_METERS
from .models import OrderDirection
from .service import MapDataService

Direction = strawberry.enum(OrderDirection, name="OrderDirection")  # type: ignore


def _context_value(info: Info, key: str) -> Any:
    ctx = getattr(info, 'context', None)
    if isinstance(ctx, dict):
        return ctx.get(key)
    return getattr(ctx, key, None)


def _service(info: Info) -> MapDataService:
    session = _context_value(info, 'db_session')
    if session is None:
        raise RuntimeError("GraphQL context is missing 'db_session'")
    settings = _context_value(info, 'settings')
    radius = getattr(settings, 'default_radius_meters', DEFAULT_RADIUS_METERS)
    return MapDataService.for_session(
        session,
        allowlist=_context_value(info, 'allowlist'),
        default_radius_meters=radius,
    )


@strawberry.type
class Query:
    @strawberry.field(description="Ids of child records related to a parent record, in the requested order.")
    async def get_records(
        self,
        info: Info,
        from_entity: str,
        relationship_field: str,
        parent_id: str,
        order_field: str,
        order_direction: Direction = Direction.ASC,  # type: ignore[valid-type]
    ) -> List[JSON]:
        return await _service(info).get_records(
            from_entity, relationship_field, parent_id, order_field, order_direction
        )

    @strawberry.field(description="JSON array of map markers for the given record ids.")
    async def get_address_data(
        self,
        info: Info,
        record_ids: List[str],
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
        return await _service(info).get_address_data(
            record_ids,
            from_entity,
            street_field=street_field,
            city_field=city_field,
            state_field=state_field,
            postcode_field=postcode_field,
            country_field=country_field,
            description_field=description_field,
            enable_circle=enable_circle,
            radius_meters=radius_meters,
        )


schema = strawberry.Schema(query=Query)
