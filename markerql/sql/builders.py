"""Query text assembly for the two supported query shapes.

Entity, field, relationship and order identifiers are interpolated into the
query text because the target query language cannot bind structural
identifiers. They MUST come from trusted, schema-validated configuration and
never from free-form user input. Values (the parent id, the id set) are always
passed as bound parameters.

Two renderings are produced from the same parts:

- ``BuiltQuery.text``: canonical text with quote characters escaped, e.g.
  ``SELECT Id FROM Case WHERE AccountId = :parentId ORDER BY CreatedDate DESC``
- ``BuiltQuery.to_statement(adapter)``: a SQLAlchemy ``TextClause`` with
  dialect-quoted identifiers, ready for ``session.execute``.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from sqlalchemy import bindparam, text as _text
from sqlalchemy.sql.elements import TextClause

from ..adapters import BaseAdapter
from ..allowlist import FieldAllowlist
from ..errors import QueryBuildError
from ..models import FieldMap, OrderDirection, is_blank
from ..naming import NameFieldResolver

logger = logging.getLogger(__name__)

ID_FIELD = 'Id'
PARENT_PARAM = 'parentId'
ID_SET_PARAM = 'idSet'

_ESCAPES = (('\\', '\\\\'), ("'", "\\'"), ('"', '\\"'))


def escape_identifier(ident: str) -> str:
    """Backslash-escape quote characters (and backslashes) in an identifier."""
    out = str(ident)
    for raw, escaped in _ESCAPES:
        out = out.replace(raw, escaped)
    return out


def coerce_direction(direction: Union[OrderDirection, str, None]) -> OrderDirection:
    """Normalise an order direction; blank means ascending."""
    if isinstance(direction, OrderDirection):
        return direction
    if direction is None or not str(direction).strip():
        return OrderDirection.ASC
    val = getattr(direction, 'value', direction)
    try:
        return OrderDirection(str(val).strip().upper())
    except ValueError:
        raise QueryBuildError(f"Unsupported order direction: {direction!r}") from None


def _unique(fields: Iterable[str]) -> List[str]:
    seen: set[str] = set()
    out: List[str] = []
    for f in fields:
        if f not in seen:
            seen.add(f)
            out.append(f)
    return out


@dataclass(frozen=True)
class BuiltQuery:
    entity: str
    fields: Tuple[str, ...]
    where_field: str
    params: Dict[str, Any] = field(default_factory=dict)
    order_field: Optional[str] = None
    direction: Optional[OrderDirection] = None

    @property
    def expanding(self) -> bool:
        return ID_SET_PARAM in self.params

    @property
    def text(self) -> str:
        return self._render(escape_identifier, escape_identifier, lambda d: d.value)

    def to_statement(self, adapter: BaseAdapter) -> TextClause:
        sql = self._render(adapter.quote_ident, adapter.table_ident, lambda d: adapter.order_direction(d.value))
        if self.expanding:
            return _text(sql).bindparams(
                bindparam(ID_SET_PARAM, value=list(self.params[ID_SET_PARAM]), expanding=True)
            )
        return _text(sql).bindparams(**self.params)

    def _render(self, ident, table, direction) -> str:
        cols = ', '.join(ident(f) for f in self.fields)
        if self.expanding:
            where = f"{ident(self.where_field)} IN :{ID_SET_PARAM}"
        else:
            where = f"{ident(self.where_field)} = :{PARENT_PARAM}"
        sql = f"SELECT {cols} FROM {table(self.entity)} WHERE {where}"
        if self.order_field is not None and self.direction is not None:
            sql += f" ORDER BY {ident(self.order_field)} {direction(self.direction)}"
        return sql


class QueryBuilder:
    """Assemble :class:`BuiltQuery` values from caller-supplied identifiers.

    When an allowlist is given every identifier is validated before assembly
    and unknown ones raise :class:`~markerql.errors.InvalidFieldError`.
    """

    def __init__(
        self,
        allowlist: Optional[FieldAllowlist] = None,
        name_resolver: Optional[NameFieldResolver] = None,
    ):
        self.allowlist = allowlist
        self.name_resolver = name_resolver or NameFieldResolver()

    def _require(self, value: Optional[str], what: str) -> str:
        if is_blank(value):
            raise QueryBuildError(f"{what} must not be blank")
        return str(value)

    def _validate(self, entity: str, fields: Iterable[str]) -> None:
        if self.allowlist is not None:
            self.allowlist.check(entity, fields)

    def child_by_parent(
        self,
        entity: str,
        relationship_field: str,
        parent_id: Any,
        order_field: str,
        direction: Union[OrderDirection, str, None] = OrderDirection.ASC,
    ) -> BuiltQuery:
        entity = self._require(entity, 'Entity name')
        relationship_field = self._require(relationship_field, 'Relationship field')
        order_field = self._require(order_field, 'Order field')
        dir_ = coerce_direction(direction)
        self._validate(entity, [relationship_field, order_field])
        q = BuiltQuery(
            entity=entity,
            fields=(ID_FIELD,),
            where_field=relationship_field,
            params={PARENT_PARAM: parent_id},
            order_field=order_field,
            direction=dir_,
        )
        logger.debug(f"Built child query: {q.text}")
        return q

    def projected_fields(self, entity: str, field_map: FieldMap) -> List[str]:
        """``Id``, the display-name field, then each supplied optional field, once each."""
        return _unique([ID_FIELD, self.name_resolver.resolve(entity), *field_map.optional_fields()])

    def projection_by_ids(self, entity: str, id_set: Iterable[Any], field_map: FieldMap) -> BuiltQuery:
        entity = self._require(entity, 'Entity name')
        fields = self.projected_fields(entity, field_map)
        self._validate(entity, fields)
        q = BuiltQuery(
            entity=entity,
            fields=tuple(fields),
            where_field=ID_FIELD,
            params={ID_SET_PARAM: _unique(id_set)},
        )
        logger.debug(f"Built projection query: {q.text}")
        return q
