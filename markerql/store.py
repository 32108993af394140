"""Record store boundary.

The store is an external, read-only collaborator: it executes a built query
and returns plain records. :class:`SQLAlchemyRecordStore` is the concrete
implementation over an ``AsyncSession``; anything else satisfying
:class:`RecordStore` can be plugged into the fetcher.
"""
from __future__ import annotations

import logging
from typing import List, Optional, Protocol

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from .adapters import BaseAdapter, adapter_for_bind
from .errors import RecordStoreError
from .models import Record
from .sql.builders import BuiltQuery

logger = logging.getLogger(__name__)

__all__ = ['RecordStore', 'SQLAlchemyRecordStore']


class RecordStore(Protocol):
    async def query(self, built: BuiltQuery) -> List[Record]:
        ...


class SQLAlchemyRecordStore:
    """Execute built queries on an async SQLAlchemy session.

    The session (and its transaction) belongs to the caller; this class never
    commits, rolls back or closes it. After a :class:`RecordStoreError` the
    caller must roll the session back before issuing another query on it:
    on PostgreSQL the failed statement leaves the transaction aborted.
    """

    def __init__(self, session: AsyncSession, adapter: Optional[BaseAdapter] = None):
        self.session = session
        self._adapter = adapter

    @property
    def adapter(self) -> BaseAdapter:
        if self._adapter is None:
            self._adapter = adapter_for_bind(self.session.get_bind())
        return self._adapter

    async def query(self, built: BuiltQuery) -> List[Record]:
        stmt = built.to_statement(self.adapter)
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            logger.error(f"Record store rejected query '{built.text}': {e}")
            raise RecordStoreError(
                f"Query on '{built.entity}' failed: {e}",
                statement=built.text,
                original=e,
            ) from e
        return [dict(row._mapping) for row in result]
