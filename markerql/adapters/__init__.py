from __future__ import annotations

import logging
from typing import Any

from .base import BaseAdapter
from .sqlite import SQLiteAdapter
from .postgres import PostgresAdapter
from .mssql import MSSQLAdapter

logger = logging.getLogger(__name__)


def get_adapter(dialect_name: str) -> BaseAdapter:
    dn = (dialect_name or '').lower()
    if dn.startswith('postgres'):
        return PostgresAdapter()
    if dn.startswith('mssql') or 'pyodbc' in dn:
        return MSSQLAdapter()
    return SQLiteAdapter()


def adapter_for_bind(bind: Any) -> BaseAdapter:
    """Pick the adapter for a SQLAlchemy engine, connection or session bind."""
    # Get the actual engine if it's an async engine
    if hasattr(bind, 'sync_engine'):
        dialect_name = bind.sync_engine.dialect.name
    else:
        dialect_name = bind.dialect.name
    logger.info(f"Detected database dialect: {dialect_name}")
    return get_adapter(dialect_name)


__all__ = [
    'BaseAdapter',
    'SQLiteAdapter',
    'PostgresAdapter',
    'MSSQLAdapter',
    'get_adapter',
    'adapter_for_bind',
]
