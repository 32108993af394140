from __future__ import annotations

from .base import BaseAdapter


class MSSQLAdapter(BaseAdapter):
    name = 'mssql'
    # Render MSSQL-quoted identifiers like [schema].[table]
    open_quote = '['
    close_quote = ']'
