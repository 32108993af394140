from __future__ import annotations

from .base import BaseAdapter


class SQLiteAdapter(BaseAdapter):
    name = 'sqlite'
    # SQLite treats a double-quoted name that matches no column as a string
    # literal; backtick-quoted names are always identifiers.
    open_quote = '`'
    close_quote = '`'
