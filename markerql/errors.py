"""Exception taxonomy for MarkerQL.

All errors derive from :class:`MarkerQLError` so callers can catch the whole
family at once. Nothing in the package swallows these; they surface unchanged
to the caller (the UI layer is expected to render an error state).
"""
from __future__ import annotations

from typing import Any, Optional

__all__ = [
    'MarkerQLError',
    'QueryBuildError',
    'InvalidFieldError',
    'RecordStoreError',
]


class MarkerQLError(Exception):
    """Base class for MarkerQL errors."""


class QueryBuildError(MarkerQLError, ValueError):
    """A required identifier (entity, relationship or order field) was blank."""


class InvalidFieldError(QueryBuildError):
    """An identifier is not part of the configured allowlist."""

    def __init__(self, entity: str, field: Optional[str] = None):
        self.entity = entity
        self.field = field
        if field is None:
            msg = f"Entity '{entity}' is not in the allowlist"
        else:
            msg = f"Field '{field}' is not allowed on entity '{entity}'"
        super().__init__(msg)


class RecordStoreError(MarkerQLError):
    """The record store rejected an otherwise well-formed query.

    The store's native exception is kept on ``original`` (and as ``__cause__``
    when raised with ``raise ... from``).

    The session that ran the query is left as the store left it; roll it back
    before reusing it.
    """

    def __init__(self, message: str, *, statement: Optional[str] = None, original: Any = None):
        super().__init__(message)
        self.statement = statement
        self.original = original
