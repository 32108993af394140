"""MarkerQL public API.

The GraphQL ``Query`` type is exported lazily so that
importing the core does not pull in Strawberry.

Exposes:
- MapDataService, RecordFetcher, QueryBuilder, MarkerTransformer, ResponseSerializer
- NameFieldResolver, resolve_name_field, FieldAllowlist, Settings
- value types: FieldMap, CircleConfig, CircleOverlay, MarkerDescriptor, OrderDirection
- errors: MarkerQLError, QueryBuildError, InvalidFieldError, RecordStoreError
"""
from __future__ import annotations

from .allowlist import FieldAllowlist
from .config import Settings
from .errors import InvalidFieldError, MarkerQLError, QueryBuildError, RecordStoreError
from .fetcher import RecordFetcher
from .markers import MarkerTransformer, build_markers
from .models import CircleConfig, CircleOverlay, FieldMap, MarkerDescriptor, OrderDirection
from .naming import NameFieldResolver, resolve_name_field
from .serializer import ResponseSerializer, serialize_markers
from .service import MapDataService
from .sql.builders import BuiltQuery, QueryBuilder
from .store import RecordStore, SQLAlchemyRecordStore


def __getattr__(name: str):  # PEP 562 lazy exports
    if name == 'Query':
        import importlib as _importlib
        _schema = _importlib.import_module(__name__ + '.schema')
        return _schema.Query
    raise AttributeError(name)


__all__ = [
    'BuiltQuery',
    'CircleConfig',
    'CircleOverlay',
    'FieldAllowlist',
    'FieldMap',
    'InvalidFieldError',
    'MapDataService',
    'MarkerDescriptor',
    'MarkerQLError',
    'MarkerTransformer',
    'NameFieldResolver',
    'OrderDirection',
    'QueryBuildError',
    'QueryBuilder',
    'RecordFetcher',
    'RecordStore',
    'RecordStoreError',
    'ResponseSerializer',
    'SQLAlchemyRecordStore',
    'Settings',
    'build_markers',
    'resolve_name_field',
    'serialize_markers',
]
