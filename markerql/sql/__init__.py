from .builders import BuiltQuery, QueryBuilder, coerce_direction, escape_identifier

__all__ = ['BuiltQuery', 'QueryBuilder', 'coerce_direction', 'escape_identifier']
