from __future__ import annotations


class BaseAdapter:
    """Dialect hooks used when rendering a built query for execution.

    Identifiers coming from configuration are plain strings; adapters turn them
    into quoted identifiers so reserved words (``Case``, ``Order``) and mixed
    case names survive on every backend.
    """
    name = 'base'
    open_quote = '"'
    close_quote = '"'

    def quote_ident(self, ident: str) -> str:
        # Embedded closing quotes are doubled, the standard SQL escape.
        body = str(ident).replace(self.close_quote, self.close_quote * 2)
        return f"{self.open_quote}{body}{self.close_quote}"

    # Table identifier helper; adapters can override for schema qualification
    def table_ident(self, entity: str) -> str:
        raw = str(entity)
        if '.' in raw:
            schema, name = raw.split('.', 1)
            return f"{self.quote_ident(schema)}.{self.quote_ident(name)}"
        return self.quote_ident(raw)

    def order_direction(self, direction: str) -> str:
        return 'DESC' if str(direction).upper() == 'DESC' else 'ASC'
