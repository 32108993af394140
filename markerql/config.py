"""Environment-driven settings.

Environment variables (a ``.env`` file in the working directory is honoured):
  MARKERQL_DATABASE_URL    async SQLAlchemy URL, defaults to sqlite+aiosqlite:///:memory:
  MARKERQL_SQL_ECHO        '1' to log SQL through the sqlalchemy.engine logger (default '0')
  MARKERQL_ALLOWLIST_PATH  optional JSON file {"Entity": ["Field", ...]}
  MARKERQL_DEFAULT_RADIUS  circle radius in metres when none is supplied (default 1000)
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from .allowlist import FieldAllowlist

logger = logging.getLogger(__name__)

DEFAULT_DATABASE_URL = 'sqlite+aiosqlite:///:memory:'
DEFAULT_RADIUS_METERS = 1000


@dataclass(frozen=True)
class Settings:
    database_url: str = DEFAULT_DATABASE_URL
    sql_echo: bool = False
    allowlist_path: Optional[str] = None
    default_radius_meters: int = DEFAULT_RADIUS_METERS

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, *, dotenv: bool = True) -> 'Settings':
        if environ is None:
            if dotenv:
                load_dotenv()
            environ = os.environ
        radius_raw = environ.get('MARKERQL_DEFAULT_RADIUS', '').strip()
        try:
            radius = int(radius_raw) if radius_raw else DEFAULT_RADIUS_METERS
        except ValueError:
            logger.warning(f"Ignoring non-integer MARKERQL_DEFAULT_RADIUS={radius_raw!r}")
            radius = DEFAULT_RADIUS_METERS
        return cls(
            database_url=environ.get('MARKERQL_DATABASE_URL') or DEFAULT_DATABASE_URL,
            sql_echo=environ.get('MARKERQL_SQL_ECHO', '0') == '1',
            allowlist_path=environ.get('MARKERQL_ALLOWLIST_PATH') or None,
            default_radius_meters=radius,
        )

    def load_allowlist(self) -> Optional[FieldAllowlist]:
        if not self.allowlist_path:
            return None
        return FieldAllowlist.from_json_file(self.allowlist_path)
