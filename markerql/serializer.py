"""JSON encoding of marker lists.

Scalar values keep their native JSON type: strings, integers, floats, booleans
and null are emitted as-is. Values the ``json`` module cannot encode natively
are converted as follows: date/time values to ISO-8601 strings, ``Decimal`` to
``int`` when integral (otherwise ``float``), ``UUID`` to its string form,
binary values to base64 text.

JSON has no representation for NaN or infinity, so non-finite floats and
Decimals are emitted as ``null``. The output is always strict JSON.
"""
from __future__ import annotations

import base64
import json
import math
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any, Dict, Iterable, List
from uuid import UUID

from .models import MarkerDescriptor

__all__ = ['ResponseSerializer', 'serialize_markers', 'to_payload']


def _scalar(value: Any) -> Any:
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, Decimal):
        if not value.is_finite():
            return None
        if value == value.to_integral_value():
            return int(value)
        return float(value)
    if isinstance(value, dict):
        return {k: _scalar(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_scalar(v) for v in value]
    return value


def _default(value: Any) -> Any:
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, UUID):
        return str(value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return base64.b64encode(bytes(value)).decode('ascii')
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_payload(markers: Iterable[MarkerDescriptor]) -> List[Dict[str, Any]]:
    return [m.to_dict() for m in markers]


class ResponseSerializer:
    def __init__(self, indent: Any = None):
        self.indent = indent

    def serialize(self, markers: Iterable[MarkerDescriptor]) -> str:
        # sort_keys stays off: key order is part of the output contract.
        return json.dumps(
            _scalar(to_payload(markers)),
            default=_default,
            ensure_ascii=False,
            allow_nan=False,
            indent=self.indent,
        )


def serialize_markers(markers: Iterable[MarkerDescriptor]) -> str:
    return ResponseSerializer().serialize(markers)
