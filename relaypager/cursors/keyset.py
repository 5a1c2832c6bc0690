from __future__ import annotations

import datetime
import decimal
import uuid
from typing import Any, NamedTuple

from .encode import encode_opaque_cursor, decode_opaque_cursor


# Values a keyset cursor may contain: what a sort column may contain
KEYSET_VALUE_TYPES = (
    str, int, float, bool, type(None),
    datetime.datetime, datetime.date, datetime.time,
    decimal.Decimal, uuid.UUID,
)


class KeysetCursor(NamedTuple):
    """ Cursor data for the "keyset" cursor

    Contains the values of the sort columns for a row, in sort order.
    Compares as a tuple, the way `(a, b) > (x, y)` does in SQL.

    Values: JSON scalars, datetime, date, time, Decimal, UUID, and tuples of those.
    """
    # The tuple used for keyset pagination
    val: tuple

    # Prefix for the opaque string
    name = 'keys'

    @property
    def key(self) -> tuple:
        return self.val

    def serialize(self) -> dict:
        return {'val': list(self.val)}

    def encode(self) -> str:
        return encode_opaque_cursor(self.name, self.serialize())

    @classmethod
    def decode(cls, cursor: str):
        data = decode_opaque_cursor(cls.name, cursor)  # ValueError

        # Check the payload
        val = data.get('val')
        if not isinstance(val, list) or not val:
            raise ValueError('Malformed cursor: "val" must be a non-empty list')
        if not all(_is_keyset_value(v) for v in val):
            raise ValueError('Malformed cursor: "val" must only contain column values')

        return cls(val=tuple(val))


def _is_keyset_value(value: Any) -> bool:
    if isinstance(value, tuple):
        return all(_is_keyset_value(v) for v in value)
    return isinstance(value, KEYSET_VALUE_TYPES)
