""" Cursors: opaque, order-preserving position markers

A cursor is whatever the paginated records are ordered by, rendered as a string.
"""

from .base import Cursor
from .id import IdCursor
from .keyset import KeysetCursor
from .encode import encode_opaque_cursor, decode_opaque_cursor
