from __future__ import annotations

import re
from typing import NamedTuple


# Canonical decimal text: exactly what `str(int)` gives
ID_CURSOR_RE = re.compile(r'0|-?[1-9][0-9]*')


class IdCursor(NamedTuple):
    """ Cursor data for the "id" cursor: a single integer key rendered as decimal text """
    id: int

    @property
    def key(self) -> int:
        return self.id

    def encode(self) -> str:
        return str(self.id)

    @classmethod
    def decode(cls, cursor: str):
        # `int()` is too lenient: ' 7', '+7', '1_0', '007' would render back differently
        if not ID_CURSOR_RE.fullmatch(cursor):
            raise ValueError(f'Malformed cursor: {cursor!r}')
        return cls(int(cursor))
