from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Cursor(Protocol):
    """ Cursor: an opaque, order-preserving position marker

    A cursor must:
    * Be comparable: cursors order the same way the paginated sequence does
    * Round-trip through a string: `Cursor.decode(cursor.encode()) == cursor`

    Implementations are usually NamedTuples: they are immutable and compare as tuples.
    """

    @property
    def key(self) -> Any:
        """ The ordering value that loaders compare against: a column value, or a tuple of values """

    def encode(self) -> str:
        """ Render the cursor as a string """

    @classmethod
    def decode(cls, cursor: str) -> Any:
        """ Parse the cursor from a string

        Raises:
            ValueError: the string is not a valid cursor. The message describes the problem.
        """
