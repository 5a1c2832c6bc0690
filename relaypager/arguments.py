""" Pagination arguments: `first`, `after`, `last`, `before` """

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Generic, TypeVar

from relaypager import exc
from .settings import ConnectionSettings


# GraphQL `Int` is a signed 32-bit integer: that's what pagination arguments come as
MAX_ARGUMENT_INT = 2 ** 31 - 1

# Pagination arithmetic is done in signed 64-bit range
MAX_PAGINATION_INT = 2 ** 63 - 1


CursorT = TypeVar('CursorT')


@dataclass
class ConnectionArguments:
    """ Raw pagination arguments, as provided by the User """
    # Forward pagination: the number of items to get after the `after` cursor
    first: Optional[int] = None
    after: Optional[str] = None

    # Backward pagination: the number of items to get before the `before` cursor
    last: Optional[int] = None
    before: Optional[str] = None

    def parse(self, cursor_type: type[CursorT], settings: ConnectionSettings = None) -> PaginationBounds[CursorT]:
        """ Validate the arguments and decode cursors

        Cursors are decoded first: a broken cursor is reported even when `first`/`last` are also wrong.

        Raises:
            exc.CursorDecodeError: malformed `after` or `before`
            exc.PaginationArgumentError: negative or non-integer `first` or `last`
            exc.IntegerConversionError: `first` or `last` is out of range
        """
        after = decode_cursor_argument('after', self.after, cursor_type)
        before = decode_cursor_argument('before', self.before, cursor_type)

        first = validate_count_argument('first', self.first)
        last = validate_count_argument('last', self.last)

        # Apply settings
        if settings is not None:
            first = settings.get_final_first(first, last)
            last = settings.get_final_last(last)

        return PaginationBounds(first=first, after=after, last=last, before=before)

    def export(self) -> dict:
        return {'first': self.first, 'after': self.after, 'last': self.last, 'before': self.before}


@dataclass(frozen=True)
class PaginationBounds(Generic[CursorT]):
    """ Validated pagination arguments with decoded cursors """
    first: Optional[int]
    after: Optional[CursorT]
    last: Optional[int]
    before: Optional[CursorT]

    @property
    def limit(self) -> Optional[int]:
        """ The number of items to ask the loader for

        One more than `first`: to ensure `hasNextPage` can be set correctly
        """
        if self.first is None:
            return None
        return self.first + 1


def validate_count_argument(name: str, value: Optional[int]) -> Optional[int]:
    """ Validate `first` or `last`

    Raises:
        exc.PaginationArgumentError
        exc.IntegerConversionError
    """
    if value is None:
        return None

    # Check types. `bool` is an `int` in Python, but not a number the User meant
    if isinstance(value, bool) or not isinstance(value, int):
        raise exc.PaginationArgumentError(f'"{name}" must be an integer', argument_name=name)

    # Check range
    if value < 0:
        raise exc.PaginationArgumentError(argument_name=name)
    if value > MAX_ARGUMENT_INT:
        raise exc.IntegerConversionError(name, value, MAX_ARGUMENT_INT)

    return value


def decode_cursor_argument(name: str, value: Optional[str], cursor_type: type[CursorT]) -> Optional[CursorT]:
    """ Decode `after` or `before` using the cursor type

    Raises:
        exc.CursorDecodeError
    """
    if value is None:
        return None

    if not isinstance(value, str):
        raise exc.CursorDecodeError(name, f'"{name}" must be a string')

    try:
        return cursor_type.decode(value)  # type: ignore[attr-defined]
    except (ValueError, TypeError, KeyError) as e:
        raise exc.CursorDecodeError(name, str(e)) from e
