""" Slice Engine: windowing rules for Relay pagination

Implements the Relay algorithm: apply `first`, then apply `last` to what's left.
"""

from __future__ import annotations

from collections import abc
from typing import NamedTuple, Optional, TypeVar

from relaypager import exc
from .arguments import MAX_PAGINATION_INT


T = TypeVar('T')


class SliceWindow(NamedTuple):
    """ The window to cut from the candidate list, and the boundary flags """
    # Leading items to drop
    skip: int

    # Items to take from the front, `skip` included
    take: int

    # Do we have any prev page? Only known with `last`
    has_previous_page: bool

    # Do we have any next page? Only known with `first`
    has_next_page: bool

    def apply(self, items: abc.Sequence[T]) -> list[T]:
        """ Cut the window from the candidate items """
        return list(items[self.skip:self.take])


def slice_window(length: int, first: Optional[int], last: Optional[int]) -> SliceWindow:
    """ Compute the window for `length` candidate items

    Args:
        length: the number of candidate items the loader has returned
        first: validated `first`, or None
        last: validated `last`, or None

    Raises:
        exc.IntegerConversionError: `length` does not fit into the pagination integer type
    """
    length = to_pagination_int('length', length)

    has_previous_page = last is not None and length > last
    has_next_page = first is not None and length > first

    # Missing bounds are a no-op
    first = length if first is None else first
    last = length if last is None else last

    # Take `first` from the front, then keep at most `last` from its trailing end
    take = min(length, first)
    skip = max(0, take - last)

    return SliceWindow(
        skip=skip,
        take=take,
        has_previous_page=has_previous_page,
        has_next_page=has_next_page,
    )


def to_pagination_int(name: str, value: int) -> int:
    """ Make sure `value` fits into the pagination integer type

    Raises:
        exc.IntegerConversionError
    """
    if not 0 <= value <= MAX_PAGINATION_INT:
        raise exc.IntegerConversionError(name, value, MAX_PAGINATION_INT)
    return value
