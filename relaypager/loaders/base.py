from __future__ import annotations

from collections import abc
from typing import Optional, Protocol, TypeVar, Union, Generic, Any


NodeT = TypeVar('NodeT')
NodeT_co = TypeVar('NodeT_co', covariant=True)


class Loader(Protocol[NodeT_co]):
    """ Loader: loads candidate nodes from some backing store

    Args:
        after: decoded `after` cursor, or None. Load items that come after it.
        before: decoded `before` cursor, or None. Load items that come before it.
        limit: the number of items the caller is interested in, or None.

    The `limit` argument is purely an optimization and may be ignored without breaking pagination.
    Bounds may be ignored as well, but then the page would not be where the User expects it.

    Returns:
        Nodes, ordered.
    """

    def load(self, after: Optional[Any], before: Optional[Any], limit: Optional[int]) -> abc.Sequence[NodeT_co]:
        ...


class AsyncLoader(Protocol[NodeT_co]):
    """ Loader, async version """

    async def load(self, after: Optional[Any], before: Optional[Any], limit: Optional[int]) -> abc.Sequence[NodeT_co]:
        ...


# A plain function that works as a loader: (after, before, limit) -> nodes
LoaderFunc = abc.Callable[[Optional[Any], Optional[Any], Optional[int]], Any]

# Anything that `as_loader()` accepts
LoaderLike = Union[Loader, AsyncLoader, LoaderFunc]


class FunctionLoader(Generic[NodeT]):
    """ Loader that calls a plain function

    The function may be async: then `load()` returns an awaitable.
    """

    def __init__(self, func: LoaderFunc):
        self.func = func

    __slots__ = 'func',

    def load(self, after: Optional[Any], before: Optional[Any], limit: Optional[int]):
        return self.func(after, before, limit)

    def __repr__(self):
        return f'{type(self).__name__}({self.func!r})'


def as_loader(loader: LoaderLike) -> Union[Loader, AsyncLoader]:
    """ Get a loader object: wrap plain functions into FunctionLoader """
    if hasattr(loader, 'load'):
        return loader  # type: ignore[return-value]
    elif callable(loader):
        return FunctionLoader(loader)
    else:
        raise TypeError(f'Not a loader: {loader!r}')
