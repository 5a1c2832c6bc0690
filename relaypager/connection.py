""" Relay pagination: Connection, Edge, PageInfo

Implements the Relay Cursor Connections specification and allows to paginate over any list of nodes:
https://relay.dev/graphql/connections.htm
"""

from __future__ import annotations

import inspect
import logging
from collections import abc
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar, TypedDict, Union

from .arguments import ConnectionArguments, PaginationBounds
from .loaders import LoaderLike, as_loader
from .settings import ConnectionSettings
from .slicing import slice_window


logger = logging.getLogger(__name__)

NodeT = TypeVar('NodeT')


@dataclass(frozen=True)
class Edge(Generic[NodeT]):
    """ Relay Edge: paginated item and its cursor """
    node: NodeT
    cursor: str

    def export(self) -> EdgeDict:
        return {'node': self.node, 'cursor': self.cursor}


@dataclass(frozen=True)
class PageInfo:
    """ Relay Page Info """
    has_previous_page: bool
    has_next_page: bool
    start_cursor: Optional[str]
    end_cursor: Optional[str]

    def export(self) -> PageInfoDict:
        return {
            'hasPreviousPage': self.has_previous_page,
            'hasNextPage': self.has_next_page,
            'startCursor': self.start_cursor,
            'endCursor': self.end_cursor,
        }


@dataclass(frozen=True)
class Connection(Generic[NodeT]):
    """ Relay Connection: a paginated list

    Use `Connection.new()` to build one with a loader, or `Connection.empty()` when there's nothing to load.
    """
    edges: tuple[Edge[NodeT], ...]
    page_info: PageInfo

    @classmethod
    def new(cls,
            node_type: type[NodeT],
            first: int = None, after: str = None,
            last: int = None, before: str = None,
            *,
            load: LoaderLike,
            settings: ConnectionSettings = None,
            ) -> Connection[NodeT]:
        """ Build a Relay-style paginated list

        You must supply a loader which is used to load the data from some backing store.
        It receives: `after: Optional[Cursor]`, `before: Optional[Cursor]`, and `limit: Optional[int]`.

        The `limit` argument is purely an optimization and may be ignored without breaking pagination.

        Args:
            node_type: The ConnectionNode class. Its `Cursor` decodes `after` and `before`
            first, after, last, before: Pagination arguments, as given by the User
            load: The loader: an object with a `load()` method, or a function
            settings: Default and max page sizes

        Raises:
            exc.CursorDecodeError: malformed `after` or `before`
            exc.PaginationArgumentError: invalid `first` or `last`
            exc.IntegerConversionError: a number doesn't fit into the pagination integer type
            Exception: whatever the loader raises
        """
        bounds = _parse_arguments(node_type, first, after, last, before, settings)
        nodes = _call_loader(load, bounds)
        if inspect.isawaitable(nodes):
            if inspect.iscoroutine(nodes):
                nodes.close()
            raise TypeError('The loader is async. Use Connection.new_async()')
        return cls.from_nodes(nodes, first=bounds.first, last=bounds.last)

    @classmethod
    async def new_async(cls,
            node_type: type[NodeT],
            first: int = None, after: str = None,
            last: int = None, before: str = None,
            *,
            load: LoaderLike,
            settings: ConnectionSettings = None,
            ) -> Connection[NodeT]:
        """ Build a Relay-style paginated list with an async loader

        Same as `new()`, but the loader may return an awaitable. This is the only point where the pipeline suspends.
        """
        bounds = _parse_arguments(node_type, first, after, last, before, settings)
        nodes = _call_loader(load, bounds)
        if inspect.isawaitable(nodes):
            nodes = await nodes
        return cls.from_nodes(nodes, first=bounds.first, last=bounds.last)

    @classmethod
    def from_nodes(cls, nodes: abc.Sequence[NodeT], *, first: Optional[int], last: Optional[int]) -> Connection[NodeT]:
        """ Build a connection from the candidate nodes

        Args:
            nodes: Candidate nodes, ordered, already bounded by `after` and `before`
            first: Validated `first`
            last: Validated `last`
        """
        if not isinstance(nodes, abc.Sequence):
            nodes = list(nodes)

        window = slice_window(len(nodes), first, last)
        edges = tuple(
            Edge(node=node, cursor=node.cursor().encode())  # type: ignore[attr-defined]
            for node in window.apply(nodes)
        )
        logger.debug('Connection window: %d candidates, skip=%d take=%d, has_previous_page=%s has_next_page=%s',
                     len(nodes), window.skip, window.take, window.has_previous_page, window.has_next_page)

        return cls(
            edges=edges,
            page_info=PageInfo(
                has_previous_page=window.has_previous_page,
                has_next_page=window.has_next_page,
                start_cursor=edges[0].cursor if edges else None,
                end_cursor=edges[-1].cursor if edges else None,
            ),
        )

    @classmethod
    def empty(cls) -> Connection[NodeT]:
        """ Get a connection with no elements

        Use it to bail out before loading anything, e.g. when permission is denied:
        the result looks exactly like a query that matched no rows.
        """
        return cls(
            edges=(),
            page_info=PageInfo(
                has_previous_page=False,
                has_next_page=False,
                start_cursor=None,
                end_cursor=None,
            ),
        )

    @property
    def nodes(self) -> list[NodeT]:
        """ Get the paginated nodes, without edges """
        return [edge.node for edge in self.edges]

    def export(self) -> ConnectionDict:
        """ Get the connection as a dict with API field names """
        return {
            'edges': [edge.export() for edge in self.edges],
            'pageInfo': self.page_info.export(),
        }


def _parse_arguments(node_type: type, first: Optional[int], after: Optional[str], last: Optional[int], before: Optional[str], settings: Optional[ConnectionSettings]) -> PaginationBounds:
    arguments = ConnectionArguments(first=first, after=after, last=last, before=before)
    return arguments.parse(node_type.Cursor, settings)  # type: ignore[attr-defined]


def _call_loader(load: LoaderLike, bounds: PaginationBounds):
    """ Invoke the loader with decoded bounds and the limit hint """
    logger.debug('Loading nodes: after=%r before=%r limit=%r', bounds.after, bounds.before, bounds.limit)
    return as_loader(load).load(bounds.after, bounds.before, bounds.limit)


class ConnectionDict(TypedDict):
    """ Relay Connection type: paginated list """
    edges: list[EdgeDict]
    pageInfo: PageInfoDict


class EdgeDict(TypedDict):
    """ Relay Edge type: paginated item """
    node: Union[object, dict]
    cursor: str


class PageInfoDict(TypedDict):
    """ Relay Page Info """
    hasPreviousPage: bool
    hasNextPage: bool
    startCursor: Optional[str]
    endCursor: Optional[str]
