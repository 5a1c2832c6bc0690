from __future__ import annotations

from collections import abc
from typing import Optional, Generic, Any

from relaypager.node import ConnectionNode
from .base import NodeT


class SequenceLoader(Generic[NodeT]):
    """ Loader that paginates a list of nodes that is already in memory

    The list must be ordered by cursor.
    Useful for small lists and for stubbing the data layer in tests.

    Example:
        loader = SequenceLoader(users)
        connection = Connection.new(User, first=10, load=loader)
    """

    def __init__(self, nodes: abc.Iterable[NodeT]):
        self.nodes: tuple[NodeT, ...] = tuple(nodes)

    def load(self, after: Optional[Any], before: Optional[Any], limit: Optional[int]) -> list[NodeT]:
        nodes = (
            node
            for node in self.nodes
            if (after is None or _cursor_of(node) > after) and
               (before is None or _cursor_of(node) < before)
        )

        # Limit
        if limit is None:
            return list(nodes)
        else:
            return [node for _, node in zip(range(limit), nodes)]


def _cursor_of(node: ConnectionNode):
    return node.cursor()
