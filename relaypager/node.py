""" Node: a record that can appear in a Connection """

from __future__ import annotations

from typing import ClassVar, Generic, TypeVar

from .cursors import Cursor


# Cursor type for a node
CursorT = TypeVar('CursorT', bound=Cursor)


class ConnectionNode(Generic[CursorT]):
    """ To return objects inside a connection, they must implement this interface

    Example:
        class User(ConnectionNode[IdCursor]):
            Cursor = IdCursor
            connection_type_name = 'UserConnection'
            edge_type_name = 'UserEdge'

            def cursor(self) -> IdCursor:
                return IdCursor(self.id)
    """
    # The cursor type: used to decode `after` and `before`
    Cursor: ClassVar[type]

    # Type name that connections over these nodes have in the API
    connection_type_name: ClassVar[str]

    # Type name that edges containing these nodes have in the API
    edge_type_name: ClassVar[str]

    __slots__ = ()

    def cursor(self) -> CursorT:
        """ Get the cursor associated with this node """
        raise NotImplementedError
