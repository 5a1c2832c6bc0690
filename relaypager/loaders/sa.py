""" Loader for SqlAlchemy: keyset pagination of a SELECT statement """

from __future__ import annotations

import logging
from typing import Optional, Generic, Any

import sqlalchemy as sa
import sqlalchemy.orm

from .base import NodeT


logger = logging.getLogger(__name__)


class SelectLoader(Generic[NodeT]):
    """ Loader that paginates an SqlAlchemy SELECT statement by its cursor columns

    Cursor keys are compared with the cursor columns:

        WHERE (col1, col2) > (:after) AND (col1, col2) < (:before)
        ORDER BY col1, col2
        LIMIT :limit

    Cursor columns must make a unique, non-nullable key; otherwise rows would be lost between pages.
    Any ORDER BY on the statement is replaced with the cursor columns.
    Single-column cursors (e.g. IdCursor) compare their `key` with the column directly;
    multi-column cursors (e.g. KeysetCursor) use a tuple comparison.

    Example:
        loader = SelectLoader(ssn, sa.select(User), User.id)
        connection = Connection.new(UserNode, first=10, after='10', load=loader)
    """

    def __init__(self, ssn: sa.orm.Session, stmt: sa.sql.Select, *columns: sa.sql.ColumnElement):
        assert columns, 'At least one cursor column is required'
        self.ssn = ssn
        self.stmt = stmt
        self.columns = columns

    def load(self, after: Optional[Any], before: Optional[Any], limit: Optional[int]) -> list[NodeT]:
        stmt = self.statement(after, before, limit)
        return self.ssn.execute(stmt).scalars().all()  # type: ignore[return-value]

    def statement(self, after: Optional[Any], before: Optional[Any], limit: Optional[int]) -> sa.sql.Select:
        """ Build the paginated SELECT statement """
        stmt = self.stmt

        # Filter
        if after is not None:
            stmt = stmt.where(self._key_expression() > self._key_value(after))
        if before is not None:
            stmt = stmt.where(self._key_expression() < self._key_value(before))

        # Sort by cursor columns only: an existing ORDER BY would page by the wrong key
        stmt = stmt.order_by(None).order_by(*self.columns)
        if limit is not None:
            stmt = stmt.limit(limit)

        logger.debug('Paginated statement: after=%r before=%r limit=%r', after, before, limit)
        return stmt

    def _key_expression(self) -> sa.sql.ColumnElement:
        if len(self.columns) == 1:
            return self.columns[0]
        else:
            return sa.tuple_(*self.columns)

    def _key_value(self, cursor: Any) -> Any:
        key = cursor.key

        if len(self.columns) == 1:
            # Single-column keyset cursors carry a 1-tuple
            if isinstance(key, tuple):
                key, = key
            return key
        else:
            if len(key) != len(self.columns):
                raise ValueError(f'Cursor has {len(key)} values, but there are {len(self.columns)} cursor columns')
            return sa.tuple_(*(sa.literal(v) for v in key))
