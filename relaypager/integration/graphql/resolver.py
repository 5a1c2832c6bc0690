""" Relay pagination: resolvers """

from __future__ import annotations

import inspect
import functools
from collections import abc
from typing import Any, Optional

import graphql

from relaypager.connection import Connection, ConnectionDict
from relaypager.settings import ConnectionSettings


# A loader function for a resolver:
# (root, info, after, before, limit, **other_field_arguments) -> nodes
ResolverLoaderFunc = abc.Callable[..., Any]


def relay_resolver(node_type: type, *, settings: ConnectionSettings = None):
    """ Decorator: turn a loader function into a connection field resolver

    The decorated function receives `(root, info, after, before, limit, **kwargs)`,
    where `after` and `before` are decoded cursors and `limit` is the number of items to load.
    It returns a list of nodes.

    The resulting resolver accepts `first`, `after`, `last`, `before` and returns the Connection as a dict.
    Every other field argument is passed through to the loader.
    Async loader functions give async resolvers.

    Example:
        @resolves(schema, 'Query', 'users')
        @relay_resolver(User)
        def resolve_users(root, info: graphql.GraphQLResolveInfo, after: Optional[IdCursor], before: Optional[IdCursor], limit: Optional[int]):
            return ssn.execute(...).scalars().all()
    """
    def decorator(func: ResolverLoaderFunc):
        if inspect.iscoroutinefunction(func):
            @functools.wraps(func)
            async def resolver_async(root: Any, info: graphql.GraphQLResolveInfo, *,
                                     first: Optional[int] = None, after: Optional[str] = None,
                                     last: Optional[int] = None, before: Optional[str] = None,
                                     **kwargs) -> ConnectionDict:
                load = functools.partial(_call_with_field_arguments, func, root, info, kwargs)
                connection = await Connection.new_async(node_type, first, after, last, before, load=load, settings=settings)
                return connection.export()
            return resolver_async
        else:
            @functools.wraps(func)
            def resolver(root: Any, info: graphql.GraphQLResolveInfo, *,
                         first: Optional[int] = None, after: Optional[str] = None,
                         last: Optional[int] = None, before: Optional[str] = None,
                         **kwargs) -> ConnectionDict:
                load = functools.partial(_call_with_field_arguments, func, root, info, kwargs)
                connection = Connection.new(node_type, first, after, last, before, load=load, settings=settings)
                return connection.export()
            return resolver
    return decorator


def relay_empty(*args, **kwargs) -> ConnectionDict:
    """ Resolver that always gives an empty connection. Never loads anything. """
    return Connection.empty().export()


def _call_with_field_arguments(func: ResolverLoaderFunc, root: Any, info: graphql.GraphQLResolveInfo, kwargs: dict,
                               after: Any, before: Any, limit: Optional[int]):
    return func(root, info, after, before, limit, **kwargs)
