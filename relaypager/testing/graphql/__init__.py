""" Testing tools for GraphQL """

from .query import graphql_query_sync, graphql_query_async
from .schema import resolves
