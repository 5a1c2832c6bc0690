""" Integration with GraphQL: graphql-core """

# High-level APIs
from .resolver import relay_resolver, relay_empty
from .schema import graphql_relay_schema, connection_sdl

# Lower-level APIs
from .types import GraphQLPageInfo
from .types import connection_type, edge_type, connection_args, connection_field
