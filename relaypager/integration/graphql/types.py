""" Relay types for programmatically built schemas """

from __future__ import annotations

import functools

import graphql


# PageInfo: the same type for every connection
GraphQLPageInfo = graphql.GraphQLObjectType(
    name='PageInfo',
    description='Pagination info for a Connection',
    fields=lambda: {
        'hasPreviousPage': graphql.GraphQLField(graphql.GraphQLNonNull(graphql.GraphQLBoolean)),
        'hasNextPage': graphql.GraphQLField(graphql.GraphQLNonNull(graphql.GraphQLBoolean)),
        'startCursor': graphql.GraphQLField(graphql.GraphQLString),
        'endCursor': graphql.GraphQLField(graphql.GraphQLString),
    },
)


def connection_args() -> dict[str, graphql.GraphQLArgument]:
    """ Get pagination arguments for a connection field """
    return {
        'first': graphql.GraphQLArgument(graphql.GraphQLInt, description='Forward pagination: the number of items to get'),
        'after': graphql.GraphQLArgument(graphql.GraphQLString, description='Forward pagination: get items after this cursor'),
        'last': graphql.GraphQLArgument(graphql.GraphQLInt, description='Backward pagination: the number of items to get'),
        'before': graphql.GraphQLArgument(graphql.GraphQLString, description='Backward pagination: get items before this cursor'),
    }


@functools.lru_cache(maxsize=None)
def edge_type(node_type: type, graphql_type: graphql.GraphQLObjectType) -> graphql.GraphQLObjectType:
    """ Make the Edge type for a node. Made once per (node type, GraphQL type) """
    return graphql.GraphQLObjectType(
        name=node_type.edge_type_name,  # type: ignore[attr-defined]
        fields=lambda: {
            'node': graphql.GraphQLField(graphql.GraphQLNonNull(graphql_type)),
            'cursor': graphql.GraphQLField(graphql.GraphQLNonNull(graphql.GraphQLString)),
        },
    )


@functools.lru_cache(maxsize=None)
def connection_type(node_type: type, graphql_type: graphql.GraphQLObjectType) -> graphql.GraphQLObjectType:
    """ Make the Connection type for a node

    Type names come from the node type; every connection shares the same PageInfo type.
    The type is made once per (node type, GraphQL type): a schema may only have one type with a given name.
    Connection fields resolve from the dict that `Connection.export()` gives.

    Args:
        node_type: The ConnectionNode class
        graphql_type: The GraphQL object type the node is exposed as
    """
    edge = edge_type(node_type, graphql_type)
    return graphql.GraphQLObjectType(
        name=node_type.connection_type_name,  # type: ignore[attr-defined]
        fields=lambda: {
            'edges': graphql.GraphQLField(graphql.GraphQLNonNull(graphql.GraphQLList(graphql.GraphQLNonNull(edge)))),
            'pageInfo': graphql.GraphQLField(graphql.GraphQLNonNull(GraphQLPageInfo)),
        },
    )


def connection_field(node_type: type, graphql_type: graphql.GraphQLObjectType, resolve=None, *, description: str = None) -> graphql.GraphQLField:
    """ Make a connection field: Connection type + pagination arguments """
    return graphql.GraphQLField(
        graphql.GraphQLNonNull(connection_type(node_type, graphql_type)),
        args=connection_args(),
        resolve=resolve,
        description=description,
    )
