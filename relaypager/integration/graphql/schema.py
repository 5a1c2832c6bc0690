import os.path

# Load GraphQL definitions from the file
pwd = os.path.dirname(__file__)

# Get this schema
with open(os.path.join(pwd, './relay.graphql'), 'rt') as f:
    graphql_relay_schema = f.read()


def connection_sdl(node_type: type, graphql_type_name: str) -> str:
    """ Generate GraphQL definitions for the Connection and Edge types of a node

    Args:
        node_type: The ConnectionNode class. Provides type names for the Connection and the Edge
        graphql_type_name: Name of the GraphQL type that the node is exposed as

    Example:
        schema = graphql.build_schema(
            graphql_relay_schema +
            connection_sdl(User, 'User') +
            '''
            type Query {
                users(first: Int, after: String, last: Int, before: String): UserConnection!
            }
            type User { id: ID! }
            '''
        )
    """
    connection_name = node_type.connection_type_name  # type: ignore[attr-defined]
    edge_name = node_type.edge_type_name  # type: ignore[attr-defined]

    return (
        f'\n'
        f'type {connection_name} implements Connection {{\n'
        f'    edges: [{edge_name}!]!\n'
        f'    pageInfo: PageInfo!\n'
        f'}}\n'
        f'\n'
        f'type {edge_name} implements Edge {{\n'
        f'    node: {graphql_type_name}!\n'
        f'    cursor: String!\n'
        f'}}\n'
    )
