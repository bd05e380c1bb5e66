"""
Assembly of the final schema document.

Fixed boilerplate comes first, then the generated node, edge and connection
types, the ``Query`` and ``Mutation`` root types and the closing ``schema``
block.
"""

from typing import Mapping, Sequence

from ...shared.models.graph import GraphNode
from .edges import render_edge_mutations
from .models import ResolvedEdge
from .naming import input_type_name, query_field_name, type_name
from .properties import INDENT


BOILERPLATE = """\
scalar Datetime
scalar Email
scalar Url
scalar Password

input GeoPointInput {
  lat: Float!
  lng: Float!
}

type GeoPoint {
  lat: Float!
  lng: Float!
}

interface Node {
  id: ID!
}

interface Edge {
  id: ID!
  node: Node
}

interface Connection {
  nodes: [Node]
  edges: [Edge]
  pageInfo: PageInfo
  totalCount: Int!
}

type PageInfo {
  endCursor: String
  hasNextPage: String
  hasPreviousPage: String
  startCursor: String
}
"""

SCHEMA_BLOCK = """\
schema {
  query: Query
  mutation: Mutation
}
"""

# Type names declared by the boilerplate or built into the grammar
RESERVED_TYPE_NAMES = frozenset({
    'Datetime', 'Email', 'Url', 'Password', 'GeoPointInput', 'GeoPoint',
    'Node', 'Edge', 'Connection', 'PageInfo', 'Query', 'Mutation',
    'String', 'Int', 'Float', 'Boolean', 'ID',
})


def render_query_type(nodes: Sequence[GraphNode]) -> str:
    lines = [
        "# the schema allows the following query:",
        "type Query {",
        f"{INDENT}nodes(id:[ID]): [Node]",
    ]
    lines.extend(
        f"{INDENT}{query_field_name(node)}(id:[ID]): [{type_name(node)}]"
        for node in nodes
    )
    lines.append("}")
    return "\n".join(lines)


def render_node_mutations(node: GraphNode, outgoing: Sequence[ResolvedEdge] = ()) -> str:
    """CRUD mutations of a node followed by the add/remove pair of each outgoing edge."""
    name = type_name(node)
    lines = [
        f"create{name}({name}: {input_type_name(node)}): {name}",
        f"update{name}({name}: {input_type_name(node)}, id: ID!): {name}",
        f"delete{name}(id: ID!): {name}",
    ]
    for resolved in outgoing:
        lines.extend(render_edge_mutations(resolved))
    return "\n".join(f"{INDENT}{line}" for line in lines)


def render_mutation_type(
    nodes: Sequence[GraphNode],
    outgoing: Mapping[str, Sequence[ResolvedEdge]],
) -> str:
    groups = [render_node_mutations(node, outgoing.get(node.id, ())) for node in nodes]
    return "type Mutation {\n" + "\n\n".join(groups) + "\n}"


def collapse_blank_lines(text: str) -> str:
    """
    Strip trailing whitespace from every line, squeeze runs of blank lines
    into one, and trim the result.
    """
    collapsed = []
    for line in text.splitlines():
        line = line.rstrip()
        if not line and collapsed and not collapsed[-1]:
            continue
        collapsed.append(line)
    return "\n".join(collapsed).strip()


def assemble_schema(
    node_fragments: Sequence[str],
    edge_fragments: Sequence[str],
    connection_fragments: Sequence[str],
    query_type: str,
    mutation_type: str,
) -> str:
    """Concatenate every part of the document in its fixed order."""
    parts = [BOILERPLATE]
    parts.extend(node_fragments)
    parts.extend(edge_fragments)
    parts.extend(connection_fragments)
    parts.extend([query_type, mutation_type, SCHEMA_BLOCK])
    return collapse_blank_lines("\n\n".join(parts))
