"""
Relay-style edge and connection synthesis for graph edges.
"""

from typing import List

from .models import ResolvedEdge
from .naming import connection_type_name, edge_base_name, edge_type_name, normalize_label
from .properties import INDENT, render_property


def render_edge_type(resolved: ResolvedEdge) -> str:
    """Render the edge wrapper: the end node plus the edge's own properties."""
    lines = [
        f"type {edge_type_name(resolved)} implements Edge {{",
        f"{INDENT}node: {normalize_label(resolved.end_node.label)}",
    ]
    lines.extend(render_property(prop) for prop in resolved.edge.properties)
    lines.append("}")
    return "\n".join(lines)


def render_connection_type(resolved: ResolvedEdge) -> str:
    return "\n".join([
        f"type {connection_type_name(resolved)} implements Connection {{",
        f"{INDENT}nodes: [{normalize_label(resolved.start_node.label)}]",
        f"{INDENT}edges: [{edge_type_name(resolved)}]",
        f"{INDENT}pageInfo: PageInfo",
        f"{INDENT}totalCount: Int!",
        "}",
    ])


def render_edge_mutations(resolved: ResolvedEdge) -> List[str]:
    """Return the ``add`` and ``remove`` mutation signatures of an edge."""
    # Mutation names are the bare edge base name; only the return type ends in Connection
    signature = (
        f"{edge_base_name(resolved)}("
        f"{normalize_label(resolved.start_node.label)}Id: ID!, "
        f"{normalize_label(resolved.end_node.label)}: ID!"
        f"): {connection_type_name(resolved)}"
    )
    return [f"add{signature}", f"remove{signature}"]
