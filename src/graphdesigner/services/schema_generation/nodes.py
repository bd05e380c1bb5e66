"""
Object and input type synthesis for graph nodes.
"""

from typing import Sequence

from ...shared.models.graph import GraphNode
from .models import ResolvedEdge
from .naming import connection_type_name, input_type_name, type_name
from .properties import INDENT, render_property


def render_node_type(node: GraphNode, outgoing: Sequence[ResolvedEdge] = ()) -> str:
    """
    Render the object type of a node.
    
    Properties keep their order; one connection field per outgoing edge is
    appended after them, named by the raw edge label.
    """
    lines = [f"type {type_name(node)} implements Node {{"]
    lines.extend(render_property(prop) for prop in node.properties)
    lines.extend(
        f"{INDENT}{resolved.edge.label}: {connection_type_name(resolved)}"
        for resolved in outgoing
    )
    lines.append("}")
    return "\n".join(lines)


def render_node_input(node: GraphNode) -> str:
    """Render the input type of a node, leaving out auto-generated properties."""
    lines = [
        f"#input for {type_name(node)}",
        f"input {input_type_name(node)} {{",
    ]
    lines.extend(
        render_property(prop) for prop in node.properties if not prop.is_auto_generated
    )
    lines.append("}")
    return "\n".join(lines)


def render_node(node: GraphNode, outgoing: Sequence[ResolvedEdge] = ()) -> str:
    return f"{render_node_type(node, outgoing)}\n\n{render_node_input(node)}"
