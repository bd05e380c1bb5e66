"""
Reference resolution and naming diagnostics.

Edges reference their endpoints by id; they are resolved against the graph
model before any text is produced so a dangling reference fails the whole
pass. Generated names are checked for collisions and for characters the
schema grammar does not accept.
"""

from collections import defaultdict
from typing import Dict, Iterable, List, Mapping, Sequence

from ...shared.exceptions import MissingEndpointError
from ...shared.models.graph import FIELD_NAME_PATTERN, GraphEdge, GraphNode
from .assembler import RESERVED_TYPE_NAMES
from .models import ResolvedEdge
from .naming import (
    connection_type_name,
    edge_type_name,
    input_type_name,
    query_field_name,
    type_name,
)


def resolve_edge(provider, edge: GraphEdge) -> ResolvedEdge:
    """
    Resolve both endpoints of an edge.
    
    Raises:
        MissingEndpointError: If either endpoint id is not in the model
    """
    start_node = provider.get_node(edge.start_node_id)
    if start_node is None:
        raise MissingEndpointError(edge.id, edge.start_node_id, 'start')
    end_node = provider.get_node(edge.end_node_id)
    if end_node is None:
        raise MissingEndpointError(edge.id, edge.end_node_id, 'end')
    return ResolvedEdge(edge=edge, start_node=start_node, end_node=end_node)


def resolve_edges(provider, edges: Iterable[GraphEdge]) -> List[ResolvedEdge]:
    return [resolve_edge(provider, edge) for edge in edges]


def _describe_node(node: GraphNode) -> str:
    return f"node '{node.label}' ({node.id})"


def _describe_edge(resolved: ResolvedEdge) -> str:
    return (
        f"edge '{resolved.edge.label}' ({resolved.edge.id}) "
        f"from '{resolved.start_node.label}' to '{resolved.end_node.label}'"
    )


def find_naming_collisions(
    nodes: Sequence[GraphNode],
    resolved_edges: Sequence[ResolvedEdge],
    outgoing: Mapping[str, Sequence[ResolvedEdge]] = None,
) -> List[str]:
    """
    Report generated names claimed by more than one entity.
    
    Covers type names (node, input, edge wrapper and connection types,
    including clashes with boilerplate types), plural query fields, and
    connection fields within one node type.
    
    Returns:
        One message per colliding name, in first-seen order
    """
    type_owners: Dict[str, List[str]] = defaultdict(list)
    query_owners: Dict[str, List[str]] = defaultdict(list)
    
    for node in nodes:
        owner = _describe_node(node)
        type_owners[type_name(node)].append(owner)
        type_owners[input_type_name(node)].append(owner)
        query_owners[query_field_name(node)].append(owner)
    
    for resolved in resolved_edges:
        owner = _describe_edge(resolved)
        type_owners[edge_type_name(resolved)].append(owner)
        type_owners[connection_type_name(resolved)].append(owner)
    
    collisions = []
    for name, owners in type_owners.items():
        if name in RESERVED_TYPE_NAMES:
            collisions.append(f"type '{name}' from {owners[0]} shadows a built-in type")
        elif len(owners) > 1:
            collisions.append(f"type '{name}' is generated by {' and '.join(owners)}")
    
    query_owners['nodes'].insert(0, "the built-in 'nodes' query")
    for name, owners in query_owners.items():
        if len(owners) > 1:
            collisions.append(f"query field '{name}' is generated by {' and '.join(owners)}")
    
    for node in nodes:
        field_owners: Dict[str, List[str]] = defaultdict(list)
        for prop in node.properties:
            field_owners[prop.key].append(f"property '{prop.key}'")
        for resolved in (outgoing or {}).get(node.id, ()):
            field_owners[resolved.edge.label].append(_describe_edge(resolved))
        for name, owners in field_owners.items():
            if len(owners) > 1:
                collisions.append(
                    f"field '{name}' of type '{type_name(node)}' is declared by {' and '.join(owners)}"
                )
    
    return collisions


def find_invalid_identifiers(
    nodes: Sequence[GraphNode],
    resolved_edges: Sequence[ResolvedEdge],
) -> List[str]:
    """Report generated names that the schema grammar would reject."""
    problems = []
    
    def check(kind: str, name: str, owner: str) -> None:
        if not FIELD_NAME_PATTERN.match(name):
            problems.append(f"{kind} '{name}' from {owner} is not a valid identifier")
    
    for node in nodes:
        owner = _describe_node(node)
        check('type', type_name(node), owner)
        check('query field', query_field_name(node), owner)
    
    for resolved in resolved_edges:
        owner = _describe_edge(resolved)
        check('type', edge_type_name(resolved), owner)
        check('connection field', resolved.edge.label, owner)
    
    return problems
