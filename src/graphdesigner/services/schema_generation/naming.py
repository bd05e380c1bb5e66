"""
Identifier synthesis for generated schema types.

Every generated name derives from user labels through ``normalize_label``, so
the node type, its input type, and the edge-derived wrapper and connection
types always agree with each other.
"""

import re

from ...shared.models.graph import GraphNode
from .models import ResolvedEdge


# Boundary inside a camelCase word, e.g. "works|At"
_CAMEL_BOUNDARY = re.compile(r'(?<=[a-z0-9])(?=[A-Z])')


def _split_words(label: str):
    for chunk in label.split():
        for word in _CAMEL_BOUNDARY.split(chunk):
            if word:
                yield word


def normalize_label(label: str) -> str:
    """
    Convert a user label into a title-case identifier.
    
    Each word gets its first character upcased and the rest downcased, then
    the words are joined without a separator::
    
        >>> normalize_label("user account")
        'UserAccount'
        >>> normalize_label("worksAt")
        'WorksAt'
    """
    return ''.join(word[0].upper() + word[1:].lower() for word in _split_words(label))


def type_name(node: GraphNode) -> str:
    return normalize_label(node.label)


def input_type_name(node: GraphNode) -> str:
    return f"{type_name(node)}Input"


def query_field_name(node: GraphNode) -> str:
    """Plural query field: the raw label with an ``s`` appended."""
    return f"{node.label}s"


def edge_base_name(resolved: ResolvedEdge) -> str:
    """Start label, edge label and end label, each normalized, concatenated."""
    return (
        normalize_label(resolved.start_node.label)
        + normalize_label(resolved.edge.label)
        + normalize_label(resolved.end_node.label)
    )


def edge_type_name(resolved: ResolvedEdge) -> str:
    return f"{edge_base_name(resolved)}Edge"


def connection_type_name(resolved: ResolvedEdge) -> str:
    return f"{edge_base_name(resolved)}Connection"
