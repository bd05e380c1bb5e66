"""
Schema generation service for Graph Schema Designer.

Turns a graph model into a schema document following the connection
pattern: node types with paginated connections, edge wrappers, and CRUD
mutations.
"""

from .service import SchemaGenerationService, generate_graphql_schema
from .models import CollisionPolicy, GenerationResult, ResolvedEdge
from .naming import normalize_label, edge_base_name
from .properties import render_property
from .targets import RenderTarget, BufferTarget, FileTarget, StreamTarget

__all__ = [
    "SchemaGenerationService",
    "generate_graphql_schema",
    "CollisionPolicy",
    "GenerationResult",
    "ResolvedEdge",
    "normalize_label",
    "edge_base_name",
    "render_property",
    "RenderTarget",
    "BufferTarget",
    "FileTarget",
    "StreamTarget",
]
