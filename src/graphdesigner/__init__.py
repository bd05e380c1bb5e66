"""
Graph Schema Designer: derive connection-style schema documents from graphs.

Usage:
    from graphdesigner import GraphStore, SchemaGenerationService
    
    store = GraphStore.load("graph.json")
    result = SchemaGenerationService().generate(store)
    print(result.document)
"""

from .shared import GraphNode, GraphEdge, PropertyDescriptor, PropertyType
from .services.graph_model import GraphStore
from .services.schema_generation import (
    SchemaGenerationService,
    GenerationResult,
    generate_graphql_schema,
    BufferTarget,
    FileTarget,
    StreamTarget,
)

__version__ = "1.0.0"
__all__ = [
    "GraphNode",
    "GraphEdge",
    "PropertyDescriptor",
    "PropertyType",
    "GraphStore",
    "SchemaGenerationService",
    "GenerationResult",
    "generate_graphql_schema",
    "BufferTarget",
    "FileTarget",
    "StreamTarget",
]
