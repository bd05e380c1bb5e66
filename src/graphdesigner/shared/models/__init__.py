"""
Shared data models for Graph Schema Designer.
"""

from .graph import (
    GraphNode,
    GraphEdge,
    PropertyDescriptor,
    PropertyType,
    TEXT_PROPERTY_TYPES,
    FIELD_NAME_PATTERN,
)
from .base import BaseModel

__all__ = [
    # Graph models
    "GraphNode",
    "GraphEdge",
    "PropertyDescriptor",
    "PropertyType",
    "TEXT_PROPERTY_TYPES",
    "FIELD_NAME_PATTERN",
    # Base models
    "BaseModel",
]
