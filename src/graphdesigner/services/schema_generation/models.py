"""
Service models for schema generation.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List

from pydantic import Field

from ...shared.models.base import BaseModel
from ...shared.models.graph import GraphEdge, GraphNode


class CollisionPolicy(str, Enum):
    """How colliding generated names are treated."""
    WARN = "warn"
    ERROR = "error"
    IGNORE = "ignore"


@dataclass(frozen=True)
class ResolvedEdge:
    """An edge together with the nodes its endpoint ids resolve to."""
    edge: GraphEdge
    start_node: GraphNode
    end_node: GraphNode


class GenerationResult(BaseModel):
    """Result of one schema generation pass."""
    
    document: str = Field(..., description="The assembled schema document")
    node_count: int = Field(default=0, ge=0, description="Number of nodes rendered")
    edge_count: int = Field(default=0, ge=0, description="Number of edges rendered")
    warnings: List[str] = Field(default_factory=list, description="Diagnostics raised during generation")
    duration_ms: float = Field(default=0.0, ge=0.0, description="Generation time in milliseconds")
    
    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)
