"""
Schema generation service implementation.

Derives a complete schema document from a graph model: one object and one
input type per node, an edge wrapper and a connection type per edge, and the
``Query``/``Mutation`` root types that reference them.

The graph model is any provider exposing ``get_all_nodes()``,
``get_all_edges()``, ``get_edges_for_start_node(node_id)`` and
``get_node(node_id)``; ``GraphStore`` is the bundled one.
"""

import time
from typing import Dict, List, Optional, Sequence

from ...shared import (
    get_logger, get_settings, Settings, GraphNode, NamingCollisionError
)
from .assembler import assemble_schema, render_mutation_type, render_query_type
from .diagnostics import (
    find_invalid_identifiers, find_naming_collisions, resolve_edge, resolve_edges
)
from .edges import render_connection_type, render_edge_type
from .models import CollisionPolicy, GenerationResult, ResolvedEdge
from .nodes import render_node
from .targets import RenderTarget


class SchemaGenerationService:
    """
    Service for deriving schema documents from graph models.
    
    Stateless apart from its configuration: every call reads the provider
    once and returns a fresh document, so repeated calls on an unchanged
    model produce identical text.
    """
    
    def __init__(self, settings: Optional[Settings] = None):
        """
        Initialize the generation service.
        
        Args:
            settings: Configuration to use (defaults to the cached settings)
        """
        self.settings = settings or get_settings()
        self.logger = get_logger(__name__)
        
        config = self.settings.generation_config
        self.collision_policy = CollisionPolicy(config['collision_policy'])
        self.check_identifiers = config['check_identifiers']
    
    def generate(self, provider) -> GenerationResult:
        """
        Generate the schema document for the current state of a graph model.
        
        Args:
            provider: Graph model to read
            
        Returns:
            Generation result carrying the document and any diagnostics
            
        Raises:
            MissingEndpointError: If an edge references a node not in the model
            NamingCollisionError: If names collide and the policy is ``error``
            UnsupportedPropertyTypeError: If a property type is not recognized
        """
        start_time = time.time()
        
        nodes = list(provider.get_all_nodes())
        edges = list(provider.get_all_edges())
        self.logger.info(f"Generating schema for {len(nodes)} nodes and {len(edges)} edges")
        
        resolved_edges = resolve_edges(provider, edges)
        outgoing = self._collect_outgoing(provider, nodes, resolved_edges)
        
        warnings = self._diagnose(nodes, resolved_edges, outgoing)
        
        node_fragments = [render_node(node, outgoing[node.id]) for node in nodes]
        self.logger.debug(f"Rendered {len(node_fragments)} node types")
        
        edge_fragments = [render_edge_type(resolved) for resolved in resolved_edges]
        connection_fragments = [render_connection_type(resolved) for resolved in resolved_edges]
        self.logger.debug(f"Rendered {len(edge_fragments)} edge and connection types")
        
        document = assemble_schema(
            node_fragments,
            edge_fragments,
            connection_fragments,
            render_query_type(nodes),
            render_mutation_type(nodes, outgoing),
        )
        
        duration_ms = (time.time() - start_time) * 1000
        self.logger.info(f"Schema generated in {duration_ms:.1f}ms ({len(document)} characters)")
        
        return GenerationResult(
            document=document,
            node_count=len(nodes),
            edge_count=len(edges),
            warnings=warnings,
            duration_ms=duration_ms,
        )
    
    def generate_to(self, provider, target: RenderTarget) -> GenerationResult:
        """
        Generate the schema document and hand it to a render target.
        
        The target is only called once the whole document has been built.
        """
        result = self.generate(provider)
        target.render(result.document)
        self.logger.debug(f"Document delivered to {target!r}")
        return result
    
    def _collect_outgoing(
        self,
        provider,
        nodes: Sequence[GraphNode],
        resolved_edges: Sequence[ResolvedEdge],
    ) -> Dict[str, List[ResolvedEdge]]:
        """Map each node id to its resolved outgoing edges, in provider order."""
        by_id = {resolved.edge.id: resolved for resolved in resolved_edges}
        outgoing = {}
        for node in nodes:
            outgoing[node.id] = [
                by_id.get(edge.id) or resolve_edge(provider, edge)
                for edge in provider.get_edges_for_start_node(node.id)
            ]
        return outgoing
    
    def _diagnose(
        self,
        nodes: Sequence[GraphNode],
        resolved_edges: Sequence[ResolvedEdge],
        outgoing: Dict[str, List[ResolvedEdge]],
    ) -> List[str]:
        warnings = []
        
        if self.collision_policy != CollisionPolicy.IGNORE:
            collisions = find_naming_collisions(nodes, resolved_edges, outgoing)
            if collisions and self.collision_policy == CollisionPolicy.ERROR:
                raise NamingCollisionError(collisions)
            warnings.extend(collisions)
        
        if self.check_identifiers:
            warnings.extend(find_invalid_identifiers(nodes, resolved_edges))
        
        for warning in warnings:
            self.logger.warning(warning)
        
        return warnings


def generate_graphql_schema(provider, target: RenderTarget, settings: Optional[Settings] = None) -> str:
    """
    Generate the schema for ``provider`` and write it to ``target``.
    
    Returns:
        The document that was rendered
    """
    service = SchemaGenerationService(settings=settings)
    return service.generate_to(provider, target).document
