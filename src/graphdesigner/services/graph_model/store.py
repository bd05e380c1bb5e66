"""
In-memory graph model.

Holds the nodes and edges a user composes in the editor, in insertion order,
and answers the read queries the schema generator needs. A store is an
ordinary object: create one per editing session and pass it where needed.
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from ...shared import get_logger, GraphEdge, GraphNode, GraphModelError, PropertyDescriptor


class GraphStore:
    """
    Ordered registry of graph nodes and edges.
    
    Removing a node also removes every edge attached to it.
    """
    
    def __init__(
        self,
        nodes: Optional[Iterable[GraphNode]] = None,
        edges: Optional[Iterable[GraphEdge]] = None,
    ):
        self.logger = get_logger(__name__)
        self._nodes: Dict[str, GraphNode] = {}
        self._edges: Dict[str, GraphEdge] = {}
        
        for node in nodes or []:
            self.add_node(node)
        for edge in edges or []:
            self.add_edge(edge)
    
    # === Loading ===
    
    @classmethod
    def from_document(cls, data: Dict[str, Any], strict: bool = False) -> "GraphStore":
        """
        Build a store from a graph document ``{"nodes": [...], "edges": [...]}``.
        
        Args:
            data: Parsed graph document
            strict: Reject edges whose endpoints are not in the document.
                Otherwise dangling edges are kept and reported by generation.
        """
        if not isinstance(data, dict):
            raise GraphModelError("Graph document must be a JSON object")
        
        store = cls()
        for raw_node in data.get('nodes') or []:
            store.add_node(GraphNode.model_validate(raw_node))
        
        for raw_edge in data.get('edges') or []:
            edge = GraphEdge.model_validate(raw_edge)
            if strict:
                store.add_edge(edge)
            else:
                store._register_edge(edge)
        
        store.logger.info(f"Loaded graph with {len(store._nodes)} nodes and {len(store._edges)} edges")
        return store
    
    @classmethod
    def load(cls, path: Union[str, Path], strict: bool = False) -> "GraphStore":
        """Load a store from a JSON graph document on disk."""
        path = Path(path)
        try:
            data = json.loads(path.read_text(encoding='utf-8'))
        except OSError as e:
            raise GraphModelError(f"Cannot read graph document {path}: {e}") from e
        except json.JSONDecodeError as e:
            raise GraphModelError(f"Graph document {path} is not valid JSON: {e}") from e
        return cls.from_document(data, strict=strict)
    
    # === Nodes ===
    
    def add_node(self, node: GraphNode) -> GraphNode:
        if node.id in self._nodes:
            raise GraphModelError(f"Node '{node.id}' already exists")
        self._nodes[node.id] = node
        self.logger.debug(f"Added node {node.id} ({node.label})")
        return node
    
    def get_node(self, node_id: str) -> Optional[GraphNode]:
        return self._nodes.get(node_id)
    
    def get_all_nodes(self) -> List[GraphNode]:
        return list(self._nodes.values())
    
    def remove_node(self, node_id: str) -> GraphNode:
        """Remove a node together with its incoming and outgoing edges."""
        node = self._require_node(node_id)
        attached = [
            edge_id for edge_id, edge in self._edges.items()
            if node_id in (edge.start_node_id, edge.end_node_id)
        ]
        for edge_id in attached:
            del self._edges[edge_id]
        del self._nodes[node_id]
        self.logger.debug(f"Removed node {node_id} and {len(attached)} attached edges")
        return node
    
    def update_node_label(self, node_id: str, label: str) -> GraphNode:
        node = self._require_node(node_id)
        node.label = label
        return node
    
    def set_node_properties(self, node_id: str, properties: List[Union[PropertyDescriptor, Dict[str, Any]]]) -> GraphNode:
        node = self._require_node(node_id)
        node.properties = properties
        return node
    
    # === Edges ===
    
    def add_edge(self, edge: GraphEdge) -> GraphEdge:
        """Add an edge between two existing nodes."""
        self._require_node(edge.start_node_id)
        self._require_node(edge.end_node_id)
        return self._register_edge(edge)
    
    def get_edge(self, edge_id: str) -> Optional[GraphEdge]:
        return self._edges.get(edge_id)
    
    def get_all_edges(self) -> List[GraphEdge]:
        return list(self._edges.values())
    
    def get_edges_for_start_node(self, node_id: str) -> List[GraphEdge]:
        return [edge for edge in self._edges.values() if edge.start_node_id == node_id]
    
    def get_edges_for_end_node(self, node_id: str) -> List[GraphEdge]:
        return [edge for edge in self._edges.values() if edge.end_node_id == node_id]
    
    def remove_edge(self, edge_id: str) -> GraphEdge:
        edge = self._require_edge(edge_id)
        del self._edges[edge_id]
        return edge
    
    def update_edge_label(self, edge_id: str, label: str) -> GraphEdge:
        edge = self._require_edge(edge_id)
        edge.label = label
        return edge
    
    def set_edge_properties(self, edge_id: str, properties: List[Union[PropertyDescriptor, Dict[str, Any]]]) -> GraphEdge:
        edge = self._require_edge(edge_id)
        edge.properties = properties
        return edge
    
    # === Housekeeping ===
    
    def clear(self) -> None:
        self._nodes.clear()
        self._edges.clear()
    
    def __len__(self) -> int:
        return len(self._nodes)
    
    def __contains__(self, node_id: str) -> bool:
        return node_id in self._nodes
    
    def _register_edge(self, edge: GraphEdge) -> GraphEdge:
        if edge.id in self._edges:
            raise GraphModelError(f"Edge '{edge.id}' already exists")
        self._edges[edge.id] = edge
        self.logger.debug(f"Added edge {edge.id} ({edge.label})")
        return edge
    
    def _require_node(self, node_id: str) -> GraphNode:
        node = self._nodes.get(node_id)
        if node is None:
            raise GraphModelError(f"Node '{node_id}' does not exist")
        return node
    
    def _require_edge(self, edge_id: str) -> GraphEdge:
        edge = self._edges.get(edge_id)
        if edge is None:
            raise GraphModelError(f"Edge '{edge_id}' does not exist")
        return edge
