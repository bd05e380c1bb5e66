"""
Common exceptions for Graph Schema Designer.
"""


class GraphDesignerError(Exception):
    """Base exception for all Graph Schema Designer errors."""
    pass


class ConfigurationError(GraphDesignerError):
    """Raised when there are configuration issues."""
    pass


class GraphModelError(GraphDesignerError):
    """Raised when a graph model operation is invalid."""
    pass


class GenerationError(GraphDesignerError):
    """Raised when schema generation fails."""
    pass


class MissingEndpointError(GenerationError):
    """Raised when an edge references a node that is not in the graph model."""

    def __init__(self, edge_id: str, node_id: str, role: str):
        self.edge_id = edge_id
        self.node_id = node_id
        self.role = role
        super().__init__(
            f"Edge '{edge_id}' references missing {role} node '{node_id}'"
        )


class NamingCollisionError(GenerationError):
    """Raised when generated identifiers collide and the policy forbids it."""

    def __init__(self, collisions):
        self.collisions = list(collisions)
        super().__init__(
            "Naming collisions detected: " + "; ".join(self.collisions)
        )


class UnsupportedPropertyTypeError(GenerationError):
    """Raised when a property type is outside the recognized scalar set."""

    def __init__(self, key: str, type_name):
        self.key = key
        self.type_name = type_name
        super().__init__(f"Property '{key}' has unsupported type '{type_name}'")


class RenderTargetError(GraphDesignerError):
    """Raised when a render target cannot accept a document."""
    pass
