"""
Shared components for Graph Schema Designer.

Contains common models, configuration, exceptions and infrastructure used by
all services:

- Graph data models and validation
- Centralized configuration management
- Shared exception hierarchy
- Logging
"""

from .models import *
from .config import *
from .exceptions import *
from .infrastructure import *

__all__ = [
    # From models
    "BaseModel",
    "GraphNode", "GraphEdge", "PropertyDescriptor", "PropertyType",
    "TEXT_PROPERTY_TYPES", "FIELD_NAME_PATTERN",
    
    # From config
    "Settings", "get_settings",
    
    # From exceptions
    "GraphDesignerError", "ConfigurationError", "GraphModelError",
    "GenerationError", "MissingEndpointError", "NamingCollisionError",
    "UnsupportedPropertyTypeError", "RenderTargetError",
    
    # From infrastructure
    "get_logger", "setup_logging",
]
