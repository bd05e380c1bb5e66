"""
Graph data models for Graph Schema Designer.

These models represent the entities a user composes in the graph editor:
nodes and edges, each carrying an ordered list of typed properties. The
schema generator only reads them.

Editor documents use camelCase keys (``isRequired``, ``startNodeID``...);
every field accepts either spelling.
"""

import re
import uuid
from enum import Enum
from typing import Any, List, Optional, Union

from pydantic import ConfigDict, Field, field_validator

from .base import BaseModel


FIELD_NAME_PATTERN = re.compile(r'^[_A-Za-z][_0-9A-Za-z]*$')


class PropertyType(str, Enum):
    """Scalar kinds a property can have. Values are the schema type tokens."""
    STRING = "String"
    URL = "Url"
    EMAIL = "Email"
    PASSWORD = "Password"
    INT = "Int"
    FLOAT = "Float"
    BOOLEAN = "Boolean"
    DATETIME = "Datetime"
    GEOPOINT = "GeoPoint"
    ID = "ID"


# Bounds on these kinds are character-length bounds
TEXT_PROPERTY_TYPES = frozenset({
    PropertyType.STRING,
    PropertyType.URL,
    PropertyType.EMAIL,
    PropertyType.PASSWORD,
})


def _new_id() -> str:
    return str(uuid.uuid4())


class PropertyDescriptor(BaseModel):
    """A typed property of a node or an edge."""
    
    model_config = ConfigDict(extra="ignore")
    
    key: str = Field(..., description="Field identifier, used verbatim")
    type: PropertyType = Field(default=PropertyType.STRING, description="Scalar kind")
    description: str = Field(default="", description="Free text description")
    is_required: bool = Field(default=False, alias="isRequired")
    is_auto_generated: bool = Field(
        default=False, alias="isAutoGenerated",
        description="Auto-generated properties are left out of input types"
    )
    default_value: Optional[Any] = Field(default=None, alias="defaultValue")
    limit_min: Optional[Union[int, float]] = Field(default=None, alias="limitMin")
    limit_max: Optional[Union[int, float]] = Field(default=None, alias="limitMax")
    
    @field_validator('key')
    @classmethod
    def validate_key(cls, v):
        """Keys are emitted verbatim and must be valid field names."""
        v = v.strip() if v else v
        if not v or not FIELD_NAME_PATTERN.match(v):
            raise ValueError(f"'{v}' is not a valid field name")
        return v
    
    @field_validator('description', mode='before')
    @classmethod
    def validate_description(cls, v):
        return "" if v is None else v
    
    @field_validator('limit_min', 'limit_max', mode='before')
    @classmethod
    def validate_limits(cls, v):
        """Empty form fields mean no limit."""
        return None if v == "" else v
    
    @property
    def is_text(self) -> bool:
        """Whether limits on this property are length limits."""
        return PropertyType(self.type) in TEXT_PROPERTY_TYPES


class GraphNode(BaseModel):
    """
    Represents a node in the designed graph.
    
    The label becomes the generated type name.
    """
    
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)
    
    id: str = Field(default_factory=_new_id, description="Unique identifier for the node")
    label: str = Field(..., description="User-facing name")
    properties: List[PropertyDescriptor] = Field(default_factory=list, description="Ordered node properties")
    
    @field_validator('label')
    @classmethod
    def validate_label(cls, v):
        if not v or not v.strip():
            raise ValueError("Node label cannot be empty")
        return v.strip()
    
    def get_property(self, key: str) -> Optional[PropertyDescriptor]:
        """Get a property by key."""
        for prop in self.properties:
            if prop.key == key:
                return prop
        return None


class GraphEdge(BaseModel):
    """
    Represents a directed edge between two nodes.
    
    The edge references its endpoints by id; it does not own them.
    """
    
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)
    
    id: str = Field(default_factory=_new_id, description="Unique identifier for the edge")
    label: str = Field(..., description="User-facing name, used verbatim as the connection field")
    start_node_id: str = Field(..., alias="startNodeID", description="ID of the start node")
    end_node_id: str = Field(..., alias="endNodeID", description="ID of the end node")
    properties: List[PropertyDescriptor] = Field(default_factory=list, description="Ordered edge properties")
    
    @field_validator('label')
    @classmethod
    def validate_label(cls, v):
        if not v or not v.strip():
            raise ValueError("Edge label cannot be empty")
        return v.strip()
    
    def get_property(self, key: str) -> Optional[PropertyDescriptor]:
        """Get a property by key."""
        for prop in self.properties:
            if prop.key == key:
                return prop
        return None
