"""
Base models for Graph Schema Designer.
"""

from pydantic import BaseModel as PydanticBaseModel, ConfigDict


class BaseModel(PydanticBaseModel):
    """
    Base model for all Graph Schema Designer data structures.
    
    Provides common configuration and utilities.
    """
    
    model_config = ConfigDict(
        # Allow field population by name or alias
        validate_by_name=True,
        validate_by_alias=True,
        # Validate assignments after object creation
        validate_assignment=True,
        # Use enum values instead of enum names
        use_enum_values=True,
        extra="forbid",
    )
