"""
Rendering of node and edge properties into field declarations.
"""

from ...shared.exceptions import UnsupportedPropertyTypeError
from ...shared.models.graph import PropertyDescriptor, PropertyType, TEXT_PROPERTY_TYPES


INDENT = '  '


def resolve_property_type(prop: PropertyDescriptor) -> PropertyType:
    """Map a descriptor's type onto the recognized scalar set."""
    try:
        return PropertyType(prop.type)
    except ValueError:
        raise UnsupportedPropertyTypeError(prop.key, prop.type) from None


def format_value(value) -> str:
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _is_set(value) -> bool:
    return value is not None and value != ''


def describe_property(prop: PropertyDescriptor) -> str:
    """
    Build the comment line for a property.
    
    The description is followed by the default value and the min/max bounds,
    each only when set. Bounds on text kinds are reported as lengths.
    """
    prop_type = resolve_property_type(prop)
    suffix = ' length' if prop_type in TEXT_PROPERTY_TYPES else ''
    
    comment = f"#{prop.description or ''}"
    if _is_set(prop.default_value):
        comment += f"; default: {format_value(prop.default_value)}"
    if _is_set(prop.limit_min):
        comment += f"; min{suffix}: {format_value(prop.limit_min)}"
    if _is_set(prop.limit_max):
        comment += f"; max{suffix}: {format_value(prop.limit_max)}"
    return comment


def declare_property(prop: PropertyDescriptor) -> str:
    prop_type = resolve_property_type(prop)
    return f"{prop.key}: {prop_type.value}{'!' if prop.is_required else ''}"


def render_property(prop: PropertyDescriptor, indent: str = INDENT) -> str:
    """
    Render a property as a comment line followed by its field declaration.
    
    Args:
        prop: Property of a node or an edge
        indent: Prefix applied to both lines
        
    Returns:
        Two-line fragment
        
    Raises:
        UnsupportedPropertyTypeError: If the type is not a recognized scalar
    """
    return f"{indent}{describe_property(prop)}\n{indent}{declare_property(prop)}"
