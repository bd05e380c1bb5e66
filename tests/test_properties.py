import pytest

from graphdesigner.shared import PropertyDescriptor, PropertyType, UnsupportedPropertyTypeError
from graphdesigner.services.schema_generation.properties import (
    declare_property,
    describe_property,
    format_value,
    render_property,
)


def test_render_property_has_comment_and_declaration():
    prop = PropertyDescriptor(key="name", type="String", description="full name", is_required=True)

    assert render_property(prop) == "  #full name\n  name: String!"


def test_optional_property_has_no_bang():
    prop = PropertyDescriptor(key="nickname", type="String")

    assert declare_property(prop) == "nickname: String"


def test_text_limits_are_lengths():
    prop = PropertyDescriptor(key="title", type="String", description="headline", limit_min=3, limit_max=40)

    assert describe_property(prop) == "#headline; min length: 3; max length: 40"


@pytest.mark.parametrize("type_name", ["Url", "Email", "Password"])
def test_all_text_kinds_use_length_suffix(type_name):
    prop = PropertyDescriptor(key="value", type=type_name, limit_min=1)

    assert "min length: 1" in describe_property(prop)


def test_numeric_limits_are_values():
    prop = PropertyDescriptor(key="age", type="Int", limit_min=0, limit_max=130)

    comment = describe_property(prop)
    assert "; min: 0" in comment
    assert "; max: 130" in comment
    assert "length" not in comment


def test_clauses_appear_in_order():
    prop = PropertyDescriptor(
        key="rating", type="Float", description="score",
        default_value=2.5, limit_min=1.0, limit_max=5,
    )

    assert describe_property(prop) == "#score; default: 2.5; min: 1; max: 5"


def test_unset_clauses_are_omitted():
    prop = PropertyDescriptor(key="active", type="Boolean", description="enabled")

    assert describe_property(prop) == "#enabled"


def test_boolean_default_is_rendered_lowercase():
    prop = PropertyDescriptor(key="active", type="Boolean", default_value=False)

    assert describe_property(prop) == "#; default: false"


def test_enum_member_type_is_accepted():
    prop = PropertyDescriptor(key="location", type=PropertyType.GEOPOINT)

    assert declare_property(prop) == "location: GeoPoint"


def test_unsupported_type_fails_fast():
    prop = PropertyDescriptor.model_construct(key="price", type="Money")

    with pytest.raises(UnsupportedPropertyTypeError) as exc_info:
        render_property(prop)

    assert exc_info.value.key == "price"
    assert "Money" in str(exc_info.value)


@pytest.mark.parametrize("value, expected", [
    (True, "true"),
    (3.0, "3"),
    (3.25, "3.25"),
    (7, "7"),
    ("guest", "guest"),
])
def test_format_value(value, expected):
    assert format_value(value) == expected


def test_empty_limits_are_omitted():
    prop = PropertyDescriptor.model_validate(
        {"key": "title", "type": "String", "description": "headline", "limitMin": "", "limitMax": ""}
    )

    assert describe_property(prop) == "#headline"
