import pytest

from graphdesigner.shared import GraphEdge, GraphNode
from graphdesigner.services.schema_generation.models import ResolvedEdge
from graphdesigner.services.schema_generation.naming import (
    connection_type_name,
    edge_base_name,
    edge_type_name,
    input_type_name,
    normalize_label,
    query_field_name,
    type_name,
)


@pytest.mark.parametrize("label, expected", [
    ("user account", "UserAccount"),
    ("Person", "Person"),
    ("person", "Person"),
    ("USER ACCOUNT", "UserAccount"),
    ("  spaced   out  ", "SpacedOut"),
    ("worksAt", "WorksAt"),
    ("works at", "WorksAt"),
    ("", ""),
])
def test_normalize_label(label, expected):
    assert normalize_label(label) == expected


def test_normalize_label_is_stable():
    assert normalize_label("blog post") == normalize_label("blog post")


def test_node_names():
    node = GraphNode(id="n", label="user account")
    assert type_name(node) == "UserAccount"
    assert input_type_name(node) == "UserAccountInput"
    # The plural query field keeps the raw label
    assert query_field_name(node) == "user accounts"


def test_edge_names_use_the_ordered_triple():
    person = GraphNode(id="p", label="Person")
    company = GraphNode(id="c", label="Company")
    edge = GraphEdge(id="e", label="worksAt", start_node_id="p", end_node_id="c")
    resolved = ResolvedEdge(edge=edge, start_node=person, end_node=company)

    assert edge_base_name(resolved) == "PersonWorksAtCompany"
    assert edge_type_name(resolved) == "PersonWorksAtCompanyEdge"
    assert connection_type_name(resolved) == "PersonWorksAtCompanyConnection"

    reversed_edge = ResolvedEdge(edge=edge, start_node=company, end_node=person)
    assert edge_base_name(reversed_edge) == "CompanyWorksAtPerson"
