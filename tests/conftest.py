"""
Shared fixtures for Graph Schema Designer tests.
"""

import pytest

from graphdesigner.shared import GraphEdge, GraphNode, PropertyDescriptor, Settings
from graphdesigner.services.graph_model import GraphStore
from graphdesigner.services.schema_generation import SchemaGenerationService


@pytest.fixture
def settings():
    return Settings(_env_file=None)


@pytest.fixture
def service(settings):
    return SchemaGenerationService(settings=settings)


@pytest.fixture
def person():
    return GraphNode(
        id="person",
        label="Person",
        properties=[
            PropertyDescriptor(key="name", type="String", is_required=True, description="full name"),
        ],
    )


@pytest.fixture
def company():
    return GraphNode(
        id="company",
        label="Company",
        properties=[
            PropertyDescriptor(key="title", type="String", description="registered name"),
            PropertyDescriptor(key="createdAt", type="Datetime", is_auto_generated=True),
        ],
    )


@pytest.fixture
def works_at():
    return GraphEdge(
        id="works-at",
        label="worksAt",
        start_node_id="person",
        end_node_id="company",
        properties=[
            PropertyDescriptor(key="since", type="Datetime", description="start date"),
        ],
    )


@pytest.fixture
def person_store(person):
    return GraphStore(nodes=[person])


@pytest.fixture
def employment_store(person, company, works_at):
    return GraphStore(nodes=[person, company], edges=[works_at])


@pytest.fixture
def graph_document():
    """Graph document in the shape the editor exports."""
    return {
        "nodes": [
            {
                "id": "n1",
                "label": "Person",
                "x": 120,
                "y": 80,
                "color": "#ff0000",
                "properties": [
                    {"key": "name", "type": "String", "description": "full name", "isRequired": True},
                    {"key": "id", "type": "ID", "isRequired": True, "isAutoGenerated": True},
                ],
            },
            {"id": "n2", "label": "Company", "properties": []},
        ],
        "edges": [
            {
                "id": "e1",
                "label": "worksAt",
                "startNodeID": "n1",
                "endNodeID": "n2",
                "properties": [{"key": "since", "type": "Datetime"}],
            },
        ],
    }
