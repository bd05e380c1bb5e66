import json

import pytest
from pydantic import ValidationError

from graphdesigner.shared import GraphEdge, GraphModelError, GraphNode, PropertyDescriptor
from graphdesigner.services.graph_model import GraphStore
from graphdesigner.services.schema_generation import SchemaGenerationService


class TestLoading:

    def test_from_document_accepts_editor_keys(self, graph_document):
        store = GraphStore.from_document(graph_document)

        person = store.get_node("n1")
        assert person.label == "Person"
        assert person.get_property("name").is_required is True
        assert person.get_property("id").is_auto_generated is True

        edge = store.get_edge("e1")
        assert edge.start_node_id == "n1"
        assert edge.end_node_id == "n2"
        assert edge.get_property("since").type == "Datetime"

    def test_insertion_order_is_kept(self, graph_document):
        store = GraphStore.from_document(graph_document)

        assert [node.id for node in store.get_all_nodes()] == ["n1", "n2"]
        assert [edge.id for edge in store.get_all_edges()] == ["e1"]

    def test_dangling_edges_are_kept_unless_strict(self, graph_document):
        graph_document["edges"][0]["startNodeID"] = "ghost"

        assert len(GraphStore.from_document(graph_document).get_all_edges()) == 1
        with pytest.raises(GraphModelError):
            GraphStore.from_document(graph_document, strict=True)

    def test_unknown_property_type_is_rejected(self, graph_document):
        graph_document["nodes"][1]["properties"] = [{"key": "price", "type": "Money"}]

        with pytest.raises(ValidationError):
            GraphStore.from_document(graph_document)

    def test_invalid_property_key_is_rejected(self):
        with pytest.raises(ValidationError):
            PropertyDescriptor(key="first name", type="String")

    def test_numeric_ids_are_loaded_as_strings(self, settings):
        store = GraphStore.from_document({
            "nodes": [{"id": 1, "label": "Person"}, {"id": 2, "label": "Company"}],
            "edges": [{"id": 3, "label": "worksAt", "startNodeID": 1, "endNodeID": 2}],
        })

        assert store.get_node("1").label == "Person"
        assert store.get_edge("3").start_node_id == "1"
        assert [e.id for e in store.get_edges_for_start_node("1")] == ["3"]

        document = SchemaGenerationService(settings=settings).generate(store).document
        assert "worksAt: PersonWorksAtCompanyConnection" in document

    def test_empty_limits_are_unset(self):
        store = GraphStore.from_document({
            "nodes": [{
                "id": "n1",
                "label": "Person",
                "properties": [{"key": "name", "type": "String", "limitMin": "", "limitMax": ""}],
            }],
        })

        prop = store.get_node("n1").get_property("name")
        assert prop.limit_min is None
        assert prop.limit_max is None

    def test_document_must_be_an_object(self):
        with pytest.raises(GraphModelError):
            GraphStore.from_document([])

    def test_load_from_file(self, tmp_path, graph_document):
        path = tmp_path / "graph.json"
        path.write_text(json.dumps(graph_document), encoding="utf-8")

        store = GraphStore.load(path)

        assert len(store) == 2
        assert "n2" in store

    def test_load_invalid_json(self, tmp_path):
        path = tmp_path / "graph.json"
        path.write_text("{nodes: ", encoding="utf-8")

        with pytest.raises(GraphModelError, match="not valid JSON"):
            GraphStore.load(path)

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(GraphModelError, match="Cannot read"):
            GraphStore.load(tmp_path / "missing.json")


class TestEditing:

    def test_duplicate_ids_are_rejected(self, person):
        store = GraphStore(nodes=[person])

        with pytest.raises(GraphModelError):
            store.add_node(GraphNode(id="person", label="Other"))

    def test_edge_requires_existing_nodes(self, person):
        store = GraphStore(nodes=[person])

        with pytest.raises(GraphModelError):
            store.add_edge(GraphEdge(label="knows", start_node_id="person", end_node_id="nobody"))

    def test_edges_by_endpoint(self, employment_store):
        assert [e.id for e in employment_store.get_edges_for_start_node("person")] == ["works-at"]
        assert employment_store.get_edges_for_start_node("company") == []
        assert [e.id for e in employment_store.get_edges_for_end_node("company")] == ["works-at"]

    def test_remove_node_drops_attached_edges(self, employment_store):
        employment_store.remove_node("company")

        assert employment_store.get_node("company") is None
        assert employment_store.get_all_edges() == []

    def test_remove_edge(self, employment_store):
        removed = employment_store.remove_edge("works-at")

        assert removed.label == "worksAt"
        assert employment_store.get_edge("works-at") is None
        with pytest.raises(GraphModelError):
            employment_store.remove_edge("works-at")

    def test_update_labels(self, employment_store):
        employment_store.update_node_label("person", "  Employee ")
        employment_store.update_edge_label("works-at", "employedBy")

        assert employment_store.get_node("person").label == "Employee"
        assert employment_store.get_edge("works-at").label == "employedBy"

    def test_empty_label_is_rejected(self, employment_store):
        with pytest.raises(ValidationError):
            employment_store.update_node_label("person", "   ")

    def test_set_properties_from_dicts(self, employment_store):
        employment_store.set_node_properties("company", [
            {"key": "revenue", "type": "Float", "limitMin": 0},
        ])
        employment_store.set_edge_properties("works-at", [
            PropertyDescriptor(key="role", type="String"),
        ])

        revenue = employment_store.get_node("company").properties[0]
        assert isinstance(revenue, PropertyDescriptor)
        assert revenue.limit_min == 0
        assert employment_store.get_edge("works-at").properties[0].key == "role"

    def test_generated_ids(self):
        node = GraphNode(label="Person")

        assert node.id
        assert node.id != GraphNode(label="Person").id

    def test_clear(self, employment_store):
        employment_store.clear()

        assert len(employment_store) == 0
        assert employment_store.get_all_edges() == []
