"""
Tests for graph materialization.
"""

import itertools

import pytest

from triplegraph.context.node_registry import NodeRegistry
from triplegraph.errors import MaterializationError
from triplegraph.extraction.deduplicator import deduplicate
from triplegraph.materialize.materializer import GraphMaterializer, check_identifier
from triplegraph.schema.triples import Triple
from tests.fakes import DeferredFailureSession, FakeSession


def counting_registry() -> NodeRegistry:
    counter = itertools.count(1)
    return NodeRegistry(id_factory=lambda name: f"{name}_{next(counter)}")


class TestGraphMaterializer:
    """Tests for GraphMaterializer."""

    def test_paris_france_example(self):
        """A duplicated triple yields two nodes and one edge."""
        triple = Triple(subject="Paris", object="France", relationship="capital_of")
        triples = deduplicate([triple, triple])
        session = FakeSession()

        graph = GraphMaterializer(session).materialize(triples)

        assert len(triples) == 1
        assert set(graph.nodes) == {"Paris", "France"}
        assert len(graph.edges) == 1
        assert graph.edges[0].type == "capital_of"
        assert [p["name"] for p in session.node_writes()] == ["Paris", "France"]
        assert session.edge_writes() == [
            {
                "source_id": graph.nodes["Paris"].id,
                "target_id": graph.nodes["France"].id,
                "type": "capital_of",
            }
        ]

    def test_shared_subject_reuses_node(self):
        """Two triples with the same subject: one node for it, two edges."""
        triples = [
            Triple(subject="Elon Musk", object="SpaceX", relationship="founded"),
            Triple(subject="Elon Musk", object="Tesla", relationship="leads"),
        ]
        session = FakeSession()

        graph = GraphMaterializer(session, registry=counting_registry()).materialize(triples)

        assert len(graph.nodes) == 3
        assert len(session.node_writes()) == 3
        assert len(graph.edges) == 2
        musk_id = graph.nodes["Elon Musk"].id
        assert musk_id == "Elon Musk_1"
        assert all(e.source_node_id == musk_id for e in graph.edges)

    def test_nodes_written_before_edges(self):
        triples = [
            Triple(subject="A", object="B", relationship="r1"),
            Triple(subject="C", object="D", relationship="r2"),
        ]
        session = FakeSession()

        GraphMaterializer(session).materialize(triples)

        kinds = [s.split()[0] for s, _ in session.statements]
        assert kinds == ["CREATE"] * 4 + ["MATCH"] * 2

    def test_node_properties(self):
        session = FakeSession()
        GraphMaterializer(session, registry=counting_registry()).materialize(
            [Triple(subject="Paris", object="France", relationship="capital_of")]
        )

        statement, params = session.statements[0]
        assert statement == "CREATE (n:Entity {id: $id, name: $name})"
        assert params == {"id": "Paris_1", "name": "Paris"}

    def test_relationship_type_stored_as_property(self):
        session = FakeSession()
        GraphMaterializer(session, relationship="RELATES_TO").materialize(
            [Triple(subject="Paris", object="France", relationship="capital of")]
        )

        statement, params = session.statements[-1]
        assert "CREATE (a)-[r:RELATES_TO {type: $type}]->(b)" in statement
        assert params["type"] == "capital of"

    def test_self_relation(self):
        session = FakeSession()
        graph = GraphMaterializer(session).materialize(
            [Triple(subject="Narcissus", object="Narcissus", relationship="loves")]
        )

        assert len(graph.nodes) == 1
        assert graph.edges[0].source_node_id == graph.edges[0].target_node_id

    def test_write_failure_aborts_remaining(self):
        """The first failed write stops the run; earlier writes are kept."""
        triples = [
            Triple(subject="A", object="B", relationship="r1"),
            Triple(subject="C", object="D", relationship="r2"),
        ]
        session = FakeSession(fail_at=2)

        with pytest.raises(MaterializationError) as exc_info:
            GraphMaterializer(session).materialize(triples)

        assert len(session.statements) == 2
        assert exc_info.value.writes_committed == 2
        assert set(exc_info.value.graph.nodes) == {"A", "B"}
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    def test_edge_write_failure(self):
        session = FakeSession(fail_at=2)

        with pytest.raises(MaterializationError) as exc_info:
            GraphMaterializer(session).materialize(
                [Triple(subject="A", object="B", relationship="r1")]
            )

        assert exc_info.value.graph.edges == []
        assert len(exc_info.value.graph.nodes) == 2

    def test_deferred_failure_on_last_edge(self):
        """An error reported only when the result is consumed still fails the run."""
        session = DeferredFailureSession(fail_at=2)

        with pytest.raises(MaterializationError) as exc_info:
            GraphMaterializer(session).materialize(
                [Triple(subject="Paris", object="France", relationship="capital_of")]
            )

        assert len(session.statements) == 3
        assert exc_info.value.writes_committed == 2
        assert exc_info.value.graph.edges == []
        assert set(exc_info.value.graph.nodes) == {"Paris", "France"}
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    def test_deferred_failure_on_node_write(self):
        session = DeferredFailureSession(fail_at=0)

        with pytest.raises(MaterializationError) as exc_info:
            GraphMaterializer(session).materialize(
                [Triple(subject="Paris", object="France", relationship="capital_of")]
            )

        assert len(session.statements) == 1
        assert exc_info.value.writes_committed == 0
        assert exc_info.value.graph.nodes == {}

    def test_empty_input(self):
        session = FakeSession()
        graph = GraphMaterializer(session).materialize([])

        assert graph.nodes == {}
        assert session.statements == []

    @pytest.mark.parametrize("label", ["Entity) DETACH DELETE (n", "has space", ""])
    def test_invalid_label_rejected(self, label):
        with pytest.raises(ValueError):
            GraphMaterializer(FakeSession(), label=label)


class TestCheckIdentifier:
    """Tests for check_identifier."""

    @pytest.mark.parametrize("value", ["Entity", "RELATION", "has_underscore_2"])
    def test_accepts_plain_identifiers(self, value):
        assert check_identifier(value) == value

    @pytest.mark.parametrize("value", ["a-b", "a b", "", "x`y"])
    def test_rejects_other_text(self, value):
        with pytest.raises(ValueError):
            check_identifier(value)
