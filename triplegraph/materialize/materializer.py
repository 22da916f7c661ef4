"""
Graph materialization.

Writes the nodes and edges of one run into the graph store through a single
session: every node first, then every edge.
"""

import logging
from typing import Iterable, Optional

from ..context.node_registry import NodeRegistry
from ..errors import MaterializationError
from ..schema.graph import GraphEdge, RunGraph
from ..schema.triples import Triple
from ..store.neo4j_store import GraphSession

logger = logging.getLogger(__name__)

# Labels and relationship types cannot be parameterized in Cypher; they are
# validated identifiers interpolated into the statement.
CREATE_NODE = "CREATE (n:{label} {{id: $id, name: $name}})"
CREATE_EDGE = (
    "MATCH (a:{label} {{id: $source_id}}), (b:{label} {{id: $target_id}}) "
    "CREATE (a)-[r:{rel} {{type: $type}}]->(b)"
)


def check_identifier(value: str) -> str:
    """Return a label or relationship type if it is safe to interpolate."""
    if not value.replace("_", "").isalnum():
        raise ValueError(f"Invalid Cypher identifier: {value!r}")
    return value


class GraphMaterializer:
    """
    Turn deduplicated triples into graph store records.

    Node identity is local to the run: the same name seen twice in one run
    maps to one node, but nothing is looked up in the store.
    """

    def __init__(
        self,
        session: GraphSession,
        label: str = "Entity",
        relationship: str = "RELATION",
        registry: Optional[NodeRegistry] = None,
    ) -> None:
        """
        Initialize materializer.

        Args:
            session: Open graph store session
            label: Node label for entity records
            relationship: Relationship type for edges; the triple's
                relationship string is stored in its `type` property
            registry: Node registry (a fresh one per run by default)
        """
        self.session = session
        self.registry = registry if registry is not None else NodeRegistry()
        self._node_stmt = CREATE_NODE.format(label=check_identifier(label))
        self._edge_stmt = CREATE_EDGE.format(
            label=check_identifier(label),
            rel=check_identifier(relationship),
        )
        self.writes = 0

    def materialize(self, triples: Iterable[Triple]) -> RunGraph:
        """
        Write nodes then edges for the given triples.

        Args:
            triples: Deduplicated triples

        Returns:
            The nodes and edges written

        Raises:
            MaterializationError: On the first failed write. Remaining writes
                are skipped; earlier writes stay in the store.
        """
        triples = list(triples)
        graph = RunGraph()

        # Node pass
        for triple in triples:
            for name in (triple.subject, triple.object):
                node, created = self.registry.register(name)
                if not created:
                    continue
                self._write(self._node_stmt, {"id": node.id, "name": node.display_name}, graph)
                graph.add_node(node)

        # Edge pass
        for triple in triples:
            edge = GraphEdge(
                source_node_id=self.registry.nodes[triple.subject].id,
                target_node_id=self.registry.nodes[triple.object].id,
                type=triple.relationship,
            )
            self._write(
                self._edge_stmt,
                {
                    "source_id": edge.source_node_id,
                    "target_id": edge.target_node_id,
                    "type": edge.type,
                },
                graph,
            )
            graph.add_edge(edge)

        logger.info("Materialized %s", graph.summary())
        return graph

    def _write(self, statement: str, parameters: dict, graph: RunGraph) -> None:
        try:
            # A failed write raises from consume(), not from run().
            self.session.run(statement, parameters).consume()
        except Exception as e:
            raise MaterializationError(
                f"Graph write failed after {self.writes} writes: {e}",
                graph=graph,
                writes_committed=self.writes,
            ) from e
        self.writes += 1
