"""
Graph node and edge definitions for a single materialization run.
"""

from pydantic import BaseModel, Field, PrivateAttr


class GraphNode(BaseModel):
    """An entity node. `id` is minted once per run from the display name."""

    display_name: str = Field(..., min_length=1)
    id: str

    def __hash__(self) -> int:
        return hash(self.id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GraphNode):
            return False
        return self.id == other.id


class GraphEdge(BaseModel):
    """A directed relationship between two nodes of the same run."""

    source_node_id: str
    target_node_id: str
    type: str


class RunGraph(BaseModel):
    """
    Nodes and edges produced by one materialization run.

    Nodes are keyed by display name; edges must reference registered nodes.
    """

    nodes: dict[str, GraphNode] = Field(default_factory=dict)
    edges: list[GraphEdge] = Field(default_factory=list)

    _node_ids: set[str] = PrivateAttr(default_factory=set)

    def add_node(self, node: GraphNode) -> None:
        """Add a node to the graph."""
        self.nodes[node.display_name] = node
        self._node_ids.add(node.id)

    def add_edge(self, edge: GraphEdge) -> None:
        """Add an edge to the graph."""
        if edge.source_node_id not in self._node_ids:
            raise ValueError(f"Source node {edge.source_node_id} not found")
        if edge.target_node_id not in self._node_ids:
            raise ValueError(f"Target node {edge.target_node_id} not found")
        self.edges.append(edge)

    def summary(self) -> str:
        """Return a summary of the graph."""
        return f"RunGraph(nodes={len(self.nodes)}, edges={len(self.edges)})"
