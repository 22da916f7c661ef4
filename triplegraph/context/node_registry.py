"""
Run-local node registry.

Maps exact display names to GraphNodes for the duration of one run.
"""

from typing import Callable

from ..schema.graph import GraphNode
from ..utils.ids import new_node_id


class NodeRegistry:
    """
    Mint one node id per distinct name within a run.

    Names are matched exactly (no case folding, no trimming). The registry
    never consults the graph store, so a later run mints new ids for the
    same names.
    """

    def __init__(self, id_factory: Callable[[str], str] = new_node_id) -> None:
        """
        Initialize registry.

        Args:
            id_factory: Builds an id from a display name
        """
        self.nodes: dict[str, GraphNode] = {}
        self._id_factory = id_factory

    def register(self, name: str) -> tuple[GraphNode, bool]:
        """
        Return the node for a name, creating it on first sight.

        Returns:
            (node, created) where created is True for a newly minted node
        """
        existing = self.nodes.get(name)
        if existing is not None:
            return existing, False

        node = GraphNode(display_name=name, id=self._id_factory(name))
        self.nodes[name] = node
        return node, True

