"""
Graph store access (Neo4j).
"""

from .neo4j_store import (
    GraphConnection,
    GraphSession,
    Neo4jConfig,
    Neo4jConnection,
    open_session,
)

__all__ = [
    "GraphConnection",
    "GraphSession",
    "Neo4jConfig",
    "Neo4jConnection",
    "open_session",
]
