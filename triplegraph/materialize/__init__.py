"""
Materialization of triples into the graph store.
"""

from .materializer import GraphMaterializer

__all__ = ["GraphMaterializer"]
