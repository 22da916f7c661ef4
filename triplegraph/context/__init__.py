"""
Run-local context: node identity within one pipeline run.
"""

from .node_registry import NodeRegistry

__all__ = ["NodeRegistry"]
