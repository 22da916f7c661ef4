"""
triplegraph - LLM-assisted triple extraction into a Neo4j knowledge graph.

Core modules:
- chunking: Split raw text into overlapping chunks
- schema: Chunk, Triple and graph node/edge definitions
- agents: LLM agents (chunk summarizer, triple extractor)
- extraction: Call throttle and triple deduplication
- context: Run-local node identity
- materialize: Write nodes and edges into the graph store
- store: Neo4j connection and session handling
- pipeline: Orchestration and state management
"""

__version__ = "0.1.0"
