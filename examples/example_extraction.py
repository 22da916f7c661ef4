"""
Example: Extract triples from a few documents and write them to Neo4j.

Requires NEO4J_URI, NEO4J_USERNAME, NEO4J_PASSWORD and a model key for
LiteLLM (e.g. GEMINI_API_KEY) in the environment or a .env file.
Pass --dry-run to skip the Neo4j write.
"""

import logging
import sys

from dotenv import load_dotenv

from triplegraph.pipeline import Pipeline, PipelineConfig
from triplegraph.schema.chunks import Chunk


def main():
    """Run example extraction."""
    logging.basicConfig(level=logging.INFO)
    load_dotenv()

    documents = [
        Chunk(content="The capital of France is Paris.", metadata={"source": "knowledge_base_1"}),
        Chunk(content="JavaScript is a versatile programming language.", metadata={"source": "web_doc_1"}),
        Chunk(
            content=(
                "Elon Musk founded SpaceX with the goal of making Mars colonization "
                "possible. Tesla, another company he leads, focuses on electric vehicles."
            ),
            metadata={"source": "web_doc_2"},
        ),
    ]

    pipeline = Pipeline(config=PipelineConfig(throttle_seconds=1.0))

    print("Extracting triples...")
    state = pipeline.run(documents, materialize="--dry-run" not in sys.argv)

    print("\n## Unique triples")
    for triple in state.triples:
        print(f"  - {triple}")

    if state.graph is not None:
        print(f"\n{state.graph.summary()}")
        for edge in state.graph.edges:
            print(f"  - {edge.source_node_id} --[{edge.type}]--> {edge.target_node_id}")

    for error in state.errors:
        print(f"ERROR: {error}")

    print(f"\n{state.summary()}")


if __name__ == "__main__":
    main()
