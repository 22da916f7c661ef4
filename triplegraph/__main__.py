"""Run the triple pipeline on a text file or inline text.

Usage:
    python -m triplegraph notes.txt
    python -m triplegraph "The capital of France is Paris." --dry-run
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .agents.base import DEFAULT_MODEL
from .pipeline import Pipeline, PipelineConfig
from .store import Neo4jConfig, Neo4jConnection


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="triplegraph",
        description="Extract subject-relationship-object triples and write them to Neo4j",
    )
    parser.add_argument("source", help="Path to a text file, or the text itself")
    parser.add_argument("--model", default=DEFAULT_MODEL, help="LiteLLM model identifier")
    parser.add_argument(
        "--throttle", type=float, default=1.0, help="Seconds between model calls"
    )
    parser.add_argument("--chunk-size", type=int, default=1000)
    parser.add_argument("--chunk-overlap", type=int, default=200)
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Extract and deduplicate only; do not write to Neo4j",
    )
    parser.add_argument("--env-file", default=None, help="Path to .env file")
    parser.add_argument("--log-level", default="INFO")
    return parser


def read_source(source: str) -> tuple[str, str]:
    """Return (text, source label) for a file path or inline text."""
    path = Path(source)
    try:
        is_file = path.is_file()
    except OSError:
        # Long inline text is not a valid path (ENAMETOOLONG)
        is_file = False
    if is_file:
        return path.read_text(encoding="utf-8"), str(path)
    return source, "text"


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    load_dotenv(args.env_file)

    config = PipelineConfig(
        model=args.model,
        throttle_seconds=args.throttle,
        chunk_size=args.chunk_size,
        chunk_overlap=args.chunk_overlap,
    )

    def connect() -> Neo4jConnection:
        connection = Neo4jConnection(Neo4jConfig.from_env(args.env_file))
        try:
            connection.verify()
        except Exception:
            connection.close()
            raise
        return connection

    text, label = read_source(args.source)
    pipeline = Pipeline(config=config, connect=connect)
    state = pipeline.run_text(text, {"source": label}, materialize=not args.dry_run)

    print(f"\nUnique triples ({len(state.triples)}):")
    for triple in state.triples:
        print(f"  - {triple}")

    if state.graph is not None:
        print(f"\n{state.graph.summary()}")

    for error in state.errors:
        print(f"ERROR: {error}", file=sys.stderr)

    return 0 if state.succeeded else 1


if __name__ == "__main__":
    sys.exit(main())
