"""
Neo4j connection and session handling.

The pipeline only needs a session that can run one parameterized statement at
a time and be closed. Connections are created per run and released by
open_session on every exit path.
"""

import logging
import os
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional, Protocol

from dotenv import load_dotenv
from neo4j import GraphDatabase

from ..errors import ConfigError

logger = logging.getLogger(__name__)


class GraphSession(Protocol):
    """A single-writer session on the graph store."""

    def run(self, statement: str, parameters: Optional[dict[str, Any]] = None) -> Any: ...

    def close(self) -> None: ...


class GraphConnection(Protocol):
    """Something that hands out sessions and can be closed."""

    def session(self) -> GraphSession: ...

    def close(self) -> None: ...


@dataclass
class Neo4jConfig:
    uri: str
    user: str
    password: str
    database: str = "neo4j"

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "Neo4jConfig":
        """
        Build config from NEO4J_* environment variables.

        A .env file is loaded first (existing variables win).

        Raises:
            ConfigError: If NEO4J_URI, NEO4J_USERNAME or NEO4J_PASSWORD is unset
        """
        load_dotenv(env_file)

        missing = [
            name
            for name in ("NEO4J_URI", "NEO4J_USERNAME", "NEO4J_PASSWORD")
            if not os.environ.get(name)
        ]
        if missing:
            raise ConfigError(f"Missing Neo4j settings: {', '.join(missing)}")

        return cls(
            uri=os.environ["NEO4J_URI"],
            user=os.environ["NEO4J_USERNAME"],
            password=os.environ["NEO4J_PASSWORD"],
            database=os.environ.get("NEO4J_DATABASE", "neo4j"),
        )


class Neo4jConnection:
    """
    Neo4j driver wrapper.

    Dependency: neo4j>=5.
    """

    def __init__(self, cfg: Neo4jConfig):
        self.cfg = cfg
        self._driver = GraphDatabase.driver(cfg.uri, auth=(cfg.user, cfg.password))

    def verify(self) -> Any:
        """Check connectivity and return server info."""
        info = self._driver.get_server_info()
        logger.info("Connection established to Neo4j at %s", info.address)
        return info

    def session(self) -> GraphSession:
        return self._driver.session(database=self.cfg.database)

    def close(self) -> None:
        self._driver.close()


@contextmanager
def open_session(connect: Callable[[], GraphConnection]) -> Iterator[GraphSession]:
    """
    Open a connection and a session, yielding the session.

    The session and then the connection are closed exactly once, whether the
    body returns or raises.
    """
    connection = connect()
    try:
        session = connection.session()
        try:
            yield session
        finally:
            session.close()
            logger.debug("Graph session closed")
    finally:
        connection.close()
        logger.debug("Graph connection closed")
