"""
Thin query-execution helpers around the Bolt driver.

Every function takes the driver explicitly; the caller owns its lifecycle,
normally through :func:`open_driver`.
"""

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional

from neo4j import GraphDatabase

logger = logging.getLogger(__name__)

DEFAULT_DATABASE = "memgraph"


@contextmanager
def open_driver(uri: str, user: str, password: str) -> Iterator[Any]:
    """Create a driver with basic auth and close it on every exit path."""
    driver = GraphDatabase.driver(uri, auth=(user, password))
    logger.debug("Driver created", extra={"uri": uri})
    try:
        yield driver
    finally:
        driver.close()


def run_query(
    driver,
    statement: str,
    parameters: Optional[Dict[str, Any]] = None,
    database: str = DEFAULT_DATABASE,
) -> List[Any]:
    """Run a statement in a managed transaction and return its records."""
    records, _, _ = driver.execute_query(
        statement, parameters or {}, database_=database
    )
    return records


def run_autocommit(
    driver,
    statement: str,
    parameters: Optional[Dict[str, Any]] = None,
    database: str = DEFAULT_DATABASE,
) -> None:
    """Run a statement in an implicit (auto-commit) transaction.

    Memgraph refuses index and constraint DDL inside explicit transactions,
    so those statements go through a plain session run.
    """
    with driver.session(database=database) as session:
        session.run(statement, parameters or {}).consume()


def _single_count(driver, statement: str, database: str) -> int:
    records = run_query(driver, statement, database=database)
    return int(records[0][0])


def count_all_nodes(driver, database: str = DEFAULT_DATABASE) -> int:
    return _single_count(driver, "MATCH (n) RETURN count(n);", database)


def count_all_edges(driver, database: str = DEFAULT_DATABASE) -> int:
    return _single_count(driver, "MATCH ()-[]->() RETURN count(*);", database)


def delete_everything(driver, database: str = DEFAULT_DATABASE) -> None:
    """Delete all nodes and relationships."""
    logger.info("Clearing existing graph data...")
    run_query(driver, "MATCH (n) DETACH DELETE n;", database=database)
    logger.info("Graph cleared.")
