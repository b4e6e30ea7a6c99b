"""
Seed data: developers, the technologies they use, and LOVES edges.

Indexes are created first (auto-commit), then nodes, then relationships.
The first failing statement aborts the seed and its error propagates.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from devgraph.client import DEFAULT_DATABASE, run_autocommit, run_query

logger = logging.getLogger(__name__)

INDEXES = [
    "CREATE INDEX ON :Developer(id);",
    "CREATE INDEX ON :Technology(id);",
    "CREATE INDEX ON :Developer(name);",
    "CREATE INDEX ON :Technology(name);",
]

DEVELOPERS: List[Dict[str, Any]] = [
    {"id": 1, "name": "Andy"},
    {"id": 2, "name": "John"},
    {"id": 3, "name": "Michael"},
]

TECHNOLOGIES: List[Dict[str, Any]] = [
    {"id": 1, "name": "Memgraph", "description": "Fastest graph DB in the world!"},
    {"id": 2, "name": "Go", "description": "Go programming language "},
    {"id": 3, "name": "Docker", "description": "Docker containerization engine"},
    {"id": 4, "name": "Kubernetes", "description": "Kubernetes container orchestration engine"},
    {"id": 5, "name": "Python", "description": "Python programming language"},
]

# (developer id, technology id)
LOVES: List[Tuple[int, int]] = [
    (1, 1),
    (2, 3),
    (3, 1),
    (1, 5),
    (2, 2),
    (3, 4),
]

CREATE_DEVELOPER = "CREATE (n:Developer {id: $id, name: $name});"
CREATE_TECHNOLOGY = (
    "CREATE (n:Technology {id: $id, name: $name, "
    "description: $description, createdAt: Date()});"
)
CREATE_LOVES = (
    "MATCH (a:Developer {id: $developer_id}), (b:Technology {id: $technology_id}) "
    "CREATE (a)-[r:LOVES]->(b);"
)


@dataclass
class SeedSummary:
    """Number of statements executed per seeding phase."""
    indexes: int = 0
    nodes: int = 0
    relationships: int = 0


def create_indexes(driver, database: str = DEFAULT_DATABASE) -> int:
    for statement in INDEXES:
        run_autocommit(driver, statement, database=database)
    logger.info("Created %d indexes", len(INDEXES))
    return len(INDEXES)


def insert_data(driver, database: str = DEFAULT_DATABASE) -> SeedSummary:
    """Load the seed graph and return how many statements ran."""
    summary = SeedSummary()
    summary.indexes = create_indexes(driver, database)

    for dev in DEVELOPERS:
        run_query(driver, CREATE_DEVELOPER, dev, database=database)
        summary.nodes += 1

    for tech in TECHNOLOGIES:
        run_query(driver, CREATE_TECHNOLOGY, tech, database=database)
        summary.nodes += 1

    for developer_id, technology_id in LOVES:
        run_query(
            driver,
            CREATE_LOVES,
            {"developer_id": developer_id, "technology_id": technology_id},
            database=database,
        )
        summary.relationships += 1

    logger.info("****** All data inserted *******",
                extra={"nodes": summary.nodes, "edges": summary.relationships})
    return summary
