"""
Delete every node and relationship in the graph.

Usage:
    python scripts/reset_graph.py --yes
    python scripts/reset_graph.py --yes --uri bolt://host:7687
"""

import argparse
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import config
from devgraph.client import count_all_nodes, delete_everything, open_driver
from devgraph.logs import setup_logging
from devgraph.readiness import ConnectivityTimeout, wait_for_driver

logger = logging.getLogger(__name__)


def main() -> None:
    parser = argparse.ArgumentParser(description="Remove all data from Memgraph.")
    parser.add_argument("--yes", action="store_true", help="Confirm deletion.")
    parser.add_argument("--uri", default=config.MEMGRAPH_URI)
    parser.add_argument("--user", default=config.MEMGRAPH_USER)
    parser.add_argument("--password", default=config.MEMGRAPH_PASSWORD)
    parser.add_argument("--database", default=config.MEMGRAPH_DATABASE)
    parser.add_argument("--max-attempts", type=int, default=config.WAIT_MAX_ATTEMPTS)
    parser.add_argument("--interval", type=float, default=config.WAIT_INTERVAL)
    args = parser.parse_args()

    if not args.yes:
        parser.error("Refusing to delete data without --yes.")

    setup_logging(config.LOG_LEVEL, config.LOG_FORMAT)

    with open_driver(args.uri, args.user, args.password) as driver:
        try:
            wait_for_driver(driver, max_attempts=args.max_attempts, interval=args.interval)
        except ConnectivityTimeout as exc:
            logger.error("Could not connect to memgraph: %s", exc)
            sys.exit(1)

        before = count_all_nodes(driver, args.database)
        delete_everything(driver, args.database)
        logger.info("Deleted %d nodes from %s", before, args.uri)


if __name__ == "__main__":
    main()
