"""
Wait for Memgraph and report basic stats.

Usage:
    python scripts/diagnostics/check_connection.py
    python scripts/diagnostics/check_connection.py --uri bolt://host:7687 --max-attempts 5
"""

import argparse
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import config
from devgraph.client import count_all_edges, count_all_nodes, open_driver, run_query
from devgraph.logs import setup_logging
from devgraph.readiness import ConnectivityTimeout, wait_for_driver


def main():
    parser = argparse.ArgumentParser(description="Test Memgraph connection")
    parser.add_argument("--uri", default=config.MEMGRAPH_URI)
    parser.add_argument("--user", default=config.MEMGRAPH_USER)
    parser.add_argument("--password", default=config.MEMGRAPH_PASSWORD)
    parser.add_argument("--database", default=config.MEMGRAPH_DATABASE)
    parser.add_argument("--max-attempts", type=int, default=config.WAIT_MAX_ATTEMPTS)
    parser.add_argument("--interval", type=float, default=config.WAIT_INTERVAL)
    args = parser.parse_args()

    setup_logging(config.LOG_LEVEL, config.LOG_FORMAT)

    with open_driver(args.uri, args.user, args.password) as driver:
        try:
            wait_for_driver(driver, max_attempts=args.max_attempts, interval=args.interval)
        except ConnectivityTimeout as exc:
            print(f"[fail] {args.uri}: {exc}")
            sys.exit(1)

        ping = run_query(driver, "RETURN 1 AS ok;", database=args.database)[0]["ok"]
        nodes = count_all_nodes(driver, args.database)
        edges = count_all_edges(driver, args.database)
        print(f"[ok] ping: {ping}; nodes: {nodes}; edges: {edges}")
    print("[done] connection test complete")


if __name__ == "__main__":
    main()
