"""
Seed a Memgraph instance and report how big the graph is.

Waits for the database to accept Bolt connections, loads the developer /
technology seed graph, then logs total node and edge counts.

Usage:
    python main.py
    python main.py --uri bolt://host:7687 --max-attempts 30
    python main.py --skip-seed
"""

import argparse
import logging
import signal
import sys
import threading
from typing import List, Optional

from neo4j.exceptions import Neo4jError, DriverError

import config
from devgraph.client import count_all_edges, count_all_nodes, open_driver
from devgraph.logs import setup_logging
from devgraph.readiness import ConnectivityTimeout, WaitCancelled, wait_for_driver
from devgraph.seed import insert_data

logger = logging.getLogger("devgraph")


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return number


def _non_negative_float(value: str) -> float:
    number = float(value)
    if not number >= 0:
        raise argparse.ArgumentTypeError(f"must be a non-negative number, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Seed Memgraph and count its contents")
    parser.add_argument("--uri", default=config.MEMGRAPH_URI)
    parser.add_argument("--user", default=config.MEMGRAPH_USER)
    parser.add_argument("--password", default=config.MEMGRAPH_PASSWORD)
    parser.add_argument("--database", default=config.MEMGRAPH_DATABASE)
    parser.add_argument("--max-attempts", type=_positive_int, default=config.WAIT_MAX_ATTEMPTS)
    parser.add_argument("--interval", type=_non_negative_float, default=config.WAIT_INTERVAL,
                        help="Seconds between connectivity checks")
    parser.add_argument("--skip-seed", action="store_true",
                        help="Only wait and count, do not insert seed data")
    return parser


def _install_stop_handlers(stop_event: threading.Event) -> dict:
    """Set ``stop_event`` on SIGINT/SIGTERM. Returns the previous handlers."""
    def _handle(signum, frame):
        logger.warning("Received signal %d, stopping", signum)
        stop_event.set()

    previous = {}
    for sig in (signal.SIGINT, signal.SIGTERM):
        previous[sig] = signal.signal(sig, _handle)
    return previous


def _stopped(stop_event: Optional[threading.Event], phase: str) -> bool:
    if stop_event is not None and stop_event.is_set():
        logger.warning("Stopped before %s", phase)
        return True
    return False


def run(args: argparse.Namespace, stop_event: Optional[threading.Event] = None) -> int:
    """Wait, seed and count. Returns a process exit code.

    A set ``stop_event`` is checked between phases, so a signal received
    while seeding or counting ends the run with 130.
    """
    try:
        with open_driver(args.uri, args.user, args.password) as driver:
            return _run_with_driver(driver, args, stop_event)
    except (Neo4jError, DriverError, ValueError) as exc:
        logger.error("Graph operation failed: %s", exc,
                     extra={"error_type": type(exc).__name__, "uri": args.uri},
                     exc_info=True)
        return 1


def _run_with_driver(driver, args: argparse.Namespace,
                     stop_event: Optional[threading.Event]) -> int:
    try:
        wait_for_driver(
            driver,
            max_attempts=args.max_attempts,
            interval=args.interval,
            stop_event=stop_event,
        )
    except ConnectivityTimeout as exc:
        logger.error("Could not connect to memgraph: %s", exc,
                     extra={"attempt": exc.attempts, "uri": args.uri})
        return 1
    except WaitCancelled as exc:
        logger.warning("%s", exc, extra={"attempt": exc.attempts})
        return 130

    if not args.skip_seed:
        if _stopped(stop_event, "seeding"):
            return 130
        insert_data(driver, args.database)

    if _stopped(stop_event, "counting nodes"):
        return 130
    nodes = count_all_nodes(driver, args.database)
    logger.info("Total nodes in the graph: %d", nodes, extra={"nodes": nodes})

    if _stopped(stop_event, "counting edges"):
        return 130
    edges = count_all_edges(driver, args.database)
    logger.info("Total edges in the graph: %d", edges, extra={"edges": edges})

    if _stopped(stop_event, "exit"):
        return 130
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(config.LOG_LEVEL, config.LOG_FORMAT)

    stop_event = threading.Event()
    previous = _install_stop_handlers(stop_event)
    try:
        return run(args, stop_event)
    finally:
        for sig, handler in previous.items():
            signal.signal(sig, handler)


if __name__ == "__main__":
    sys.exit(main())
