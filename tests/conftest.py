"""Shared pytest fixtures for devgraph tests."""

import importlib.util
import os
import sys
import time
from pathlib import Path
from unittest.mock import MagicMock

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


# ---------------------------------------------------------------------------
# Module loaders (scripts/ is not an importable package)
# ---------------------------------------------------------------------------

def _load_module(name: str, filepath: Path):
    """Load a Python module from an absolute path."""
    spec = importlib.util.spec_from_file_location(name, str(filepath))
    mod = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(mod)
    return mod


@pytest.fixture
def reset_graph_module():
    return _load_module("reset_graph", PROJECT_ROOT / "scripts" / "reset_graph.py")


@pytest.fixture
def check_connection_module():
    return _load_module(
        "check_connection",
        PROJECT_ROOT / "scripts" / "diagnostics" / "check_connection.py",
    )


# ---------------------------------------------------------------------------
# Unit-test fixtures (no external services)
# ---------------------------------------------------------------------------

class FlakyProbe:
    """Connectivity probe that fails a fixed number of times, then succeeds.

    ``failures=None`` fails forever. Records the monotonic time of each call.
    """

    def __init__(self, failures=None, error=ConnectionRefusedError("connection refused")):
        self.failures = failures
        self.error = error
        self.calls = []

    @property
    def call_count(self):
        return len(self.calls)

    def __call__(self):
        self.calls.append(time.monotonic())
        if self.failures is None or len(self.calls) <= self.failures:
            raise self.error


@pytest.fixture
def flaky_probe():
    """Factory for FlakyProbe instances."""
    return FlakyProbe


@pytest.fixture
def mock_driver():
    """Return a mocked Bolt driver.

    ``execute_query`` returns a single record ``[0]``; sessions used as
    context managers yield ``driver.mock_session``.
    """
    driver = MagicMock()
    driver.execute_query.return_value = ([[0]], MagicMock(), ["count"])
    session = MagicMock()
    driver.session.return_value.__enter__ = MagicMock(return_value=session)
    driver.session.return_value.__exit__ = MagicMock(return_value=False)
    driver.mock_session = session
    return driver


# ---------------------------------------------------------------------------
# Integration-test fixtures
# ---------------------------------------------------------------------------

@pytest.fixture(scope="session")
def memgraph_connection_params():
    """Return Memgraph connection parameters from environment or defaults."""
    return {
        "uri": os.environ.get("MEMGRAPH_URI", "bolt://localhost:7687"),
        "user": os.environ.get("MEMGRAPH_USER", "memgraph"),
        "password": os.environ.get("MEMGRAPH_PASSWORD", "memgraph"),
        "database": os.environ.get("MEMGRAPH_DATABASE", "memgraph"),
    }


@pytest.fixture(scope="session")
def live_driver(memgraph_connection_params):
    """Return a real driver once Memgraph is ready (skips if not available)."""
    import config
    from devgraph.client import open_driver
    from devgraph.readiness import ConnectivityTimeout, wait_for_driver

    with open_driver(
        memgraph_connection_params["uri"],
        memgraph_connection_params["user"],
        memgraph_connection_params["password"],
    ) as driver:
        try:
            wait_for_driver(
                driver,
                max_attempts=config.TEST_WAIT_MAX_ATTEMPTS,
                interval=config.WAIT_INTERVAL,
            )
        except ConnectivityTimeout as exc:
            pytest.skip(f"Memgraph not available: {exc}")
        yield driver


@pytest.fixture
def database(memgraph_connection_params):
    return memgraph_connection_params["database"]


@pytest.fixture
def clean_graph(live_driver, database):
    """Start each test with an empty graph and leave it empty afterwards."""
    from devgraph.client import delete_everything

    delete_everything(live_driver, database)
    yield live_driver
    delete_everything(live_driver, database)
