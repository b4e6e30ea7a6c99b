"""
Readiness wait for an external dependency.

Polls a connectivity probe on a fixed interval until it succeeds or the
attempt budget is spent. Used at process start before any data operations
and by the integration test harness.

Usage:
    from devgraph.readiness import wait_for_driver, ConnectivityTimeout

    with open_driver(uri, user, password) as driver:
        wait_for_driver(driver, max_attempts=100, interval=1.0)
"""

import logging
import threading
import time
from typing import Callable, Optional

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 100
DEFAULT_INTERVAL = 1.0


class ConnectivityTimeout(Exception):
    """Raised when every allowed probe failed."""

    def __init__(self, attempts: int, last_error: Optional[BaseException] = None):
        self.attempts = attempts
        self.last_error = last_error
        super().__init__(
            f"Could not connect even though it took {attempts} attempts"
        )


class WaitCancelled(Exception):
    """Raised when the stop event is set while waiting between probes."""

    def __init__(self, attempts: int):
        self.attempts = attempts
        super().__init__(f"Readiness wait cancelled after {attempts} attempts")


def wait_for(
    probe: Callable[[], object],
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    interval: float = DEFAULT_INTERVAL,
    stop_event: Optional[threading.Event] = None,
    name: str = "dependency",
) -> None:
    """Block until ``probe()`` returns without raising.

    ``max_attempts`` is the exact number of probes made before giving up;
    there is no sleep after the last failed probe. Every exception raised by
    the probe counts as one failed attempt, whatever its type.

    If ``stop_event`` is given, the pause between probes waits on it instead
    of sleeping, and :class:`WaitCancelled` is raised as soon as it is set.
    """
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")
    if not interval >= 0:
        raise ValueError(f"interval must not be negative, got {interval}")

    attempts = 0
    while True:
        attempts += 1
        try:
            probe()
        except Exception as exc:
            logger.warning(
                "Could not connect to %s (attempt %d/%d): %s",
                name, attempts, max_attempts, exc,
                extra={"attempt": attempts, "error_type": type(exc).__name__},
            )
            if attempts >= max_attempts:
                logger.error("Giving up on %s after %d attempts", name, attempts,
                             extra={"attempt": attempts})
                raise ConnectivityTimeout(attempts, exc) from exc
        else:
            logger.info("Connected to %s", name, extra={"attempt": attempts})
            return

        if stop_event is None:
            time.sleep(interval)
        elif stop_event.wait(interval):
            raise WaitCancelled(attempts)


def wait_for_driver(driver, **kwargs) -> None:
    """Wait until a Bolt driver can reach its server."""
    kwargs.setdefault("name", "memgraph")
    wait_for(driver.verify_connectivity, **kwargs)
