"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
NetClient, a product of Garudex Labs

Network reachability monitor.

A single background thread periodically runs a probe and records whether
the network looks reachable. Requests read :attr:`NetworkMonitor.is_connected`
before dispatch and short-circuit when it is ``False``. The flag is a best
effort hint and may be stale.
"""

from __future__ import annotations

import socket
import threading
from typing import Callable, Optional, Tuple

from netclient.logging_config import get_logger

logger = get_logger(__name__)

Probe = Callable[[], bool]

DEFAULT_PROBE_ADDRESS: Tuple[str, int] = ("1.1.1.1", 53)


def socket_probe(address: Tuple[str, int] = DEFAULT_PROBE_ADDRESS, timeout: float = 3.0) -> Probe:
    """Return a probe that succeeds when a TCP connection to ``address`` opens."""

    def probe() -> bool:
        try:
            with socket.create_connection(address, timeout=timeout):
                return True
        except OSError:
            return False

    return probe


class NetworkMonitor:
    """Tracks network reachability on a daemon thread.

    The monitor starts optimistic (``is_connected`` is ``True``) until the
    first probe completes.

    Args:
        probe: Zero-argument callable returning ``True`` when reachable.
        interval: Seconds between probes.
    """

    def __init__(self, probe: Optional[Probe] = None, interval: float = 10.0) -> None:
        self._probe = probe or socket_probe()
        self._interval = interval
        self._connected = True
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def is_connected(self) -> bool:
        return self._connected

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def check_now(self) -> bool:
        """Run the probe synchronously and record its result."""
        try:
            connected = bool(self._probe())
        except Exception as exc:
            logger.warning(f"reachability probe raised: {exc}")
            connected = False
        if connected != self._connected:
            logger.info(
                "reachability_changed",
                connected=connected,
            )
        self._connected = connected
        return connected

    def start(self) -> None:
        """Start the background probe thread. Calling twice is a no-op."""
        if self.is_running:
            return
        self._stop_event.clear()
        self._thread = threading.Thread(
            target=self._run, name="NetworkMonitor", daemon=True
        )
        self._thread.start()
        logger.debug("NetworkMonitor started")

    def stop(self) -> None:
        """Stop the background thread and wait for it to exit."""
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout=self._interval + 1.0)
            self._thread = None
            logger.debug("NetworkMonitor stopped")

    def _run(self) -> None:
        while not self._stop_event.is_set():
            self.check_now()
            self._stop_event.wait(self._interval)
