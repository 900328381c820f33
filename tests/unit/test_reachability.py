"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
NetClient, a product of Garudex Labs

Unit tests for the network reachability monitor.
"""

import socket
import threading

from netclient.core.reachability import NetworkMonitor, socket_probe


class TestNetworkMonitor:
    """Test NetworkMonitor state handling."""

    def test_starts_optimistic(self):
        """Test the monitor reports connected before any probe."""
        monitor = NetworkMonitor(probe=lambda: False)
        assert monitor.is_connected is True
        assert monitor.is_running is False

    def test_check_now_records_result(self):
        """Test check_now stores the probe outcome."""
        state = {"up": False}
        monitor = NetworkMonitor(probe=lambda: state["up"])

        assert monitor.check_now() is False
        assert monitor.is_connected is False

        state["up"] = True
        assert monitor.check_now() is True
        assert monitor.is_connected is True

    def test_probe_exception_counts_as_offline(self):
        """Test a raising probe is treated as unreachable."""

        def probe():
            raise OSError("no route")

        monitor = NetworkMonitor(probe=probe)
        assert monitor.check_now() is False
        assert monitor.is_connected is False

    def test_start_probes_in_background(self):
        """Test the background thread runs the probe and can be stopped."""
        probed = threading.Event()

        def probe():
            probed.set()
            return False

        monitor = NetworkMonitor(probe=probe, interval=0.05)
        monitor.start()
        try:
            assert probed.wait(timeout=2.0)
            assert monitor.is_running
        finally:
            monitor.stop()

        assert monitor.is_running is False
        assert monitor.is_connected is False

    def test_start_is_idempotent(self):
        """Test starting twice keeps one thread."""
        monitor = NetworkMonitor(probe=lambda: True, interval=0.05)
        monitor.start()
        try:
            first = monitor._thread
            monitor.start()
            assert monitor._thread is first
        finally:
            monitor.stop()

    def test_stop_without_start(self):
        """Test stopping an idle monitor is harmless."""
        monitor = NetworkMonitor(probe=lambda: True)
        monitor.stop()
        assert monitor.is_running is False


class TestSocketProbe:
    """Test the default TCP probe."""

    def test_reachable_listener(self):
        """Test the probe succeeds against a listening socket."""
        server = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        server.bind(("127.0.0.1", 0))
        server.listen(1)
        try:
            probe = socket_probe(server.getsockname(), timeout=1.0)
            assert probe() is True
        finally:
            server.close()

    def test_unreachable_port(self):
        """Test the probe fails when nothing listens."""
        server = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        server.bind(("127.0.0.1", 0))
        address = server.getsockname()
        server.close()

        assert socket_probe(address, timeout=1.0)() is False
