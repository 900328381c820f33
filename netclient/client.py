"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
NetClient, a product of Garudex Labs

NetClient configuration object, builder and default instance.

Provides three ways to configure requests:
    - ``NetworkClient(base_url=...)``: explicit client passed to requests
    - ``NetworkClientBuilder().set_base_url(...).build()``: fluent setup
    - ``netclient.initialize(...)``: process-wide default used by requests
      created without a client

The base URL, response handler and monitor are read by requests at dispatch
time. Changing them while requests are in flight is not supported.
"""

from __future__ import annotations

import threading
from typing import Any, Callable, Dict, Mapping, Optional, Union

from netclient.adapters.base import BaseAdapter
from netclient.adapters.http import HttpAdapter
from netclient.config.settings import ClientSettings
from netclient.core.classifier import ResponseHandler
from netclient.core.reachability import NetworkMonitor, socket_probe
from netclient.core.request import NetworkRequest
from netclient.exceptions import InvalidConfigurationError
from netclient.logging_config import get_logger, setup_logging

logger = get_logger(__name__)

BaseURLProvider = Callable[[], Optional[str]]


class NetworkClient:
    """Configuration shared by the requests that run against it.

    Quick start::

        client = NetworkClient(base_url="https://postman-echo.com")
        response = await client.request(path="/get").response_json()

    Environment-dependent base URL, resolved on every request::

        client = NetworkClient(base_url=lambda: os.environ["API_BASE_URL"])

    Args:
        base_url: Base URL string or zero-argument callable returning one.
        response_handler: Replaces the default response classification.
        adapter: Transport adapter. Defaults to :class:`HttpAdapter`.
        monitor: Reachability monitor. Defaults to a socket-probing monitor,
            which only runs once :meth:`start` is called.
        default_headers: Headers added to every request before its own.
        timeout: Per-request timeout in seconds.
    """

    def __init__(
        self,
        base_url: Union[str, BaseURLProvider, None] = None,
        response_handler: Optional[ResponseHandler] = None,
        adapter: Optional[BaseAdapter] = None,
        monitor: Optional[NetworkMonitor] = None,
        default_headers: Optional[Mapping[str, str]] = None,
        timeout: float = 30.0,
    ) -> None:
        if timeout <= 0:
            raise InvalidConfigurationError(f"timeout must be positive, got {timeout}")
        self.base_url = base_url
        self.response_handler = response_handler
        self.adapter = adapter or HttpAdapter()
        self.monitor = monitor or NetworkMonitor()
        self.default_headers: Dict[str, str] = dict(default_headers or {})
        self.timeout = timeout
        logger.debug("NetworkClient initialized")

    @property
    def base_url(self) -> Optional[BaseURLProvider]:
        """Zero-argument callable producing the base URL, if configured."""
        return self._base_url

    @base_url.setter
    def base_url(self, value: Union[str, BaseURLProvider, None]) -> None:
        if isinstance(value, str):
            url = value
            self._base_url: Optional[BaseURLProvider] = lambda: url
        else:
            self._base_url = value

    def resolve_base_url(self) -> Optional[str]:
        """Call the base URL provider, if any."""
        if self._base_url is None:
            return None
        return self._base_url()

    @classmethod
    def from_settings(cls, settings: ClientSettings, **overrides: Any) -> NetworkClient:
        """Build a client from loaded :class:`ClientSettings`.

        Keyword ``overrides`` are passed to the constructor and take
        precedence over the settings.
        """
        monitor_settings = settings.monitor
        if monitor_settings.enabled:
            probe = socket_probe(
                (monitor_settings.probe_host, monitor_settings.probe_port),
                timeout=monitor_settings.timeout,
            )
        else:
            probe = lambda: True  # noqa: E731
        kwargs: Dict[str, Any] = {
            "base_url": settings.base_url,
            "adapter": HttpAdapter(follow_redirects=settings.follow_redirects),
            "monitor": NetworkMonitor(probe=probe, interval=monitor_settings.interval),
            "default_headers": settings.default_headers,
            "timeout": settings.timeout,
        }
        kwargs.update(overrides)
        return cls(**kwargs)

    def request(self, url: Optional[str] = None, **kwargs: Any) -> NetworkRequest:
        """Create a :class:`NetworkRequest` bound to this client."""
        return NetworkRequest(url, client=self, **kwargs)

    # -- Lifecycle ---------------------------------------------------------

    def start(self) -> NetworkClient:
        """Start the reachability monitor."""
        self.monitor.start()
        return self

    def close(self) -> None:
        """Stop the monitor and release adapter resources."""
        self.monitor.stop()
        self.adapter.close()
        logger.debug("NetworkClient closed")


# ---------------------------------------------------------------------------
# NetworkClientBuilder
# ---------------------------------------------------------------------------

class NetworkClientBuilder:
    """Fluent builder for :class:`NetworkClient`.

    Example::

        client = (
            NetworkClientBuilder()
            .set_base_url("https://api.example.com")
            .set_timeout(10)
            .add_default_header("User-Agent", "my-app/1.0")
            .build()
        )
    """

    def __init__(self) -> None:
        self._base_url: Union[str, BaseURLProvider, None] = None
        self._response_handler: Optional[ResponseHandler] = None
        self._adapter: Optional[BaseAdapter] = None
        self._monitor: Optional[NetworkMonitor] = None
        self._default_headers: Dict[str, str] = {}
        self._timeout: float = 30.0

    def set_base_url(self, base_url: Union[str, BaseURLProvider, None]) -> NetworkClientBuilder:
        """Set the base URL or base URL provider."""
        self._base_url = base_url
        return self

    def set_response_handler(self, handler: Optional[ResponseHandler]) -> NetworkClientBuilder:
        """Replace the default response classification."""
        self._response_handler = handler
        return self

    def set_transport(self, adapter: BaseAdapter) -> NetworkClientBuilder:
        """Override the default HTTP adapter with a custom transport."""
        self._adapter = adapter
        return self

    def set_monitor(self, monitor: NetworkMonitor) -> NetworkClientBuilder:
        self._monitor = monitor
        return self

    def set_timeout(self, timeout: float) -> NetworkClientBuilder:
        self._timeout = timeout
        return self

    def add_default_header(self, name: str, value: str) -> NetworkClientBuilder:
        self._default_headers[name] = value
        return self

    def build(self) -> NetworkClient:
        """Construct the NetworkClient.

        Raises:
            InvalidConfigurationError: If the timeout is not positive.
        """
        client = NetworkClient(
            base_url=self._base_url,
            response_handler=self._response_handler,
            adapter=self._adapter,
            monitor=self._monitor,
            default_headers=self._default_headers,
            timeout=self._timeout,
        )
        logger.info("NetworkClientBuilder: built client")
        return client


# ---------------------------------------------------------------------------
# Default instance
# ---------------------------------------------------------------------------

_DEFAULT_CLIENT: Optional[NetworkClient] = None
_DEFAULT_CLIENT_LOCK = threading.RLock()


def initialize(
    client: Optional[NetworkClient] = None,
    settings: Optional[ClientSettings] = None,
    **kwargs: Any,
) -> NetworkClient:
    """Install and start the process-wide default client.

    Args:
        client: Ready-made client to install.
        settings: Loaded settings; also configures logging.
        **kwargs: Constructor arguments when neither ``client`` nor
            ``settings`` is given (overrides when ``settings`` is).

    Returns:
        The installed default client.
    """
    global _DEFAULT_CLIENT
    if client is not None and settings is not None:
        raise InvalidConfigurationError("Pass either client or settings, not both.")

    if client is None:
        if settings is not None:
            setup_logging(
                level=settings.logging.level,
                log_file=settings.logging.file,
                json_format=settings.logging.json_format,
            )
            client = NetworkClient.from_settings(settings, **kwargs)
        else:
            client = NetworkClient(**kwargs)

    with _DEFAULT_CLIENT_LOCK:
        previous = _DEFAULT_CLIENT
        _DEFAULT_CLIENT = client
        if previous is not None and previous is not client:
            previous.close()
        client.start()

    logger.info("NetClient default client initialized")
    return client


def get_default_client() -> NetworkClient:
    """Return the default client, initializing one on first use."""
    with _DEFAULT_CLIENT_LOCK:
        if _DEFAULT_CLIENT is None:
            logger.info("NetClient used before initialize(); initializing defaults")
            return initialize()
        return _DEFAULT_CLIENT


def reset_default_client() -> None:
    """Close and forget the default client."""
    global _DEFAULT_CLIENT
    with _DEFAULT_CLIENT_LOCK:
        previous = _DEFAULT_CLIENT
        _DEFAULT_CLIENT = None
    if previous is not None:
        previous.close()
