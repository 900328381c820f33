"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
NetClient, a product of Garudex Labs

Public API for NetClient.

Quick start::

    import netclient
    from netclient import NetworkRequest

    netclient.initialize(base_url="https://postman-echo.com")
    response = await NetworkRequest(path="/get").response_json()

Advanced::

    from netclient import NetworkClientBuilder
    client = NetworkClientBuilder().set_base_url(get_env_url).build().start()
    future = client.request(path="/get").promises.response_json()
"""

from netclient._version import __version__
from netclient.adapters import BaseAdapter, HttpAdapter, MockAdapter, MockResponse, TransportResult
from netclient.client import (
    NetworkClient,
    NetworkClientBuilder,
    get_default_client,
    initialize,
    reset_default_client,
)
from netclient.config import ClientSettings, load_config
from netclient.core.body import DictBody, EncodableBody, FormBody, HTTPBody, HTTPBodyFormat, JSONBody
from netclient.core.classifier import ResponseHandler, default_response_handler
from netclient.core.mapping import ImmutableMappable, Map, Mappable, MappingError
from netclient.core.metadata import NetworkResponse, ResponseMetadata
from netclient.core.reachability import NetworkMonitor
from netclient.core.request import NetworkRequest
from netclient.core.result import Failure, Result, Success
from netclient.core.status import HTTPMethod, HTTPStatusCodes
from netclient.exceptions import (
    ConfigurationError,
    DeserializationError,
    InvalidConfigurationError,
    InvalidStatusCodeError,
    InvalidURLError,
    MissingBaseURLError,
    NetClientError,
    NetworkError,
    NetworkResponseError,
    NoDataError,
    NoNetworkConnectionError,
    NoResponseError,
    RequestConfigurationError,
)

__all__ = [
    "__version__",
    # client
    "NetworkClient",
    "NetworkClientBuilder",
    "initialize",
    "get_default_client",
    "reset_default_client",
    "ClientSettings",
    "load_config",
    # requests
    "NetworkRequest",
    "HTTPMethod",
    "HTTPStatusCodes",
    "HTTPBody",
    "HTTPBodyFormat",
    "DictBody",
    "FormBody",
    "JSONBody",
    "EncodableBody",
    # responses
    "NetworkResponse",
    "ResponseMetadata",
    "Result",
    "Success",
    "Failure",
    "ResponseHandler",
    "default_response_handler",
    # mapping
    "Map",
    "Mappable",
    "ImmutableMappable",
    "MappingError",
    # infra
    "NetworkMonitor",
    "BaseAdapter",
    "HttpAdapter",
    "MockAdapter",
    "MockResponse",
    "TransportResult",
    # errors
    "NetClientError",
    "NetworkError",
    "NoNetworkConnectionError",
    "NoResponseError",
    "MissingBaseURLError",
    "InvalidURLError",
    "InvalidStatusCodeError",
    "NoDataError",
    "DeserializationError",
    "NetworkResponseError",
    "ConfigurationError",
    "InvalidConfigurationError",
    "RequestConfigurationError",
]
