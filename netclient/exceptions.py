"""
Exception hierarchy for NetClient.

All custom exceptions inherit from NetClientError base class.

Classification errors (subclasses of NetworkError) are not raised on the
request path; they travel as ``Failure`` values and are only raised by the
throwing calling conventions, wrapped in :class:`NetworkResponseError`.
"""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from netclient.core.metadata import ResponseMetadata


class NetClientError(Exception):
    """Base exception for all NetClient errors."""
    pass


# Classification Errors
class NetworkError(NetClientError):
    """Base exception for the closed request classification taxonomy."""

    @property
    def status_code(self) -> Optional[int]:
        """HTTP status code that caused the failure, when one applies."""
        return None

    @property
    def url(self) -> Optional[str]:
        """URL that caused the failure, when one applies."""
        return None


class NoNetworkConnectionError(NetworkError):
    """Raised when the connectivity monitor reports no network."""

    def __init__(self) -> None:
        super().__init__("No network connection")


class NoResponseError(NetworkError):
    """Raised when the transport produced no structured response."""

    def __init__(self) -> None:
        super().__init__("Transport returned no response")


class MissingBaseURLError(NetworkError):
    """Raised when a path-only request is built without a base URL."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"No base URL configured for path '{path}'")


class InvalidURLError(NetworkError):
    """Raised when the resolved request URL cannot be used."""

    def __init__(self, url: str) -> None:
        self._url = url
        super().__init__(f"Invalid URL: {url}")

    @property
    def url(self) -> Optional[str]:
        return self._url


class InvalidStatusCodeError(NetworkError):
    """Raised when the response status is outside the accepted set."""

    def __init__(self, status_code: int) -> None:
        self._status_code = status_code
        super().__init__(f"Invalid status code: {status_code}")

    @property
    def status_code(self) -> Optional[int]:
        return self._status_code


class NoDataError(NetworkError):
    """Raised when an accepted response carries no body."""

    def __init__(self) -> None:
        super().__init__("Response contained no data")


class DeserializationError(NetworkError):
    """Raised when structured mapping cannot build the target type."""

    def __init__(self, message: str = "Deserialization failed") -> None:
        super().__init__(message)


# Calling-convention Errors
class NetworkResponseError(NetClientError):
    """
    Bundles a request failure with the response metadata gathered for it.

    Raised by the async convention and used to reject promises created by
    the ``*_with_metadata`` promise variants.

    Attributes:
        error: The classified or underlying error.
        metadata: Response metadata accumulated up to the failure.
    """

    def __init__(self, error: BaseException, metadata: Optional["ResponseMetadata"] = None) -> None:
        self.error = error
        self.metadata = metadata
        super().__init__(str(error))


# Configuration Errors
class ConfigurationError(NetClientError):
    """Base exception for configuration-related errors."""
    pass


class InvalidConfigurationError(ConfigurationError):
    """Raised when configuration is invalid or malformed."""
    pass


class RequestConfigurationError(ConfigurationError):
    """Raised when a request descriptor is built or modified incorrectly."""
    pass
