"""
Exceptions raised by the Etherscan client.

ConfigurationError is raised while building a client and means no client was
produced. NetworkError is raised by any operation whose HTTP call did not
succeed. JSON decode failures are not wrapped; they surface as the
requests.exceptions.JSONDecodeError raised by Response.json().
"""

from typing import Optional


class EtherscanError(Exception):
    """Base class for errors raised by this package."""


class ConfigurationError(EtherscanError, ValueError):
    """Invalid client configuration, e.g. a missing API key."""


class NetworkError(EtherscanError):
    """
    The transport call failed or returned a non-success HTTP status.

    :param message: Human readable description.
    :param status_code: HTTP status of the response, None when no response arrived.
    :param url: The requested URL with the API key redacted.
    """

    def __init__(self, message: str = "Network response was not ok",
                 status_code: Optional[int] = None, url: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.url = url
