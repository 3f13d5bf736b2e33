"""
etherscan_client

A typed client for the Etherscan REST API and compatible explorer deployments.
"""

__version__ = "0.1.0"

from etherscan_client.api import (  # noqa: E402
    EtherScan,
    ConfigurationError,
    EtherscanError,
    NetworkError,
    Network,
    KeyCasing,
)

__all__ = [
    '__version__',
    'EtherScan',
    'ConfigurationError',
    'EtherscanError',
    'NetworkError',
    'Network',
    'KeyCasing',
]
