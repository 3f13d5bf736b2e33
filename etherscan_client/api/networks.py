"""
networks.py

Maps an explorer deployment to its API origin.
"""

from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Union


class Network(str, Enum):
    MAINNET = "mainnet"
    SEPOLIA = "sepolia"
    GOERLI = "goerli"


DEFAULT_NETWORK = Network.MAINNET

BASE_URLS: Mapping[Network, str] = MappingProxyType({
    Network.MAINNET: "https://api.etherscan.io/api",
    Network.SEPOLIA: "https://api-sepolia.etherscan.io/api",
    Network.GOERLI: "https://api-goerli.etherscan.io/api",
})


def resolve_base_url(network: Optional[Union[Network, str]] = None) -> str:
    """
    Returns the API origin for a network selector.

    Unknown or missing selectors resolve to the mainnet origin.

    :param network: A Network member or its string value.
    :return: The origin, scheme + host + path prefix.
    """
    try:
        return BASE_URLS[Network(network)]
    except (ValueError, TypeError):
        return BASE_URLS[DEFAULT_NETWORK]
