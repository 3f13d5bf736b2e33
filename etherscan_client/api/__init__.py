"""
API Module

This module provides the EtherScan client, its resource clients, the request
construction core and the typed parameter records.
"""

from etherscan_client.api.client import EtherScan
from etherscan_client.api.errors import ConfigurationError, EtherscanError, NetworkError
from etherscan_client.api.networks import BASE_URLS, Network, resolve_base_url
from etherscan_client.api.params import (
    BlockType,
    BlockValidationOptions,
    Closest,
    CodeFormat,
    KeyCasing,
    LogOptions,
    Sort,
    Tag,
    TopicOperator,
    TopicOptions,
    TransactionOptions,
    VerifyProxyContractOptions,
    VerifySourceCodeOptions,
    normalize_params,
)
from etherscan_client.api.request import ClientConfig, RequestBuilder, RequestDescriptor

__all__ = [
    'EtherScan',
    'ConfigurationError',
    'EtherscanError',
    'NetworkError',
    'BASE_URLS',
    'Network',
    'resolve_base_url',
    'BlockType',
    'BlockValidationOptions',
    'Closest',
    'CodeFormat',
    'KeyCasing',
    'LogOptions',
    'Sort',
    'Tag',
    'TopicOperator',
    'TopicOptions',
    'TransactionOptions',
    'VerifyProxyContractOptions',
    'VerifySourceCodeOptions',
    'normalize_params',
    'ClientConfig',
    'RequestBuilder',
    'RequestDescriptor',
]
