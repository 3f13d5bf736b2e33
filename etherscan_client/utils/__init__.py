"""
Utilities Module

This module provides configuration management, logging, Sentry integration and
Prometheus metrics shared by the client.
"""

from etherscan_client.utils.config import get_config
from etherscan_client.utils.logger import get_logger
from etherscan_client.utils.sentry import (
    init_sentry,
    capture_exception,
    add_breadcrumb,
    close_sentry
)

__all__ = [
    'get_config',
    'get_logger',
    'init_sentry',
    'capture_exception',
    'add_breadcrumb',
    'close_sentry'
]
