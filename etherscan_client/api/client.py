"""
client.py

The EtherScan client: holds the immutable configuration, builds request descriptors
and sends them with requests. Every operation performs a single HTTP call and returns
the decoded JSON body untouched.

No retry, caching or rate limiting is done here; a failed call raises NetworkError
to the caller.
"""

import time
from typing import Any, Mapping, NoReturn, Optional, Union

import requests

from etherscan_client.api.account import Account
from etherscan_client.api.block import Block
from etherscan_client.api.contract import Contract
from etherscan_client.api.errors import ConfigurationError, NetworkError
from etherscan_client.api.logs import Logs
from etherscan_client.api.networks import Network
from etherscan_client.api.params import KeyCasing
from etherscan_client.api.request import ClientConfig, RequestBuilder, RequestDescriptor, redact_url
from etherscan_client.api.transaction import Transaction
from etherscan_client.utils.config import get_config
from etherscan_client.utils.logger import get_logger
from etherscan_client.utils.metrics import record_request
from etherscan_client.utils.sentry import add_breadcrumb, capture_exception

logger = get_logger(__name__)


class EtherScan:
    """
    EtherScan handles communication with the Etherscan API.

    Resource clients are exposed as attributes: ``account``, ``block``, ``contract``,
    ``logs`` and ``transaction``.

    :param api_key: API key for the Etherscan API. Falls back to ETHERSCAN_API_KEY.
    :param network: Explorer deployment. Falls back to ETHERSCAN_NETWORK, then mainnet.
    :param key_casing: Parameter key casing policy. Falls back to ETHERSCAN_KEY_CASING.
    :param timeout: Request timeout in seconds. Falls back to REQUEST_TIMEOUT.
    :param session: Optional requests.Session; one is created (and owned) otherwise.
    :raises ConfigurationError: If the API key is missing or a selector is unsupported.

    A requests.Session is not guaranteed to be thread-safe. Use one client per
    thread, or pass a separate ``session`` to each client used from another thread.
    """

    def __init__(self, api_key: Optional[str] = None,
                 network: Optional[Union[Network, str]] = None,
                 key_casing: Optional[Union[KeyCasing, str]] = None,
                 timeout: Optional[float] = None,
                 session: Optional[requests.Session] = None):
        config = get_config()
        api_key = api_key if api_key is not None else config.API_KEY
        if not api_key:
            raise ConfigurationError("API key is required")

        self.config = ClientConfig(
            api_key=api_key,
            network=network if network is not None else config.NETWORK,
            key_casing=key_casing if key_casing is not None else config.KEY_CASING,
            timeout=timeout if timeout is not None else config.REQUEST_TIMEOUT,
        )
        self._builder = RequestBuilder(self.config)
        self._owns_session = session is None
        self._session = session if session is not None else requests.Session()

        self.account = Account(self)
        self.block = Block(self)
        self.contract = Contract(self)
        self.logs = Logs(self)
        self.transaction = Transaction(self)

        logger.info(f"EtherScan client initialized for {self.config.network.value}")

    @property
    def network(self) -> Network:
        return self.config.network

    @property
    def base_url(self) -> str:
        return self._builder.base_url

    def construct_url(self, module: str, action: str,
                      params: Optional[Mapping[str, Any]] = None) -> str:
        return self._builder.construct_url(module, action, params)

    def get(self, module: str, action: str,
            params: Optional[Mapping[str, Any]] = None) -> Any:
        """
        Performs a read call and returns the decoded JSON body.

        :raises NetworkError: If the transport failed or the status was not a success.
        :raises requests.exceptions.JSONDecodeError: If the body is not JSON.
        """
        return self._send(module, action, self._builder.build_get(module, action, params))

    def post(self, module: str, action: str,
             params: Optional[Mapping[str, Any]] = None) -> Any:
        """Submits ``params`` as a form body; used by the verification endpoints."""
        return self._send(module, action, self._builder.build_post(module, action, params))

    def _send(self, module: str, action: str, descriptor: RequestDescriptor) -> Any:
        safe_url = redact_url(descriptor.url)
        logger.debug(f"{descriptor.method} {safe_url}")
        add_breadcrumb(module, action, descriptor.method, safe_url)

        started = time.monotonic()
        try:
            response = self._session.request(
                descriptor.method,
                descriptor.url,
                headers=dict(descriptor.headers) or None,
                data=descriptor.body,
                timeout=self.config.timeout,
            )
        except requests.RequestException as err:
            self._fail(module, action, started, NetworkError(url=safe_url), err)

        if not response.ok:
            self._fail(module, action, started,
                       NetworkError(status_code=response.status_code, url=safe_url))

        record_request(module, action, "success", time.monotonic() - started)
        return response.json()

    def _fail(self, module: str, action: str, started: float,
              error: NetworkError, cause: Optional[Exception] = None) -> NoReturn:
        record_request(module, action, "network_error", time.monotonic() - started)
        detail = f"status {error.status_code}" if error.status_code is not None else repr(cause)
        logger.error(f"Etherscan {module}/{action} failed: {detail}")
        capture_exception(error, module, action,
                          url=error.url, status_code=error.status_code)
        raise error from cause

    def close(self) -> None:
        """Closes the underlying session if this client created it."""
        if self._owns_session:
            self._session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def __repr__(self):
        return f"EtherScan(network={self.config.network.value!r})"
