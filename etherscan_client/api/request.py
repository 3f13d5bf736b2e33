"""
request.py

Builds the request descriptors every Etherscan call is made from. Nothing in this
module performs I/O: a descriptor is a pure function of the module name, the action
name, the caller parameters and the immutable client configuration.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Union
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from etherscan_client.api.errors import ConfigurationError
from etherscan_client.api.networks import DEFAULT_NETWORK, Network, resolve_base_url
from etherscan_client.api.params import KeyCasing, normalize_params

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def _coerce_network(network: Union[Network, str]) -> Network:
    try:
        return Network(network.lower() if isinstance(network, str) else network)
    except ValueError:
        supported = ", ".join(member.value for member in Network)
        raise ConfigurationError(
            f"Unsupported network {network!r}; expected one of {supported}"
        ) from None


def _coerce_key_casing(key_casing: Union[KeyCasing, str]) -> KeyCasing:
    try:
        return KeyCasing(key_casing.lower() if isinstance(key_casing, str) else key_casing)
    except ValueError:
        supported = ", ".join(member.value for member in KeyCasing)
        raise ConfigurationError(
            f"Unsupported key casing {key_casing!r}; expected one of {supported}"
        ) from None


@dataclass(frozen=True)
class ClientConfig:
    """
    Settings of one client instance, fixed at construction.

    ``network`` and ``key_casing`` accept either enum members or their string values.

    Attributes:
        api_key (str): Etherscan API key, appended to every request.
        network (Network): Explorer deployment the client talks to.
        key_casing (KeyCasing): Key casing policy for query strings and form bodies.
        timeout (Optional[float]): Seconds handed to the transport; None waits forever.
    """
    api_key: str
    network: Network = DEFAULT_NETWORK
    key_casing: KeyCasing = KeyCasing.LOWER
    timeout: Optional[float] = None

    def __post_init__(self):
        if not self.api_key or not isinstance(self.api_key, str):
            raise ConfigurationError("API key is required")
        object.__setattr__(self, "network", _coerce_network(self.network))
        object.__setattr__(self, "key_casing", _coerce_key_casing(self.key_casing))

    def __repr__(self):
        return (f"ClientConfig(api_key='***', network={self.network.value!r}, "
                f"key_casing={self.key_casing.value!r}, timeout={self.timeout!r})")


@dataclass(frozen=True)
class RequestDescriptor:
    url: str
    method: str = "GET"
    headers: Mapping[str, str] = field(default_factory=dict)
    body: Optional[str] = None


class RequestBuilder:
    """
    Composes module, action, caller parameters and the API key into request descriptors.

    :param config: The client configuration; only read, never modified.
    """

    def __init__(self, config: ClientConfig):
        self._config = config

    @property
    def base_url(self) -> str:
        return resolve_base_url(self._config.network)

    def _query(self, module: str, action: str,
               params: Optional[Mapping[str, Any]] = None) -> Dict[str, str]:
        query = normalize_params(params, self._config.key_casing)
        # The mandatory trio always wins over caller parameters of the same name.
        query.update({
            "module": module,
            "action": action,
            "apikey": self._config.api_key,
        })
        return query

    def construct_url(self, module: str, action: str,
                      params: Optional[Mapping[str, Any]] = None) -> str:
        """
        Returns ``{origin}?{querystring}`` for a read call.

        :param module: The API module, e.g. ``account``.
        :param action: The action within the module, e.g. ``balance``.
        :param params: Caller parameters; None values are left out.
        """
        return f"{self.base_url}?{urlencode(self._query(module, action, params))}"

    def build_get(self, module: str, action: str,
                  params: Optional[Mapping[str, Any]] = None) -> RequestDescriptor:
        return RequestDescriptor(url=self.construct_url(module, action, params))

    def build_post(self, module: str, action: str,
                   params: Optional[Mapping[str, Any]] = None) -> RequestDescriptor:
        """
        Returns a POST descriptor for verification submissions.

        The URL carries only ``module``, ``action`` and ``apikey``; the normalized
        parameters travel in a form-urlencoded body.
        """
        body = urlencode(normalize_params(params, self._config.key_casing))
        return RequestDescriptor(
            url=self.construct_url(module, action),
            method="POST",
            headers={"Content-Type": FORM_CONTENT_TYPE},
            body=body,
        )


def redact_url(url: str) -> str:
    """Replaces the apikey query value so the URL can be logged."""
    parts = urlsplit(url)
    query = [
        (key, "***" if key == "apikey" else value)
        for key, value in parse_qsl(parts.query, keep_blank_values=True)
    ]
    return urlunsplit(parts._replace(query=urlencode(query)))
