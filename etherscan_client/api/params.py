"""
params.py

Typed request parameters and their normalization into the flat string mapping the
Etherscan query string (or form body) is built from.

Each endpoint family takes a frozen dataclass whose fields use Python names; the
wire key of a field is declared with ``wire()`` when it differs from the field
name. ``normalize_params`` then applies the key casing policy, drops absent
values and stringifies the rest. Percent-encoding happens later, when the query
string or form body is assembled.
"""

from dataclasses import dataclass, field, fields
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Iterable, Mapping, Optional, Sequence, Union


class KeyCasing(str, Enum):
    """How parameter keys are written on the wire."""
    LOWER = "lower"
    PRESERVE = "preserve"


# The logs module only understands these two keys in camel case.
PRESERVED_KEYS = frozenset({"fromBlock", "toBlock"})


class Tag(str, Enum):
    EARLIEST = "earliest"
    PENDING = "pending"
    LATEST = "latest"


class Sort(str, Enum):
    ASC = "asc"
    DESC = "desc"


class BlockType(str, Enum):
    BLOCKS = "blocks"
    UNCLES = "uncles"


class Closest(str, Enum):
    BEFORE = "before"
    AFTER = "after"


class TopicOperator(str, Enum):
    AND = "and"
    OR = "or"


class CodeFormat(str, Enum):
    SINGLE_FILE = "solidity-single-file"
    STANDARD_JSON_INPUT = "solidity-standard-json-input"


def normalize_key(key: str, key_casing: Union[KeyCasing, str] = KeyCasing.LOWER) -> str:
    if KeyCasing(key_casing) is KeyCasing.PRESERVE or key in PRESERVED_KEYS:
        return key
    return key.lower()


def stringify(value: Any) -> str:
    """
    Canonical text form of a parameter value.

    Booleans become ``true``/``false``, enum members their value, dates ISO
    ``yyyy-MM-dd``, floats positional decimals (``1e16`` is sent as
    ``10000000000000000``) and sequences a comma-joined list without ``None`` items.
    """
    if isinstance(value, Enum):
        return stringify(value.value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, date):
        return value.strftime("%Y-%m-%d")
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return format(Decimal(repr(value)), "f")
    if isinstance(value, (list, tuple)):
        return ",".join(stringify(item) for item in value if item is not None)
    return str(value)


def join_addresses(addresses: Union[str, Iterable[str]]) -> str:
    """Flattens one address or a list of addresses into a comma-joined string."""
    if isinstance(addresses, str):
        return addresses
    return ",".join(addresses)


def normalize_params(params: Optional[Mapping[str, Any]],
                     key_casing: Union[KeyCasing, str] = KeyCasing.LOWER) -> Dict[str, str]:
    """
    Converts loosely typed parameters into the canonical wire mapping.

    :param params: Parameter name to value; None values and lists holding
        nothing but None are dropped.
    :param key_casing: The key casing policy of the client.
    :return: A new dict of wire key to string value, in input order.
    """
    normalized: Dict[str, str] = {}
    for key, value in (params or {}).items():
        if value is None:
            continue
        text = stringify(value)
        if not text and isinstance(value, (list, tuple)):
            continue
        normalized[normalize_key(key, key_casing)] = text
    return normalized


def wire(name: str, default: Any = None, required: bool = False) -> Any:
    """Declares a dataclass field whose wire key differs from its attribute name."""
    if required:
        return field(metadata={"param": name})
    return field(default=default, metadata={"param": name})


class Params:
    """Mixin for the per-endpoint parameter records."""

    def to_params(self) -> Dict[str, Any]:
        return {
            f.metadata.get("param", f.name): getattr(self, f.name)
            for f in fields(self)
        }


def merge_params(*parts: Optional[Union[Params, Mapping[str, Any]]]) -> Dict[str, Any]:
    """Combines positional arguments and option records into one parameter mapping."""
    merged: Dict[str, Any] = {}
    for part in parts:
        if part is None:
            continue
        merged.update(part.to_params() if isinstance(part, Params) else part)
    return merged


@dataclass(frozen=True)
class TransactionOptions(Params):
    start_block: Optional[int] = wire("startBlock")
    end_block: Optional[int] = wire("endBlock")
    page: Optional[int] = None
    offset: Optional[int] = None
    sort: Optional[Sort] = None


@dataclass(frozen=True)
class BlockValidationOptions(Params):
    page: Optional[int] = None
    offset: Optional[int] = None


@dataclass(frozen=True)
class LogOptions(Params):
    """Block range and paging for ``logs/getLogs``; offset is capped at 1000 by the API."""
    from_block: Optional[int] = wire("fromBlock")
    to_block: Optional[int] = wire("toBlock")
    page: Optional[int] = None
    offset: Optional[int] = None


@dataclass(frozen=True)
class TopicOptions(LogOptions):
    """
    LogOptions plus topic filters.

    A single topic is given as ``topic0`` .. ``topic3``. When several topics
    are combined, the operator between each pair is ``topicX_Y_opr``.
    """
    topic0: Optional[str] = None
    topic1: Optional[str] = None
    topic2: Optional[str] = None
    topic3: Optional[str] = None
    topic0_1_opr: Optional[TopicOperator] = None
    topic0_2_opr: Optional[TopicOperator] = None
    topic0_3_opr: Optional[TopicOperator] = None
    topic1_2_opr: Optional[TopicOperator] = None
    topic1_3_opr: Optional[TopicOperator] = None
    topic2_3_opr: Optional[TopicOperator] = None


@dataclass(frozen=True)
class VerifySourceCodeOptions(Params):
    """
    Form fields of a ``contract/verifysourcecode`` submission.

    ``contract_name`` is e.g. ``contracts/Verified.sol:Verified`` and
    ``compiler_version`` e.g. ``v0.8.26+commit.8a97fa7a``. The misspelt
    ``constructorArguements`` key is what the API expects.
    """
    chain_id: Union[int, str] = wire("chainId", required=True)
    source_code: str = wire("sourceCode", required=True)
    contract_address: str = wire("contractAddress", required=True)
    contract_name: str = wire("contractName", required=True)
    compiler_version: str = wire("compilerVersion", required=True)
    code_format: CodeFormat = wire("codeFormat", CodeFormat.STANDARD_JSON_INPUT)
    constructor_arguments: Optional[str] = wire("constructorArguements")
    optimization_used: Optional[bool] = wire("optimizationUsed")
    runs: Optional[int] = None
    evm_version: Optional[str] = wire("evmVersion")
    license_type: Optional[int] = wire("licenseType")

    def to_params(self) -> Dict[str, Any]:
        params = super().to_params()
        # The endpoint wants 0/1 here, not true/false.
        if self.optimization_used is not None:
            params["optimizationUsed"] = int(self.optimization_used)
        return params


@dataclass(frozen=True)
class VerifyProxyContractOptions(Params):
    contract_address: str = wire("contractAddress", required=True)
    expected_implementation: Optional[str] = wire("expectedImplementation")


ParamsLike = Optional[Union[Params, Mapping[str, Any]]]
AddressList = Union[str, Sequence[str]]
