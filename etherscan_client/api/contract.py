"""
contract.py

Endpoints of the ``contract`` module: ABI and source lookups, creator lookups and
source code verification. Verification submissions are POSTed as form bodies and
answer with a GUID receipt, which is then polled with check_verification_status().
"""

from typing import TYPE_CHECKING, Any

from etherscan_client.api.params import (
    AddressList,
    VerifyProxyContractOptions,
    VerifySourceCodeOptions,
    join_addresses,
)
from etherscan_client.utils.logger import get_logger

if TYPE_CHECKING:
    from etherscan_client.api.client import EtherScan

logger = get_logger(__name__)

MODULE = "contract"

# getcontractcreation answers for at most this many addresses per call.
MAX_CREATOR_ADDRESSES = 5


class Contract:
    """Wraps the ``contract`` endpoints of an EtherScan client."""

    def __init__(self, etherscan: "EtherScan"):
        self._etherscan = etherscan

    def get_abi(self, address: str) -> Any:
        """
        Get the ABI of a verified contract.

        :param address: A contract address with verified source code.
        """
        return self._etherscan.get(MODULE, "getabi", {"address": address})

    def get_source_code(self, address: str) -> Any:
        """Get the Solidity source code of a verified contract."""
        return self._etherscan.get(MODULE, "getsourcecode", {"address": address})

    def get_creator(self, contract_addresses: AddressList) -> Any:
        """
        Get the deployer address and creation transaction hash of contracts.

        :param contract_addresses: One contract address, or a list of up to 5.
        """
        if not isinstance(contract_addresses, str) and len(contract_addresses) > MAX_CREATOR_ADDRESSES:
            logger.warning(f"getcontractcreation accepts up to {MAX_CREATOR_ADDRESSES} "
                           f"addresses, {len(contract_addresses)} given")
        return self._etherscan.get(MODULE, "getcontractcreation", {
            "contractAddresses": join_addresses(contract_addresses),
        })

    def verify_source_code(self, options: VerifySourceCodeOptions) -> Any:
        """
        Submit contract source code for verification.

        :param options: The submission form fields.
        :return: The response whose ``result`` is the GUID receipt of the submission.
        """
        logger.info(f"Submitting {options.contract_name} at {options.contract_address} "
                    f"for verification")
        return self._etherscan.post(MODULE, "verifysourcecode", options.to_params())

    def verify_proxy_contract(self, options: VerifyProxyContractOptions) -> Any:
        """
        Submit a proxy contract for verification.

        :param options: Proxy address and, optionally, the implementation it should point to.
        :return: The response whose ``result`` is the GUID receipt of the submission.
        """
        logger.info(f"Submitting proxy {options.contract_address} for verification")
        return self._etherscan.post(MODULE, "verifyproxycontract", options.to_params())

    def check_verification_status(self, guid: str) -> Any:
        """Get the status of a source code verification request."""
        return self._etherscan.get(MODULE, "checkverifystatus", {"guid": guid})

    def check_proxy_verification(self, guid: str) -> Any:
        """Get the status of a proxy contract verification request."""
        return self._etherscan.get(MODULE, "checkproxyverification", {"guid": guid})
