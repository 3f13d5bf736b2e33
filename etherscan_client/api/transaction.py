"""
transaction.py

Endpoints of the ``transaction`` module.
"""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from etherscan_client.api.client import EtherScan

MODULE = "transaction"


class Transaction:

    def __init__(self, etherscan: "EtherScan"):
        self._etherscan = etherscan

    def check_execution_status(self, tx_hash: str) -> Any:
        """Get the status code of a contract execution."""
        return self._etherscan.get(MODULE, "getstatus", {"txHash": tx_hash})

    def check_tx_receipt_status(self, tx_hash: str) -> Any:
        """
        Get the receipt status of a transaction.

        Only applicable to post-Byzantium transactions.
        """
        return self._etherscan.get(MODULE, "gettxreceiptstatus", {"txHash": tx_hash})
