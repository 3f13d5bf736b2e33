"""
logs.py

Event log queries (``logs/getLogs``). The block range keys go out as ``fromBlock``
and ``toBlock`` under every key casing policy.
"""

from typing import TYPE_CHECKING, Any, Optional

from etherscan_client.api.params import LogOptions, TopicOptions, merge_params

if TYPE_CHECKING:
    from etherscan_client.api.client import EtherScan

MODULE = "logs"
ACTION = "getLogs"


class Logs:
    """Wraps the ``logs`` endpoint of an EtherScan client."""

    def __init__(self, etherscan: "EtherScan"):
        self._etherscan = etherscan

    def get_logs_by_address(self, address: str, options: Optional[LogOptions] = None) -> Any:
        """
        Get the event logs emitted by an address.

        :param address: The address to check for logs.
        :param options: Block range and paging; at most 1000 records per page.
        """
        return self._etherscan.get(MODULE, ACTION, merge_params({"address": address}, options))

    def get_logs_by_topics(self, options: Optional[TopicOptions] = None) -> Any:
        """
        Get event logs in a block range, filtered by topics.

        :param options: Block range, paging, ``topic0`` .. ``topic3`` and the
            ``topicX_Y_opr`` operators between them.
        """
        return self._etherscan.get(MODULE, ACTION, merge_params(options))

    def get_logs_by_address_and_topics(self, address: str,
                                       options: Optional[TopicOptions] = None) -> Any:
        """Get the event logs of an address, filtered by topics and block range."""
        return self._etherscan.get(MODULE, ACTION, merge_params({"address": address}, options))
