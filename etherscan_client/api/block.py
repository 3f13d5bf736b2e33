"""
block.py

Block endpoints, plus the daily block series which the API serves from the
``stats`` module.
"""

from datetime import date
from typing import TYPE_CHECKING, Any, Optional, Union

from etherscan_client.api.params import Closest, Sort

if TYPE_CHECKING:
    from etherscan_client.api.client import EtherScan

MODULE = "block"
STATS_MODULE = "stats"

DateLike = Union[date, str]


class Block:
    """Wraps the block related endpoints of an EtherScan client."""

    def __init__(self, etherscan: "EtherScan"):
        self._etherscan = etherscan

    def get_block_reward(self, block_no: int) -> Any:
        """Get the block reward and 'uncle' block rewards of a block."""
        return self._etherscan.get(MODULE, "getblockreward", {"blockNo": block_no})

    def get_block_countdown(self, block_no: int) -> Any:
        """Get the estimated time remaining, in seconds, until a block is mined."""
        return self._etherscan.get(MODULE, "getblockcountdown", {"blockNo": block_no})

    def get_block_number_by_timestamp(self, timestamp: int,
                                      closest: Optional[Union[Closest, str]] = None) -> Any:
        """
        Get the block number that was mined at a certain timestamp.

        :param timestamp: Unix timestamp in seconds.
        :param closest: ``before`` or ``after`` the timestamp.
        """
        return self._etherscan.get(MODULE, "getblocknobytime", {
            "timestamp": timestamp,
            "closest": closest,
        })

    def get_daily_avg_block_size(self, start_date: DateLike, end_date: DateLike,
                                 sort: Optional[Union[Sort, str]] = None) -> Any:
        """Get the daily average block size within a date range."""
        return self._daily("dailyavgblocksize", start_date, end_date, sort)

    def get_daily_block_count(self, start_date: DateLike, end_date: DateLike,
                              sort: Optional[Union[Sort, str]] = None) -> Any:
        """Get the number of blocks mined daily and the block rewards paid."""
        return self._daily("dailyblkcount", start_date, end_date, sort)

    def get_daily_block_rewards(self, start_date: DateLike, end_date: DateLike,
                                sort: Optional[Union[Sort, str]] = None) -> Any:
        """Get the block rewards distributed to miners daily."""
        return self._daily("dailyblockrewards", start_date, end_date, sort)

    def get_daily_avg_block_time(self, start_date: DateLike, end_date: DateLike,
                                 sort: Optional[Union[Sort, str]] = None) -> Any:
        """Get the daily average time needed for a block to be mined."""
        return self._daily("dailyavgblocktime", start_date, end_date, sort)

    def get_daily_uncle_block_count(self, start_date: DateLike, end_date: DateLike,
                                    sort: Optional[Union[Sort, str]] = None) -> Any:
        """Get the 'uncle' blocks mined daily and their rewards."""
        return self._daily("dailyuncleblkcount", start_date, end_date, sort)

    def _daily(self, action: str, start_date: DateLike, end_date: DateLike,
               sort: Optional[Union[Sort, str]]) -> Any:
        # Dates go out as yyyy-MM-dd.
        return self._etherscan.get(STATS_MODULE, action, {
            "startDate": start_date,
            "endDate": end_date,
            "sort": sort,
        })
