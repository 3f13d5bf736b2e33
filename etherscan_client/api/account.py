"""
account.py

Endpoints of the ``account`` module: balances, transaction lists, token transfer
events, validated blocks and beacon chain withdrawals.
"""

from typing import TYPE_CHECKING, Any, Optional, Union

from etherscan_client.api.params import (
    AddressList,
    BlockType,
    BlockValidationOptions,
    Tag,
    TransactionOptions,
    join_addresses,
    merge_params,
)

if TYPE_CHECKING:
    from etherscan_client.api.client import EtherScan

MODULE = "account"


class Account:
    """Wraps the ``account`` endpoints of an EtherScan client."""

    def __init__(self, etherscan: "EtherScan"):
        self._etherscan = etherscan

    def get_balance(self, address: AddressList,
                    tag: Optional[Union[Tag, str]] = None) -> Any:
        """
        Get Ether balance for a single address, or for several in one call.

        :param address: One address, or a list of up to 20 addresses.
        :param tag: Pre-defined block parameter, ``earliest``, ``pending`` or ``latest``.
        :return: The decoded JSON response.
        """
        action = "balance" if isinstance(address, str) else "balancemulti"
        return self._etherscan.get(MODULE, action, {
            "address": join_addresses(address),
            "tag": tag,
        })

    def get_normal_transactions(self, address: str,
                                options: Optional[TransactionOptions] = None) -> Any:
        """
        Get the list of 'normal' transactions performed by an address.

        :param address: The address to list transactions for.
        :param options: Block range, paging and sort order.
        """
        return self._etherscan.get(MODULE, "txlist", merge_params({"address": address}, options))

    def get_internal_transactions(self, address: str,
                                  options: Optional[TransactionOptions] = None) -> Any:
        """Get the list of 'internal' transactions performed by an address."""
        return self._etherscan.get(MODULE, "txlistinternal",
                                   merge_params({"address": address}, options))

    def get_internal_transactions_by_hash(self, tx_hash: str) -> Any:
        """Get the internal transactions performed within one transaction."""
        return self._etherscan.get(MODULE, "txlistinternal", {"txHash": tx_hash})

    def get_internal_transactions_by_block_range(
            self, options: Optional[TransactionOptions] = None) -> Any:
        """Get internal transactions within a block range, with optional paging."""
        return self._etherscan.get(MODULE, "txlistinternal", merge_params(options))

    def get_erc20_token_events(self, address: Optional[str] = None,
                               contract_address: Optional[str] = None,
                               options: Optional[TransactionOptions] = None) -> Any:
        """
        Get ERC-20 token transfer events of an address.

        :param address: The address whose transfers to list.
        :param contract_address: Restrict to one token contract.
        :param options: Block range, paging and sort order.
        """
        return self._token_events("tokentx", address, contract_address, options)

    def get_erc721_token_events(self, address: Optional[str] = None,
                                contract_address: Optional[str] = None,
                                options: Optional[TransactionOptions] = None) -> Any:
        """Get ERC-721 (NFT) token transfer events of an address."""
        return self._token_events("tokennfttx", address, contract_address, options)

    def get_erc1155_token_events(self, address: Optional[str] = None,
                                 contract_address: Optional[str] = None,
                                 options: Optional[TransactionOptions] = None) -> Any:
        """Get ERC-1155 (multi token standard) transfer events of an address."""
        return self._token_events("token1155tx", address, contract_address, options)

    def _token_events(self, action: str, address: Optional[str],
                      contract_address: Optional[str],
                      options: Optional[TransactionOptions]) -> Any:
        return self._etherscan.get(MODULE, action, merge_params(
            {"address": address, "contractAddress": contract_address},
            options,
        ))

    def get_validated_blocks(self, address: str,
                             block_type: Union[BlockType, str] = BlockType.BLOCKS,
                             options: Optional[BlockValidationOptions] = None) -> Any:
        """
        Get the list of blocks validated by an address.

        :param address: The validator address.
        :param block_type: ``blocks`` for canonical blocks, ``uncles`` for uncle blocks.
        :param options: Paging.
        """
        return self._etherscan.get(MODULE, "getminedblocks", merge_params(
            {"address": address, "blockType": block_type},
            options,
        ))

    def get_beacon_chain_withdrawals(self, address: str,
                                     options: Optional[TransactionOptions] = None) -> Any:
        """Get the beacon chain withdrawals made to an address."""
        return self._etherscan.get(MODULE, "txsBeaconWithdrawal",
                                   merge_params({"address": address}, options))

    def get_historical_balance(self, address: str, block_no: int) -> Any:
        """
        Get the Ether balance of an address at a block number (PRO tier).

        :param address: The address to check.
        :param block_no: Block number, e.g. ``12697906``.
        """
        return self._etherscan.get(MODULE, "balancehistory", {
            "address": address,
            "blockNo": block_no,
        })
