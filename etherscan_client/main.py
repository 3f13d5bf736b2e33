"""
main.py

Command line entry point. Runs a single Etherscan lookup and prints the decoded JSON
response, e.g.:

    etherscan-client balance 0xde0b295669a9fd93d5f28d9ec85e40f4cb697bae
    etherscan-client --network sepolia tx-status 0x15f8e5ea...
"""

import argparse
import json
import sys
from typing import List, Optional

from etherscan_client.api import (
    EtherScan,
    ConfigurationError,
    NetworkError,
    Network,
    Sort,
    TransactionOptions,
)
from etherscan_client.utils.config import get_config
from etherscan_client.utils.logger import get_logger
from etherscan_client.utils.sentry import close_sentry, init_sentry

logger = get_logger(__name__)


def _balance(client: EtherScan, args: argparse.Namespace):
    address = args.address[0] if len(args.address) == 1 else args.address
    return client.account.get_balance(address, tag=args.tag)


def _txlist(client: EtherScan, args: argparse.Namespace):
    options = TransactionOptions(
        start_block=args.start_block,
        end_block=args.end_block,
        page=args.page,
        offset=args.offset,
        sort=Sort(args.sort) if args.sort else None,
    )
    return client.account.get_normal_transactions(args.address, options)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="etherscan-client",
        description="Query the Etherscan API and print the JSON response."
    )
    parser.add_argument("--api-key", help="API key (default: $ETHERSCAN_API_KEY)")
    parser.add_argument("--network", choices=[n.value for n in Network],
                        help="explorer deployment (default: $ETHERSCAN_NETWORK or mainnet)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    balance = subparsers.add_parser("balance", help="Ether balance of one or more addresses")
    balance.add_argument("address", nargs="+")
    balance.add_argument("--tag", choices=["earliest", "pending", "latest"])
    balance.set_defaults(handler=_balance)

    txlist = subparsers.add_parser("txlist", help="normal transactions of an address")
    txlist.add_argument("address")
    txlist.add_argument("--start-block", type=int)
    txlist.add_argument("--end-block", type=int)
    txlist.add_argument("--page", type=int)
    txlist.add_argument("--offset", type=int)
    txlist.add_argument("--sort", choices=["asc", "desc"])
    txlist.set_defaults(handler=_txlist)

    abi = subparsers.add_parser("abi", help="ABI of a verified contract")
    abi.add_argument("address")
    abi.set_defaults(handler=lambda client, args: client.contract.get_abi(args.address))

    source = subparsers.add_parser("source", help="source code of a verified contract")
    source.add_argument("address")
    source.set_defaults(handler=lambda client, args: client.contract.get_source_code(args.address))

    creator = subparsers.add_parser("creator", help="deployer and creation tx of up to 5 contracts")
    creator.add_argument("address", nargs="+")
    creator.set_defaults(handler=lambda client, args: client.contract.get_creator(args.address))

    verify_status = subparsers.add_parser("verify-status", help="status of a verification GUID")
    verify_status.add_argument("guid")
    verify_status.set_defaults(
        handler=lambda client, args: client.contract.check_verification_status(args.guid)
    )

    tx_status = subparsers.add_parser("tx-status", help="contract execution status")
    tx_status.add_argument("tx_hash")
    tx_status.set_defaults(
        handler=lambda client, args: client.transaction.check_execution_status(args.tx_hash)
    )

    receipt_status = subparsers.add_parser("receipt-status", help="transaction receipt status")
    receipt_status.add_argument("tx_hash")
    receipt_status.set_defaults(
        handler=lambda client, args: client.transaction.check_tx_receipt_status(args.tx_hash)
    )

    block_reward = subparsers.add_parser("block-reward", help="block and uncle rewards")
    block_reward.add_argument("block_no", type=int)
    block_reward.set_defaults(
        handler=lambda client, args: client.block.get_block_reward(args.block_no)
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parses arguments, runs the selected lookup and prints the response.

    Returns the process exit code: 0 on success, 1 on configuration or network errors.
    """
    args = build_parser().parse_args(argv)
    config = get_config()
    try:
        config.validate(require_api_key=args.api_key is None)
    except ValueError as e:
        logger.error(str(e))
        return 1
    logger.debug(f"Configuration: {config.to_dict()}")

    init_sentry()
    try:
        with EtherScan(api_key=args.api_key, network=args.network) as client:
            result = args.handler(client, args)
    except ConfigurationError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1
    except NetworkError as e:
        logger.error(f"Request failed: {e}")
        return 1
    finally:
        close_sentry()

    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
