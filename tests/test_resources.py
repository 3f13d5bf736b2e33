"""
test_resources.py

Tests for the resource clients: each operation must hit its fixed module/action
pair with the expected wire parameters and return the decoded body.
"""

from datetime import date
from urllib.parse import parse_qs

import pytest

from etherscan_client.api.errors import NetworkError
from etherscan_client.api.params import (
    BlockType,
    BlockValidationOptions,
    Closest,
    LogOptions,
    Sort,
    Tag,
    TopicOperator,
    TopicOptions,
    TransactionOptions,
    VerifyProxyContractOptions,
    VerifySourceCodeOptions,
)
from tests.conftest import make_response, query_of


def sent_query(last_request):
    """Query parameters of the last call, without the apikey."""
    _, url, _ = last_request()
    query = query_of(url)
    assert query.pop("apikey") == "K"
    return query


class TestAccount:
    """Tests for the account resource client"""

    def test_get_balance_single(self, client, last_request):
        client.account.get_balance("0xde0b295669a9fd93d5f28d9ec85e40f4cb697bae", tag=Tag.LATEST)

        assert sent_query(last_request) == {
            "module": "account",
            "action": "balance",
            "address": "0xde0b295669a9fd93d5f28d9ec85e40f4cb697bae",
            "tag": "latest",
        }

    def test_get_balance_multiple_uses_balancemulti(self, client, last_request):
        """Test that an address list switches to balancemulti with a joined value"""
        client.account.get_balance(["0xAA", "0xBB"])

        assert sent_query(last_request) == {
            "module": "account",
            "action": "balancemulti",
            "address": "0xAA,0xBB",
        }

    def test_get_normal_transactions(self, client, last_request):
        options = TransactionOptions(start_block=0, end_block=99999999, page=1,
                                     offset=10, sort=Sort.ASC)

        client.account.get_normal_transactions("0x1", options)

        assert sent_query(last_request) == {
            "module": "account",
            "action": "txlist",
            "address": "0x1",
            "startblock": "0",
            "endblock": "99999999",
            "page": "1",
            "offset": "10",
            "sort": "asc",
        }

    def test_get_internal_transactions_without_options(self, client, last_request):
        client.account.get_internal_transactions("0x1")

        assert sent_query(last_request) == {
            "module": "account", "action": "txlistinternal", "address": "0x1",
        }

    def test_get_internal_transactions_by_hash(self, client, last_request):
        client.account.get_internal_transactions_by_hash("0xH")

        assert sent_query(last_request) == {
            "module": "account", "action": "txlistinternal", "txhash": "0xH",
        }

    def test_get_internal_transactions_by_block_range(self, client, last_request):
        client.account.get_internal_transactions_by_block_range(
            TransactionOptions(start_block=13481773, end_block=13491773)
        )

        assert sent_query(last_request) == {
            "module": "account",
            "action": "txlistinternal",
            "startblock": "13481773",
            "endblock": "13491773",
        }

    @pytest.mark.parametrize("method, action", [
        ("get_erc20_token_events", "tokentx"),
        ("get_erc721_token_events", "tokennfttx"),
        ("get_erc1155_token_events", "token1155tx"),
    ])
    def test_token_events(self, client, last_request, method, action):
        getattr(client.account, method)("0x1", "0xC", TransactionOptions(page=1))

        assert sent_query(last_request) == {
            "module": "account",
            "action": action,
            "address": "0x1",
            "contractaddress": "0xC",
            "page": "1",
        }

    def test_token_events_without_contract(self, client, last_request):
        client.account.get_erc20_token_events("0x1")

        assert "contractaddress" not in sent_query(last_request)

    def test_get_validated_blocks(self, client, last_request):
        client.account.get_validated_blocks("0x1", BlockType.UNCLES,
                                            BlockValidationOptions(page=1, offset=10))

        assert sent_query(last_request) == {
            "module": "account",
            "action": "getminedblocks",
            "address": "0x1",
            "blocktype": "uncles",
            "page": "1",
            "offset": "10",
        }

    def test_get_beacon_chain_withdrawals(self, client, last_request):
        client.account.get_beacon_chain_withdrawals("0x1")

        assert sent_query(last_request) == {
            "module": "account", "action": "txsBeaconWithdrawal", "address": "0x1",
        }

    def test_get_historical_balance(self, client, last_request):
        client.account.get_historical_balance("0x1", 8000000)

        assert sent_query(last_request) == {
            "module": "account", "action": "balancehistory", "address": "0x1",
            "blockno": "8000000",
        }


class TestBlock:
    """Tests for the block resource client"""

    def test_get_block_reward(self, client, last_request):
        client.block.get_block_reward(2165403)

        assert sent_query(last_request) == {
            "module": "block", "action": "getblockreward", "blockno": "2165403",
        }

    def test_get_block_countdown(self, client, last_request):
        client.block.get_block_countdown(16701588)

        assert sent_query(last_request)["action"] == "getblockcountdown"

    def test_get_block_number_by_timestamp(self, client, last_request):
        client.block.get_block_number_by_timestamp(1578638524, Closest.BEFORE)

        assert sent_query(last_request) == {
            "module": "block",
            "action": "getblocknobytime",
            "timestamp": "1578638524",
            "closest": "before",
        }

    @pytest.mark.parametrize("method, action", [
        ("get_daily_avg_block_size", "dailyavgblocksize"),
        ("get_daily_block_count", "dailyblkcount"),
        ("get_daily_block_rewards", "dailyblockrewards"),
        ("get_daily_avg_block_time", "dailyavgblocktime"),
        ("get_daily_uncle_block_count", "dailyuncleblkcount"),
    ])
    def test_daily_series_use_stats_module(self, client, last_request, method, action):
        """Test that the daily series go to the stats module with ISO dates"""
        getattr(client.block, method)(date(2019, 2, 1), "2019-02-28", Sort.DESC)

        assert sent_query(last_request) == {
            "module": "stats",
            "action": action,
            "startdate": "2019-02-01",
            "enddate": "2019-02-28",
            "sort": "desc",
        }


class TestContract:
    """Tests for the contract resource client"""

    def test_get_abi(self, client, session):
        payload = {"status": "1", "message": "OK", "result": "[{\"type\":\"function\"}]"}
        session.request.return_value = make_response(payload)

        assert client.contract.get_abi("0xC") == payload

    def test_get_source_code(self, client, last_request):
        client.contract.get_source_code("0xC")

        assert sent_query(last_request) == {
            "module": "contract", "action": "getsourcecode", "address": "0xC",
        }

    def test_get_creator_joins_addresses(self, client, last_request):
        client.contract.get_creator(["0xAA", "0xBB"])

        assert sent_query(last_request) == {
            "module": "contract",
            "action": "getcontractcreation",
            "contractaddresses": "0xAA,0xBB",
        }

    def test_verify_source_code_posts_form(self, client, session, last_request):
        """Test that a verification submission is a form POST returning the GUID payload"""
        payload = {"status": "1", "message": "OK",
                   "result": "ezq878u486pzijkvvmerl6a9mzwhv6sefgvqi5tkwceejc7tvn"}
        session.request.return_value = make_response(payload)
        options = VerifySourceCodeOptions(
            chain_id=1,
            source_code="{}",
            contract_address="0xC",
            contract_name="contracts/Verified.sol:Verified",
            compiler_version="v0.8.26+commit.8a97fa7a",
        )

        result = client.contract.verify_source_code(options)

        method, url, kwargs = last_request()
        assert result == payload
        assert method == "POST"
        assert query_of(url) == {"module": "contract", "action": "verifysourcecode", "apikey": "K"}
        body = {key: values[0] for key, values in parse_qs(kwargs["data"]).items()}
        assert body == {
            "chainid": "1",
            "sourcecode": "{}",
            "contractaddress": "0xC",
            "contractname": "contracts/Verified.sol:Verified",
            "compilerversion": "v0.8.26+commit.8a97fa7a",
            "codeformat": "solidity-standard-json-input",
        }

    def test_verify_proxy_contract(self, client, last_request):
        client.contract.verify_proxy_contract(
            VerifyProxyContractOptions(contract_address="0xP", expected_implementation="0xI")
        )

        method, url, kwargs = last_request()
        assert method == "POST"
        assert query_of(url)["action"] == "verifyproxycontract"
        assert parse_qs(kwargs["data"]) == {
            "contractaddress": ["0xP"],
            "expectedimplementation": ["0xI"],
        }

    def test_check_verification_status(self, client, last_request):
        client.contract.check_verification_status("guid-1")

        assert sent_query(last_request) == {
            "module": "contract", "action": "checkverifystatus", "guid": "guid-1",
        }

    def test_check_proxy_verification(self, client, last_request):
        client.contract.check_proxy_verification("guid-2")

        assert sent_query(last_request)["action"] == "checkproxyverification"


class TestLogs:
    """Tests for the logs resource client"""

    def test_get_logs_by_address_keeps_block_range_case(self, client, last_request):
        client.logs.get_logs_by_address("0xA", LogOptions(from_block=12878196, to_block=12879196,
                                                          page=1, offset=1000))

        assert sent_query(last_request) == {
            "module": "logs",
            "action": "getLogs",
            "address": "0xA",
            "fromBlock": "12878196",
            "toBlock": "12879196",
            "page": "1",
            "offset": "1000",
        }

    def test_get_logs_by_topics(self, client, last_request):
        client.logs.get_logs_by_topics(TopicOptions(
            from_block=12878196,
            to_block=12879196,
            topic0="0xddf2",
            topic1="0x0000",
            topic0_1_opr=TopicOperator.OR,
        ))

        query = sent_query(last_request)
        assert "address" not in query
        assert query["topic0"] == "0xddf2"
        assert query["topic0_1_opr"] == "or"

    def test_get_logs_by_address_and_topics(self, client, last_request):
        client.logs.get_logs_by_address_and_topics("0xA", TopicOptions(topic0="0xddf2"))

        assert sent_query(last_request) == {
            "module": "logs", "action": "getLogs", "address": "0xA", "topic0": "0xddf2",
        }


class TestTransaction:
    """Tests for the transaction resource client"""

    def test_check_execution_status(self, client, last_request):
        client.transaction.check_execution_status("0xH")

        assert sent_query(last_request) == {
            "module": "transaction", "action": "getstatus", "txhash": "0xH",
        }

    def test_check_tx_receipt_status(self, client, last_request):
        client.transaction.check_tx_receipt_status("0xH")

        assert sent_query(last_request)["action"] == "gettxreceiptstatus"


class TestOperationsFailOnNetworkErrors:
    """Every operation surfaces a non-success status as a NetworkError"""

    @pytest.mark.parametrize("call", [
        lambda c: c.account.get_balance("0x1"),
        lambda c: c.account.get_normal_transactions("0x1"),
        lambda c: c.block.get_block_reward(1),
        lambda c: c.block.get_daily_block_count("2019-02-01", "2019-02-28"),
        lambda c: c.contract.get_abi("0xC"),
        lambda c: c.contract.verify_proxy_contract(VerifyProxyContractOptions(contract_address="0xP")),
        lambda c: c.logs.get_logs_by_topics(),
        lambda c: c.transaction.check_execution_status("0xH"),
    ])
    def test_network_error(self, client, session, call):
        session.request.return_value = make_response(status_code=500)

        with pytest.raises(NetworkError, match="Network response was not ok"):
            call(client)
