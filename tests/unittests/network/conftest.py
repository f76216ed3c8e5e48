from unittest import mock

import pytest

from vault_relay.network.client import LedgerClient


@pytest.fixture
def token_address():
    return "0x" + "22" * 20


@pytest.fixture
def vault_address():
    return "0x" + "11" * 20


@pytest.fixture
def tx_hash():
    return b"\xab" * 32


@pytest.fixture
def web3(tx_hash):
    web3 = mock.MagicMock()
    web3.eth.get_transaction_count.return_value = 7
    web3.eth.send_raw_transaction.return_value = tx_hash
    web3.eth.wait_for_transaction_receipt.return_value = {"status": 1, "blockNumber": 100}
    return web3


@pytest.fixture
def ledger_client(web3, privkey):
    return LedgerClient(web3, privkey, receipt_timeout=30, poll_latency=0.1)


@pytest.fixture
def unsigned_transaction(token_address):
    return {
        "to": token_address,
        "value": 0,
        "gas": 60_000,
        "maxFeePerGas": 2_000_000_000,
        "maxPriorityFeePerGas": 1_000_000_000,
        "nonce": 7,
        "chainId": 421614,
        "data": "0x",
    }
