import pytest
from eth_account import Account

# Well known throw-away key, never use it on a live network.
TEST_PRIVKEY = "0x4c0883a69102937d6231471b5dbb6204fe512961708279f6d5f7b8e0d8d7b1a2"


@pytest.fixture
def privkey():
    return TEST_PRIVKEY


@pytest.fixture
def relay_address(privkey):
    return Account.from_key(privkey).address


@pytest.fixture
def minimal_settings(privkey):
    """The minimum settings required for instantiating a RelayConfig."""
    return {
        "ARBITRUM_RPC": "http://localhost:8545",
        "PRIVATE_KEY": privkey,
        "VAULT_ADDRESS": "0x1000000000000000000000000000000000000001",
        "USDX_ADDRESS": "0x2000000000000000000000000000000000000002",
    }
