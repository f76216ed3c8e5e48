from unittest import mock

import pytest

from vault_relay.services.utils.factories import construct_flask_app
from vault_relay.services.vault.utils import CORPORATE_VAULT, LEDGER_CLIENT, USDX_TOKEN

VAULT_ADDRESS = "0x1000000000000000000000000000000000000001"


def pending_transaction(tx_hash: str) -> mock.MagicMock:
    pending = mock.MagicMock(hash=tx_hash)
    pending.wait.return_value = {"status": 1, "blockNumber": 1}
    return pending


@pytest.fixture
def ledger_client(relay_address):
    return mock.MagicMock(address=relay_address)


@pytest.fixture
def token():
    token = mock.MagicMock()
    token.mint.return_value = pending_transaction("0xaa")
    token.approve.return_value = pending_transaction("0xbb")
    token.balance_of.return_value = 0
    return token


@pytest.fixture
def vault():
    vault = mock.MagicMock(address=VAULT_ADDRESS)
    vault.deposit.return_value = pending_transaction("0xcc")
    vault.submit_batch_payment.return_value = pending_transaction("0xdd")
    vault.approve_payment.return_value = pending_transaction("0xee")
    return vault


@pytest.fixture
def vault_app(ledger_client, token, vault):
    app = construct_flask_app(test_config={"TESTING": True})
    app.config[LEDGER_CLIENT] = ledger_client
    app.config[USDX_TOKEN] = token
    app.config[CORPORATE_VAULT] = vault
    return app


@pytest.fixture
def vault_client(vault_app):
    return vault_app.test_client()
