"""Signing JSON-RPC client for the ledger the relay's contracts live on.

Every transaction is signed locally using the relay's private key and sent as
a raw transaction. Sending returns a :class:`PendingTransaction` right away,
which has to be waited on to learn whether the transaction was confirmed.
"""
from typing import Any, Optional

import structlog
from eth_account import Account
from eth_utils import encode_hex, to_checksum_address
from prometheus_client import Counter
from web3 import HTTPProvider, Web3
from web3.contract import Contract
from web3.contract.contract import ContractFunction
from web3.types import TxReceipt

from vault_relay.constants import RECEIPT_POLL_LATENCY, RECEIPT_TIMEOUT
from vault_relay.contracts import ABI
from vault_relay.exceptions import TransactionReverted

log = structlog.get_logger(__name__)

TRANSACTIONS_TOTAL = Counter(
    "ledger_transactions_total",
    "Transactions sent to the ledger, by contract function and outcome.",
    labelnames=("function", "outcome"),
)


class PendingTransaction:
    """A transaction which was sent to the ledger, but not necessarily mined yet."""

    def __init__(self, client: "LedgerClient", tx_hash: bytes, function_name: str = ""):
        self.client = client
        self.tx_hash = tx_hash
        self.function_name = function_name

    def __repr__(self):
        return f"<{self.__class__.__qualname__} {self.hash}>"

    @property
    def hash(self) -> str:
        """The 0x-prefixed hex encoded transaction hash."""
        return encode_hex(self.tx_hash)

    def wait(self, timeout: Optional[float] = None) -> TxReceipt:
        """Block until the transaction was mined and return its receipt.

        :raises web3.exceptions.TimeExhausted:
            if no receipt is available after `timeout` seconds. Defaults to
            the client's receipt timeout.
        :raises TransactionReverted: if the transaction's execution failed.
        """
        timeout = self.client.receipt_timeout if timeout is None else timeout
        log.debug("Waiting for receipt", tx_hash=self.hash, timeout=timeout)
        receipt = self.client.web3.eth.wait_for_transaction_receipt(
            self.tx_hash, timeout=timeout, poll_latency=self.client.poll_latency
        )
        if receipt["status"] == 0:
            log.error("Transaction reverted", tx_hash=self.hash, block=receipt["blockNumber"])
            TRANSACTIONS_TOTAL.labels(self.function_name, "reverted").inc()
            raise TransactionReverted(self.hash, receipt)

        TRANSACTIONS_TOTAL.labels(self.function_name, "confirmed").inc()
        log.info("Transaction confirmed", tx_hash=self.hash, block=receipt["blockNumber"])
        return receipt


class LedgerClient:
    """Send signed transactions and read-only calls to contracts via `web3`.

    The client does not keep track of nonces itself; each transaction uses the
    account's pending transaction count at the time it is built.
    """

    def __init__(
        self,
        web3: Web3,
        privkey: str,
        receipt_timeout: float = RECEIPT_TIMEOUT,
        poll_latency: float = RECEIPT_POLL_LATENCY,
    ):
        self.web3 = web3
        self.account = Account.from_key(privkey)
        self.receipt_timeout = receipt_timeout
        self.poll_latency = poll_latency

    def __repr__(self):
        return f"<{self.__class__.__qualname__} address={self.address}>"

    @property
    def address(self) -> str:
        """Checksum address of the relay's account."""
        return self.account.address

    def new_contract_proxy(self, abi: ABI, contract_address: str) -> Contract:
        return self.web3.eth.contract(address=to_checksum_address(contract_address), abi=abi)

    def call(self, function: ContractFunction) -> Any:
        """Execute a read-only call of the given contract `function`."""
        return function.call({"from": self.address})

    def transact(self, function: ContractFunction) -> PendingTransaction:
        """Build, sign and send a transaction calling the given contract `function`.

        Gas and fees are estimated by :mod:`web3`. If the call would revert,
        the estimation fails with a :exc:`web3.exceptions.ContractLogicError`
        carrying the revert reason, and nothing is sent.
        """
        nonce = self.web3.eth.get_transaction_count(self.address, "pending")
        transaction = function.build_transaction({"from": self.address, "nonce": nonce})
        log.debug("Sending transaction", function=function.fn_name, nonce=nonce)

        signed = self.account.sign_transaction(transaction)
        tx_hash = self.web3.eth.send_raw_transaction(signed.raw_transaction)

        TRANSACTIONS_TOTAL.labels(function.fn_name, "sent").inc()
        pending = PendingTransaction(self, tx_hash, function.fn_name)
        log.info("Transaction sent", function=function.fn_name, tx_hash=pending.hash)
        return pending


def connect(chain_url: str, privkey: str, **kwargs) -> LedgerClient:
    """Create a :class:`LedgerClient` talking to the JSON-RPC endpoint at `chain_url`."""
    log.debug("Connecting to ledger", chain_url=chain_url)
    return LedgerClient(Web3(HTTPProvider(chain_url)), privkey, **kwargs)
