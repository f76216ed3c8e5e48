"""Proxies for the contracts the relay forwards requests to.

All amounts handed to and returned by the proxies are fixed-point integers.
"""
from typing import Sequence

import structlog
from eth_utils import to_checksum_address

from vault_relay.contracts import (
    CONTRACT_CORPORATE_VAULT,
    CONTRACT_MANAGER,
    CONTRACT_USDX,
    ContractManager,
)
from vault_relay.network.client import LedgerClient, PendingTransaction

log = structlog.get_logger(__name__)


class ContractProxy:
    """Base class binding a contract's ABI and address to a :class:`LedgerClient`."""

    CONTRACT_NAME: str = ""

    def __init__(
        self, client: LedgerClient, address: str, contract_manager: ContractManager = CONTRACT_MANAGER
    ):
        self.client = client
        self.address = to_checksum_address(address)
        self.proxy = client.new_contract_proxy(
            abi=contract_manager.get_contract_abi(self.CONTRACT_NAME), contract_address=self.address
        )

    def __repr__(self):
        return f"<{self.__class__.__qualname__} {self.address}>"

    def transact(self, function_name: str, *args) -> PendingTransaction:
        log.debug("Preparing transaction", contract=self.CONTRACT_NAME, function=function_name)
        function = getattr(self.proxy.functions, function_name)(*args)
        return self.client.transact(function)


class StablecoinToken(ContractProxy):
    """The USDx token contract."""

    CONTRACT_NAME = CONTRACT_USDX

    def balance_of(self, address: str) -> int:
        return self.client.call(self.proxy.functions.balanceOf(to_checksum_address(address)))

    def mint(self, to: str, amount: int) -> PendingTransaction:
        """Mint `amount` tokens for the address `to`."""
        return self.transact("mint", to_checksum_address(to), amount)

    def approve(self, spender: str, amount: int) -> PendingTransaction:
        """Allow `spender` to transfer `amount` tokens on behalf of the relay's account."""
        return self.transact("approve", to_checksum_address(spender), amount)


class CorporateVault(ContractProxy):
    """The corporate vault holding deposited USDx and managing payments."""

    CONTRACT_NAME = CONTRACT_CORPORATE_VAULT

    def deposit(self, amount: int) -> PendingTransaction:
        """Move `amount` tokens from the relay's account into the vault.

        The vault must have been approved to transfer at least `amount` beforehand.
        """
        return self.transact("depositUSDx", amount)

    def submit_batch_payment(
        self, recipients: Sequence[str], amounts: Sequence[int]
    ) -> PendingTransaction:
        recipients = [to_checksum_address(recipient) for recipient in recipients]
        return self.transact("submitBatchPayment", recipients, list(amounts))

    def approve_payment(self, payment_id) -> PendingTransaction:
        return self.transact("approvePayment", payment_id)
