from vault_relay.services.vault.schemas.balance import BalanceSchema
from vault_relay.services.vault.schemas.deposit import DepositSchema
from vault_relay.services.vault.schemas.payments import (
    ApprovePaymentSchema,
    BatchPaymentSchema,
    PaymentIdField,
)

__all__ = [
    "ApprovePaymentSchema",
    "BalanceSchema",
    "BatchPaymentSchema",
    "DepositSchema",
    "PaymentIdField",
]
