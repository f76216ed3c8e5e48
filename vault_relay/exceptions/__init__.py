from vault_relay.exceptions.config import ConfigurationError, MissingSettingError
from vault_relay.exceptions.services import (
    AmountTooPrecise,
    InvalidAmount,
    InvalidRequest,
    RelayError,
    TransactionReverted,
)

__all__ = [
    "AmountTooPrecise",
    "ConfigurationError",
    "InvalidAmount",
    "InvalidRequest",
    "MissingSettingError",
    "RelayError",
    "TransactionReverted",
]
