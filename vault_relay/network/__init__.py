from vault_relay.network.client import LedgerClient, PendingTransaction, connect
from vault_relay.network.proxies import CorporateVault, StablecoinToken

__all__ = ["CorporateVault", "LedgerClient", "PendingTransaction", "StablecoinToken", "connect"]
