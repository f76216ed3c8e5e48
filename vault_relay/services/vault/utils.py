from typing import NamedTuple

from flask import current_app

from vault_relay.network import CorporateVault, LedgerClient, StablecoinToken, connect
from vault_relay.utils.configuration import RelayConfig

#: Keys under which the ledger client and contract proxies are stored in the app's config.
LEDGER_CLIENT = "ledger-client"
USDX_TOKEN = "usdx-token"
CORPORATE_VAULT = "corporate-vault"


class VaultContracts(NamedTuple):
    client: LedgerClient
    token: StablecoinToken
    vault: CorporateVault


def create_contracts(config: RelayConfig) -> VaultContracts:
    """Connect to the ledger configured in `config` and bind the contract proxies."""
    client = connect(config.rpc_url, config.private_key, receipt_timeout=config.receipt_timeout)
    return VaultContracts(
        client=client,
        token=StablecoinToken(client, config.usdx_address),
        vault=CorporateVault(client, config.vault_address),
    )


def get_contracts() -> VaultContracts:
    """Fetch the ledger client and contract proxies of the current flask app.

    :raises RuntimeError: if the app was constructed without them.
    """
    try:
        return VaultContracts(
            client=current_app.config[LEDGER_CLIENT],
            token=current_app.config[USDX_TOKEN],
            vault=current_app.config[CORPORATE_VAULT],
        )
    except KeyError:
        raise RuntimeError("No ledger client available on service!")


def format_requested_value(value) -> str:
    """Render a value taken from a JSON request body the way it was sent.

    Integral floats lose their fractional part, so ``100.0`` renders as ``100``.
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
