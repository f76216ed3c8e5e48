#: Namespace used for the pluggy hook specifications and implementations.
HOST_NAMESPACE = "vault_relay"

#: Number of fractional digits used by the USDx token contract.
USDX_DECIMALS = 6

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 4000

#: Seconds to wait for a transaction receipt before giving up.
RECEIPT_TIMEOUT = 120
RECEIPT_POLL_LATENCY = 0.5

#: Environment variables read by :class:`vault_relay.utils.configuration.relay.RelayConfig`.
ENV_RPC_URL = "ARBITRUM_RPC"
ENV_PRIVATE_KEY = "PRIVATE_KEY"
ENV_VAULT_ADDRESS = "VAULT_ADDRESS"
ENV_USDX_ADDRESS = "USDX_ADDRESS"
ENV_PORT = "PORT"
ENV_HOST = "HOST"
ENV_RECEIPT_TIMEOUT = "RECEIPT_TIMEOUT"

CONTRACT_USDX = "USDx"
CONTRACT_CORPORATE_VAULT = "CorporateVault"
