from vault_relay.utils.configuration.base import ConfigMapping
from vault_relay.utils.configuration.relay import RelayConfig, load_relay_config

__all__ = ["ConfigMapping", "RelayConfig", "load_relay_config"]
