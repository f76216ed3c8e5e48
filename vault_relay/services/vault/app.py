"""Construct and serve the relay's flask app."""
import structlog
import waitress

from vault_relay.services.utils.factories import construct_flask_app
from vault_relay.services.vault.utils import (
    CORPORATE_VAULT,
    LEDGER_CLIENT,
    USDX_TOKEN,
    create_contracts,
)
from vault_relay.utils.configuration import RelayConfig

log = structlog.get_logger(__name__)


def construct_vault_service(config: RelayConfig, test_config=None):
    """Create the relay app, connected to the ledger and contracts given in `config`."""
    from vault_relay import __version__

    log.info("Creating Vault Relay Flask App", version=__version__)
    app = construct_flask_app(test_config=test_config)

    log.debug("Connecting contract proxies", token=config.usdx_address, vault=config.vault_address)
    client, token, vault = create_contracts(config)
    app.config[LEDGER_CLIENT] = client
    app.config[USDX_TOKEN] = token
    app.config[CORPORATE_VAULT] = vault

    log.info("Relay account loaded", address=client.address)
    return app


def serve(config: RelayConfig):
    """Serve the relay with :mod:`waitress` on the configured host and port."""
    app = construct_vault_service(config)
    log.info("Backend running", host=config.host, port=config.port)
    waitress.serve(app, host=config.host, port=config.port)
