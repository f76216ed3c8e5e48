import pluggy
import structlog

from vault_relay.constants import HOST_NAMESPACE
from vault_relay.hooks import impl, specs

log = structlog.get_logger(__name__)


def get_plugin_manager(namespace: str) -> pluggy.PluginManager:
    """Fetch pluggy's plugin manager for our library."""
    pm = pluggy.PluginManager(namespace)
    log.debug("Loading Hook Specifications..")
    pm.add_hookspecs(specs)

    log.debug("Loading Hook Implementations from entry points..")
    pm.load_setuptools_entrypoints(namespace)

    log.debug("Registering Hook Implementations of vault_relay services..")
    for module in impl.load_hook_modules():
        pm.register(module)
    return pm


RELAY_PM = get_plugin_manager(HOST_NAMESPACE)
