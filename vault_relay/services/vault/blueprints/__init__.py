import pluggy

from vault_relay.constants import HOST_NAMESPACE
from vault_relay.services.vault.blueprints.balance import balance_blueprint
from vault_relay.services.vault.blueprints.deposit import deposit_blueprint
from vault_relay.services.vault.blueprints.payments import payments_blueprint

__all__ = ["balance_blueprint", "deposit_blueprint", "payments_blueprint"]


HOOK_IMPL = pluggy.HookimplMarker(HOST_NAMESPACE)


@HOOK_IMPL
def register_blueprints(app):
    for bp in (balance_blueprint, deposit_blueprint, payments_blueprint):
        app.register_blueprint(bp)
