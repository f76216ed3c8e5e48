import pluggy

from vault_relay.constants import HOST_NAMESPACE
from vault_relay.services.common.blueprints.admin import admin_blueprint
from vault_relay.services.common.blueprints.cors import cors_blueprint
from vault_relay.services.common.blueprints.metrics import metrics_blueprint

__all__ = ["admin_blueprint", "cors_blueprint", "metrics_blueprint"]


HOOK_IMPL = pluggy.HookimplMarker(HOST_NAMESPACE)


@HOOK_IMPL
def register_blueprints(app):
    for bp in (admin_blueprint, cors_blueprint, metrics_blueprint):
        app.register_blueprint(bp)
