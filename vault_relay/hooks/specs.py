import flask
import pluggy

from vault_relay.constants import HOST_NAMESPACE

HOOK_SPEC = pluggy.HookspecMarker(HOST_NAMESPACE)


@HOOK_SPEC
def register_blueprints(app: flask.Flask) -> None:
    """Register the blueprints of a service with the given relay `app`."""
