from typing import Mapping

import flask
import structlog

from vault_relay.hooks import RELAY_PM

log = structlog.get_logger(__name__)


def construct_flask_app(
    test_config: Mapping = None,
    secret: str = "dev",
    config_file: str = "config.py",
    enable_plugins: bool = True,
) -> flask.Flask:
    """Construct a flask app with a set of default blueprints registered.

    The blueprints of all services are registered via the ``register_blueprints``
    hook, so a constructed app has the following endpoints:

        `/status`
        Returns 200 OK as long as the underlying flask app is responsive and running.

        `/metrics`
        Exposes prometheus compatible metrics.

        `/vault-balance`, `/deposit-usdx`, `/submit-batch-payment`, `/approve-payment`
        The relay endpoints, see :mod:`vault_relay.services.vault`.

    Blueprints supplied by plugins installed via the ``vault_relay`` entry point
    are injected as well. No blueprints are registered at all if `enable_plugins`
    is `False`.
    """
    app = flask.Flask(__name__, instance_relative_config=True)
    app.config.from_mapping(SECRET_KEY=secret)

    if test_config is not None:
        app.config.from_mapping(test_config)
    else:
        # Optional instance/config.py, e.g. for deployment specific flask settings.
        app.config.from_pyfile(config_file, silent=True)

    if enable_plugins:
        log.debug("Registering service blueprints")
        RELAY_PM.hook.register_blueprints(app=app)

    return app
