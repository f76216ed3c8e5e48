"""HTTP services offered by the relay.

Every sub-package is a service supplying its Flask blueprints through a
``blueprints`` module, which registers them via the ``register_blueprints``
hook. See :mod:`vault_relay.hooks.impl`.
"""
