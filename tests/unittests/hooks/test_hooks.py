from unittest import mock

import flask

from vault_relay.hooks import RELAY_PM, get_plugin_manager
from vault_relay.hooks.impl import load_hook_modules
from vault_relay.services.common import blueprints as common_blueprints
from vault_relay.services.vault import blueprints as vault_blueprints


def test_load_hook_modules_returns_blueprints_of_all_services():
    assert set(load_hook_modules()) == {common_blueprints, vault_blueprints}


def test_relay_plugin_manager_has_services_registered():
    assert RELAY_PM.is_registered(common_blueprints)
    assert RELAY_PM.is_registered(vault_blueprints)


@mock.patch("vault_relay.hooks.impl.importlib.import_module", side_effect=ModuleNotFoundError)
def test_services_without_blueprints_are_skipped(_):
    assert load_hook_modules() == []


def test_register_blueprints_hook_registers_every_service():
    app = flask.Flask(__name__)

    RELAY_PM.hook.register_blueprints(app=app)

    assert {"admin_view", "cors_view", "metrics_view"} <= set(app.blueprints)
    assert {"balance_view", "deposit_view", "payments_view"} <= set(app.blueprints)


@mock.patch("vault_relay.hooks.pluggy.PluginManager.load_setuptools_entrypoints")
def test_plugins_are_loaded_from_entry_points(mock_load_entrypoints):
    get_plugin_manager("vault_relay")
    mock_load_entrypoints.assert_called_once_with("vault_relay")
