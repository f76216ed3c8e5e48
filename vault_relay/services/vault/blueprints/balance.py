"""Query the USDx balance of the relay's account.

The following endpoints are supplied by this blueprint:

    * [GET] /vault-balance
        Return the USDx balance held by the relay's own account, as a decimal string.

"""
import structlog
from flask import Blueprint, request

from vault_relay.services.common.errors import handle_exception
from vault_relay.services.common.metrics import REDMetricsTracker
from vault_relay.services.vault.schemas import BalanceSchema
from vault_relay.services.vault.utils import get_contracts
from vault_relay.utils.units import from_fixed_point

log = structlog.get_logger(__name__)

balance_blueprint = Blueprint("balance_view", __name__)
balance_blueprint.register_error_handler(Exception, handle_exception)

balance_schema = BalanceSchema()


@balance_blueprint.route("/vault-balance", methods=["GET"])
def vault_balance_view():
    """Return the USDx balance of the relay's account.

    Example::

        GET /vault-balance

        200 OK

            {"balance": "1250.5"}
    """
    handlers = {"GET": get_vault_balance}
    with REDMetricsTracker(request.method, "/vault-balance"):
        return handlers[request.method]()


def get_vault_balance():
    client, token, _ = get_contracts()

    balance = token.balance_of(client.address)
    log.debug("Fetched balance", address=client.address, balance=balance)

    return balance_schema.jsonify({"balance": from_fixed_point(balance)})
