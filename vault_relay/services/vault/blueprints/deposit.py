"""Fund the corporate vault with freshly minted USDx.

The following endpoints are supplied by this blueprint:

    * [POST] /deposit-usdx
        Mint the requested amount of USDx to the relay's account, approve the vault
        to transfer it, and deposit it into the vault.

"""
import structlog
from flask import Blueprint, request

from vault_relay.network import PendingTransaction
from vault_relay.services.common.errors import handle_exception
from vault_relay.services.common.metrics import REDMetricsTracker
from vault_relay.services.vault.schemas import DepositSchema
from vault_relay.services.vault.utils import format_requested_value, get_contracts

log = structlog.get_logger(__name__)

deposit_blueprint = Blueprint("deposit_view", __name__)
deposit_blueprint.register_error_handler(Exception, handle_exception)

deposit_schema = DepositSchema()


@deposit_blueprint.route("/deposit-usdx", methods=["POST"])
def deposit_view():
    """Deposit USDx into the vault.

    Example::

        POST /deposit-usdx

            {"amount": "100"}

        200 OK

            {
                "txHash": "0x5c50...",
                "message": "100 USDx deposited successfully into the vault!"
            }

    The returned hash is the one of the final deposit transaction.
    """
    handlers = {"POST": deposit_usdx}
    with REDMetricsTracker(request.method, "/deposit-usdx"):
        return handlers[request.method]()


def deposit_usdx():
    data = deposit_schema.validate_and_deserialize(request.get_json(silent=True))
    amount = data["amount"]

    deposit_tx = mint_approve_and_deposit(amount)

    requested_amount = format_requested_value(data["requested_amount"])
    return deposit_schema.jsonify(
        {
            "tx_hash": deposit_tx.hash,
            "message": f"{requested_amount} USDx deposited successfully into the vault!",
        }
    )


def mint_approve_and_deposit(amount: int) -> PendingTransaction:
    """Move `amount` newly minted tokens into the vault.

    Each transaction is confirmed before the next one is sent. A failure
    aborts the remaining steps; earlier steps are not undone.
    """
    client, token, vault = get_contracts()

    log.info("Minting USDx", amount=amount, target=client.address)
    token.mint(client.address, amount).wait()

    log.info("Approving vault", amount=amount, spender=vault.address)
    token.approve(vault.address, amount).wait()

    log.info("Depositing USDx", amount=amount, vault=vault.address)
    deposit_tx = vault.deposit(amount)
    deposit_tx.wait()

    return deposit_tx
