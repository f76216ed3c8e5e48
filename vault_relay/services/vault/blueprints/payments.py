"""Submit and approve payments of the corporate vault.

The following endpoints are supplied by this blueprint:

    * [POST] /submit-batch-payment
        Submit a single payment to several recipients.

    * [POST] /approve-payment
        Approve a pending payment by its id.

"""
import structlog
from flask import Blueprint, request

from vault_relay.services.common.errors import handle_exception
from vault_relay.services.common.metrics import REDMetricsTracker
from vault_relay.services.vault.schemas import ApprovePaymentSchema, BatchPaymentSchema
from vault_relay.services.vault.utils import format_requested_value, get_contracts

log = structlog.get_logger(__name__)

payments_blueprint = Blueprint("payments_view", __name__)
payments_blueprint.register_error_handler(Exception, handle_exception)

batch_payment_schema = BatchPaymentSchema()
approve_payment_schema = ApprovePaymentSchema()


@payments_blueprint.route("/submit-batch-payment", methods=["POST"])
def batch_payment_view():
    """Submit a batch payment to the vault.

    `recipients` and `amounts` are matched by position, and must therefore
    be of equal length.

    Example::

        POST /submit-batch-payment

            {
                "recipients": ["0x1111...", "0x2222..."],
                "amounts": ["10", "20.5"]
            }

        200 OK

            {"txHash": "0x9a1b...", "message": "Batch payment submitted!"}
    """
    handlers = {"POST": submit_batch_payment}
    with REDMetricsTracker(request.method, "/submit-batch-payment"):
        return handlers[request.method]()


def submit_batch_payment():
    data = batch_payment_schema.validate_and_deserialize(request.get_json(silent=True))
    _, _, vault = get_contracts()

    log.info("Submitting batch payment", recipients=len(data["recipients"]))
    tx = vault.submit_batch_payment(data["recipients"], data["amounts"])
    tx.wait()

    return batch_payment_schema.jsonify({"tx_hash": tx.hash, "message": "Batch payment submitted!"})


@payments_blueprint.route("/approve-payment", methods=["POST"])
def approve_payment_view():
    """Approve the pending vault payment with the given id.

    Example::

        POST /approve-payment

            {"paymentId": 0}

        200 OK

            {"txHash": "0x77ce...", "message": "Payment 0 approved!"}
    """
    handlers = {"POST": approve_payment}
    with REDMetricsTracker(request.method, "/approve-payment"):
        return handlers[request.method]()


def approve_payment():
    data = approve_payment_schema.validate_and_deserialize(request.get_json(silent=True))
    _, _, vault = get_contracts()

    log.info("Approving payment", payment_id=data["payment_id"])
    tx = vault.approve_payment(data["payment_id"])
    tx.wait()

    payment_id = format_requested_value(data["requested_payment_id"])
    return approve_payment_schema.jsonify(
        {"tx_hash": tx.hash, "message": f"Payment {payment_id} approved!"}
    )
