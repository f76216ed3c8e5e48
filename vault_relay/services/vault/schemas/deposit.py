from marshmallow import post_load
from marshmallow.fields import String

from vault_relay.services.common.schemas import RelaySchema, TokenAmountField

INVALID_DEPOSIT_AMOUNT = "Invalid deposit amount"


class DepositSchema(RelaySchema):
    """Validator for POST /deposit-usdx requests.

    Load-only parameters:

        - amount (:class:`TokenAmountField`)

    Dump-only parameters:

        - txHash (string)
        - message (string)

    The deserialized data holds the fixed-point `amount`, and the amount as it
    was sent under `requested_amount`.
    """

    # Deserialization fields.
    amount = TokenAmountField(
        required=True,
        load_only=True,
        error_messages={
            "required": INVALID_DEPOSIT_AMOUNT,
            "null": INVALID_DEPOSIT_AMOUNT,
            "invalid": INVALID_DEPOSIT_AMOUNT,
            "not_positive": INVALID_DEPOSIT_AMOUNT,
        },
    )

    # Serialization fields.
    tx_hash = String(required=True, dump_only=True, data_key="txHash")
    message = String(required=True, dump_only=True)

    @post_load(pass_original=True)
    def add_requested_amount(self, data, original_data, **kwargs):
        data["requested_amount"] = original_data["amount"]
        return data
