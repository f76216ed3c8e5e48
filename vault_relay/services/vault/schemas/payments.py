from marshmallow import ValidationError, post_load, validates_schema
from marshmallow.fields import Field, List, String
from marshmallow.validate import Length

from vault_relay.services.common.schemas import RelaySchema, TokenAmountField

MISSING_RECIPIENTS_OR_AMOUNTS = "Missing recipients or amounts"
RECIPIENTS_AMOUNTS_MISMATCH = "Recipients and amounts mismatch"
MISSING_PAYMENT_ID = "Missing paymentId"

_missing_batch_messages = {
    "required": MISSING_RECIPIENTS_OR_AMOUNTS,
    "null": MISSING_RECIPIENTS_OR_AMOUNTS,
}


class BatchPaymentSchema(RelaySchema):
    """Validator for POST /submit-batch-payment requests.

    Load-only parameters:

        - recipients (list of string)
        - amounts (list of :class:`TokenAmountField`)

    Dump-only parameters:

        - txHash (string)
        - message (string)
    """

    # Deserialization fields.
    recipients = List(
        String(),
        required=True,
        load_only=True,
        validate=Length(min=1, error=MISSING_RECIPIENTS_OR_AMOUNTS),
        error_messages=_missing_batch_messages,
    )
    amounts = List(
        TokenAmountField(),
        required=True,
        load_only=True,
        validate=Length(min=1, error=MISSING_RECIPIENTS_OR_AMOUNTS),
        error_messages=_missing_batch_messages,
    )

    # Serialization fields.
    tx_hash = String(required=True, dump_only=True, data_key="txHash")
    message = String(required=True, dump_only=True)

    @validates_schema
    def validate_lengths(self, data, **kwargs):
        if len(data["recipients"]) != len(data["amounts"]):
            raise ValidationError(RECIPIENTS_AMOUNTS_MISMATCH)


class PaymentIdField(Field):
    """A field for deserializing the id of a vault payment to an :class:`int`.

    Accepts non-negative integers (including integral floats), and strings of
    decimal digits.
    """

    default_error_messages = {
        "invalid": "Invalid paymentId: {value!r}",
        "null": "Invalid paymentId: None",
    }

    def _deserialize(self, value, attr, data, **kwargs) -> int:
        if isinstance(value, bool):
            raise self.make_error("invalid", value=value)
        if isinstance(value, str) and value.strip().isdecimal():
            return int(value)
        if isinstance(value, int) and value >= 0:
            return value
        if isinstance(value, float) and value.is_integer() and value >= 0:
            return int(value)
        raise self.make_error("invalid", value=value)


class ApprovePaymentSchema(RelaySchema):
    """Validator for POST /approve-payment requests.

    Load-only parameters:

        - paymentId (:class:`PaymentIdField`)

    Dump-only parameters:

        - txHash (string)
        - message (string)

    Falsy ids such as `0` are valid; only a missing `paymentId` is rejected as such.
    """

    # Deserialization fields.
    payment_id = PaymentIdField(
        required=True,
        load_only=True,
        data_key="paymentId",
        error_messages={"required": MISSING_PAYMENT_ID},
    )

    # Serialization fields.
    tx_hash = String(required=True, dump_only=True, data_key="txHash")
    message = String(required=True, dump_only=True)

    @post_load(pass_original=True)
    def add_requested_payment_id(self, data, original_data, **kwargs):
        data["requested_payment_id"] = original_data["paymentId"]
        return data
