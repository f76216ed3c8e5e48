from typing import Any, Mapping, Union

from flask_marshmallow import Schema
from marshmallow import EXCLUDE, ValidationError
from marshmallow.fields import Field

from vault_relay.constants import USDX_DECIMALS
from vault_relay.exceptions import AmountTooPrecise, InvalidAmount, InvalidRequest
from vault_relay.utils.units import to_fixed_point


def first_error_message(messages: Union[str, list, dict]) -> str:
    """Pick the first message from a (possibly nested) marshmallow error structure."""
    if isinstance(messages, dict):
        # Field errors are reported before errors of the schema validators.
        keys = sorted(messages, key=lambda key: key == "_schema")
        return first_error_message(messages[keys[0]]) if keys else ""
    if isinstance(messages, (list, tuple)):
        return first_error_message(messages[0]) if messages else ""
    return str(messages)


class RelaySchema(Schema):
    """A modified :class:`.Schema` class, raising :exc:`InvalidRequest` on validation errors.

    Unknown keys in the request body are ignored.

    Provides a convenience method for validation and deserialization.
    """

    class Meta:
        unknown = EXCLUDE

    def validate_and_deserialize(self, data_obj: Any) -> dict:
        """Validate `data_obj` and deserialize its fields to native python objects.

        Anything but a JSON object is treated like an empty object.

        :raises InvalidRequest:
            if validating the `data_obj` did not succeed. Its message is the
            first error message reported by marshmallow.
        """
        if not isinstance(data_obj, Mapping):
            data_obj = {}
        try:
            return self.load(data_obj)
        except ValidationError as e:
            raise InvalidRequest(first_error_message(e.messages)) from e


class TokenAmountField(Field):
    """A field for (de)serializing a human readable token amount from and to a fixed-point :class:`int`.

    Accepts decimal strings and JSON numbers. The amount must be strictly positive,
    and must not have more fractional digits than `decimals`.
    """

    default_error_messages = {
        "invalid": "Invalid amount.",
        "not_positive": "Amount must be greater than 0.",
        "too_precise": "Amount exceeds {decimals} decimal places.",
    }

    def __init__(self, *args, decimals: int = USDX_DECIMALS, **kwargs):
        super(TokenAmountField, self).__init__(*args, **kwargs)
        self.decimals = decimals

    def _deserialize(self, value, attr, data, **kwargs) -> int:
        """Load the amount and scale it to its fixed-point representation."""
        try:
            scaled = to_fixed_point(value, self.decimals)
        except AmountTooPrecise as e:
            raise self.make_error("too_precise", decimals=self.decimals) from e
        except InvalidAmount as e:
            raise self.make_error("invalid") from e
        if scaled <= 0:
            raise self.make_error("not_positive")
        return scaled

    def _serialize(self, value, attr, obj, **kwargs):
        return value
