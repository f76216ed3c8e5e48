import pytest
from marshmallow import ValidationError, validates_schema

from vault_relay.exceptions import InvalidRequest
from vault_relay.services.common.schemas import (
    RelaySchema,
    TokenAmountField,
    first_error_message,
)


@pytest.fixture
def test_schema():
    """Minimal schema to test the :class:`RelaySchema` and :class:`TokenAmountField` classes.

    Defines a single required :class:`TokenAmountField` at :attr:`.TestSchema.amount`,
    and a schema validator rejecting an amount of exactly 13 tokens.
    """

    class TestSchema(RelaySchema):
        amount = TokenAmountField(required=True)

        @validates_schema
        def reject_unlucky_amount(self, data, **kwargs):
            if data["amount"] == 13_000_000:
                raise ValidationError("Unlucky amount")

    return TestSchema()


@pytest.mark.parametrize(
    "input_value, expected",
    argvalues=[("1", 1_000_000), ("0.25", 250_000), (7, 7_000_000), (0.5, 500_000)],
)
def test_token_amount_field_deserializes_to_fixed_point(input_value, expected):
    assert TokenAmountField()._deserialize(input_value, "amount", {}) == expected


def test_token_amount_field_respects_decimals():
    assert TokenAmountField(decimals=2)._deserialize("1.25", "amount", {}) == 125
    with pytest.raises(ValidationError, match="Amount exceeds 2 decimal places."):
        TokenAmountField(decimals=2)._deserialize("1.255", "amount", {})


@pytest.mark.parametrize(
    "input_value, expected_error",
    argvalues=[
        ("abc", "Invalid amount."),
        (True, "Invalid amount."),
        ("0", "Amount must be greater than 0."),
        (-3, "Amount must be greater than 0."),
        ("0.0000001", "Amount exceeds 6 decimal places."),
    ],
)
def test_token_amount_field_rejects_invalid_amounts(input_value, expected_error):
    with pytest.raises(ValidationError) as exc_info:
        TokenAmountField()._deserialize(input_value, "amount", {})
    assert exc_info.value.messages == [expected_error]


def test_token_amount_field_serializes_unchanged():
    assert TokenAmountField()._serialize(5, "amount", object()) == 5


class TestRelaySchema:
    def test_validate_and_deserialize_returns_loaded_data(self, test_schema):
        assert test_schema.validate_and_deserialize({"amount": "2"}) == {"amount": 2_000_000}

    @pytest.mark.parametrize("data_obj", [None, "amount=2", ["2"], 2])
    def test_non_objects_are_treated_as_empty_object(self, test_schema, data_obj):
        with pytest.raises(InvalidRequest, match="Missing data for required field."):
            test_schema.validate_and_deserialize(data_obj)

    def test_raises_invalid_request_with_first_error_message(self, test_schema):
        with pytest.raises(InvalidRequest) as exc_info:
            test_schema.validate_and_deserialize({"amount": "abc"})
        assert str(exc_info.value) == "Invalid amount."
        assert isinstance(exc_info.value.__cause__, ValidationError)

    def test_schema_validator_errors_are_reported(self, test_schema):
        with pytest.raises(InvalidRequest, match="Unlucky amount"):
            test_schema.validate_and_deserialize({"amount": 13})

    def test_unknown_keys_are_excluded(self, test_schema):
        assert test_schema.validate_and_deserialize({"amount": 1, "extra": True}) == {
            "amount": 1_000_000
        }


@pytest.mark.parametrize(
    "messages, expected",
    argvalues=[
        ("plain", "plain"),
        (["first", "second"], "first"),
        ({"amount": ["bad amount"]}, "bad amount"),
        ({"_schema": ["schema error"], "amount": ["field error"]}, "field error"),
        ({"amounts": {1: ["nested error"]}}, "nested error"),
        ({}, ""),
        ([], ""),
    ],
)
def test_first_error_message(messages, expected):
    assert first_error_message(messages) == expected
