from marshmallow.fields import String

from vault_relay.services.common.schemas import RelaySchema


class BalanceSchema(RelaySchema):
    """Serializer for GET /vault-balance responses.

    Dump-only parameters:

        - balance (string)
    """

    balance = String(required=True, dump_only=True)
