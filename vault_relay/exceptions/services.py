class RelayError(RuntimeError):
    """There was a problem while relaying a request to the ledger."""


class InvalidRequest(RelayError):
    """The request body did not pass validation.

    Raised before any transaction is sent, so the ledger is never touched
    when this occurs.
    """


class InvalidAmount(InvalidRequest):
    """An amount could not be converted to its fixed-point representation."""


class TransactionReverted(RelayError):
    """A transaction was mined, but its execution reverted.

    The receipt is attached for inspection.
    """

    def __init__(self, tx_hash: str, receipt=None):
        self.tx_hash = tx_hash
        self.receipt = receipt
        super(TransactionReverted, self).__init__(f"Transaction {tx_hash} reverted")


class AmountTooPrecise(InvalidAmount):
    """An amount has more fractional digits than its token supports."""
