"""Microservice relaying requests to the USDx token and CorporateVault contracts.

The service owns a single signing account. It can report the account's USDx
balance, fund the vault from it, and submit and approve vault payments::

    GET /vault-balance

    200 OK

        {"balance": "150.25"}

Depositing mints the requested amount to the service's account, approves the
vault to transfer it, and deposits it, waiting for each transaction to be
confirmed before sending the next::

    POST /deposit-usdx

        {"amount": "100"}

    200 OK

        {"txHash": "0x...", "message": "100 USDx deposited successfully into the vault!"}

Payments are submitted in batches and approved by their id::

    POST /submit-batch-payment

        {"recipients": ["0x...", "0x..."], "amounts": ["10", "20.5"]}

    POST /approve-payment

        {"paymentId": 0}

Any failure, whether caused by an invalid request or by the ledger, is
answered with `500` and the error's message::

    500 INTERNAL SERVER ERROR

        {"error": "Invalid deposit amount"}

.. Note::

    Depositing is not atomic. If approving or depositing fails, the tokens
    minted in the first step stay with the service's account.
"""
