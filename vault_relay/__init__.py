"""USDx Vault Relay.

Small HTTP relay forwarding balance, deposit and payment requests to the
``USDx`` token and ``CorporateVault`` contracts.
"""

__version__ = "0.1.0"
