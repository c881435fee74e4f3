"""txledger — batch replay of a client transaction log into final account balances."""

__version__ = "0.1.0"
