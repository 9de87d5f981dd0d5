"""Coin bookkeeping for a coinswap wallet: spend info, a classified UTXO cache and HD index tracking."""

__version__ = "0.1.0"

__all__ = ["spend_info", "utxo_cache", "contracts"]