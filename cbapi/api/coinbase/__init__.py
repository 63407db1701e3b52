"""ABOUTME: Coinbase v2 REST client"""

from .client import CoinbaseClient

__all__ = ["CoinbaseClient"]
