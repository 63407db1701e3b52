"""ABOUTME: Enumerations and domain records for the Coinbase API client"""

from .enums import PriceSide
from .records import Balance, BalanceSheet, Currency, Ticker, UNAVAILABLE_TICKER_FIELDS

__all__ = [
    "PriceSide",
    "Balance",
    "BalanceSheet",
    "Currency",
    "Ticker",
    "UNAVAILABLE_TICKER_FIELDS",
]
