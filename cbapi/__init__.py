"""ABOUTME: Client-side request pipeline for the Coinbase v2 REST API"""

from .auth.models import AccessLevel, Credentials
from .api.coinbase.client import CoinbaseClient
from .exceptions import (
    ErrorKind,
    CoinbaseAPIException,
    AuthenticationError,
    RateLimitError,
    ServiceUnavailableError,
    GenericExchangeError,
    TransportError
)

__version__ = "1.0.0"

__all__ = [
    "AccessLevel",
    "Credentials",
    "CoinbaseClient",
    "ErrorKind",
    "CoinbaseAPIException",
    "AuthenticationError",
    "RateLimitError",
    "ServiceUnavailableError",
    "GenericExchangeError",
    "TransportError"
]
