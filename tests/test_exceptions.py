"""
예외 계층 테스트
"""

import pytest

from cbapi.exceptions import (
    AuthenticationError,
    CoinbaseAPIException,
    ErrorKind,
    GenericExchangeError,
    RateLimitError,
    ServiceUnavailableError,
    TransportError,
    exception_for_kind,
)


@pytest.mark.parametrize("kind, error_class", [
    (ErrorKind.AUTHENTICATION, AuthenticationError),
    (ErrorKind.RATE_LIMIT, RateLimitError),
    (ErrorKind.SERVICE_UNAVAILABLE, ServiceUnavailableError),
    (ErrorKind.GENERIC, GenericExchangeError),
])
def test_exception_for_kind(kind, error_class):
    error = exception_for_kind(kind, "boom", 500)

    assert type(error) is error_class
    assert error.kind is kind
    assert error.message == "boom"
    assert error.http_status == 500
    assert isinstance(error, CoinbaseAPIException)


def test_every_kind_is_mapped():
    for kind in ErrorKind:
        assert exception_for_kind(kind, "x").kind is kind


def test_transport_error_is_generic():
    error = TransportError("HTTP request failed")

    assert isinstance(error, GenericExchangeError)
    assert error.kind is ErrorKind.GENERIC
    assert error.http_status is None
