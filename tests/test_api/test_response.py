"""
응답 분류 및 data 봉투 추출 테스트
"""

import json

import pytest

from cbapi.api.response import (
    Classification,
    ResponseClassifier,
    error_kind_for_status,
    extract_error_message,
    unwrap_data,
)
from cbapi.api.transport import HttpResponse
from cbapi.exceptions import (
    AuthenticationError,
    ErrorKind,
    GenericExchangeError,
    RateLimitError,
    ServiceUnavailableError,
)


ERROR_BODY = {"errors": {"id": "not_found", "message": "Not found"}}


class TestErrorKindForStatus:
    """상태 코드 -> ErrorKind 매핑 테스트"""

    @pytest.mark.parametrize("status, kind", [
        (400, ErrorKind.GENERIC),
        (401, ErrorKind.AUTHENTICATION),
        (402, ErrorKind.AUTHENTICATION),
        (403, ErrorKind.AUTHENTICATION),
        (404, ErrorKind.GENERIC),
        (429, ErrorKind.RATE_LIMIT),
        (500, ErrorKind.SERVICE_UNAVAILABLE),
        (503, ErrorKind.SERVICE_UNAVAILABLE),
        (418, ErrorKind.GENERIC),
        (502, ErrorKind.GENERIC),
    ])
    def test_mapping(self, status, kind):
        assert error_kind_for_status(status) is kind


class TestResponseClassifier:
    """ResponseClassifier 테스트"""

    def setup_method(self):
        """각 테스트 전 초기화"""
        self.classifier = ResponseClassifier()

    @pytest.mark.parametrize("status, body", [
        (200, {"data": []}),
        (201, {"data": {"id": "1"}}),
        (204, {}),
        (204, None),
        (204, "nil"),
    ])
    def test_success_statuses(self, status, body):
        result = self.classifier.classify(HttpResponse(status=status, body=body))

        assert result == Classification(success=True, status=status)

    @pytest.mark.parametrize("status, error_class", [
        (400, GenericExchangeError),
        (401, AuthenticationError),
        (402, AuthenticationError),
        (403, AuthenticationError),
        (404, GenericExchangeError),
        (429, RateLimitError),
        (500, ServiceUnavailableError),
        (503, ServiceUnavailableError),
        (418, GenericExchangeError),
    ])
    def test_failure_raises_exactly_one_classified_error(self, status, error_class):
        """실패 상태 코드는 해당 종류의 예외 하나만 발생"""
        # Given
        response = HttpResponse(status=status, body=ERROR_BODY)

        # When
        result = self.classifier.classify(response)
        with pytest.raises(error_class) as exc_info:
            self.classifier.check(response)

        # Then
        assert result.success is False
        assert result.kind is error_class.kind
        assert type(exc_info.value) is error_class
        assert exc_info.value.http_status == status
        assert exc_info.value.message == "Not found"

    def test_check_returns_body_on_success(self):
        body = {"data": [{"id": "BTC"}]}

        assert self.classifier.check(HttpResponse(status=200, body=body)) is body

    @pytest.mark.parametrize("body", [{}, None])
    def test_204_is_success_with_empty_payload(self, body):
        """본문 없는 204도 빈 payload의 성공 (전송 계층 구현과 무관)"""
        assert self.classifier.check(HttpResponse(status=204, body=body)) == {}

    @pytest.mark.parametrize("body", [None, "nil"])
    def test_missing_body_is_failure_even_with_200(self, body):
        result = self.classifier.classify(HttpResponse(status=200, body=body))

        assert result.success is False
        assert result.kind is ErrorKind.GENERIC
        assert result.message

    def test_none_response_is_failure(self):
        with pytest.raises(GenericExchangeError) as exc_info:
            self.classifier.check(None)

        assert exc_info.value.http_status == 200
        assert exc_info.value.message == "null"

    def test_status_from_body_when_transport_has_none(self):
        """전송 계층 상태가 없으면 본문의 status 사용"""
        response = HttpResponse(status=None, body={"status": 429, "errors": {"message": "slow down"}})

        with pytest.raises(RateLimitError, match="slow down"):
            self.classifier.check(response)

    def test_status_defaults_to_200(self):
        response = HttpResponse(status=None, body={"data": [1]})

        assert self.classifier.extract_status(response) == 200
        assert self.classifier.classify(response).success

    def test_non_json_body_is_classified(self):
        """HTML 오류 페이지 등 JSON이 아닌 본문도 분류"""
        with pytest.raises(ServiceUnavailableError) as exc_info:
            self.classifier.check(HttpResponse(status=503, body="<html>maintenance</html>"))

        assert "maintenance" in exc_info.value.message


class TestExtractErrorMessage:
    """오류 메시지 추출 테스트"""

    def test_prefers_errors_message(self):
        assert extract_error_message(ERROR_BODY) == "Not found"

    def test_falls_back_to_serialized_errors(self):
        """errors에 message가 없으면 errors 직렬화"""
        errors = [{"id": "invalid_scope", "message": "Invalid scope"}]

        message = extract_error_message({"errors": errors})

        assert json.loads(message) == errors

    def test_falls_back_to_serialized_body(self):
        """errors가 없으면 전체 본문 직렬화"""
        body = {"error": "unexpected"}

        assert json.loads(extract_error_message(body)) == body

    @pytest.mark.parametrize("body", [None, "", {}, {"errors": None}, {"errors": {}}])
    def test_never_empty(self, body):
        assert extract_error_message(body) != ""


class TestUnwrapData:
    """data 봉투 추출 테스트"""

    def test_returns_data_unchanged(self):
        data = [{"id": "BTC"}]

        assert unwrap_data({"data": data}) is data

    @pytest.mark.parametrize("body", [
        {},
        {"errors": []},
        {"data": None},
        {"data": []},
        {"data": {}},
        {"data": ""},
        None,
        [],
    ])
    def test_missing_or_empty_data_is_malformed(self, body):
        """data가 없거나 비어있으면 ([] 포함) GenericExchangeError"""
        with pytest.raises(GenericExchangeError) as exc_info:
            unwrap_data(body)

        assert "coinbase failed due to a malformed response" in str(exc_info.value)
        assert json.dumps(body) in str(exc_info.value)

    def test_empty_list_data_is_malformed(self):
        with pytest.raises(GenericExchangeError, match=r'\{"data": \[\]\}'):
            unwrap_data({"data": []})
