"""Tests for response classification and token refresh."""

import logging
from unittest.mock import MagicMock

import pytest

from fitbit_api.responses import (
    MAX_REFRESH_ATTEMPTS,
    ApiFailure,
    ApiSuccess,
    ResponseClassifier,
    UnhandledResponseError,
)


@pytest.fixture
def set_token():
    return MagicMock()


def test_success_carries_payload_and_lowercased_headers(make_response, set_token):
    response = make_response(200, {"sleep": []}, headers={
        "Content-Type": "application/json",
        "Fitbit-Rate-Limit-Remaining": "149",
    })
    result = ResponseClassifier(set_token).classify(lambda: response)

    assert isinstance(result, ApiSuccess)
    assert result.is_success
    assert result.code == 200
    assert result.data == {"sleep": []}
    assert result.response is response
    assert result.headers == {"content-type": "application/json", "fitbit-rate-limit-remaining": "149"}


def test_success_has_no_error_field(make_response, set_token):
    result = ResponseClassifier(set_token).classify(lambda: make_response(200, {}))
    assert not hasattr(result, "error")


def test_http_error_with_error_document(make_response, make_error, set_token):
    result = ResponseClassifier(set_token).classify(
        lambda: make_response(400, make_error("validation", "Invalid date"))
    )

    assert isinstance(result, ApiFailure)
    assert not result.is_success
    assert result.code == 400
    assert result.error["errors"][0]["message"] == "Invalid date"
    assert result.error_type == "validation"
    assert not hasattr(result, "data")


def test_errors_in_ok_response_are_a_failure(make_response, make_error, set_token):
    """Fitbit sometimes answers 200 with an error list."""
    result = ResponseClassifier(set_token).classify(
        lambda: make_response(200, make_error("system", "Oops"))
    )

    assert isinstance(result, ApiFailure)
    assert result.code == 200
    assert result.error_type == "system"


def test_empty_ok_body_is_success_without_data(make_response, set_token):
    result = ResponseClassifier(set_token).classify(lambda: make_response(204))

    assert isinstance(result, ApiSuccess)
    assert result.code == 204
    assert result.data is None


@pytest.mark.parametrize("status", [500, 502, 503])
def test_server_error_without_json_is_a_failure(make_response, set_token, status):
    result = ResponseClassifier(set_token).classify(
        lambda: make_response(status, body="<html>Internal Server Error</html>")
    )

    assert isinstance(result, ApiFailure)
    assert result.code == status
    assert result.error is None
    assert result.error_type is None


@pytest.mark.parametrize("status", [400, 404, 429])
def test_client_error_without_json_raises(make_response, set_token, status):
    response = make_response(status, body="Not Found", url="https://api.fitbit.com/1/user/-/nope.json")

    with pytest.raises(UnhandledResponseError) as exc_info:
        ResponseClassifier(set_token).classify(lambda: response)

    assert exc_info.value.status_code == status
    assert exc_info.value.url == "https://api.fitbit.com/1/user/-/nope.json"


def test_refresh_then_success(make_response, make_error, set_token):
    perform_call = MagicMock(side_effect=[
        make_response(401, make_error("invalid_token")),
        make_response(200, {"user": {"displayName": "Sam"}}),
    ])
    get_token = MagicMock(return_value="fresh-token")

    result = ResponseClassifier(set_token, get_token).classify(perform_call)

    assert isinstance(result, ApiSuccess)
    assert result.data == {"user": {"displayName": "Sam"}}
    assert perform_call.call_count == 2
    get_token.assert_called_once_with()
    set_token.assert_called_once_with("fresh-token")


def test_refresh_is_bounded(make_response, make_error, set_token):
    """A token rejected every time is refreshed twice, then reported."""
    perform_call = MagicMock(return_value=make_response(401, make_error("expired_token")))
    get_token = MagicMock(side_effect=["token-1", "token-2", "token-3"])

    result = ResponseClassifier(set_token, get_token).classify(perform_call)

    assert isinstance(result, ApiFailure)
    assert result.error_type == "expired_token"
    assert perform_call.call_count == MAX_REFRESH_ATTEMPTS + 1 == 3
    assert get_token.call_count == 2
    assert [call.args for call in set_token.call_args_list] == [("token-1",), ("token-2",)]


def test_attempts_already_spent_skip_refresh(make_response, make_error, set_token):
    perform_call = MagicMock(return_value=make_response(401, make_error("expired_token")))
    get_token = MagicMock(return_value="unused")

    result = ResponseClassifier(set_token, get_token).classify(perform_call, attempts=2)

    assert isinstance(result, ApiFailure)
    assert perform_call.call_count == 1
    get_token.assert_not_called()


def test_refresh_failure_returns_original_failure(make_response, make_error, set_token, caplog):
    original = make_response(401, make_error("expired_token"))
    perform_call = MagicMock(return_value=original)
    get_token = MagicMock(side_effect=RuntimeError("refresh endpoint down"))

    with caplog.at_level(logging.ERROR, logger="fitbit_api.responses"):
        result = ResponseClassifier(set_token, get_token).classify(perform_call)

    assert isinstance(result, ApiFailure)
    assert result.response is original
    assert perform_call.call_count == 1
    set_token.assert_not_called()
    assert "refresh endpoint down" in caplog.text


def test_failure_to_install_refreshed_token_returns_original_failure(make_response, make_error):
    original = make_response(401, make_error("invalid_token"))
    perform_call = MagicMock(return_value=original)
    get_token = MagicMock(return_value="fresh-token")
    set_token = MagicMock(side_effect=ValueError("bad header value"))

    result = ResponseClassifier(set_token, get_token).classify(perform_call)

    assert isinstance(result, ApiFailure)
    assert result.response is original
    assert perform_call.call_count == 1
    set_token.assert_called_once_with("fresh-token")


def test_no_refresh_without_callback(make_response, make_error, set_token):
    perform_call = MagicMock(return_value=make_response(401, make_error("expired_token")))

    result = ResponseClassifier(set_token).classify(perform_call)

    assert isinstance(result, ApiFailure)
    assert perform_call.call_count == 1
    set_token.assert_not_called()


def test_other_error_types_are_not_refreshed(make_response, make_error, set_token):
    perform_call = MagicMock(return_value=make_response(403, make_error("insufficient_scope")))
    get_token = MagicMock(return_value="unused")

    result = ResponseClassifier(set_token, get_token).classify(perform_call)

    assert result.error_type == "insufficient_scope"
    assert perform_call.call_count == 1
    get_token.assert_not_called()


def test_classification_is_repeatable(make_response, set_token):
    payload = {"summary": {"totalMinutesAsleep": 420}}
    classifier = ResponseClassifier(set_token)

    first = classifier.classify(lambda: make_response(200, payload))
    second = classifier.classify(lambda: make_response(200, payload))

    assert first.is_success and second.is_success
    assert first.data == second.data == payload
    set_token.assert_not_called()
