"""
Unit tests for request building and execution
"""

import json
import logging
from unittest.mock import MagicMock, patch
from urllib.parse import parse_qs, urlsplit

import pytest
import requests

from jms_sdk.exceptions import (
    DecodeError,
    EncodeError,
    ReadError,
    ServerError,
    TransportError,
    ValidationError,
)
from jms_sdk.http_client import (
    RequestExecutor,
    build_request,
    encode_body,
    encode_query,
    populate_result,
    set_query,
)
from jms_sdk.resources import Session


class TestBuildRequest:
    """Test request construction"""

    def test_json_body(self):
        request = build_request("post", "https://jms.example.com/api/v1/users/users/", {"name": "bob"})

        assert request.method == "POST"
        assert request.headers["Content-Type"] == "application/json"
        assert json.loads(request.body) == {"name": "bob"}

    def test_no_body(self):
        request = build_request("GET", "https://jms.example.com/api/v1/users/users/")

        assert request.body is None
        assert request.headers["Content-Type"] == "application/json"
        assert "Authorization" not in request.headers

    def test_unserializable_body(self):
        with pytest.raises(EncodeError) as exc_info:
            build_request("POST", "https://jms.example.com/", {"when": object()})
        assert exc_info.value.error_code == "ENCODE_ERROR"

    def test_nan_rejected(self):
        with pytest.raises(EncodeError):
            encode_body({"value": float("nan")})

    def test_invalid_url(self):
        with pytest.raises(ValidationError, match="make new request error"):
            build_request("GET", "not-a-url")

    def test_body_round_trip(self):
        original = {"id": "abc", "count": 3, "ratio": 0.25, "tags": ["a", "ü"], "nested": {"ok": True, "none": None}}
        assert json.loads(encode_body(original)) == original


class TestQuery:
    """Test query-string handling"""

    def test_set_query_round_trip(self):
        request = build_request("GET", "https://jms.example.com/api/v1/users/users/")
        params = {"limit": ["10"], "search": ["bob"]}

        returned = set_query(request, params)

        assert returned is request
        assert parse_qs(urlsplit(request.url).query) == params

    def test_set_query_replaces_existing(self):
        request = build_request("GET", "https://jms.example.com/api/v1/users/users/?old=1")
        set_query(request, {"new": "2"})
        assert urlsplit(request.url).query == "new=2"
        assert urlsplit(request.url).path == "/api/v1/users/users/"

    def test_encode_query_sorted(self):
        assert encode_query({"search": "bob", "limit": 10}) == "limit=10&search=bob"

    def test_encode_query_multi_values_and_bools(self):
        assert encode_query({"id": ["a", "b"], "is_active": True}) == "id=a&id=b&is_active=true"

    def test_encode_query_escapes(self):
        assert encode_query({"search": "a b&c"}) == "search=a+b%26c"


class TestPopulateResult:
    """Test writing decoded data into destinations"""

    def test_dict_destination(self):
        result = {"keep": 1}
        populate_result(result, {"id": "abc"})
        assert result == {"keep": 1, "id": "abc"}

    def test_list_destination(self):
        result = ["old"]
        populate_result(result, [1, 2])
        assert result == [1, 2]

    def test_model_destination(self):
        session = populate_result(Session(), {"id": "abc", "unknown": 1})
        assert session.id == "abc"
        assert session.extra == {"unknown": 1}

    def test_shape_mismatch(self):
        with pytest.raises(DecodeError):
            populate_result({}, [1, 2])
        with pytest.raises(DecodeError):
            populate_result([], {"id": "abc"})
        with pytest.raises(DecodeError):
            populate_result(Session(), ["abc"])

    def test_unsupported_destination(self):
        with pytest.raises(DecodeError, match="unsupported result type"):
            populate_result(42, {"id": "abc"})


@patch('jms_sdk.http_client.requests.Session')
class TestRequestExecutor:
    """Test request execution"""

    def _request(self):
        return build_request("GET", "https://jms.example.com/api/v1/terminal/sessions/abc/")

    def _session(self, mock_session_cls, response=None, error=None):
        session = MagicMock()
        if error is not None:
            session.send.side_effect = error
        else:
            session.send.return_value = response
        mock_session_cls.return_value = session
        return session

    def test_success_populates_destination(self, mock_session_cls, make_response):
        response = make_response(200, '{"id":"abc"}')
        session = self._session(mock_session_cls, response)
        result = {}

        returned = RequestExecutor().execute(self._request(), result)

        assert returned is result
        assert result["id"] == "abc"
        assert response.closed
        session.close.assert_called_once()

    def test_send_arguments(self, mock_session_cls, make_response):
        session = self._session(mock_session_cls, make_response(200, "{}"))
        request = self._request()

        RequestExecutor(timeout=5.0, verify_ssl=False).execute(request, {})

        session.send.assert_called_once_with(request, timeout=5.0, verify=False, stream=True)

    def test_server_error(self, mock_session_cls, make_response):
        response = make_response(404, '{"detail":"not found"}')
        self._session(mock_session_cls, response)

        with pytest.raises(ServerError) as exc_info:
            RequestExecutor().execute(self._request(), {})

        error = exc_info.value
        assert "404" in str(error)
        assert '{"detail":"not found"}' in str(error)
        assert error.status_code == 404
        assert error.body == '{"detail":"not found"}'
        assert response.closed

    @pytest.mark.parametrize("status", [199, 400, 500, 503])
    def test_status_outside_range(self, mock_session_cls, make_response, status):
        self._session(mock_session_cls, make_response(status, "nope"))
        with pytest.raises(ServerError):
            RequestExecutor().execute(self._request())

    def test_redirect_status_is_success(self, mock_session_cls, make_response):
        self._session(mock_session_cls, make_response(302, ""))
        assert RequestExecutor().execute(self._request()) is None

    def test_no_destination_skips_decoding(self, mock_session_cls, make_response):
        response = make_response(204, "")
        self._session(mock_session_cls, response)

        assert RequestExecutor().execute(self._request(), None) is None
        assert response.closed

    def test_transport_error(self, mock_session_cls):
        cause = requests.exceptions.ConnectionError("connection refused")
        session = self._session(mock_session_cls, error=cause)

        with pytest.raises(TransportError) as exc_info:
            RequestExecutor().execute(self._request(), {})

        assert exc_info.value.__cause__ is cause
        assert "connection refused" in str(exc_info.value)
        session.close.assert_called_once()

    def test_timeout_is_transport_error(self, mock_session_cls):
        self._session(mock_session_cls, error=requests.exceptions.Timeout("timed out"))
        with pytest.raises(TransportError):
            RequestExecutor().execute(self._request(), {})

    def test_read_error(self, mock_session_cls, make_response):
        response = make_response(200, read_error=requests.exceptions.ChunkedEncodingError("broken"))
        session = self._session(mock_session_cls, response)

        with pytest.raises(ReadError):
            RequestExecutor().execute(self._request(), {})

        assert response.closed
        session.close.assert_called_once()

    def test_decode_error_keeps_decoder_message(self, mock_session_cls, make_response):
        self._session(mock_session_cls, make_response(200, "not json"))

        with pytest.raises(DecodeError) as exc_info:
            RequestExecutor().execute(self._request(), {})

        assert "Expecting value" in str(exc_info.value)

    def test_server_error_keeps_raw_body(self, mock_session_cls, make_response):
        self._session(mock_session_cls, make_response(502, b"bad gateway \xff\xfe"))

        with pytest.raises(ServerError) as exc_info:
            RequestExecutor().execute(self._request(), {})

        assert exc_info.value.raw_body == b"bad gateway \xff\xfe"
        assert exc_info.value.body == "bad gateway \ufffd\ufffd"

    def test_decode_into_model(self, mock_session_cls, make_response):
        self._session(mock_session_cls, make_response(200, '{"id":"abc","protocol":"ssh"}'))

        session = RequestExecutor().execute(self._request(), Session())

        assert session.id == "abc"
        assert session.protocol == "ssh"

    def test_debug_logs_body(self, mock_session_cls, make_response, caplog):
        self._session(mock_session_cls, make_response(500, "boom"))

        with caplog.at_level(logging.INFO, logger="jms_sdk.http_client"):
            with pytest.raises(ServerError):
                RequestExecutor(debug=True).execute(self._request())

        assert "response body: boom" in caplog.text
        record = next(r for r in caplog.records if r.getMessage() == "response body: boom")
        assert record.name == "jms_sdk.http_client"
        assert record.levelno == logging.INFO

    def test_no_body_logging_without_debug(self, mock_session_cls, make_response, caplog):
        self._session(mock_session_cls, make_response(200, '{"secret":"x"}'))

        with caplog.at_level(logging.INFO, logger="jms_sdk.http_client"):
            RequestExecutor().execute(self._request(), {})

        assert "response body" not in caplog.text
