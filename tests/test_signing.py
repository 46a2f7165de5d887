"""
Test suite for HMAC request signing

This module tests the canonical string construction, the HMAC signer and
the Authorization header it produces.
"""

import base64
import hashlib
import hmac
import re
from types import SimpleNamespace

import pytest
from requests.structures import CaseInsensitiveDict

from jms_sdk.exceptions import MissingHeaderError, SignError
from jms_sdk.http_client import build_request
from jms_sdk.signing import (
    HMACSigner,
    SigningConfig,
    build_string_to_sign,
    compute_signature,
    create_signer,
    ensure_date_header,
    format_http_date,
    path_and_query,
    sign_request,
    DEFAULT_SIGNED_HEADERS,
)

FIXED_DATE = "Mon, 02 Jan 2006 15:04:05 GMT"


def make_request(url="https://jms.example.com/api/v1/x?y=1", method="GET", headers=None, body=None):
    """Minimal request object exposing the attributes the signer reads."""
    return SimpleNamespace(
        method=method,
        url=url,
        headers=CaseInsensitiveDict(headers or {}),
        body=body,
    )


class TestStringToSign:
    """Test canonical string construction"""

    def test_request_target_with_query(self):
        request = make_request()
        assert build_string_to_sign(request, ["(request-target)"]) == "(request-target): get /api/v1/x?y=1"

    def test_request_target_empty_path(self):
        request = make_request(url="https://jms.example.com")
        assert build_string_to_sign(request, ["(request-target)"]) == "(request-target): get /"

    def test_request_target_from_prepared_request(self):
        request = build_request("POST", "https://jms.example.com/api/v1/assets/assets/")
        assert build_string_to_sign(request, ["(request-target)"]) == \
            "(request-target): post /api/v1/assets/assets/"

    def test_path_and_query(self):
        assert path_and_query("https://h/a/b?c=d") == "/a/b?c=d"
        assert path_and_query("https://h/a/b") == "/a/b"
        assert path_and_query("https://h") == "/"

    def test_order_follows_caller(self):
        request = make_request(headers={"Date": FIXED_DATE, "X-Org": "org-1"})

        forward = build_string_to_sign(request, ["(request-target)", "date", "x-org"])
        reverse = build_string_to_sign(request, ["x-org", "date", "(request-target)"])

        assert forward.split("\n") == [
            "(request-target): get /api/v1/x?y=1",
            f"date: {FIXED_DATE}",
            "x-org: org-1",
        ]
        assert reverse.split("\n") == list(reversed(forward.split("\n")))
        assert forward != reverse

    def test_deterministic(self):
        request = make_request(headers={"Date": FIXED_DATE})
        first = build_string_to_sign(request, DEFAULT_SIGNED_HEADERS)
        second = build_string_to_sign(request, DEFAULT_SIGNED_HEADERS)
        assert first == second

    def test_header_names_case_insensitive(self):
        request = make_request(headers={"date": FIXED_DATE})
        assert build_string_to_sign(request, ["Date"]) == f"date: {FIXED_DATE}"

    def test_missing_header_fails(self):
        request = make_request(headers={"Date": FIXED_DATE})

        with pytest.raises(MissingHeaderError) as exc_info:
            build_string_to_sign(request, ["(request-target)", "x-custom"])

        assert isinstance(exc_info.value, SignError)
        assert exc_info.value.details["header"] == "x-custom"

    def test_missing_date_fails_without_population(self):
        request = make_request()
        with pytest.raises(MissingHeaderError):
            build_string_to_sign(request, ["date"])

    def test_computed_components(self):
        request = make_request(url="https://jms.example.com:8443/api?q=1", method="post", body=b"12345")

        lines = build_string_to_sign(request, ["request-line", "host", "content-length"]).split("\n")

        assert lines == [
            "POST /api?q=1 HTTP/1.1",
            "host: jms.example.com:8443",
            "content-length: 5",
        ]

    def test_computed_components_prefer_headers(self):
        request = make_request(headers={"Host": "proxy.example.com", "Content-Length": "42"})
        lines = build_string_to_sign(request, ["host", "content-length"]).split("\n")
        assert lines == ["host: proxy.example.com", "content-length: 42"]

    def test_content_length_without_body(self):
        request = make_request()
        assert build_string_to_sign(request, ["content-length"]) == "content-length: 0"


class TestDateHeader:
    """Test Date header population"""

    def test_format_http_date(self):
        assert format_http_date(1136214245) == FIXED_DATE

    def test_date_added_when_absent(self):
        request = make_request()
        date = ensure_date_header(request, 1136214245)
        assert date == FIXED_DATE
        assert request.headers["Date"] == FIXED_DATE

    def test_existing_date_preserved(self):
        request = make_request(headers={"Date": "Tue, 03 Jan 2006 00:00:00 GMT"})
        ensure_date_header(request, 1136214245)
        assert request.headers["Date"] == "Tue, 03 Jan 2006 00:00:00 GMT"

    def test_current_date_format(self):
        pattern = r"^[A-Z][a-z]{2}, \d{2} [A-Z][a-z]{2} \d{4} \d{2}:\d{2}:\d{2} GMT$"
        assert re.match(pattern, format_http_date())


class TestHMACSigner:
    """Test HMAC-SHA256 signing"""

    def test_compute_signature_matches_hmac_sha256(self):
        expected = base64.b64encode(
            hmac.new(b"secret", b"date: x", hashlib.sha256).digest()
        ).decode("ascii")
        assert compute_signature("date: x", b"secret") == expected

    def test_sign_request_sets_authorization(self):
        request = make_request(headers={"Date": FIXED_DATE})
        signer = create_signer("ak-123", "sk-456")

        result = signer.sign_request(request)

        expected_string = f"(request-target): get /api/v1/x?y=1\ndate: {FIXED_DATE}"
        expected_signature = compute_signature(expected_string, b"sk-456")
        assert result.string_to_sign == expected_string
        assert result.signature == expected_signature
        assert request.headers["Authorization"] == (
            'Signature keyId="ak-123",algorithm="hmac-sha256",'
            f'headers="(request-target) date",signature="{expected_signature}"'
        )
        assert result.authorization == request.headers["Authorization"]
        assert result.headers == ["(request-target)", "date"]

    def test_sign_request_adds_date(self):
        request = make_request()
        sign_request(request, "ak", "sk")
        assert "Date" in request.headers
        assert "date: " + request.headers["Date"] in build_string_to_sign(request, ["date"])

    def test_signature_independent_of_other_headers(self):
        first = make_request(headers={"Date": FIXED_DATE})
        second = make_request(headers={"Date": FIXED_DATE, "Accept": "application/json"})

        assert sign_request(first, "ak", "sk").signature == sign_request(second, "ak", "sk").signature

    def test_different_secret_different_signature(self):
        first = make_request(headers={"Date": FIXED_DATE})
        second = make_request(headers={"Date": FIXED_DATE})

        assert sign_request(first, "ak", "sk-1").signature != sign_request(second, "ak", "sk-2").signature

    def test_missing_header_propagates(self):
        request = make_request()
        signer = create_signer("ak", "sk", ["(request-target)", "date", "digest"])
        with pytest.raises(MissingHeaderError):
            signer.sign_request(request)
        assert "Authorization" not in request.headers

    def test_invalid_signing_config(self):
        with pytest.raises(SignError):
            create_signer("", "sk")
        with pytest.raises(SignError):
            create_signer("ak", "")

    def test_signing_config_defaults(self):
        config = SigningConfig(key_id="ak", secret_key="sk")
        assert config.headers == ["(request-target)", "date"]
        assert config.secret_bytes == b"sk"
        assert "sk" not in repr(config)

    def test_signer_accepts_bytes_secret(self):
        request = make_request(headers={"Date": FIXED_DATE})
        result = HMACSigner(SigningConfig(key_id="ak", secret_key=b"sk")).sign_request(request)
        assert result.signature == compute_signature(result.string_to_sign, b"sk")
