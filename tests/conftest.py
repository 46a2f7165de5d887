"""
Shared fixtures for the JumpServer SDK test suite
"""

import pytest

from jms_sdk.config import AuthEnvironment, EndpointConfig


class FakeResponse:
    """Stand-in for requests.Response that records whether it was closed."""

    def __init__(self, status_code=200, body=b"", read_error=None):
        self.status_code = status_code
        self._body = body.encode('utf-8') if isinstance(body, str) else body
        self._read_error = read_error
        self.closed = False

    @property
    def content(self):
        if self._read_error is not None:
            raise self._read_error
        return self._body

    @property
    def text(self):
        return self.content.decode('utf-8')

    def close(self):
        self.closed = True


@pytest.fixture
def endpoint_config():
    return EndpointConfig(endpoints="https://jms.example.com")


@pytest.fixture
def token_file(tmp_path):
    path = tmp_path / "access-token"
    path.write_bytes(b'{"protected":"abc","payload":"def","signature":"ghi"}')
    return path


@pytest.fixture
def broker_env():
    return AuthEnvironment({"CONJUR_APPLIANCE_URL": "https://conjur.example.com"})


@pytest.fixture
def make_response():
    return FakeResponse
