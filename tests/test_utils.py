"""
Unit tests for URL helpers
"""

import pytest

from jms_sdk.utils import combine_url


@pytest.mark.parametrize("base,path", [
    ("https://jms.example.com", "/api/v1/users/users/"),
    ("https://jms.example.com/", "/api/v1/users/users/"),
    ("https://jms.example.com/", "api/v1/users/users/"),
    ("https://jms.example.com", "api/v1/users/users/"),
])
def test_combine_url(base, path):
    assert combine_url(base, path) == "https://jms.example.com/api/v1/users/users/"


def test_combine_url_keeps_base_path():
    assert combine_url("https://jms.example.com/jms", "api/") == "https://jms.example.com/jms/api/"
