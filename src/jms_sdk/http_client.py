"""
HTTP transport for JumpServer API communication

This module builds JSON requests and executes them, turning every failure
into an SDK exception. It performs exactly one HTTP call per request and
never retries.
"""

import json
import logging
from contextlib import closing
from collections.abc import Iterable
from typing import Any, Dict, Mapping, Optional, Union
from urllib.parse import urlencode, urlsplit, urlunsplit

import requests
from requests.exceptions import RequestException

from .exceptions import (
    DecodeError,
    EncodeError,
    ReadError,
    ServerError,
    TransportError,
    ValidationError,
)

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"

QueryValue = Union[str, int, float, bool, Iterable]


def encode_body(body: Any) -> Optional[bytes]:
    """
    Serialize a request payload to JSON bytes.

    Args:
        body: JSON-representable value, or None for no body

    Returns:
        Optional[bytes]: Encoded body, None when ``body`` is None

    Raises:
        EncodeError: If the value cannot be serialized
    """
    if body is None:
        return None
    try:
        return json.dumps(body, ensure_ascii=False, allow_nan=False).encode('utf-8')
    except (TypeError, ValueError) as e:
        raise EncodeError(
            f"make request error marshal body error: {e}",
            details={"body_type": type(body).__name__}
        ) from e


def build_request(method: str, endpoint: str, body: Any = None) -> requests.PreparedRequest:
    """
    Build an unauthenticated JSON request.

    Args:
        method: HTTP method
        endpoint: Absolute request URL
        body: Optional JSON payload

    Returns:
        requests.PreparedRequest: Request with ``Content-Type: application/json``

    Raises:
        EncodeError: If the payload cannot be serialized
        ValidationError: If the request cannot be created
    """
    payload = encode_body(body)
    request = requests.Request(
        method=method.upper(),
        url=endpoint,
        headers={'Content-Type': JSON_CONTENT_TYPE},
        data=payload,
    )
    try:
        prepared = request.prepare()
    except (RequestException, ValueError) as e:
        raise ValidationError(
            f"make new request error: {e}",
            details={"method": method, "endpoint": endpoint}
        ) from e
    logger.debug("Built %s request to %s", prepared.method, prepared.url)
    return prepared


def encode_query(params: Mapping[str, QueryValue]) -> str:
    """
    Encode a flat parameter mapping, sorted by key.

    Values may be scalars or lists of scalars; booleans become
    ``true``/``false``.
    """
    pairs = []
    for key in sorted(params):
        value = params[key]
        if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
            values = [value]
        else:
            values = list(value)
        for item in values:
            if isinstance(item, bool):
                item = 'true' if item else 'false'
            pairs.append((key, item))
    return urlencode(pairs)


def set_query(request: requests.PreparedRequest, params: Mapping[str, QueryValue]) -> requests.PreparedRequest:
    """Replace the query string of ``request`` in place and return it."""
    parts = urlsplit(request.url)
    request.url = urlunsplit((parts.scheme, parts.netloc, parts.path, encode_query(params), parts.fragment))
    return request


def populate_result(result: Any, data: Any) -> Any:
    """
    Write decoded JSON into a caller-supplied destination.

    Objects with a ``load`` method receive the data; dicts are updated and
    lists have their contents replaced.

    Raises:
        DecodeError: If the data does not fit the destination
    """
    if hasattr(result, 'load'):
        try:
            result.load(data)
        except (TypeError, ValueError, KeyError, AttributeError) as e:
            raise DecodeError(f"decode response body error: {e}") from e
        return result

    if isinstance(result, dict):
        if not isinstance(data, dict):
            raise DecodeError(f"decode response body error: cannot decode {type(data).__name__} into dict")
        result.update(data)
        return result

    if isinstance(result, list):
        if not isinstance(data, list):
            raise DecodeError(f"decode response body error: cannot decode {type(data).__name__} into list")
        result[:] = data
        return result

    raise DecodeError(f"decode response body error: unsupported result type {type(result).__name__}")


class RequestExecutor:
    """
    Executes prepared requests against the JumpServer API.
    """

    def __init__(self, timeout: float = 30.0, verify_ssl: bool = True, debug: bool = False):
        """
        Initialize the executor.

        Args:
            timeout: Request timeout in seconds
            verify_ssl: Whether to verify TLS certificates
            debug: Log raw response bodies at INFO on the ``jms_sdk.http_client``
                logger; the SDK installs no handler, so the application must
                configure logging (for example ``logging.basicConfig``) to see them
        """
        self.timeout = timeout
        self.verify_ssl = verify_ssl
        self.debug = debug

    def execute(self, request: requests.PreparedRequest, result: Any = None) -> Any:
        """
        Perform ``request`` once and decode the response into ``result``.

        Args:
            request: Prepared request
            result: Destination for the decoded body, or None to skip decoding

        Returns:
            The populated ``result``, or None when no destination was given

        Raises:
            TransportError: On network-level failure
            ReadError: If the response body cannot be read
            ServerError: If the status is outside [200, 400)
            DecodeError: If the body cannot be decoded into ``result``
        """
        details: Dict[str, Any] = {"method": request.method, "url": request.url}

        with closing(requests.Session()) as session:
            try:
                response = session.send(
                    request,
                    timeout=self.timeout,
                    verify=self.verify_ssl,
                    stream=True,
                )
            except RequestException as e:
                raise TransportError(f"do request error: {e}", details=details) from e

            with closing(response):
                try:
                    body = response.content
                except RequestException as e:
                    raise ReadError(f"read response body error: {e}", details=details) from e

                status_code = response.status_code

        text = body.decode('utf-8', errors='replace') if body else ''

        if self.debug:
            logger.info("response body: %s", text)

        if status_code < 200 or status_code >= 400:
            raise ServerError(
                status_code, text, details={**details, "status_code": status_code}, raw_body=body
            )

        if result is None:
            return None

        try:
            data = json.loads(body)
        except ValueError as e:
            raise DecodeError(f"decode response body error: {e}", details=details) from e

        return populate_result(result, data)
