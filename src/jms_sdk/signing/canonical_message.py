"""
Canonical string construction for HTTP signatures

This module builds the string-to-sign from selected request fields. Each
signed header name yields exactly one line and the lines keep the order the
caller asked for.
"""

import time
from email.utils import formatdate
from typing import List, Optional, Sequence
from urllib.parse import urlsplit

from ..exceptions import MissingHeaderError
from .types import (
    REQUEST_TARGET,
    REQUEST_LINE,
    HOST,
    CONTENT_LENGTH,
    SigningErrorCodes,
)


def format_http_date(timestamp: Optional[float] = None) -> str:
    """
    Format a timestamp as an RFC 1123 HTTP date.

    Args:
        timestamp: Unix timestamp (uses current time if None)

    Returns:
        str: Date such as ``Mon, 02 Jan 2006 15:04:05 GMT``
    """
    if timestamp is None:
        timestamp = time.time()
    return formatdate(timestamp, usegmt=True)


def ensure_date_header(request, timestamp: Optional[float] = None) -> str:
    """Populate the Date header when the request carries none and return it."""
    date = request.headers.get('Date')
    if date is None:
        date = format_http_date(timestamp)
        request.headers['Date'] = date
    return date


def path_and_query(url: str) -> str:
    """Return the request URI of ``url``: path (``/`` when empty) plus raw query."""
    parts = urlsplit(url)
    target = parts.path or '/'
    if parts.query:
        target += '?' + parts.query
    return target


class StringToSignBuilder:
    """
    Builds the string-to-sign for a single request
    """

    def __init__(self, request, header_names: Sequence[str]):
        """
        Initialize the builder.

        Args:
            request: Request with ``method``, ``url``, ``headers`` and ``body``
            header_names: Header names to cover, in signing order
        """
        self.request = request
        self.header_names = list(header_names)

    def build(self) -> str:
        """
        Build the string-to-sign.

        Returns:
            str: Newline-joined lines in the order of ``header_names``

        Raises:
            MissingHeaderError: If a named header is absent from the request
        """
        lines = [self._build_line(name) for name in self.header_names]
        return '\n'.join(lines)

    def _build_line(self, header_name: str) -> str:
        name = header_name.lower()

        if name == REQUEST_TARGET:
            method = (self.request.method or '').lower()
            return f"{REQUEST_TARGET}: {method} {path_and_query(self.request.url)}"

        if name == REQUEST_LINE:
            method = (self.request.method or '').upper()
            return f"{method} {path_and_query(self.request.url)} HTTP/1.1"

        if name == HOST:
            host = self.request.headers.get('Host') or urlsplit(self.request.url).netloc
            return f"{HOST}: {host}"

        if name == CONTENT_LENGTH:
            length = self.request.headers.get('Content-Length')
            if length is None:
                length = str(len(self.request.body or b''))
            return f"{CONTENT_LENGTH}: {length}"

        value = self.request.headers.get(header_name)
        if value is None:
            raise MissingHeaderError(
                f"missing header {header_name!r} required for signing",
                SigningErrorCodes.MISSING_REQUIRED_HEADER,
                {"header": header_name, "available_headers": list(self.request.headers.keys())}
            )

        return f"{name}: {value}"


def build_string_to_sign(request, header_names: Sequence[str]) -> str:
    """
    Build the string-to-sign for ``request`` covering ``header_names``.

    Args:
        request: Request to describe
        header_names: Ordered header names (case-insensitive)

    Returns:
        str: Canonical string-to-sign
    """
    return StringToSignBuilder(request, header_names).build()


def covered_header_list(header_names: Sequence[str]) -> List[str]:
    """Lower-case header names for the ``headers`` parameter of the signature."""
    return [name.lower() for name in header_names]
