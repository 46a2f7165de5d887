"""
JumpServer Python SDK - Request Signing Module

HMAC-SHA256 HTTP signatures covering ``(request-target)`` and ``date``,
as expected by the JumpServer access-key authentication backend.
"""

from .types import (
    SignatureAlgorithm,
    SigningConfig,
    SignatureResult,
    SigningErrorCodes,
    DEFAULT_SIGNED_HEADERS,
    REQUEST_TARGET,
    REQUEST_LINE,
    HOST,
    CONTENT_LENGTH,
    DATE,
)

from .canonical_message import (
    StringToSignBuilder,
    build_string_to_sign,
    ensure_date_header,
    format_http_date,
    path_and_query,
)

from .hmac_signer import (
    HMACSigner,
    compute_signature,
    create_signer,
    sign_request,
)

# Public API exports
__all__ = [
    # Core signing functionality
    'HMACSigner',
    'create_signer',
    'sign_request',
    'compute_signature',
    # Canonical string
    'StringToSignBuilder',
    'build_string_to_sign',
    'ensure_date_header',
    'format_http_date',
    'path_and_query',
    # Types
    'SignatureAlgorithm',
    'SigningConfig',
    'SignatureResult',
    'SigningErrorCodes',
    'DEFAULT_SIGNED_HEADERS',
    'REQUEST_TARGET',
    'REQUEST_LINE',
    'HOST',
    'CONTENT_LENGTH',
    'DATE',
]
