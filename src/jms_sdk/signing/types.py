"""
Type definitions for request signing functionality

This module provides the constants and data classes used by the
HMAC HTTP signature implementation.
"""

from typing import List, Optional, Union
from dataclasses import dataclass, field
from enum import Enum


class SignatureAlgorithm(str, Enum):
    """Signature algorithm types"""
    HMAC_SHA256 = "hmac-sha256"


# Pseudo-headers computed from the request rather than read from its headers
REQUEST_TARGET = "(request-target)"
REQUEST_LINE = "request-line"
HOST = "host"
CONTENT_LENGTH = "content-length"
DATE = "date"

# Headers covered by every request sent to the JumpServer API
DEFAULT_SIGNED_HEADERS = [REQUEST_TARGET, DATE]


@dataclass
class SigningConfig:
    """
    Configuration for request signing

    Attributes:
        key_id: Access key identifying the signer
        secret_key: Shared secret used as the HMAC key
        headers: Ordered header names covered by the signature
        algorithm: Signature algorithm to use
    """
    key_id: str
    secret_key: Union[str, bytes] = field(repr=False)
    headers: Optional[List[str]] = None
    algorithm: SignatureAlgorithm = SignatureAlgorithm.HMAC_SHA256

    def __post_init__(self):
        """Validate signing configuration"""
        if not self.key_id:
            raise ValueError("Key ID cannot be empty")

        if not self.secret_key:
            raise ValueError("Secret key cannot be empty")

        if self.headers is None:
            self.headers = list(DEFAULT_SIGNED_HEADERS)

        if not self.headers:
            raise ValueError("At least one header must be signed")

        # Order is significant; only the case is normalized
        self.headers = [h.lower() for h in self.headers]

    @property
    def secret_bytes(self) -> bytes:
        if isinstance(self.secret_key, bytes):
            return self.secret_key
        return self.secret_key.encode('utf-8')


@dataclass
class SignatureResult:
    """
    Generated HTTP signature

    Attributes:
        string_to_sign: Canonical string the signature was computed over
        signature: Base64-encoded HMAC digest
        authorization: Complete Authorization header value
        headers: Header names covered, in signing order
    """
    string_to_sign: str
    signature: str
    authorization: str
    headers: List[str]

    def __post_init__(self):
        """Validate signature result"""
        if not self.signature:
            raise ValueError("Signature cannot be empty")

        if not self.authorization:
            raise ValueError("Authorization value cannot be empty")


# Common signing error codes
class SigningErrorCodes:
    """Standard error codes for signing operations"""

    INVALID_CONFIG = "INVALID_CONFIG"
    MISSING_REQUIRED_HEADER = "MISSING_HEADER"
    SIGNING_FAILED = "SIGNING_FAILED"
