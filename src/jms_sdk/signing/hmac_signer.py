"""
HMAC-SHA256 HTTP signature signer

This module signs outbound requests with the HTTP signature scheme the
JumpServer API expects for access-key authentication. The signature covers
an ordered list of headers and is written to the ``Authorization`` header.
"""

import base64
import logging
from typing import List, Optional, Sequence, Union

from cryptography.hazmat.primitives import hashes, hmac

from ..exceptions import SignError
from .types import (
    SigningConfig,
    SignatureResult,
    SigningErrorCodes,
)
from .canonical_message import (
    build_string_to_sign,
    covered_header_list,
    ensure_date_header,
)

logger = logging.getLogger(__name__)


def compute_signature(string_to_sign: str, secret_key: bytes) -> str:
    """
    Compute the base64-encoded HMAC-SHA256 of ``string_to_sign``.

    Args:
        string_to_sign: Canonical string
        secret_key: HMAC key

    Returns:
        str: Base64 (standard alphabet) signature
    """
    mac = hmac.HMAC(secret_key, hashes.SHA256())
    mac.update(string_to_sign.encode('utf-8'))
    return base64.b64encode(mac.finalize()).decode('ascii')


def format_authorization(key_id: str, algorithm: str, headers: List[str], signature: str) -> str:
    """Render the ``Authorization`` header value for a computed signature."""
    return (
        f'Signature keyId="{key_id}",algorithm="{algorithm}",'
        f'headers="{" ".join(headers)}",signature="{signature}"'
    )


class HMACSigner:
    """
    HTTP signature signer using HMAC-SHA256

    The signer holds the key material for one signing operation and
    mutates the request it is given.
    """

    def __init__(self, config: SigningConfig):
        """
        Initialize the signer with configuration.

        Args:
            config: Signing configuration
        """
        self.config = config

    def sign_request(self, request) -> SignatureResult:
        """
        Sign ``request`` in place.

        A ``Date`` header is added first when absent, then the string-to-sign
        is built and the ``Authorization`` header is set.

        Args:
            request: Request to sign

        Returns:
            SignatureResult: Signing result with the canonical string

        Raises:
            SignError: If signing fails
        """
        ensure_date_header(request)

        string_to_sign = build_string_to_sign(request, self.config.headers)
        logger.debug("String to sign for %s %s:\n%s", request.method, request.url, string_to_sign)

        try:
            signature = compute_signature(string_to_sign, self.config.secret_bytes)
        except (TypeError, ValueError) as e:
            raise SignError(
                f"Request signing failed: {e}",
                SigningErrorCodes.SIGNING_FAILED,
                {"original_error": str(e)}
            ) from e

        headers = covered_header_list(self.config.headers)
        authorization = format_authorization(
            self.config.key_id,
            self.config.algorithm.value,
            headers,
            signature,
        )
        request.headers['Authorization'] = authorization

        return SignatureResult(
            string_to_sign=string_to_sign,
            signature=signature,
            authorization=authorization,
            headers=headers,
        )


def create_signer(
    key_id: str,
    secret_key: Union[str, bytes],
    headers: Optional[Sequence[str]] = None
) -> HMACSigner:
    """
    Create an HMAC signer.

    Args:
        key_id: Access key
        secret_key: Secret key
        headers: Header names to sign (defaults to ``(request-target)`` and ``date``)

    Returns:
        HMACSigner: Configured signer

    Raises:
        SignError: If the key material is unusable
    """
    try:
        config = SigningConfig(
            key_id=key_id,
            secret_key=secret_key,
            headers=list(headers) if headers is not None else None,
        )
    except ValueError as e:
        raise SignError(
            f"Invalid signing configuration: {e}",
            SigningErrorCodes.INVALID_CONFIG,
        ) from e
    return HMACSigner(config)


def sign_request(
    request,
    key_id: str,
    secret_key: Union[str, bytes],
    headers: Optional[Sequence[str]] = None
) -> SignatureResult:
    """
    Convenience function to sign a request in one call.

    Args:
        request: Request to sign
        key_id: Access key
        secret_key: Secret key
        headers: Header names to sign

    Returns:
        SignatureResult: Signing result
    """
    return create_signer(key_id, secret_key, headers).sign_request(request)
