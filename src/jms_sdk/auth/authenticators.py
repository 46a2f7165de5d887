"""
Request authenticators

An authenticator produces a valid ``Authorization`` header for a request.
The request builder does not know which strategy is behind it.
"""

import logging
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from ..exceptions import JmsSDKError, SignError, ValidationError
from ..signing import DEFAULT_SIGNED_HEADERS, SignatureResult, create_signer
from .credentials import CredentialProvider

logger = logging.getLogger(__name__)

# Attribute of a signed request holding the signer that produced its signature
SIGNER_ATTRIBUTE = "_jms_signer"


class Authenticator(ABC):
    """Attaches authentication to an outbound request."""

    @abstractmethod
    def authenticate(self, request) -> None:
        """
        Authenticate ``request`` in place.

        Raises:
            SignError: If the request cannot be authenticated
        """

    def refresh(self, request) -> None:
        """
        Authenticate ``request`` again after its URL changed.

        Raises:
            SignError: If the request cannot be authenticated
        """
        self.authenticate(request)


class TokenAuth(Authenticator):
    """Static token authentication, bypassing HMAC signing."""

    def __init__(self, token: str):
        if not token:
            raise ValidationError("Token cannot be empty")
        self._token = token

    def authenticate(self, request) -> None:
        request.headers['Authorization'] = f"Token {self._token}"

    def __repr__(self) -> str:
        return "TokenAuth(token=***)"


class SignatureAuth(Authenticator):
    """HMAC signature authentication with keys from a credential provider."""

    def __init__(self, provider: CredentialProvider, headers: Optional[Sequence[str]] = None):
        self.provider = provider
        self.headers: List[str] = list(headers) if headers is not None else list(DEFAULT_SIGNED_HEADERS)

    def authenticate(self, request) -> None:
        self.sign(request)

    def sign(self, request) -> SignatureResult:
        """Resolve credentials and sign ``request``."""
        try:
            credentials = self.provider.resolve()
        except SignError:
            raise
        except JmsSDKError as e:
            raise SignError(
                f"resolve credentials error: {e}",
                details={"provider": self.provider.name, "cause": e.error_code}
            ) from e

        signer = create_signer(credentials.access_key, credentials.secret_key, self.headers)
        result = signer.sign_request(request)
        setattr(request, SIGNER_ATTRIBUTE, signer)
        logger.debug("Signed %s %s with key %s", request.method, request.url, credentials.access_key)
        return result

    def refresh(self, request) -> SignatureResult:
        """
        Sign ``request`` again with the key pair of its previous signature.

        Credentials are only resolved when the request was never signed here.
        """
        signer = getattr(request, SIGNER_ATTRIBUTE, None)
        if signer is None:
            return self.sign(request)
        return signer.sign_request(request)
