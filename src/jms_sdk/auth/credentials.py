"""
Credential material and provider abstractions
"""

import logging
import threading
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional

from ..config.client_config import MAX_CREDENTIAL_TTL
from ..exceptions import ValidationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Credentials:
    """Access-key / secret-key pair used for HMAC signing"""
    access_key: str
    secret_key: str = field(repr=False)

    def __post_init__(self):
        if not self.access_key:
            raise ValidationError("Access key cannot be empty")
        if not self.secret_key:
            raise ValidationError("Secret key cannot be empty")


class CredentialProvider(ABC):
    """Resolves the key pair for one signing operation."""

    name = "provider"

    @abstractmethod
    def resolve(self) -> Credentials:
        """
        Resolve credentials.

        Returns:
            Credentials: Freshly resolved key pair

        Raises:
            ConfigMissingError: If a required variable or file is absent
            CredentialError: If fetching the keys fails
        """


class StaticCredentialProvider(CredentialProvider):
    """Provider returning a key pair supplied up front."""

    name = "static"

    def __init__(self, access_key: str, secret_key: str):
        self._credentials = Credentials(access_key, secret_key)

    def resolve(self) -> Credentials:
        return self._credentials


class CachedCredentialProvider(CredentialProvider):
    """
    Short-lived cache in front of another provider.

    Resolved keys are reused for at most ``ttl`` seconds, which is capped at
    ``MAX_CREDENTIAL_TTL``.
    """

    def __init__(self, provider: CredentialProvider, ttl: float, clock=time.monotonic):
        if ttl <= 0 or ttl > MAX_CREDENTIAL_TTL:
            raise ValidationError(
                f"Credential TTL must be in (0, {MAX_CREDENTIAL_TTL:g}] seconds",
                details={"ttl": ttl}
            )
        self.provider = provider
        self.ttl = ttl
        self.name = f"cached-{provider.name}"
        self._clock = clock
        self._credentials: Optional[Credentials] = None
        self._expires_at = 0.0
        self._lock = threading.Lock()

    def resolve(self) -> Credentials:
        with self._lock:
            now = self._clock()
            if self._credentials is not None and now < self._expires_at:
                return self._credentials

            credentials = self.provider.resolve()
            self._credentials = credentials
            self._expires_at = now + self.ttl
            logger.debug("Cached credentials from %s for %.0fs", self.provider.name, self.ttl)
            return credentials

    def invalidate(self) -> None:
        """Drop any cached key pair."""
        with self._lock:
            self._credentials = None
            self._expires_at = 0.0
