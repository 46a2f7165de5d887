"""
JumpServer Python SDK - Authentication Module

Credential providers (static, broker fetch, vault client) and the
authenticators that turn them into an ``Authorization`` header.
"""

from .credentials import (
    Credentials,
    CredentialProvider,
    StaticCredentialProvider,
    CachedCredentialProvider,
)
from .broker import BrokerCredentialProvider
from .vault import (
    VaultClient,
    VaultConfig,
    VaultCredentialProvider,
    read_token_file,
    token_authorization,
)
from .authenticators import (
    Authenticator,
    TokenAuth,
    SignatureAuth,
)

__all__ = [
    'Credentials',
    'CredentialProvider',
    'StaticCredentialProvider',
    'CachedCredentialProvider',
    'BrokerCredentialProvider',
    'VaultClient',
    'VaultConfig',
    'VaultCredentialProvider',
    'read_token_file',
    'token_authorization',
    'Authenticator',
    'TokenAuth',
    'SignatureAuth',
]
