"""
Configuration management for the JumpServer Python SDK

This module provides the client configuration, its JSON/environment
loaders, and the explicit environment snapshot used by credential providers.
"""

from .client_config import (
    AuthMode,
    ClientConfig,
    EndpointConfig,
    MAX_CREDENTIAL_TTL,
    load_client_config_from_json,
    load_client_config_from_file,
)
from .environment import (
    AuthEnvironment,
    BrokerSettings,
    VaultSettings,
    BROKER_URL_ENV,
    VAULT_ACCOUNT_ENV,
    VAULT_CERT_FILE_ENV,
    DEFAULT_ACCESS_TOKEN_FILE,
)

__all__ = [
    'AuthMode',
    'ClientConfig',
    'EndpointConfig',
    'MAX_CREDENTIAL_TTL',
    'load_client_config_from_json',
    'load_client_config_from_file',
    'AuthEnvironment',
    'BrokerSettings',
    'VaultSettings',
    'BROKER_URL_ENV',
    'VAULT_ACCOUNT_ENV',
    'VAULT_CERT_FILE_ENV',
    'DEFAULT_ACCESS_TOKEN_FILE',
]
