"""
JumpServer Python SDK
Signed API client with token, broker and vault authentication
"""

from .version import __version__
from .exceptions import (
    JmsSDKError,
    ValidationError,
    ConfigMissingError,
    EncodeError,
    SignError,
    MissingHeaderError,
    CredentialError,
    TransportError,
    ReadError,
    ServerError,
    DecodeError,
)
from .config import (
    AuthEnvironment,
    AuthMode,
    BrokerSettings,
    ClientConfig,
    EndpointConfig,
    VaultSettings,
    load_client_config_from_file,
    load_client_config_from_json,
)
from .signing import (
    HMACSigner,
    SignatureResult,
    SigningConfig,
    build_string_to_sign,
    create_signer,
    sign_request,
)
from .auth import (
    Authenticator,
    BrokerCredentialProvider,
    CachedCredentialProvider,
    CredentialProvider,
    Credentials,
    SignatureAuth,
    StaticCredentialProvider,
    TokenAuth,
    VaultClient,
    VaultConfig,
    VaultCredentialProvider,
)
from .http_client import (
    RequestExecutor,
    build_request,
    encode_query,
)
from .api import (
    JmsAPI,
    TokenAPI,
    SignedAPI,
    BrokerSignedAPI,
    VaultSignedAPI,
    create_api,
)
from .resources import (
    Account,
    AccountFilter,
    Asset,
    AssetFilter,
    ModelList,
    OperateLog,
    OperateLogFilter,
    Session,
    SessionFilter,
    User,
    UserFilter,
)
from .client import JmsClient, create_client, create_client_from_file
from .utils import combine_url

__all__ = [
    '__version__',
    # Exceptions
    'JmsSDKError',
    'ValidationError',
    'ConfigMissingError',
    'EncodeError',
    'SignError',
    'MissingHeaderError',
    'CredentialError',
    'TransportError',
    'ReadError',
    'ServerError',
    'DecodeError',
    # Configuration
    'AuthEnvironment',
    'AuthMode',
    'BrokerSettings',
    'ClientConfig',
    'EndpointConfig',
    'VaultSettings',
    'load_client_config_from_file',
    'load_client_config_from_json',
    # Signing
    'HMACSigner',
    'SignatureResult',
    'SigningConfig',
    'build_string_to_sign',
    'create_signer',
    'sign_request',
    # Authentication
    'Authenticator',
    'BrokerCredentialProvider',
    'CachedCredentialProvider',
    'CredentialProvider',
    'Credentials',
    'SignatureAuth',
    'StaticCredentialProvider',
    'TokenAuth',
    'VaultClient',
    'VaultConfig',
    'VaultCredentialProvider',
    # Transport and facade
    'RequestExecutor',
    'build_request',
    'encode_query',
    'JmsAPI',
    'TokenAPI',
    'SignedAPI',
    'BrokerSignedAPI',
    'VaultSignedAPI',
    'create_api',
    # Resources
    'Account',
    'AccountFilter',
    'Asset',
    'AssetFilter',
    'ModelList',
    'OperateLog',
    'OperateLogFilter',
    'Session',
    'SessionFilter',
    'User',
    'UserFilter',
    # Client
    'JmsClient',
    'create_client',
    'create_client_from_file',
    'combine_url',
]
