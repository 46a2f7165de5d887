"""
Client configuration for the JumpServer Python SDK

Provides the endpoint configuration shared by every resource and the
client configuration that selects an authentication mode.
"""

import json
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Union
from urllib.parse import urlparse

from ..exceptions import ConfigMissingError, ValidationError
from .environment import AuthEnvironment, BrokerSettings, VaultSettings

# Upper bound for credential caching; secrets are never kept longer
MAX_CREDENTIAL_TTL = 300.0

_TRUE_VALUES = ("1", "true", "yes", "on")


class AuthMode(str, Enum):
    """Authentication strategies understood by the API facade"""
    TOKEN = "token"
    BROKER = "broker"
    VAULT = "vault"


@dataclass(frozen=True)
class EndpointConfig:
    """Base URL and transport settings, immutable once built."""
    endpoints: str
    debug: bool = False
    timeout: float = 30.0
    verify_ssl: bool = True

    def __post_init__(self):
        """Validate endpoint configuration."""
        if not self.endpoints:
            raise ValidationError("Endpoints cannot be empty")

        parsed = urlparse(self.endpoints)
        if not parsed.scheme or not parsed.netloc:
            raise ValidationError(f"Invalid endpoints URL format: {self.endpoints}")

        if self.timeout <= 0:
            raise ValidationError("Timeout must be positive")


@dataclass
class ClientConfig:
    """
    Configuration for a JumpServer client

    Attributes:
        endpoints: JumpServer base URL
        token: Static API token; selects token authentication when set
        debug: Log raw response bodies (INFO on ``jms_sdk.http_client``;
            the application configures logging handlers)
        auth_mode: Explicit authentication mode, overriding field-based selection
        conjur_file_name: Name of the variable holding the vault token file
            path, used instead of looking it up through ``ConjurEnvName``;
            selects vault authentication when set
        timeout: Request timeout in seconds
        verify_ssl: Verify TLS certificates of the JumpServer API
        credential_ttl: Seconds to reuse resolved keys (0 disables caching)
        broker: Broker-fetch settings
        vault: Vault-client settings
    """
    endpoints: str
    token: Optional[str] = field(default=None, repr=False)
    debug: bool = False
    auth_mode: Optional[AuthMode] = None
    conjur_file_name: Optional[str] = None
    timeout: float = 30.0
    verify_ssl: bool = True
    credential_ttl: float = 0.0
    broker: BrokerSettings = field(default_factory=BrokerSettings)
    vault: VaultSettings = field(default_factory=VaultSettings)

    def __post_init__(self):
        """Validate client configuration."""
        if not self.endpoints:
            raise ValidationError("Endpoints cannot be empty")

        if self.auth_mode is not None and not isinstance(self.auth_mode, AuthMode):
            try:
                self.auth_mode = AuthMode(str(self.auth_mode).lower())
            except ValueError:
                raise ValidationError(
                    f"Unknown auth mode: {self.auth_mode}",
                    details={"allowed": [m.value for m in AuthMode]}
                )

        if self.auth_mode == AuthMode.TOKEN and not self.token:
            raise ValidationError("Token authentication requires a token")

        if self.credential_ttl < 0 or self.credential_ttl > MAX_CREDENTIAL_TTL:
            raise ValidationError(
                f"Credential TTL must be between 0 and {MAX_CREDENTIAL_TTL:g} seconds"
            )

    def resolve_auth_mode(self) -> AuthMode:
        """Pick the authentication mode from the populated fields."""
        if self.auth_mode is not None:
            return self.auth_mode
        if self.token:
            return AuthMode.TOKEN
        if self.conjur_file_name:
            return AuthMode.VAULT
        return AuthMode.BROKER

    def endpoint_config(self) -> EndpointConfig:
        return EndpointConfig(
            endpoints=self.endpoints,
            debug=self.debug,
            timeout=self.timeout,
            verify_ssl=self.verify_ssl,
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ClientConfig':
        """Build a configuration from a decoded JSON object."""
        if not isinstance(data, dict):
            raise ValidationError("Configuration must be a JSON object")
        if not data.get("endpoints"):
            raise ConfigMissingError("endpoints not found in configuration")

        broker_data = data.get("broker") or {}
        vault_data = data.get("vault") or {}
        try:
            return cls(
                endpoints=data["endpoints"],
                token=data.get("token") or None,
                debug=bool(data.get("debug", False)),
                auth_mode=data.get("auth_mode") or None,
                conjur_file_name=data.get("conjur_file_name") or None,
                timeout=float(data.get("timeout", 30.0)),
                verify_ssl=bool(data.get("verify_ssl", True)),
                credential_ttl=float(data.get("credential_ttl", 0.0)),
                broker=BrokerSettings(**broker_data),
                vault=VaultSettings(**vault_data),
            )
        except (TypeError, ValueError) as e:
            raise ValidationError(f"Invalid configuration format: {e}")

    @classmethod
    def from_environment(cls, env: Optional[AuthEnvironment] = None) -> 'ClientConfig':
        """Build a configuration from ``JMS_*`` environment variables."""
        env = env or AuthEnvironment.from_os()
        try:
            return cls(
                endpoints=env.require("JMS_ENDPOINT"),
                token=env.get("JMS_TOKEN"),
                debug=env.get("JMS_DEBUG", "false").lower() in _TRUE_VALUES,
                auth_mode=env.get("JMS_AUTH_MODE"),
                conjur_file_name=env.get("JMS_CONJUR_FILE_NAME"),
                timeout=float(env.get("JMS_TIMEOUT", "30")),
                verify_ssl=env.get("JMS_VERIFY_SSL", "true").lower() in _TRUE_VALUES,
                credential_ttl=float(env.get("JMS_CREDENTIAL_TTL", "0")),
            )
        except ValueError as e:
            raise ValidationError(f"Invalid environment configuration: {e}")


def load_client_config_from_json(json_string: str) -> ClientConfig:
    """Load client configuration from a JSON string."""
    try:
        data = json.loads(json_string)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Failed to parse configuration JSON: {e}", "PARSE_ERROR")
    return ClientConfig.from_dict(data)


def load_client_config_from_file(file_path: Union[str, Path]) -> ClientConfig:
    """Load client configuration from a JSON file."""
    path = Path(file_path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            json_string = f.read()
    except FileNotFoundError:
        raise ConfigMissingError(f"Configuration file not found: {path}", details={"path": str(path)})
    except OSError as e:
        raise ConfigMissingError(f"Failed to read configuration file: {e}", details={"path": str(path)})
    return load_client_config_from_json(json_string)
