"""
Explicit environment snapshot and credential-source settings

Credential providers never read ``os.environ`` directly; they receive an
``AuthEnvironment`` so tests can inject a fake environment.
"""

import os
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

from ..exceptions import ConfigMissingError

# Secret broker (Conjur appliance) variables
BROKER_URL_ENV = "CONJUR_APPLIANCE_URL"
VAULT_ACCOUNT_ENV = "CONJUR_ACCOUNT"
VAULT_CERT_FILE_ENV = "CONJUR_CERT_FILE"

DEFAULT_ACCESS_TOKEN_FILE = "/run/conjur/access-token"
DEFAULT_BROKER_ACCOUNT = "lixiang"
DEFAULT_ACCESS_KEY_SECRET = "Prd_Vault/authn/App_JMS-Tools_prd/IT_JumpServer_JMS-Tools/username"
DEFAULT_SECRET_KEY_SECRET = "Prd_Vault/authn/App_JMS-Tools_prd/IT_JumpServer_JMS-Tools/password"


class AuthEnvironment:
    """Read-only view of environment variables used for credential resolution"""

    def __init__(self, values: Optional[Mapping[str, str]] = None):
        self._values = MappingProxyType(dict(values or {}))

    @classmethod
    def from_os(cls) -> 'AuthEnvironment':
        """Snapshot the current process environment."""
        return cls(os.environ)

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        value = self._values.get(name)
        if value is None or value == "":
            return default
        return value

    def require(self, name: str) -> str:
        """
        Return the value of ``name``.

        Raises:
            ConfigMissingError: If the variable is unset or empty
        """
        value = self.get(name)
        if value is None:
            raise ConfigMissingError(f"{name} not found", details={"variable": name})
        return value

    def __contains__(self, name: str) -> bool:
        return self.get(name) is not None

    def __repr__(self) -> str:
        return f"AuthEnvironment(keys={sorted(self._values)})"


@dataclass(frozen=True)
class BrokerSettings:
    """Where the broker-fetch variant finds its token and secrets"""
    token_file: str = DEFAULT_ACCESS_TOKEN_FILE
    url_env: str = BROKER_URL_ENV
    account: str = DEFAULT_BROKER_ACCOUNT
    access_key_secret: str = DEFAULT_ACCESS_KEY_SECRET
    secret_key_secret: str = DEFAULT_SECRET_KEY_SECRET
    timeout: float = 30.0


@dataclass(frozen=True)
class VaultSettings:
    """Names of the environment variables read by the vault-client variant"""
    token_env_var: str = "ConjurEnvName"
    access_key_path_var: str = "AKPath"
    secret_key_path_var: str = "SKPath"
    timeout: float = 30.0
