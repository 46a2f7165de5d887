"""
Vault (Conjur) client and the vault-client credential provider

The client authenticates with a short-lived access token read from a
token file and retrieves secret variables over the Conjur REST API.
"""

import base64
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union
from urllib.parse import quote

import requests
from requests.exceptions import RequestException

from ..config.environment import (
    AuthEnvironment,
    VaultSettings,
    BROKER_URL_ENV,
    VAULT_ACCOUNT_ENV,
    VAULT_CERT_FILE_ENV,
)
from ..exceptions import ConfigMissingError, CredentialError, JmsSDKError
from .credentials import CredentialProvider, Credentials

logger = logging.getLogger(__name__)


def token_authorization(raw_token: bytes) -> str:
    """Authorization header value for a Conjur access token."""
    encoded = base64.b64encode(raw_token).decode('ascii')
    return f'Token token="{encoded}"'


def read_token_file(path: Union[str, Path]) -> bytes:
    """
    Read an access-token file.

    Raises:
        ConfigMissingError: If the file does not exist or cannot be read
    """
    token_path = Path(path)
    try:
        return token_path.read_bytes()
    except FileNotFoundError:
        raise ConfigMissingError(f"access token file not found: {token_path}", details={"path": str(token_path)})
    except OSError as e:
        raise ConfigMissingError(f"read access token file error: {e}", details={"path": str(token_path)})


@dataclass(frozen=True)
class VaultConfig:
    """Connection settings for the vault appliance."""
    appliance_url: str
    account: str
    cert_file: Optional[str] = None

    @classmethod
    def from_environment(cls, env: AuthEnvironment) -> 'VaultConfig':
        """
        Load the ambient vault configuration.

        Raises:
            ConfigMissingError: If the appliance URL or account is unset
        """
        return cls(
            appliance_url=env.require(BROKER_URL_ENV).rstrip('/'),
            account=env.require(VAULT_ACCOUNT_ENV),
            cert_file=env.get(VAULT_CERT_FILE_ENV),
        )

    @property
    def verify(self) -> Union[bool, str]:
        return self.cert_file or True


class VaultClient:
    """Minimal Conjur REST client authenticated by an access token."""

    def __init__(self, config: VaultConfig, token: bytes, timeout: float = 30.0):
        if not token:
            raise CredentialError("vault access token is empty")
        self.config = config
        self.timeout = timeout
        self._authorization = token_authorization(token)

    @classmethod
    def from_token_file(cls, config: VaultConfig, token_file: Union[str, Path], timeout: float = 30.0) -> 'VaultClient':
        """Create a client from a token file written by the authenticator sidecar."""
        return cls(config, read_token_file(token_file), timeout)

    def secret_url(self, variable_id: str) -> str:
        return (
            f"{self.config.appliance_url}/secrets/{quote(self.config.account, safe='')}"
            f"/variable/{quote(variable_id, safe='')}"
        )

    def retrieve_secret(self, variable_id: str) -> str:
        """
        Retrieve the value of a secret variable.

        Args:
            variable_id: Fully qualified variable identifier

        Returns:
            str: Secret value

        Raises:
            CredentialError: On transport failure or non-200 status
        """
        url = self.secret_url(variable_id)
        logger.debug("Retrieving vault secret %s", variable_id)

        session = requests.Session()
        try:
            response = session.get(
                url,
                headers={'Authorization': self._authorization},
                verify=self.config.verify,
                timeout=self.timeout,
            )
            try:
                body = response.text
                status_code = response.status_code
            finally:
                response.close()
        except RequestException as e:
            raise CredentialError(
                f"retrieve secret {variable_id} error: {e}",
                details={"variable": variable_id}
            ) from e
        finally:
            session.close()

        if status_code != 200:
            raise CredentialError(
                f"retrieve secret {variable_id} error,status code:{status_code} : {body}",
                details={"variable": variable_id, "status_code": status_code}
            )
        return body


class VaultCredentialProvider(CredentialProvider):
    """
    Resolves keys through a vault client.

    The variable names come from ``VaultSettings``: one names the variable
    that holds the token file path, the other two hold the secret paths of the
    access key and secret key.
    """

    name = "vault"

    def __init__(
        self,
        environment: AuthEnvironment,
        settings: Optional[VaultSettings] = None,
        token_env_name: Optional[str] = None,
    ):
        self.environment = environment
        self.settings = settings or VaultSettings()
        self.token_env_name = token_env_name

    def resolve(self) -> Credentials:
        env = self.environment
        token_env_name = self.token_env_name or env.require(self.settings.token_env_var)
        access_key_path = env.require(self.settings.access_key_path_var)
        secret_key_path = env.require(self.settings.secret_key_path_var)
        token_file = env.require(token_env_name)

        config = VaultConfig.from_environment(env)
        try:
            client = VaultClient.from_token_file(config, token_file, self.settings.timeout)
        except ConfigMissingError:
            raise
        except JmsSDKError as e:
            raise CredentialError(f"error creating vault client: {e}") from e

        try:
            access_key = client.retrieve_secret(access_key_path)
        except CredentialError as e:
            raise CredentialError(f"error retrieving ak: {e}", details=e.details) from e
        try:
            secret_key = client.retrieve_secret(secret_key_path)
        except CredentialError as e:
            raise CredentialError(f"error retrieving sk: {e}", details=e.details) from e

        return Credentials(access_key, secret_key)
