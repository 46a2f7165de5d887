"""
Broker-fetch credential provider

Fetches the access key and secret key from the secret broker with two
sequential GET requests, authenticated by the local access-token file.
"""

import logging
from typing import Optional

import requests
from requests.exceptions import RequestException

from ..config.environment import AuthEnvironment, BrokerSettings
from ..exceptions import CredentialError
from .credentials import CredentialProvider, Credentials
from .vault import read_token_file, token_authorization

logger = logging.getLogger(__name__)


class BrokerCredentialProvider(CredentialProvider):
    """Resolves keys from the secret broker on every call."""

    name = "broker"

    def __init__(self, environment: AuthEnvironment, settings: Optional[BrokerSettings] = None):
        self.environment = environment
        self.settings = settings or BrokerSettings()

    def secret_url(self, base_url: str, secret_path: str) -> str:
        return f"{base_url.rstrip('/')}/secrets/{self.settings.account}/variable/{secret_path}"

    def resolve(self) -> Credentials:
        token = read_token_file(self.settings.token_file)
        base_url = self.environment.require(self.settings.url_env)
        authorization = token_authorization(token)

        # Broker certificates are internal; verification is off for these calls
        logger.warning("Fetching credentials from %s without TLS verification", base_url)

        session = requests.Session()
        try:
            access_key = self._fetch(
                session, self.secret_url(base_url, self.settings.access_key_secret),
                authorization, "access key"
            )
            secret_key = self._fetch(
                session, self.secret_url(base_url, self.settings.secret_key_secret),
                authorization, "secret key"
            )
        finally:
            session.close()

        return Credentials(access_key, secret_key)

    def _fetch(self, session, url: str, authorization: str, what: str) -> str:
        try:
            response = session.get(
                url,
                headers={'Authorization': authorization},
                verify=False,
                timeout=self.settings.timeout,
            )
        except RequestException as e:
            raise CredentialError(f"get {what} error: {e}", details={"url": url}) from e

        try:
            body = response.text
        except RequestException as e:
            raise CredentialError(f"read {what} body error: {e}", details={"url": url}) from e
        finally:
            response.close()

        if response.status_code != 200:
            raise CredentialError(
                f"get {what} error,status code:{response.status_code} : {body}",
                details={"url": url, "status_code": response.status_code}
            )
        return body
