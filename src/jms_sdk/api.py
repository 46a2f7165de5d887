"""
API facade used by resource wrappers

``JmsAPI`` exposes four operations (``make_request``, ``do_request``,
``set_query`` and ``get_endpoint``) with the same contract whichever
authentication strategy backs it.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional

import requests

from .auth import (
    Authenticator,
    BrokerCredentialProvider,
    CachedCredentialProvider,
    CredentialProvider,
    SignatureAuth,
    TokenAuth,
    VaultCredentialProvider,
)
from .config import AuthEnvironment, AuthMode, ClientConfig, EndpointConfig
from .exceptions import JmsSDKError, SignError
from .http_client import QueryValue, RequestExecutor, build_request
from .http_client import set_query as _set_query

logger = logging.getLogger(__name__)


class JmsAPI(ABC):
    """
    Request construction and execution for one JumpServer endpoint.
    """

    auth_mode: AuthMode

    def __init__(self, endpoint_config: EndpointConfig, executor: Optional[RequestExecutor] = None):
        self.endpoint_config = endpoint_config
        self.executor = executor or RequestExecutor(
            timeout=endpoint_config.timeout,
            verify_ssl=endpoint_config.verify_ssl,
            debug=endpoint_config.debug,
        )

    @property
    @abstractmethod
    def authenticator(self) -> Authenticator:
        """Authenticator attaching credentials to each request."""

    def make_request(self, method: str, endpoint: str, body: Any = None) -> requests.PreparedRequest:
        """
        Build and authenticate a request.

        Args:
            method: HTTP method (GET, POST, PUT, etc.)
            endpoint: Absolute URL of the endpoint
            body: Optional JSON payload

        Returns:
            requests.PreparedRequest: Authenticated request

        Raises:
            EncodeError: If the payload cannot be serialized
            SignError: If the request cannot be authenticated
        """
        request = build_request(method, endpoint, body)
        self._authenticate(request)
        return request

    def do_request(self, request: requests.PreparedRequest, result: Any = None) -> Any:
        """
        Execute a request and decode the response into ``result``.

        Returns:
            The populated ``result``, or None when ``result`` is None
        """
        return self.executor.execute(request, result)

    def set_query(self, request: requests.PreparedRequest, params: Mapping[str, QueryValue]) -> requests.PreparedRequest:
        """
        Replace the query string of ``request`` and return the same object.
        """
        return _set_query(request, params)

    def get_endpoint(self) -> str:
        return self.endpoint_config.endpoints

    def _authenticate(self, request: requests.PreparedRequest, refresh: bool = False) -> None:
        authenticator = self.authenticator
        try:
            if refresh:
                authenticator.refresh(request)
            else:
                authenticator.authenticate(request)
        except SignError as e:
            raise type(e)(
                f"sign request error: {e}", e.error_code, {**e.details, "url": request.url}
            ) from e
        except JmsSDKError as e:
            raise SignError(f"sign request error: {e}", details={"cause": e.error_code}) from e


class TokenAPI(JmsAPI):
    """Facade authenticating with a static ``Authorization: Token`` header."""

    auth_mode = AuthMode.TOKEN

    def __init__(self, endpoint_config: EndpointConfig, token: str, executor: Optional[RequestExecutor] = None):
        super().__init__(endpoint_config, executor)
        self._auth = TokenAuth(token)

    @property
    def authenticator(self) -> Authenticator:
        return self._auth


class SignedAPI(JmsAPI):
    """Facade authenticating with HMAC signatures."""

    def __init__(
        self,
        endpoint_config: EndpointConfig,
        provider: CredentialProvider,
        executor: Optional[RequestExecutor] = None,
    ):
        super().__init__(endpoint_config, executor)
        self.provider = provider
        self._auth = SignatureAuth(provider)

    @property
    def authenticator(self) -> Authenticator:
        return self._auth

    def set_query(self, request: requests.PreparedRequest, params: Mapping[str, QueryValue]) -> requests.PreparedRequest:
        """
        Replace the query string and re-sign the request.

        The signature covers ``(request-target)``, so a signed request is
        signed again once its query changes, reusing the key pair of its
        first signature.
        """
        _set_query(request, params)
        if 'Authorization' in request.headers:
            del request.headers['Authorization']
            self._authenticate(request, refresh=True)
        return request


class BrokerSignedAPI(SignedAPI):
    """HMAC facade whose keys come from the secret broker."""

    auth_mode = AuthMode.BROKER


class VaultSignedAPI(SignedAPI):
    """HMAC facade whose keys come from a vault client."""

    auth_mode = AuthMode.VAULT


def create_api(config: ClientConfig, environment: Optional[AuthEnvironment] = None) -> JmsAPI:
    """
    Create the facade matching the populated configuration fields.

    Args:
        config: Client configuration
        environment: Environment snapshot for credential providers
            (defaults to the process environment)

    Returns:
        JmsAPI: Facade for the selected authentication mode
    """
    endpoint_config = config.endpoint_config()
    mode = config.resolve_auth_mode()

    if mode == AuthMode.TOKEN:
        api: JmsAPI = TokenAPI(endpoint_config, config.token)
    else:
        environment = environment or AuthEnvironment.from_os()
        if mode == AuthMode.VAULT:
            provider: CredentialProvider = VaultCredentialProvider(
                environment, config.vault, token_env_name=config.conjur_file_name
            )
            api_cls = VaultSignedAPI
        else:
            provider = BrokerCredentialProvider(environment, config.broker)
            api_cls = BrokerSignedAPI

        if config.credential_ttl > 0:
            provider = CachedCredentialProvider(provider, config.credential_ttl)
        api = api_cls(endpoint_config, provider)

    logger.info("Initialized JumpServer API for %s using %s authentication", config.endpoints, mode.value)
    return api
