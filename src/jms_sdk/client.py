"""
High-level JumpServer client

Bundles every resource wrapper over a single API facade.
"""

import logging
from typing import Optional, Union
from pathlib import Path

from .api import JmsAPI, create_api
from .config import AuthEnvironment, ClientConfig, load_client_config_from_file
from .resources import Accounts, Assets, OperateLogs, Sessions, Users

logger = logging.getLogger(__name__)


class JmsClient:
    """
    Entry point for JumpServer API operations.

    All resources share the facade, and therefore the endpoint configuration
    and authentication strategy, given at construction.
    """

    def __init__(self, api: JmsAPI):
        self.api = api
        self.sessions = Sessions(api)
        self.accounts = Accounts(api)
        self.assets = Assets(api)
        self.users = Users(api)
        self.operate_logs = OperateLogs(api)

    @property
    def endpoint(self) -> str:
        return self.api.get_endpoint()


def create_client(
    config: Optional[ClientConfig] = None,
    environment: Optional[AuthEnvironment] = None,
    **kwargs
) -> JmsClient:
    """
    Create a JumpServer client.

    Args:
        config: Client configuration; built from ``kwargs`` when omitted
        environment: Environment snapshot for broker/vault credentials
        **kwargs: ``ClientConfig`` fields (``endpoints``, ``token``, ...)

    Returns:
        JmsClient: Configured client
    """
    if config is None:
        config = ClientConfig(**kwargs)
    return JmsClient(create_api(config, environment))


def create_client_from_file(
    file_path: Union[str, Path],
    environment: Optional[AuthEnvironment] = None
) -> JmsClient:
    """Create a client from a JSON configuration file."""
    return create_client(load_client_config_from_file(file_path), environment)
