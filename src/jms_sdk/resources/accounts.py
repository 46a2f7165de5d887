"""
Asset accounts
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .base import Model, QueryFilter, Resource


@dataclass
class AccountFilter(QueryFilter):
    """Filters accepted by the account list endpoint."""
    id: Optional[str] = None
    asset: Optional[str] = None
    source_id: Optional[str] = None
    secret_type: Optional[str] = None
    ip: Optional[str] = None
    hostname: Optional[str] = None
    address: Optional[str] = None
    asset_id: Optional[str] = None
    assets: Optional[str] = None
    nodes: Optional[str] = None
    node_id: Optional[str] = None
    has_secret: Optional[bool] = None
    platform: Optional[str] = None
    category: Optional[str] = None
    type: Optional[str] = None
    search: Optional[str] = None
    order: Optional[str] = None
    limit: Optional[int] = None
    offset: Optional[int] = None


@dataclass
class Account(Model):
    """An account defined on an asset."""
    id: str = ""
    name: str = ""
    username: str = ""
    asset: Optional[Dict[str, Any]] = None
    secret_type: Optional[Dict[str, Any]] = None
    source: Optional[Dict[str, Any]] = None
    source_id: Optional[str] = None
    connectivity: Optional[Dict[str, Any]] = None
    su_from: Any = None
    version: int = 0
    privileged: bool = False
    is_active: bool = False
    has_secret: bool = False
    comment: str = ""
    created_by: str = ""
    org_id: str = ""
    org_name: str = ""
    date_created: Optional[str] = None
    date_updated: Optional[str] = None


class Accounts(Resource):
    path = "/api/v1/accounts/accounts/"
    name = "account"
    model = Account
