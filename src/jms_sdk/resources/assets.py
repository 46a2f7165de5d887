"""
Assets (hosts, databases, devices)
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .base import Model, QueryFilter, Resource


@dataclass
class AssetFilter(QueryFilter):
    """Filters accepted by the asset list endpoint."""
    id: Optional[str] = None
    name: Optional[str] = None
    address: Optional[str] = None
    is_active: Optional[bool] = None
    labels: Optional[str] = None
    type: Optional[str] = None
    category: Optional[str] = None
    platform: Optional[str] = None
    domain: Optional[str] = None
    protocols: Optional[str] = None
    domain_enabled: Optional[bool] = None
    ping_enabled: Optional[bool] = None
    gather_facts_enabled: Optional[bool] = None
    change_secret_enabled: Optional[bool] = None
    push_account_enabled: Optional[bool] = None
    verify_account_enabled: Optional[bool] = None
    gather_accounts_enabled: Optional[bool] = None
    search: Optional[str] = None
    order: Optional[str] = None
    limit: Optional[int] = None
    offset: Optional[int] = None


@dataclass
class Asset(Model):
    """A managed asset."""
    id: str = ""
    name: str = ""
    address: str = ""
    comment: str = ""
    domain: Any = None
    platform: Optional[Dict[str, Any]] = None
    nodes: List[Dict[str, Any]] = field(default_factory=list)
    labels: List[Any] = field(default_factory=list)
    protocols: List[Dict[str, Any]] = field(default_factory=list)
    nodes_display: List[str] = field(default_factory=list)
    accounts: List[Dict[str, Any]] = field(default_factory=list)
    category: Optional[Dict[str, Any]] = None
    type: Optional[Dict[str, Any]] = None
    connectivity: Optional[Dict[str, Any]] = None
    auto_config: Optional[Dict[str, Any]] = None
    created_by: str = ""
    org_id: str = ""
    org_name: str = ""
    gathered_info: Dict[str, Any] = field(default_factory=dict)
    spec_info: Dict[str, Any] = field(default_factory=dict)
    is_active: bool = False
    date_verified: Optional[str] = None
    date_created: Optional[str] = None


class Assets(Resource):
    path = "/api/v1/assets/assets/"
    name = "asset"
    model = Asset
