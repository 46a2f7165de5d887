"""
Users
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .base import Model, QueryFilter, Resource


@dataclass
class UserFilter(QueryFilter):
    """Filters accepted by the user list endpoint."""
    id: Optional[str] = None
    username: Optional[str] = None
    email: Optional[str] = None
    name: Optional[str] = None
    groups: Optional[str] = None
    group_id: Optional[str] = None
    exclude_group_id: Optional[str] = None
    source: Optional[str] = None
    org_roles: Optional[str] = None
    system_roles: Optional[str] = None
    is_active: Optional[bool] = None
    search: Optional[str] = None
    order: Optional[str] = None
    limit: Optional[int] = None
    offset: Optional[int] = None


@dataclass
class User(Model):
    """A JumpServer user."""
    id: str = ""
    name: str = ""
    username: str = ""
    email: str = ""
    wechat: str = ""
    phone: Optional[str] = None
    mfa_level: Optional[Dict[str, Any]] = None
    source: Optional[Dict[str, Any]] = None
    wecom_id: Any = None
    dingtalk_id: Any = None
    feishu_id: Any = None
    created_by: str = ""
    updated_by: str = ""
    comment: str = ""
    is_superuser: bool = False
    is_org_admin: bool = False
    avatar_url: str = ""
    groups: List[Any] = field(default_factory=list)
    system_roles: List[Dict[str, Any]] = field(default_factory=list)
    org_roles: List[Dict[str, Any]] = field(default_factory=list)
    password_strategy: Optional[Dict[str, Any]] = None
    is_service_account: bool = False
    is_valid: bool = False
    is_expired: bool = False
    is_active: bool = False
    is_otp_secret_key_bound: bool = False
    can_public_key_auth: bool = False
    mfa_enabled: bool = False
    need_update_password: bool = False
    mfa_force_enabled: bool = False
    is_first_login: bool = False
    login_blocked: bool = False
    date_expired: Optional[str] = None
    date_joined: Optional[str] = None
    last_login: Optional[str] = None
    date_updated: Optional[str] = None
    date_password_last_updated: Optional[str] = None


class Users(Resource):
    path = "/api/v1/users/users/"
    name = "user"
    model = User
