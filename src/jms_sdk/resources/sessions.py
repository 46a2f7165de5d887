"""
Terminal sessions
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .base import Model, QueryFilter, Resource


@dataclass
class SessionFilter(QueryFilter):
    """Filters accepted by the session list endpoint."""
    user: Optional[str] = None
    asset: Optional[str] = None
    account: Optional[str] = None
    remote_addr: Optional[str] = None
    protocol: Optional[str] = None
    is_finished: Optional[bool] = None
    login_from: Optional[str] = None
    terminal: Optional[str] = None
    search: Optional[str] = None
    order: Optional[str] = None
    limit: Optional[int] = None
    offset: Optional[int] = None
    date_from: Optional[str] = None
    date_to: Optional[str] = None


@dataclass
class Session(Model):
    """A recorded terminal session."""
    id: str = ""
    user: str = ""
    asset: str = ""
    user_id: str = ""
    asset_id: str = ""
    account: str = ""
    account_id: str = ""
    protocol: str = ""
    type: Optional[Dict[str, Any]] = None
    login_from: Optional[Dict[str, Any]] = None
    remote_addr: str = ""
    comment: Any = None
    terminal_display: str = ""
    is_locked: bool = False
    command_amount: int = 0
    terminal: Optional[Dict[str, Any]] = None
    org_id: str = ""
    org_name: str = ""
    is_success: bool = False
    is_finished: bool = False
    has_replay: bool = False
    has_command: bool = False
    can_replay: bool = False
    can_join: bool = False
    can_terminate: bool = False
    date_start: Optional[str] = None
    date_end: Optional[str] = None


class Sessions(Resource):
    path = "/api/v1/terminal/sessions/"
    name = "session"
    model = Session
