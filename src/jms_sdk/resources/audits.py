"""
Audit logs
"""

from dataclasses import dataclass
from typing import Any, Optional

from .base import Model, QueryFilter, Resource


@dataclass
class OperateLogFilter(QueryFilter):
    """Filters accepted by the operate-log list endpoint."""
    user: Optional[str] = None
    action: Optional[str] = None
    resource_type: Optional[str] = None
    resource: Optional[str] = None
    remote_addr: Optional[str] = None
    search: Optional[str] = None
    order: Optional[str] = None
    limit: Optional[int] = None
    offset: Optional[int] = None


@dataclass
class OperateLog(Model):
    """A create/update/delete operation recorded by the audit log."""
    id: str = ""
    user: str = ""
    action: Any = None
    resource_type: str = ""
    resource: str = ""
    resource_id: str = ""
    remote_addr: str = ""
    datetime: Optional[str] = None
    org_id: str = ""


class OperateLogs(Resource):
    path = "/api/v1/audits/operate-logs/"
    name = "operation log"
    model = OperateLog
