"""
JumpServer Python SDK - Resource Wrappers

Thin ``get``/``list`` wrappers over the API facade, one per collection.
"""

from .base import Model, ModelList, QueryFilter, Resource
from .sessions import Session, SessionFilter, Sessions
from .accounts import Account, AccountFilter, Accounts
from .assets import Asset, AssetFilter, Assets
from .users import User, UserFilter, Users
from .audits import OperateLog, OperateLogFilter, OperateLogs

__all__ = [
    'Model',
    'ModelList',
    'QueryFilter',
    'Resource',
    'Session',
    'SessionFilter',
    'Sessions',
    'Account',
    'AccountFilter',
    'Accounts',
    'Asset',
    'AssetFilter',
    'Assets',
    'User',
    'UserFilter',
    'Users',
    'OperateLog',
    'OperateLogFilter',
    'OperateLogs',
]
