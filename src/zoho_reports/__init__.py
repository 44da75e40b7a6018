"""High-level Zoho Reports client entrypoints."""
from .actions import Action
from .client import ReportClient
from .config import ClientConfig, ProxyConfig, ProxyType
from .exceptions import ParseError, ReportsError, ServerError, TransportError
from .models import GroupInfo, ImportResult, PermissionInfo, PlanInfo, ShareInfo

__all__ = [
    "Action",
    "ClientConfig",
    "GroupInfo",
    "ImportResult",
    "ParseError",
    "PermissionInfo",
    "PlanInfo",
    "ProxyConfig",
    "ProxyType",
    "ReportClient",
    "ReportsError",
    "ServerError",
    "ShareInfo",
    "TransportError",
]
