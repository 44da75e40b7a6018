"""Read-only result objects built from decoded response envelopes."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from .exceptions import ParseError

_EMPTY: Mapping[str, Any] = MappingProxyType({})


def _result(payload: Any, kind: str) -> Mapping[str, Any]:
    try:
        result = payload["response"]["result"]
    except (KeyError, TypeError) as exc:
        raise ParseError(f"{kind} response has no 'response.result' block", content=payload) from exc
    if not isinstance(result, Mapping):
        raise ParseError(f"{kind} result is not an object", content=payload)
    return result


def _as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() == "true"


def _as_int(value: Any) -> Any:
    if isinstance(value, str) and value.strip().lstrip("-").isdigit():
        return int(value)
    return value


def _as_tuple(value: Any) -> tuple[Any, ...]:
    if value is None:
        return ()
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        return tuple(value)
    return (value,)


@dataclass(frozen=True, slots=True)
class ImportResult:
    """Summary of an IMPORT operation."""

    import_type: str | None
    total_column_count: int | None
    selected_column_count: int | None
    total_row_count: int | None
    success_row_count: int | None
    warning_row_count: int | None
    import_operation: str | None
    import_errors: Any = None
    column_details: Mapping[str, str] = field(default_factory=lambda: _EMPTY)

    @classmethod
    def from_response(cls, payload: Any) -> ImportResult:
        result = _result(payload, "IMPORT")
        summary = result.get("importSummary") or {}
        return cls(
            import_type=summary.get("importType"),
            total_column_count=_as_int(summary.get("totalColumnCount")),
            selected_column_count=_as_int(summary.get("selectedColumnCount")),
            total_row_count=_as_int(summary.get("totalRowCount")),
            success_row_count=_as_int(summary.get("successRowCount")),
            warning_row_count=_as_int(summary.get("warnings")),
            import_operation=summary.get("importOperation"),
            import_errors=result.get("importErrors"),
            column_details=MappingProxyType(dict(result.get("columnDetails") or {})),
        )

    @property
    def imported_columns(self) -> list[str]:
        return list(self.column_details)

    def column_data_type(self, column_name: str) -> str | None:
        return self.column_details.get(column_name)

    def __str__(self) -> str:
        return (
            f"Import result: importtype {self.import_type} "
            f"totalcolumncount {self.total_column_count} "
            f"selectedcolumncount {self.selected_column_count} "
            f"totalrowcount {self.total_row_count} "
            f"successrowcount {self.success_row_count} "
            f"rowwithwarningcount {self.warning_row_count} "
            f"importoperation {self.import_operation}"
        )


@dataclass(frozen=True, slots=True)
class PlanInfo:
    """Plan and usage details for an account.

    Trial fields are only read when the service reports that a trial was
    availed; otherwise they keep their defaults.
    """

    plan: str | None
    addons: Any
    billing_date: str | None
    rows_allowed: int | None
    rows_used: int | None
    trial_availed: bool
    trial_plan: str | None = None
    trial_status: bool = False
    trial_end_date: str | None = None

    @classmethod
    def from_response(cls, payload: Any) -> PlanInfo:
        result = _result(payload, "GETUSERPLANDETAILS")
        trial_availed = _as_bool(result.get("TrialAvailed"))
        trial: dict[str, Any] = {}
        if trial_availed:
            trial = {
                "trial_plan": result.get("TrialPlan"),
                "trial_status": _as_bool(result.get("TrialStatus")),
                "trial_end_date": result.get("TrialEndDate"),
            }
        return cls(
            plan=result.get("plan"),
            addons=result.get("addon"),
            billing_date=result.get("billingDate"),
            rows_allowed=_as_int(result.get("rowsAllowed")),
            rows_used=_as_int(result.get("rowsUsed")),
            trial_availed=trial_availed,
            **trial,
        )


@dataclass(frozen=True, slots=True)
class PermissionInfo:
    """Permissions granted on one view to one principal."""

    view_name: str
    shared_by: str | None
    filter_criteria: str | None = None
    permissions: Mapping[str, bool] = field(default_factory=lambda: _EMPTY)

    @classmethod
    def from_perminfo(cls, perminfo: Mapping[str, Any]) -> PermissionInfo:
        flags = perminfo.get("permission") or {}
        return cls(
            view_name=perminfo.get("viewname", ""),
            shared_by=perminfo.get("sharedby"),
            filter_criteria=perminfo.get("criteria") or None,
            permissions=MappingProxyType({name: _as_bool(value) for name, value in flags.items()}),
        )

    def has_permission(self, name: str) -> bool:
        return self.permissions.get(name, False)

    @property
    def can_read(self) -> bool:
        return self.has_permission("read")

    @property
    def can_export(self) -> bool:
        return self.has_permission("export")

    @property
    def can_view_underlying_data(self) -> bool:
        return self.has_permission("vud")

    @property
    def can_add_row(self) -> bool:
        return self.has_permission("addrow")

    @property
    def can_update_row(self) -> bool:
        return self.has_permission("updaterow")

    @property
    def can_delete_row(self) -> bool:
        return self.has_permission("deleterow")

    @property
    def can_delete_all_rows(self) -> bool:
        return self.has_permission("deleteallrows")

    @property
    def can_append_import(self) -> bool:
        return self.has_permission("appendimport")

    @property
    def can_update_import(self) -> bool:
        return self.has_permission("updateimport")

    @property
    def can_truncate_import(self) -> bool:
        return self.has_permission("truncateimport")

    @property
    def can_delete_update_add_import(self) -> bool:
        return self.has_permission("deleteupdateaddimport")

    @property
    def can_share(self) -> bool:
        return self.has_permission("share")


@dataclass(frozen=True, slots=True)
class GroupInfo:
    """A sharing group and its members."""

    name: str
    description: str | None
    members: tuple[str, ...] = ()


PermissionMap = Mapping[str, tuple[PermissionInfo, ...]]


def _permissions(entries: Any) -> tuple[PermissionInfo, ...]:
    return tuple(
        PermissionInfo.from_perminfo(entry.get("perminfo") or {})
        for entry in entries or ()
        if isinstance(entry, Mapping)
    )


@dataclass(frozen=True, slots=True)
class ShareInfo:
    """Sharing details of a database.

    Each permission map is keyed by principal (email address or group name)
    and holds one `PermissionInfo` per shared view, in response order.
    """

    shared_user_permissions: PermissionMap
    group_permissions: PermissionMap
    public_permissions: PermissionMap
    private_link_permissions: PermissionMap
    group_members: tuple[GroupInfo, ...] = ()
    database_owners: tuple[str, ...] = ()

    @classmethod
    def from_response(cls, payload: Any) -> ShareInfo:
        result = _result(payload, "GETSHAREINFO")

        users: dict[str, tuple[PermissionInfo, ...]] = {}
        for entry in result.get("usershareinfo") or ():
            info = entry.get("shareinfo") or {}
            users[info.get("email", "")] = _permissions(info.get("permissions"))

        groups: dict[str, tuple[PermissionInfo, ...]] = {}
        members: list[GroupInfo] = []
        for entry in result.get("groupshareinfo") or ():
            info = entry.get("shareinfo") or {}
            name = info.get("groupName", "")
            members.append(
                GroupInfo(
                    name=name,
                    description=info.get("desc"),
                    members=_as_tuple(info.get("groupmembers")),
                )
            )
            groups[name] = _permissions(info.get("permissions"))

        owners = (result.get("dbownershareinfo") or {}).get("dbowners")
        return cls(
            shared_user_permissions=MappingProxyType(users),
            group_permissions=MappingProxyType(groups),
            public_permissions=_link_permissions(result.get("publicshareinfo")),
            private_link_permissions=_link_permissions(result.get("privatelinkshareinfo")),
            group_members=tuple(members),
            database_owners=_as_tuple(owners),
        )

    @property
    def shared_users(self) -> list[str]:
        return list(self.shared_user_permissions)


def _link_permissions(info: Any) -> PermissionMap:
    if not isinstance(info, Mapping) or "email" not in info:
        return MappingProxyType({})
    return MappingProxyType({info["email"]: _permissions(info.get("permissions"))})
