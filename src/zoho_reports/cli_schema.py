"""Schema describing important fields for CLI table rendering."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

Row = Mapping[str, Any]
ValueExtractor = Callable[[Row], Any]
ValueFormatter = Callable[[Any], str]
SortKey = Callable[[Row], Any]


@dataclass(frozen=True)
class Column:
    """Describe how to pull and format a column for Rich tables."""

    header: str
    keys: tuple[str, ...] = ()
    extractor: ValueExtractor | None = None
    formatter: ValueFormatter | None = None
    justify: str = "left"

    def render(self, row: Row) -> str:
        value: Any | None = None
        if self.keys:
            for key in self.keys:
                if key in row:
                    value = row.get(key)
                    if value is not None:
                        break
        if value is None and self.extractor:
            value = self.extractor(row)
        if value is None:
            return ""
        if self.formatter:
            formatted = self.formatter(value)
            return "" if formatted is None else str(formatted)
        return str(value)


@dataclass(frozen=True)
class TableView:
    """Describe a Rich table for a CLI command."""

    title: str
    columns: tuple[Column, ...]
    sort_key: SortKey | None = None


def _bool_formatter(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        value = value.strip().lower() == "true"
    return "Yes" if bool(value) else "No"


def _list_formatter(*, max_chars: int = 48, sep: str = ", ") -> ValueFormatter:
    def _formatter(value: Any) -> str:
        if value is None:
            return ""
        if isinstance(value, (list, tuple)):
            s = sep.join(str(v) for v in value)
        else:
            s = str(value)
        return s if len(s) <= max_chars else s[: max_chars - 1] + "…"

    return _formatter


def _trial_summary(row: Row) -> Any:
    if not row.get("trial_availed"):
        return "No"
    status = "active" if row.get("trial_status") else "inactive"
    return f"{row.get('trial_plan')} ({status}, ends {row.get('trial_end_date')})"


CLI_TABLE_VIEWS: dict[str, TableView] = {
    "plan": TableView(
        title="Plan",
        columns=(
            Column("Plan", keys=("plan",)),
            Column("Addons", keys=("addons",), formatter=_list_formatter()),
            Column("Billing Date", keys=("billing_date",)),
            Column("Rows Allowed", keys=("rows_allowed",), justify="right"),
            Column("Rows Used", keys=("rows_used",), justify="right"),
            Column("Trial", extractor=_trial_summary),
        ),
    ),
    "users": TableView(
        title="Users",
        columns=(
            Column("Email", keys=("emailId", "email")),
            Column("Active", keys=("status", "isActive"), formatter=_bool_formatter),
            Column("Role", keys=("role",)),
        ),
        sort_key=lambda row: str(row.get("emailId") or row.get("email") or ""),
    ),
    "share-info": TableView(
        title="Sharing",
        columns=(
            Column("Principal", keys=("principal",)),
            Column("Kind", keys=("kind",)),
            Column("View", keys=("view",)),
            Column("Shared By", keys=("shared_by",)),
            Column("Criteria", keys=("criteria",)),
            Column("Permissions", keys=("permissions",), formatter=_list_formatter(max_chars=64)),
        ),
    ),
    "row": TableView(
        title="Row",
        columns=(
            Column("Column", keys=("column",)),
            Column("Value", keys=("value",)),
        ),
    ),
}
