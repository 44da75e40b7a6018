"""Command-line interface for Zoho Reports."""
from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

try:  # pragma: no cover - exercised in runtime environments
    import typer
    from rich import box
    from rich.console import Console
    from rich.table import Table
except ImportError as exc:  # pragma: no cover - optional dependency guard
    raise RuntimeError(
        "The CLI requires Typer and Rich. Install the CLI extras via "
        "'pip install zoho-reports-client[cli]' to enable this command."
    ) from exc

from . import ReportClient
from .cli_schema import CLI_TABLE_VIEWS, TableView
from .config import DEFAULT_BASE_URL, ProxyConfig, ProxyType
from .exceptions import ReportsError, ServerError
from .models import ImportResult, PlanInfo, ShareInfo

app = typer.Typer(help="Zoho Reports command line client.", no_args_is_help=True)

console = Console(force_terminal=False, color_system=None)


def _build_client(
    authtoken: str,
    base_url: str,
    verify_ssl: bool,
    cert_path: Path | None,
    connect_timeout: float,
    read_timeout: float,
    proxy_host: str | None,
    proxy_port: int | None,
    proxy_type: str,
    proxy_user: str | None,
    proxy_password: str | None,
) -> ReportClient:
    verify_target: bool | str
    if cert_path:
        expanded_cert = cert_path.expanduser()
        if not expanded_cert.exists():
            raise typer.BadParameter("Certificate file not found for --cert option.")
        if not verify_ssl:
            raise typer.BadParameter("Cannot combine --cert with --no-verify.")
        verify_target = str(expanded_cert)
    else:
        verify_target = verify_ssl

    proxy: ProxyConfig | None = None
    if proxy_host:
        if proxy_port is None:
            raise typer.BadParameter("--proxy-port is required when --proxy-host is set.")
        try:
            parsed_type = ProxyType.parse(proxy_type)
        except ValueError as exc:
            raise typer.BadParameter("--proxy-type must be HTTP, HTTPS or BOTH.") from exc
        proxy = ProxyConfig(
            host=proxy_host,
            port=proxy_port,
            proxy_type=parsed_type,
            username=proxy_user,
            password=proxy_password,
        )

    return ReportClient(
        authtoken,
        base_url=base_url,
        verify_ssl=verify_target,
        connect_timeout=connect_timeout,
        read_timeout=read_timeout,
        proxy=proxy,
    )


@app.callback()
def main(
    ctx: typer.Context,
    authtoken: str = typer.Option(
        ..., "--authtoken", envvar="ZOHO_REPORTS_AUTHTOKEN", help="Zoho Reports auth token."
    ),
    base_url: str = typer.Option(
        DEFAULT_BASE_URL, "--base-url", envvar="ZOHO_REPORTS_BASE_URL", help="API base URL."
    ),
    verify_ssl: bool = typer.Option(
        True,
        "--verify/--no-verify",
        envvar="ZOHO_REPORTS_VERIFY_SSL",
        help="Enable or disable TLS certificate verification.",
        show_default=True,
    ),
    cert_path: Path | None = typer.Option(
        None,
        "--cert",
        envvar="ZOHO_REPORTS_CA_CERT",
        help="Path to a custom CA bundle for TLS verification.",
    ),
    connect_timeout: float = typer.Option(
        15.0, min=0, help="Connection timeout in seconds, 0 for none.", show_default=True
    ),
    read_timeout: float = typer.Option(
        60.0, min=0, help="Read timeout in seconds, 0 for none.", show_default=True
    ),
    proxy_host: str | None = typer.Option(None, "--proxy-host", envvar="ZOHO_REPORTS_PROXY_HOST"),
    proxy_port: int | None = typer.Option(None, "--proxy-port", envvar="ZOHO_REPORTS_PROXY_PORT"),
    proxy_type: str = typer.Option(
        "BOTH", "--proxy-type", help="Proxy scope: HTTP, HTTPS or BOTH.", show_default=True
    ),
    proxy_user: str | None = typer.Option(None, "--proxy-user", envvar="ZOHO_REPORTS_PROXY_USER"),
    proxy_password: str | None = typer.Option(
        None, "--proxy-password", envvar="ZOHO_REPORTS_PROXY_PASSWORD", hide_input=True
    ),
) -> None:
    """Connection settings shared by every command."""

    ctx.obj = {
        "authtoken": authtoken,
        "base_url": base_url,
        "verify_ssl": verify_ssl,
        "cert_path": cert_path,
        "connect_timeout": connect_timeout,
        "read_timeout": read_timeout,
        "proxy_host": proxy_host,
        "proxy_port": proxy_port,
        "proxy_type": proxy_type,
        "proxy_user": proxy_user,
        "proxy_password": proxy_password,
    }


def _client(ctx: typer.Context) -> ReportClient:
    return _build_client(**ctx.obj)


def _echo_json(payload: Any) -> None:
    typer.echo(json.dumps(payload, indent=2, default=str))


def _render_rich_table(view: TableView, rows: Sequence[Mapping[str, Any]]) -> None:
    table = Table(
        title=view.title,
        box=box.SIMPLE,
        show_lines=False,
        header_style="bold cyan",
    )
    for column in view.columns:
        table.add_column(column.header, justify=column.justify)
    ordered_rows = list(rows)
    if view.sort_key:
        ordered_rows.sort(key=view.sort_key)
    for row in ordered_rows:
        table.add_row(*(column.render(row) for column in view.columns))
    console.print(table)


def _present_output(payload: Any, *, view_id: str | None, json_output: bool) -> None:
    if json_output or view_id is None:
        _echo_json(payload)
        return
    view = CLI_TABLE_VIEWS.get(view_id)
    if not view:
        _echo_json(payload)
        return
    if isinstance(payload, Mapping):
        payload = [payload]
    if not isinstance(payload, Sequence) or isinstance(payload, (str, bytes)):
        _echo_json(payload)
        return
    rows = [item for item in payload if isinstance(item, Mapping)]
    if not rows:
        _echo_json(payload)
        return
    _render_rich_table(view, rows)


def _handle_error(exc: ReportsError) -> None:
    message = f"{exc.action or 'Request'} failed (status {exc.status_code}): {exc}"
    if isinstance(exc, ServerError) and exc.code is not None:
        message += f"\nError code: {exc.code}"
    typer.secho(message, err=True, fg=typer.colors.RED)
    raise typer.Exit(code=1)


def parse_values(values: Sequence[str]) -> dict[str, str]:
    """Parse repeated ``COLUMN=VALUE`` options, keeping order."""
    out: dict[str, str] = {}
    for item in values:
        if "=" not in item:
            raise typer.BadParameter(f"Expected COLUMN=VALUE, got {item!r}.")
        key, val = item.split("=", 1)
        out[key.strip()] = val
    return out


def _plan_row(plan: PlanInfo) -> dict[str, Any]:
    return {
        "plan": plan.plan,
        "addons": plan.addons,
        "billing_date": plan.billing_date,
        "rows_allowed": plan.rows_allowed,
        "rows_used": plan.rows_used,
        "trial_availed": plan.trial_availed,
        "trial_plan": plan.trial_plan,
        "trial_status": plan.trial_status,
        "trial_end_date": plan.trial_end_date,
    }


def _import_summary(result: ImportResult) -> dict[str, Any]:
    return {
        "importType": result.import_type,
        "importOperation": result.import_operation,
        "totalColumnCount": result.total_column_count,
        "selectedColumnCount": result.selected_column_count,
        "totalRowCount": result.total_row_count,
        "successRowCount": result.success_row_count,
        "warnings": result.warning_row_count,
        "importErrors": result.import_errors,
        "columnDetails": dict(result.column_details),
    }


def _share_rows(info: ShareInfo) -> list[dict[str, Any]]:
    sections = (
        ("user", info.shared_user_permissions),
        ("group", info.group_permissions),
        ("public", info.public_permissions),
        ("private-link", info.private_link_permissions),
    )
    rows: list[dict[str, Any]] = []
    for kind, permission_map in sections:
        for principal, entries in permission_map.items():
            for perm in entries:
                rows.append(
                    {
                        "principal": principal,
                        "kind": kind,
                        "view": perm.view_name,
                        "shared_by": perm.shared_by,
                        "criteria": perm.filter_criteria,
                        "permissions": [name for name, granted in perm.permissions.items() if granted],
                    }
                )
    for owner in info.database_owners:
        rows.append({"principal": owner, "kind": "owner", "view": "*", "permissions": ["all"]})
    return rows


@app.command("export")
def export(
    ctx: typer.Context,
    email: str = typer.Argument(..., help="Database owner email."),
    database: str = typer.Argument(..., help="Database name."),
    view: str = typer.Argument(..., help="Table or report name."),
    file_format: str = typer.Option("CSV", "--format", "-f", help="CSV, JSON, XML, HTML, PDF or IMAGE."),
    criteria: str | None = typer.Option(None, "--criteria", help="Filter criteria."),
    sql: str | None = typer.Option(None, "--sql", help="Export the result of a SQL SELECT instead."),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write to this file instead of stdout."),
) -> None:
    """Export a table or report."""

    with _client(ctx) as client:
        uri = client.table_uri(email, database, view)
        try:
            if sql:
                payload = client.data.export_sql(uri, file_format.upper(), sql)
            else:
                payload = client.data.export(uri, file_format.upper(), criteria)
        except ReportsError as exc:
            _handle_error(exc)
            return

    if output:
        output.expanduser().write_bytes(payload)
        typer.echo(f"Wrote {len(payload)} bytes to {output}")
        return
    typer.echo(payload, nl=False)


@app.command("import")
def import_data(
    ctx: typer.Context,
    email: str = typer.Argument(..., help="Database owner email."),
    database: str = typer.Argument(..., help="Database name."),
    table: str = typer.Argument(..., help="Table name."),
    file: Path = typer.Argument(..., help="CSV or JSON file to import."),
    import_type: str = typer.Option("APPEND", "--type", help="APPEND, TRUNCATEADD or UPDATEADD."),
    auto_identify: bool = typer.Option(True, "--auto-identify/--no-auto-identify"),
    on_error: str = typer.Option("ABORT", "--on-error", help="ABORT, SKIPROW or SETCOLUMNEMPTY."),
    create_table: bool = typer.Option(False, "--create-table/--no-create-table"),
    matching_columns: str | None = typer.Option(
        None, "--matching-columns", help="Comma-separated key columns for UPDATEADD."
    ),
) -> None:
    """Import a file into a table and print the import summary."""

    if not file.expanduser().exists():
        raise typer.BadParameter(f"Import file not found: {file}")
    config: dict[str, str] = {"ZOHO_CREATE_TABLE": "TRUE" if create_table else "FALSE"}
    if matching_columns:
        config["ZOHO_MATCHING_COLUMNS"] = matching_columns

    with _client(ctx) as client:
        uri = client.table_uri(email, database, table)
        try:
            result = client.data.import_file(
                uri,
                import_type.upper(),
                file.expanduser(),
                auto_identify,
                on_error.upper(),
                config,
            )
        except ReportsError as exc:
            _handle_error(exc)
            return

    _echo_json(_import_summary(result))


@app.command("add-row")
def add_row(
    ctx: typer.Context,
    email: str = typer.Argument(..., help="Database owner email."),
    database: str = typer.Argument(..., help="Database name."),
    table: str = typer.Argument(..., help="Table name."),
    value: list[str] = typer.Option(..., "--value", "-v", help="Column value as COLUMN=VALUE."),
    output_json: bool = typer.Option(False, "--json", "-j", help="Return raw JSON."),
) -> None:
    """Add a row and show it as stored."""

    values = parse_values(value)
    with _client(ctx) as client:
        uri = client.table_uri(email, database, table)
        try:
            row = client.data.add_row(uri, values)
        except ReportsError as exc:
            _handle_error(exc)
            return

    if output_json:
        _echo_json(row)
        return
    _present_output(
        [{"column": column, "value": cell} for column, cell in row.items()],
        view_id="row",
        json_output=False,
    )


@app.command("delete-rows")
def delete_rows(
    ctx: typer.Context,
    email: str = typer.Argument(..., help="Database owner email."),
    database: str = typer.Argument(..., help="Database name."),
    table: str = typer.Argument(..., help="Table name."),
    criteria: str | None = typer.Option(None, "--criteria", help="Rows to delete; all rows when omitted."),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip the confirmation for deleting all rows."),
) -> None:
    """Delete rows from a table."""

    if not criteria and not yes:
        typer.confirm(f"Delete ALL rows from {table}?", abort=True)
    with _client(ctx) as client:
        uri = client.table_uri(email, database, table)
        try:
            client.data.delete(uri, criteria)
        except ReportsError as exc:
            _handle_error(exc)
            return

    typer.echo(f"Deleted rows from {table}.")


@app.command("db-exists")
def db_exists(
    ctx: typer.Context,
    email: str = typer.Argument(..., help="Account email."),
    database: str = typer.Argument(..., help="Database name."),
) -> None:
    """Report whether a database exists."""

    with _client(ctx) as client:
        try:
            exists = client.databases.exists(client.user_uri(email), database)
        except ReportsError as exc:
            _handle_error(exc)
            return

    typer.echo("true" if exists else "false")


@app.command("plan")
def plan(
    ctx: typer.Context,
    email: str = typer.Argument(..., help="Account email."),
    output_json: bool = typer.Option(False, "--json", "-j", help="Return raw JSON."),
) -> None:
    """Show plan and usage details."""

    with _client(ctx) as client:
        try:
            info = client.users.plan_info(client.user_uri(email))
        except ReportsError as exc:
            _handle_error(exc)
            return

    _present_output(_plan_row(info), view_id="plan", json_output=output_json)


@app.command("users")
def users(
    ctx: typer.Context,
    email: str = typer.Argument(..., help="Account email."),
    output_json: bool = typer.Option(False, "--json", "-j", help="Return raw JSON."),
) -> None:
    """List the users of an account."""

    with _client(ctx) as client:
        try:
            result = client.users.list(client.user_uri(email))
        except ReportsError as exc:
            _handle_error(exc)
            return

    if isinstance(result, Mapping) and "users" in result:
        result = result["users"]
    _present_output(result, view_id="users", json_output=output_json)


@app.command("share-info")
def share_info(
    ctx: typer.Context,
    email: str = typer.Argument(..., help="Database owner email."),
    database: str = typer.Argument(..., help="Database name."),
    output_json: bool = typer.Option(False, "--json", "-j", help="Return raw JSON."),
) -> None:
    """Show who a database is shared with."""

    with _client(ctx) as client:
        try:
            info = client.sharing.info(client.db_uri(email, database))
        except ReportsError as exc:
            _handle_error(exc)
            return

    _present_output(_share_rows(info), view_id="share-info", json_output=output_json)


@app.command("view-url")
def view_url(
    ctx: typer.Context,
    email: str = typer.Argument(..., help="Database owner email."),
    database: str = typer.Argument(..., help="Database name."),
    view: str = typer.Argument(..., help="Table or report name."),
    embed: bool = typer.Option(False, "--embed", help="Return the embed URL instead."),
    criteria: str | None = typer.Option(None, "--criteria", help="Filter for the embed URL."),
) -> None:
    """Print the URL of a view."""

    with _client(ctx) as client:
        uri = client.table_uri(email, database, view)
        try:
            url = client.views.embed_url(uri, criteria) if embed else client.views.url(uri)
        except ReportsError as exc:
            _handle_error(exc)
            return

    typer.echo(url)


if __name__ == "__main__":  # pragma: no cover
    app()
