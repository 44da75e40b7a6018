"""Row level operations: add, update, delete, import and export."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import IO, Any

from ..actions import Action, ParamKey
from ..exceptions import ParseError
from ..models import ImportResult
from .base import Config, ResourceBase

IMPORT_FILE_CONTENT_TYPE = "json/csv"


class DataResource(ResourceBase):
    """Read and write table data."""

    def add_row(self, table_uri: str, column_values: Mapping[str, Any], config: Config = None) -> dict[str, Any]:
        """Insert one row and return it as ``{column: value}``.

        The mapping reflects the row as stored by the service, including
        auto-number and formula columns.
        """
        result = self._result(Action.ADDROW, table_uri, self._merge(config, column_values))
        try:
            columns = result["column_order"]
            row = result["rows"][0]
        except (KeyError, IndexError, TypeError) as exc:
            raise ParseError(
                "ADDROW response is missing column_order or rows",
                action=Action.ADDROW.value,
                content=result,
            ) from exc
        return dict(zip(columns, row))

    def delete(self, table_uri: str, criteria: str | None = None, config: Config = None) -> None:
        """Delete rows matching ``criteria`` (all rows when omitted)."""
        self._mutate(Action.DELETE, table_uri, self._merge(config, {ParamKey.CRITERIA: criteria}))

    def update(
        self,
        table_uri: str,
        column_values: Mapping[str, Any],
        criteria: str | None = None,
        config: Config = None,
    ) -> None:
        params = self._merge(config, column_values)
        params = self._merge(params, {ParamKey.CRITERIA: criteria})
        self._mutate(Action.UPDATE, table_uri, params)

    def import_file(
        self,
        table_uri: str,
        import_type: str,
        file: str | os.PathLike[str] | IO[bytes],
        auto_identify: bool | str = "TRUE",
        on_error: str = "ABORT",
        config: Config = None,
    ) -> ImportResult:
        """Upload a CSV/JSON file into a table.

        Args:
            table_uri: Target table URI.
            import_type: APPEND, TRUNCATEADD or UPDATEADD.
            file: Path to the file, or an open binary file object.
            auto_identify: Whether the service should detect the file format.
            on_error: ABORT, SKIPROW or SETCOLUMNEMPTY.
            config: Additional service parameters (e.g. ZOHO_MATCHING_COLUMNS).
        """
        params = self._import_params(config, import_type, auto_identify, on_error)
        if isinstance(file, (str, os.PathLike)):
            filename = os.path.basename(os.fspath(file))
            with open(file, "rb") as handle:
                return self._import(table_uri, params, files=self._file_part(filename, handle))
        filename = os.path.basename(str(getattr(file, "name", "") or "import.csv"))
        return self._import(table_uri, params, files=self._file_part(filename, file))

    def import_string(
        self,
        table_uri: str,
        import_type: str,
        import_data: str,
        auto_identify: bool | str = "TRUE",
        on_error: str = "ABORT",
        config: Config = None,
    ) -> ImportResult:
        """Import inline CSV/JSON content; empty content is still sent."""
        params = self._import_params(config, import_type, auto_identify, on_error)
        params[ParamKey.IMPORT_DATA] = import_data
        return self._import(table_uri, params)

    def export(
        self,
        table_uri: str,
        file_format: str,
        criteria: str | None = None,
        config: Config = None,
    ) -> bytes:
        """Export a view in ``file_format`` (CSV, JSON, XML, PDF, ...) and return the raw body."""
        params = self._merge(config, {ParamKey.CRITERIA: criteria})
        return self._client.request(
            Action.EXPORT, table_uri, params=params, output_format=file_format, expect="raw"
        )

    def export_sql(self, table_uri: str, file_format: str, sql_query: str, config: Config = None) -> bytes:
        params = self._merge(config, {ParamKey.SQL_QUERY: sql_query})
        return self._client.request(
            Action.EXPORT, table_uri, params=params, output_format=file_format, expect="raw"
        )

    # Internal helpers -------------------------------------------------------
    def _import_params(
        self,
        config: Config,
        import_type: str,
        auto_identify: bool | str,
        on_error: str,
    ) -> dict[str, Any]:
        params = self._merge(
            config,
            {
                ParamKey.IMPORT_TYPE: import_type,
                ParamKey.AUTO_IDENTIFY: self._flag(auto_identify, upper=True),
                ParamKey.ON_IMPORT_ERROR: on_error,
            },
        )
        params.setdefault(ParamKey.CREATE_TABLE, "FALSE")
        # Blank caller options are dropped here; the form keeps empty values for IMPORT.
        return {key: value for key, value in params.items() if value is not None and value != ""}

    @staticmethod
    def _file_part(filename: str, handle: IO[bytes]) -> dict[str, Any]:
        return {ParamKey.FILE: (filename, handle, IMPORT_FILE_CONTENT_TYPE)}

    def _import(self, table_uri: str, params: Mapping[str, Any], **options: Any) -> ImportResult:
        payload = self._envelope(Action.IMPORT, table_uri, params, **options)
        return ImportResult.from_response(payload)
