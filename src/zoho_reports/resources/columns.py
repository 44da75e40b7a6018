"""Column and lookup operations."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from ..actions import Action, ParamKey
from .base import Config, ResourceBase


class ColumnsResource(ResourceBase):
    """Manage table columns."""

    def add(self, table_uri: str, column_name: str, data_type: str, config: Config = None) -> None:
        params = self._merge(config, {ParamKey.COLUMN_NAME: column_name, ParamKey.DATA_TYPE: data_type})
        self._mutate(Action.ADDCOLUMN, table_uri, params)

    def delete(self, table_uri: str, column_name: str, config: Config = None) -> None:
        self._mutate(Action.DELETECOLUMN, table_uri, self._merge(config, {ParamKey.COLUMN_NAME: column_name}))

    def rename(self, table_uri: str, old_column_name: str, new_column_name: str, config: Config = None) -> None:
        params = self._merge(
            config,
            {ParamKey.OLD_COLUMN_NAME: old_column_name, ParamKey.NEW_COLUMN_NAME: new_column_name},
        )
        self._mutate(Action.RENAMECOLUMN, table_uri, params)

    def hide(self, table_uri: str, column_names: Iterable[str], config: Config = None) -> Any:
        """Hide columns; each name becomes its own ZOHO_COLUMNNAME query parameter."""
        return self._result(
            Action.HIDECOLUMN,
            table_uri,
            self._merge(config),
            list_params=self._column_params(column_names),
        )

    def show(self, table_uri: str, column_names: Iterable[str], config: Config = None) -> Any:
        return self._result(
            Action.SHOWCOLUMN,
            table_uri,
            self._merge(config),
            list_params=self._column_params(column_names),
        )

    def add_lookup(
        self,
        table_uri: str,
        column_name: str,
        referred_table: str,
        referred_column: str,
        on_error: str = "ABORT",
        config: Config = None,
    ) -> None:
        """Turn ``column_name`` into a lookup of ``referred_table.referred_column``.

        Args:
            on_error: ABORT or SETASEMPTY when existing values do not match.
        """
        params = self._merge(
            config,
            {
                ParamKey.COLUMN_NAME: column_name,
                ParamKey.REFERRED_TABLE: referred_table,
                ParamKey.REFERRED_COLUMN: referred_column,
                ParamKey.IF_ERROR_ON_CONVERSION: on_error,
            },
        )
        self._mutate(Action.ADDLOOKUP, table_uri, params)

    def remove_lookup(self, table_uri: str, column_name: str, config: Config = None) -> None:
        self._mutate(Action.REMOVELOOKUP, table_uri, self._merge(config, {ParamKey.COLUMN_NAME: column_name}))

    @staticmethod
    def _column_params(column_names: Iterable[str]) -> list[tuple[str, str]]:
        if isinstance(column_names, str):
            column_names = [column_names]
        return [(ParamKey.COLUMN_NAME, name) for name in column_names]
