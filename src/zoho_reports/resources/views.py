"""View (table, report, dashboard) operations."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from typing import Any

from ..actions import Action, ParamKey
from .base import Config, ResourceBase


class ViewsResource(ResourceBase):
    """Create, copy, rename and describe views."""

    def create_table(self, db_uri: str, table_design: str | Mapping[str, Any], config: Config = None) -> None:
        """Create a table from a design document.

        Args:
            db_uri: Target database URI.
            table_design: JSON design string, or a mapping that is serialised to one.
        """
        if not isinstance(table_design, str):
            table_design = json.dumps(table_design)
        self._mutate(
            Action.CREATETABLE, db_uri, self._merge(config, {ParamKey.TABLE_DESIGN: table_design})
        )

    def auto_generate_reports(self, table_uri: str, source: str, config: Config = None) -> Any:
        """Generate reports from a table or a single column (``source``)."""
        return self._result(
            Action.AUTOGENREPORTS, table_uri, self._merge(config, {ParamKey.SOURCE: source})
        )

    def create_similar(
        self,
        table_uri: str,
        ref_view: str,
        folder_name: str,
        copy_custom_formula: bool,
        copy_agg_formula: bool,
        config: Config = None,
    ) -> Any:
        """Create views for a table modelled on those of ``ref_view``."""
        params = self._merge(
            config,
            {
                ParamKey.REF_VIEW: ref_view,
                ParamKey.FOLDER_NAME: folder_name,
                ParamKey.COPY_CUSTOM_FORMULA: self._flag(bool(copy_custom_formula)),
                ParamKey.COPY_AGG_FORMULA: self._flag(bool(copy_agg_formula)),
            },
        )
        return self._result(Action.CREATESIMILARVIEWS, table_uri, params)

    def rename(
        self,
        db_uri: str,
        view_name: str,
        new_view_name: str,
        new_view_desc: str | None = None,
        config: Config = None,
    ) -> None:
        params = self._merge(
            config,
            {
                ParamKey.VIEW_NAME: view_name,
                ParamKey.NEW_VIEW_NAME: new_view_name,
                ParamKey.NEW_VIEW_DESC: new_view_desc,
            },
        )
        self._mutate(Action.RENAMEVIEW, db_uri, params)

    def copy_reports(
        self,
        db_uri: str,
        views: str | Iterable[str],
        db_name: str,
        db_key: str,
        config: Config = None,
    ) -> None:
        """Copy reports into another database identified by name and copy key."""
        params = self._merge(
            config,
            {
                ParamKey.VIEW_TO_COPY: self._join(views),
                ParamKey.DATABASE_NAME: db_name,
                ParamKey.COPY_DB_KEY: db_key,
            },
        )
        self._mutate(Action.COPYREPORTS, db_uri, params)

    def copy_formula(
        self,
        table_uri: str,
        formula: str | Iterable[str],
        db_name: str,
        db_key: str,
        config: Config = None,
    ) -> None:
        params = self._merge(
            config,
            {
                ParamKey.FORMULA_TO_COPY: self._join(formula),
                ParamKey.DATABASE_NAME: db_name,
                ParamKey.COPY_DB_KEY: db_key,
            },
        )
        self._mutate(Action.COPYFORMULA, table_uri, params)

    def name(self, user_uri: str, obj_id: str | int, config: Config = None) -> str:
        return self._result(
            Action.GETVIEWNAME, user_uri, self._merge(config, {ParamKey.OBJ_ID: obj_id}), path=("viewname",)
        )

    def info(self, table_uri: str, config: Config = None) -> Any:
        """Return view id and database id of a view."""
        return self._result(Action.GETINFO, table_uri, self._merge(config))

    def url(self, table_uri: str, config: Config = None) -> str:
        return self._result(Action.GETVIEWURL, table_uri, self._merge(config), path=("viewurl",))

    def embed_url(self, table_uri: str, criteria: str | None = None, config: Config = None) -> str:
        return self._result(
            Action.GETEMBEDURL,
            table_uri,
            self._merge(config, {ParamKey.CRITERIA: criteria}),
            path=("embedUrl",),
        )
