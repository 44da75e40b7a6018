"""Database level operations."""

from __future__ import annotations

from typing import Any

from ..actions import Action, ParamKey
from .base import Config, ResourceBase


class DatabasesResource(ResourceBase):
    """Copy, delete and inspect databases."""

    def copy(self, db_uri: str, db_key: str, new_db_name: str, config: Config = None) -> Any:
        """Copy a database and return the new database id.

        Args:
            db_uri: URI of the source database.
            db_key: Copy key obtained from `copy_key` on the source database.
            new_db_name: Name of the copy.
        """
        params = self._merge(
            config,
            {ParamKey.DATABASE_NAME: new_db_name, ParamKey.COPY_DB_KEY: db_key},
        )
        return self._result(Action.COPYDATABASE, db_uri, params, path=("dbid",))

    def delete(self, user_uri: str, db_name: str, config: Config = None) -> None:
        self._mutate(
            Action.DELETEDATABASE, user_uri, self._merge(config, {ParamKey.DATABASE_NAME: db_name})
        )

    def enable_domain(self, user_uri: str, db_name: str, domain_name: str, config: Config = None) -> Any:
        """Make a database available in a white-label domain."""
        params = self._merge(
            config, {ParamKey.DOMAIN_DB_NAME: db_name, ParamKey.DOMAIN_NAME: domain_name}
        )
        return self._result(Action.ENABLEDOMAINDB, user_uri, params)

    def disable_domain(self, user_uri: str, db_name: str, domain_name: str, config: Config = None) -> Any:
        params = self._merge(
            config, {ParamKey.DOMAIN_DB_NAME: db_name, ParamKey.DOMAIN_NAME: domain_name}
        )
        return self._result(Action.DISABLEDOMAINDB, user_uri, params)

    def metadata(self, user_uri: str, metadata: str, config: Config = None) -> Any:
        """Return catalog metadata (ZOHO_CATALOGLIST, ZOHO_DATATYPES, ...)."""
        return self._result(
            Action.DATABASEMETADATA, user_uri, self._merge(config, {ParamKey.METADATA: metadata})
        )

    def name(self, user_uri: str, db_id: str | int, config: Config = None) -> str:
        return self._result(
            Action.GETDATABASENAME, user_uri, self._merge(config, {ParamKey.DB_ID: db_id}), path=("dbname",)
        )

    def exists(self, user_uri: str, db_name: str, config: Config = None) -> bool:
        value = self._result(
            Action.ISDBEXIST, user_uri, self._merge(config, {ParamKey.DB_NAME: db_name}), path=("isdbexist",)
        )
        if isinstance(value, bool):
            return value
        return str(value).strip().lower() == "true"

    def copy_key(self, db_uri: str, config: Config = None) -> str:
        return self._result(Action.GETCOPYDBKEY, db_uri, self._merge(config), path=("copydbkey",))
