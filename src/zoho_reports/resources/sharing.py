"""Sharing and ownership operations."""

from __future__ import annotations

from collections.abc import Iterable

from ..actions import Action, ParamKey
from ..models import ShareInfo
from .base import Config, ResourceBase

Emails = str | Iterable[str]


class SharingResource(ResourceBase):
    """Share views and manage database owners."""

    def share(
        self,
        db_uri: str,
        emails: Emails,
        views: str | Iterable[str],
        criteria: str | None = None,
        config: Config = None,
    ) -> None:
        """Share ``views`` with ``emails``, optionally filtered by ``criteria``.

        Permission flags such as ZOHO_READ or ZOHO_EXPORT go in ``config``.
        """
        params = self._merge(
            config,
            {
                ParamKey.EMAILS: self._join(emails),
                ParamKey.VIEWS: self._join(views),
                ParamKey.CRITERIA: criteria,
            },
        )
        self._mutate(Action.SHARE, db_uri, params)

    def remove(self, db_uri: str, emails: Emails, config: Config = None) -> None:
        self._mutate(Action.REMOVESHARE, db_uri, self._merge(config, {ParamKey.EMAILS: self._join(emails)}))

    def add_owner(self, db_uri: str, emails: Emails, config: Config = None) -> None:
        self._mutate(Action.ADDDBOWNER, db_uri, self._merge(config, {ParamKey.EMAILS: self._join(emails)}))

    def remove_owner(self, db_uri: str, emails: Emails, config: Config = None) -> None:
        self._mutate(Action.REMOVEDBOWNER, db_uri, self._merge(config, {ParamKey.EMAILS: self._join(emails)}))

    def info(self, db_uri: str, config: Config = None) -> ShareInfo:
        payload = self._envelope(Action.GETSHAREINFO, db_uri, self._merge(config))
        return ShareInfo.from_response(payload)
