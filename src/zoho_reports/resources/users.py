"""Account user operations."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from ..actions import Action, ParamKey
from ..models import PlanInfo
from .base import Config, ResourceBase

Emails = str | Iterable[str]


class UsersResource(ResourceBase):
    """Manage the users of an account."""

    def list(self, user_uri: str, config: Config = None) -> Any:
        return self._result(Action.GETUSERS, user_uri, self._merge(config))

    def add(self, user_uri: str, emails: Emails, config: Config = None) -> None:
        self._change(Action.ADDUSER, user_uri, emails, config)

    def remove(self, user_uri: str, emails: Emails, config: Config = None) -> None:
        self._change(Action.REMOVEUSER, user_uri, emails, config)

    def activate(self, user_uri: str, emails: Emails, config: Config = None) -> None:
        self._change(Action.ACTIVATEUSER, user_uri, emails, config)

    def deactivate(self, user_uri: str, emails: Emails, config: Config = None) -> None:
        self._change(Action.DEACTIVATEUSER, user_uri, emails, config)

    def plan_info(self, user_uri: str, config: Config = None) -> PlanInfo:
        payload = self._envelope(Action.GETUSERPLANDETAILS, user_uri, self._merge(config))
        return PlanInfo.from_response(payload)

    def _change(self, action: Action, user_uri: str, emails: Emails, config: Config) -> None:
        self._mutate(action, user_uri, self._merge(config, {ParamKey.EMAILS: self._join(emails)}))
