"""Common helpers for resource wrappers."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from ..actions import Action
from ..http import project

if TYPE_CHECKING:  # pragma: no cover - import-time guard
    from ..client import ReportClient

Config = Mapping[str, Any] | None


class ResourceBase:
    """Provide shared helpers for resource modules."""

    def __init__(self, client: ReportClient) -> None:
        self._client = client

    @staticmethod
    def _merge(config: Config, named: Mapping[str, Any] | None = None) -> dict[str, Any]:
        # Explicit arguments win over caller-supplied config keys; None means "not given".
        merged: dict[str, Any] = dict(config or {})
        if named:
            merged.update((key, value) for key, value in named.items() if value is not None)
        return merged

    @staticmethod
    def _join(values: str | Iterable[str]) -> str:
        if isinstance(values, str):
            return values
        return ",".join(values)

    @staticmethod
    def _flag(value: bool | str, *, upper: bool = False) -> str:
        if isinstance(value, bool):
            text = "true" if value else "false"
            return text.upper() if upper else text
        return value

    def _mutate(self, action: Action, uri: str, params: Mapping[str, Any] | None = None, **options: Any) -> None:
        self._client.request(action, uri, params=params, expect="none", **options)

    def _envelope(self, action: Action, uri: str, params: Mapping[str, Any] | None = None, **options: Any) -> Any:
        return self._client.request(action, uri, params=params, expect="json", **options)

    def _result(
        self,
        action: Action,
        uri: str,
        params: Mapping[str, Any] | None = None,
        *,
        path: tuple[str, ...] = (),
        **options: Any,
    ) -> Any:
        payload = self._envelope(action, uri, params, **options)
        return project(payload, action, *path)
