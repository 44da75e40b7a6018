"""High-level Zoho Reports API client."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

import requests
import urllib3
from urllib3.exceptions import InsecureRequestWarning

from . import uris
from .actions import Action
from .config import (
    DEFAULT_BASE_URL,
    OUTPUT_FORMAT_JSON,
    ClientConfig,
    ProxyConfig,
    ProxyType,
    check_timeout,
)
from .exceptions import TransportError
from .http import Expect, HttpResponse, build_url, prepare_form
from .http import request as http_request
from .resources import (
    ColumnsResource,
    DataResource,
    DatabasesResource,
    SharingResource,
    UsersResource,
    ViewsResource,
)

logger = logging.getLogger(__name__)


class ReportClient:
    """Wrap the Zoho Reports action API with helper methods.

    Every call is a single synchronous POST. The action travels with the
    call rather than living on the instance, but the client still holds a
    `requests.Session` and mutable configuration, so share one instance
    across threads only if configuration is left alone.
    """

    def __init__(
        self,
        auth_token: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        connect_timeout: float | None = 15.0,
        read_timeout: float | None = 60.0,
        verify_ssl: bool | str = True,
        proxy: ProxyConfig | None = None,
        default_headers: Mapping[str, str] | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.config = ClientConfig(
            auth_token=auth_token,
            base_url=base_url,
            connect_timeout=connect_timeout,
            read_timeout=read_timeout,
            verify_ssl=verify_ssl,
            proxy=proxy,
            default_headers=default_headers,
        )
        self._suppress_insecure_warning_if_needed()
        self._session = session or requests.Session()
        self.data = DataResource(self)
        self.databases = DatabasesResource(self)
        self.views = ViewsResource(self)
        self.columns = ColumnsResource(self)
        self.sharing = SharingResource(self)
        self.users = UsersResource(self)

    # Context manager helpers -------------------------------------------------
    def __enter__(self) -> ReportClient:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # pragma: no cover - passthrough
        self.close()

    # Connection settings -----------------------------------------------------
    @property
    def auth_token(self) -> str:
        return self.config.auth_token

    @property
    def connection_timeout(self) -> float | None:
        return self.config.connect_timeout

    @connection_timeout.setter
    def connection_timeout(self, seconds: float | None) -> None:
        check_timeout("connect_timeout", seconds)
        self.config.connect_timeout = seconds

    @property
    def read_timeout(self) -> float | None:
        return self.config.read_timeout

    @read_timeout.setter
    def read_timeout(self, seconds: float | None) -> None:
        check_timeout("read_timeout", seconds)
        self.config.read_timeout = seconds

    def set_proxy(
        self,
        host: str,
        port: int,
        proxy_type: ProxyType | str = ProxyType.BOTH,
        username: str | None = None,
        password: str | None = None,
    ) -> None:
        """Route every subsequent request through a proxy."""
        self.config.proxy = ProxyConfig(
            host=host,
            port=int(port),
            proxy_type=ProxyType.parse(proxy_type),
            username=username,
            password=password,
        )

    # Resource URIs -----------------------------------------------------------
    def user_uri(self, email: str) -> str:
        return uris.user_uri(self.config.base_url, email)

    def db_uri(self, email: str, db_name: str) -> str:
        return uris.db_uri(self.config.base_url, email, db_name)

    def table_uri(self, email: str, db_name: str, table_name: str) -> str:
        return uris.table_uri(self.config.base_url, email, db_name, table_name)

    # Public API --------------------------------------------------------------
    def request(
        self,
        action: Action | str,
        resource_uri: str,
        *,
        params: Mapping[str, Any] | None = None,
        output_format: str = OUTPUT_FORMAT_JSON,
        expect: Expect = "json",
        list_params: Iterable[tuple[str, str]] = (),
        files: Mapping[str, Any] | None = None,
    ) -> Any:
        """Send one action and return the decoded body (or raw bytes for EXPORT)."""

        action_name = str(action)
        url = build_url(
            resource_uri,
            action=action_name,
            output_format=output_format,
            auth_token=self.config.auth_token,
            api_version=self.config.api_version,
            list_params=list_params,
        )
        form = prepare_form(action_name, params)
        self._log_request(action_name, resource_uri)
        response = self._perform_request(url, action=action_name, form=form, files=files, expect=expect)
        return response.data

    def close(self) -> None:
        self._session.close()

    # Internal helpers -------------------------------------------------------
    def _perform_request(
        self,
        url: str,
        *,
        action: str,
        form: Mapping[str, str],
        files: Mapping[str, Any] | None,
        expect: Expect,
    ) -> HttpResponse:
        try:
            return http_request(
                self._session,
                url,
                action=action,
                form=form,
                files=files,
                headers=self.config.resolved_headers(),
                expect=expect,
                timeout=self.config.resolved_timeout(),
                proxies=self.config.resolved_proxies(),
                verify=self.config.verify_ssl,
            )
        except requests.RequestException as exc:
            reason = str(exc).strip() or exc.__class__.__name__
            status = exc.response.status_code if exc.response is not None else None
            raise TransportError(
                f"Failed to communicate with Zoho Reports during {action}: {reason}",
                action=action,
                status_code=status,
                reason=reason,
            ) from exc

    def _log_request(self, action: str, resource_uri: str) -> None:
        logger.info("Zoho Reports request %s %s", action, resource_uri)

    def _suppress_insecure_warning_if_needed(self) -> None:
        if isinstance(self.config.verify_ssl, bool) and not self.config.verify_ssl:
            urllib3.disable_warnings(InsecureRequestWarning)
