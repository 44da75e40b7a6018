"""Configuration helpers for the Zoho Reports client."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from urllib.parse import quote

DEFAULT_BASE_URL = "https://reportsapi.zoho.com/api/"
API_VERSION = "1.0"
OUTPUT_FORMAT_JSON = "JSON"
ERROR_FORMAT_JSON = "JSON"
USER_AGENT = "zoho-reports-client"


def check_timeout(name: str, seconds: float | None) -> None:
    if seconds is not None and seconds < 0:
        raise ValueError(f"{name} must be zero or positive, got {seconds!r}")


class ProxyType(str, Enum):
    """Scheme used to reach the configured proxy."""

    HTTP = "HTTP"
    HTTPS = "HTTPS"
    BOTH = "BOTH"

    @classmethod
    def parse(cls, value: ProxyType | str) -> ProxyType:
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError as exc:
            raise ValueError(f"Unsupported proxy type: {value!r}") from exc


@dataclass(slots=True)
class ProxyConfig:
    """Proxy endpoint and optional basic credentials."""

    host: str
    port: int
    proxy_type: ProxyType = ProxyType.BOTH
    username: str | None = None
    password: str | None = None

    def proxy_url(self) -> str:
        host = self.host
        if "://" not in host:
            scheme = "https" if ProxyType.parse(self.proxy_type) is ProxyType.HTTPS else "http"
            host = f"{scheme}://{host}"
        scheme, _, netloc = host.partition("://")
        credentials = ""
        if self.username:
            credentials = quote(self.username, safe="")
            if self.password is not None:
                credentials += ":" + quote(self.password, safe="")
            credentials += "@"
        return f"{scheme}://{credentials}{netloc.rstrip('/')}:{self.port}"

    def resolved_proxies(self) -> dict[str, str]:
        """Route both schemes through the proxy; the type only picks its URL scheme."""
        url = self.proxy_url()
        return {"http": url, "https": url}


@dataclass(slots=True)
class ClientConfig:
    """Typed configuration for `ReportClient`."""

    auth_token: str
    base_url: str = DEFAULT_BASE_URL
    api_version: str = API_VERSION
    connect_timeout: float | None = 15.0
    read_timeout: float | None = 60.0
    verify_ssl: bool | str = True
    proxy: ProxyConfig | None = None
    default_headers: Mapping[str, str] | None = None

    def __post_init__(self) -> None:
        check_timeout("connect_timeout", self.connect_timeout)
        check_timeout("read_timeout", self.read_timeout)

    def resolved_headers(self) -> dict[str, str]:
        headers: dict[str, str] = {"User-Agent": USER_AGENT}
        if self.default_headers:
            headers.update(self.default_headers)
        return headers

    def resolved_timeout(self) -> tuple[float | None, float | None] | None:
        """Zero or ``None`` disables the corresponding limit."""
        connect = self.connect_timeout or None
        read = self.read_timeout or None
        if connect is None and read is None:
            return None
        return (connect, read)

    def resolved_proxies(self) -> dict[str, str] | None:
        if self.proxy is None:
            return None
        return self.proxy.resolved_proxies()
