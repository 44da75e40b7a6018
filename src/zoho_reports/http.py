"""HTTP utilities for Zoho Reports API access."""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Literal
from urllib.parse import urlencode

from requests import Response, Session

from .actions import Action, ParamKey
from .config import ERROR_FORMAT_JSON
from .exceptions import ParseError, ServerError

logger = logging.getLogger(__name__)

Expect = Literal["json", "raw", "none"]

_ESCAPE_RE = re.compile(r"\\(.?)", re.DOTALL)


@dataclass(slots=True)
class HttpResponse:
    """Typed response wrapper with helper accessors."""

    status_code: int
    data: Any
    headers: Mapping[str, str]


def build_url(
    resource_uri: str,
    *,
    action: str,
    output_format: str,
    auth_token: str,
    api_version: str,
    list_params: Iterable[tuple[str, str]] = (),
) -> str:
    """Append the fixed control parameters (and any repeated list params)."""

    query = [
        (ParamKey.ACTION, str(action)),
        (ParamKey.OUTPUT_FORMAT, output_format),
        (ParamKey.ERROR_FORMAT, ERROR_FORMAT_JSON),
        (ParamKey.AUTH_TOKEN, auth_token),
        (ParamKey.API_VERSION, api_version),
    ]
    query.extend((key, str(value)) for key, value in list_params)
    return f"{resource_uri}?{urlencode(query)}"


def prepare_form(action: str, params: Mapping[str, Any] | None) -> dict[str, str]:
    """Drop absent values; empty strings survive only for IMPORT.

    Booleans go out as ``true``/``false``.
    """

    keep_empty = str(action) == Action.IMPORT.value
    form: dict[str, str] = {}
    for key, value in (params or {}).items():
        if value is None:
            continue
        if isinstance(value, bool):
            text = "true" if value else "false"
        else:
            text = value if isinstance(value, str) else str(value)
        if text == "" and not keep_empty:
            continue
        form[key] = text
    return form


def strip_slashes(text: str) -> str:
    """Undo one level of backslash escaping."""
    return _ESCAPE_RE.sub(r"\1", text)


def parse_json(response: Response, action: str) -> Any:
    """Parse JSON, retrying once on an un-escaped copy of the body."""

    try:
        return response.json()
    except ValueError:
        pass
    try:
        payload = json.loads(strip_slashes(response.text))
    except ValueError as exc:
        raise ParseError(
            f"Returned JSON format for {action} is not proper. Could possibly be version mismatch",
            action=str(action),
            status_code=response.status_code,
            content=response.content,
        ) from exc
    logger.warning("Decoded %s response only after removing escape characters", action)
    return payload


def raise_for_error(response: Response, action: str) -> None:
    """Raise `ServerError` (or `ParseError`) for any non-200 response."""

    if response.status_code == 200:
        return
    payload = parse_json(response, action)
    error = None
    if isinstance(payload, Mapping):
        envelope = payload.get("response")
        if isinstance(envelope, Mapping):
            error = envelope.get("error")
    if not isinstance(error, Mapping):
        raise ServerError(
            None,
            response.text[:200],
            action=str(action),
            status_code=response.status_code,
        )
    raise ServerError(
        _coerce_code(error.get("code")),
        str(error.get("message", "")),
        action=str(action),
        status_code=response.status_code,
    )


def _coerce_code(code: Any) -> int | str | None:
    if isinstance(code, str) and code.strip().isdigit():
        return int(code)
    return code


def project(payload: Any, action: str, *path: str) -> Any:
    """Return ``response.result`` (or a key below it) from an envelope."""

    node = payload
    for key in ("response", "result", *path):
        if not isinstance(node, Mapping) or key not in node:
            raise ParseError(
                f"Response for {action} has no '{key}' entry",
                action=str(action),
                content=payload,
            )
        node = node[key]
    return node


def request(
    session: Session,
    url: str,
    *,
    action: str,
    form: Mapping[str, str] | None = None,
    files: Mapping[str, Any] | None = None,
    headers: Mapping[str, str] | None = None,
    expect: Expect = "json",
    timeout: float | tuple[float | None, float | None] | None = None,
    proxies: Mapping[str, str] | None = None,
    verify: bool | str = True,
) -> HttpResponse:
    """POST a request and decode the response according to the action."""

    response = session.post(
        url,
        data=form,
        files=files,
        headers=headers,
        timeout=timeout,
        proxies=proxies,
        verify=verify,
    )
    logger.debug("Zoho Reports %s answered with HTTP %s", action, response.status_code)
    raise_for_error(response, action)

    data: Any = None
    if str(action) == Action.EXPORT.value or expect == "raw":
        data = response.content
    elif expect == "json":
        data = parse_json(response, action)

    return HttpResponse(status_code=response.status_code, data=data, headers=response.headers)
