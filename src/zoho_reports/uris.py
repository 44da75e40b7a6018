"""Resource URI builders.

Names are form-encoded segment by segment. Afterwards the encoded ``/`` and
``\\`` are rewritten to the literal ``(/)`` and ``(//)`` placeholders so the
service does not read them as path separators.
"""

from __future__ import annotations

from urllib.parse import quote_plus

SLASH_PLACEHOLDER = "(/)"
BACKSLASH_PLACEHOLDER = "(//)"


def _encode(segment: str) -> str:
    return quote_plus(segment, safe="")


def replace_special_chars(value: str) -> str:
    """Swap encoded slashes for the service's literal placeholders."""
    value = value.replace("%2F", SLASH_PLACEHOLDER)
    return value.replace("%5C", BACKSLASH_PLACEHOLDER)


def _base(base_url: str) -> str:
    return base_url if base_url.endswith("/") else f"{base_url}/"


def user_uri(base_url: str, email: str) -> str:
    return _base(base_url) + _encode(email)


def db_uri(base_url: str, email: str, db_name: str) -> str:
    return replace_special_chars(f"{user_uri(base_url, email)}/{_encode(db_name)}")


def table_uri(base_url: str, email: str, db_name: str, table_name: str) -> str:
    """Return the URI addressing a table, report or dashboard."""
    return replace_special_chars(
        f"{user_uri(base_url, email)}/{_encode(db_name)}/{_encode(table_name)}"
    )
