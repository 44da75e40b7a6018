from zoho_reports import ReportClient
from zoho_reports.uris import db_uri, replace_special_chars, table_uri, user_uri

BASE = "https://reportsapi.zoho.com/api/"


def test_user_uri_encodes_email():
    assert user_uri(BASE, "owner@example.com") == f"{BASE}owner%40example.com"


def test_user_uri_adds_missing_trailing_slash():
    assert user_uri("https://reportsapi.zoho.com/api", "a@b.co") == f"{BASE}a%40b.co"


def test_db_uri_encodes_spaces():
    assert db_uri(BASE, "owner@example.com", "My DB") == f"{BASE}owner%40example.com/My+DB"


def test_table_uri_keeps_slash_in_names_as_placeholder():
    uri = table_uri(BASE, "owner@example.com", "My DB", "My/Table")

    assert uri == f"{BASE}owner%40example.com/My+DB/My(/)Table"
    assert "%2F" not in uri


def test_table_uri_replaces_backslash():
    uri = table_uri(BASE, "owner@example.com", "Sales\\2024", "Orders")

    assert uri.endswith("/Sales(//)2024/Orders")


def test_replace_special_chars_only_touches_encoded_separators():
    assert replace_special_chars("a%2Fb%5Cc%20d/e") == "a(/)b(//)c%20d/e"


def test_client_uri_helpers_use_configured_base():
    client = ReportClient("token", base_url="https://analyticsapi.zoho.eu/api/")

    assert client.user_uri("x@y.com") == "https://analyticsapi.zoho.eu/api/x%40y.com"
    assert client.db_uri("x@y.com", "D/B") == "https://analyticsapi.zoho.eu/api/x%40y.com/D(/)B"
    assert client.table_uri("x@y.com", "DB", "T") == "https://analyticsapi.zoho.eu/api/x%40y.com/DB/T"
