from typer.testing import CliRunner

from zoho_reports.cli import app
from zoho_reports.config import ProxyType

runner = CliRunner()


class DummyClient:
    captured: dict[str, object] = {}

    def __init__(self, auth_token, **kwargs):
        DummyClient.captured = {"auth_token": auth_token, **kwargs}
        self.databases = type("D", (), {"exists": lambda self, uri, name: True})()

    def user_uri(self, email):
        return f"https://reportsapi.zoho.com/api/{email}"

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        return False


def test_cli_reads_token_and_base_url_from_env(monkeypatch):
    monkeypatch.setattr("zoho_reports.cli.ReportClient", DummyClient)

    result = runner.invoke(
        app,
        ["db-exists", "owner@example.com", "Sales"],
        env={
            "ZOHO_REPORTS_AUTHTOKEN": "env-token",
            "ZOHO_REPORTS_BASE_URL": "https://analyticsapi.zoho.eu/api/",
        },
    )

    assert result.exit_code == 0
    assert DummyClient.captured["auth_token"] == "env-token"
    assert DummyClient.captured["base_url"] == "https://analyticsapi.zoho.eu/api/"


def test_cli_builds_proxy_from_env(monkeypatch):
    monkeypatch.setattr("zoho_reports.cli.ReportClient", DummyClient)

    result = runner.invoke(
        app,
        ["--proxy-type", "https", "db-exists", "owner@example.com", "Sales"],
        env={
            "ZOHO_REPORTS_AUTHTOKEN": "env-token",
            "ZOHO_REPORTS_PROXY_HOST": "proxy.local",
            "ZOHO_REPORTS_PROXY_PORT": "3128",
            "ZOHO_REPORTS_PROXY_USER": "user",
            "ZOHO_REPORTS_PROXY_PASSWORD": "secret",
        },
    )

    assert result.exit_code == 0
    proxy = DummyClient.captured["proxy"]
    assert proxy.host == "proxy.local"
    assert proxy.port == 3128
    assert proxy.proxy_type is ProxyType.HTTPS
    assert proxy.username == "user"


def test_cli_respects_env_cert(monkeypatch, tmp_path):
    cert = tmp_path / "ca.pem"
    cert.write_text("dummy", encoding="utf-8")
    monkeypatch.setattr("zoho_reports.cli.ReportClient", DummyClient)

    result = runner.invoke(
        app,
        ["db-exists", "owner@example.com", "Sales"],
        env={"ZOHO_REPORTS_AUTHTOKEN": "t", "ZOHO_REPORTS_CA_CERT": str(cert), "ZOHO_REPORTS_VERIFY_SSL": "1"},
    )

    assert result.exit_code == 0
    assert DummyClient.captured["verify_ssl"] == str(cert)


def test_cli_env_cert_with_no_verify_rejected(tmp_path):
    cert = tmp_path / "ca.pem"
    cert.write_text("dummy", encoding="utf-8")

    result = runner.invoke(
        app,
        ["db-exists", "owner@example.com", "Sales"],
        env={"ZOHO_REPORTS_AUTHTOKEN": "t", "ZOHO_REPORTS_CA_CERT": str(cert), "ZOHO_REPORTS_VERIFY_SSL": "0"},
    )

    assert result.exit_code != 0
    assert "Cannot combine --cert with --no-verify" in result.output


def test_cli_requires_proxy_port_with_host(monkeypatch):
    monkeypatch.setattr("zoho_reports.cli.ReportClient", DummyClient)

    result = runner.invoke(
        app,
        ["--proxy-host", "proxy.local", "db-exists", "owner@example.com", "Sales"],
        env={"ZOHO_REPORTS_AUTHTOKEN": "t"},
    )

    assert result.exit_code != 0


def test_cli_rejects_negative_timeout(monkeypatch):
    monkeypatch.setattr("zoho_reports.cli.ReportClient", DummyClient)

    result = runner.invoke(
        app,
        ["--read-timeout", "-1", "db-exists", "owner@example.com", "Sales"],
        env={"ZOHO_REPORTS_AUTHTOKEN": "t"},
    )

    assert result.exit_code != 0
