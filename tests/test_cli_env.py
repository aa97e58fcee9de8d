from typer.testing import CliRunner

from osdsctl.cli import app

runner = CliRunner()


def _patch_client(monkeypatch, captured):
    class DummyClient:
        def __init__(self, **kwargs):
            captured.update(kwargs)
            self.volumes = type("V", (), {"list": lambda self: []})()

        def __enter__(self):
            return self

        def __exit__(self, exc_type, exc, tb):
            return False

    monkeypatch.setattr("osdsctl.cli.OpenSDSClient", DummyClient)


def test_cli_defaults_to_local_endpoint(monkeypatch):
    captured: dict[str, object] = {}
    _patch_client(monkeypatch, captured)

    result = runner.invoke(app, ["volume", "list"])

    assert result.exit_code == 0
    assert captured["endpoint"] == "http://localhost:50040"
    assert captured["api_version"] == "v1beta"
    assert captured["verify_ssl"] is True


def test_cli_reads_endpoint_and_timeout_from_env(monkeypatch):
    captured: dict[str, object] = {}
    _patch_client(monkeypatch, captured)

    result = runner.invoke(
        app,
        ["volume", "list"],
        env={"OPENSDS_ENDPOINT": "https://opensds.example:8443", "OPENSDS_TIMEOUT": "5"},
    )

    assert result.exit_code == 0
    assert captured["endpoint"] == "https://opensds.example:8443"
    assert captured["timeout"] == 5.0


def test_cli_respects_env_cert_and_verify_true(monkeypatch, tmp_path):
    cert = tmp_path / "ca.pem"
    cert.write_text("dummy", encoding="utf-8")
    captured: dict[str, object] = {}
    _patch_client(monkeypatch, captured)

    result = runner.invoke(
        app,
        ["volume", "list"],
        env={"OPENSDS_CA_CERT": str(cert), "OPENSDS_VERIFY_SSL": "1"},
    )

    assert result.exit_code == 0
    assert captured["verify_ssl"] == str(cert)


def test_cli_env_cert_with_no_verify_rejected(tmp_path):
    cert = tmp_path / "ca.pem"
    cert.write_text("dummy", encoding="utf-8")

    result = runner.invoke(
        app,
        ["volume", "list"],
        env={"OPENSDS_CA_CERT": str(cert), "OPENSDS_VERIFY_SSL": "0"},
    )

    assert result.exit_code == 1
    assert "Cannot combine --cert with --no-verify" in result.stderr
