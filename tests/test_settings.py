"""
Tests for environment configuration and the CLI arguments.
"""
import pytest

from universe import settings
from universe.cli import parse_args


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "GCD_HOST",
        "GCD_PORT",
        "GCD_LOG_LEVEL",
        "GCD_LOG_JSON",
        "GCD_MAX_BODY_BYTES",
        "GCD_REQUEST_TIMEOUT_SECONDS",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    assert settings.server_host() == "localhost"
    assert settings.server_port() == 3000
    assert settings.log_level() == "info"
    assert settings.log_json() is False
    assert settings.max_body_bytes() == 65_536
    assert settings.request_timeout_seconds() == 15.0


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("GCD_HOST", "0.0.0.0")
    monkeypatch.setenv("GCD_PORT", "8080")
    monkeypatch.setenv("GCD_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("GCD_LOG_JSON", "yes")
    monkeypatch.setenv("GCD_MAX_BODY_BYTES", "1024")
    monkeypatch.setenv("GCD_REQUEST_TIMEOUT_SECONDS", "2.5")

    assert settings.server_host() == "0.0.0.0"
    assert settings.server_port() == 8080
    assert settings.log_level() == "debug"
    assert settings.log_json() is True
    assert settings.max_body_bytes() == 1024
    assert settings.request_timeout_seconds() == 2.5


def test_malformed_values_fall_back(monkeypatch):
    monkeypatch.setenv("GCD_PORT", "http")
    monkeypatch.setenv("GCD_MAX_BODY_BYTES", "lots")
    assert settings.server_port() == 3000
    assert settings.max_body_bytes() == 65_536


def test_non_positive_limits_disable(monkeypatch):
    monkeypatch.setenv("GCD_MAX_BODY_BYTES", "0")
    monkeypatch.setenv("GCD_REQUEST_TIMEOUT_SECONDS", "-1")
    assert settings.max_body_bytes() is None
    assert settings.request_timeout_seconds() is None


def test_cli_flags_override_environment(monkeypatch):
    monkeypatch.setenv("GCD_PORT", "8080")
    args = parse_args([])
    assert args.port == 8080
    assert args.host == "localhost"

    args = parse_args(["--host", "127.0.0.1", "--port", "9000", "--log-level", "warning"])
    assert (args.host, args.port, args.log_level) == ("127.0.0.1", 9000, "warning")
