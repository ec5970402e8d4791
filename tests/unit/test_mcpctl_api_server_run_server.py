"""Unit tests for mcpctl.api.server.run_server."""

import importlib
import subprocess

import mcp.client.stdio
import pytest
import typer

from mcpctl.api.server.run_server import run_server
from tests.unit.conftest import stdio_server_payload

pytestmark = pytest.mark.server

check_module = importlib.import_module("mcpctl.api.runtime.check_installed")


@pytest.fixture
def launched(monkeypatch):
    calls = []

    def fake_run(argv, **kwargs):
        calls.append({"argv": argv, **kwargs})
        return subprocess.CompletedProcess(argv, 3)

    monkeypatch.setattr(subprocess, "run", fake_run)
    monkeypatch.setattr(mcp.client.stdio, "DEFAULT_INHERITED_ENV_VARS", ["HOME", "PATH"])
    monkeypatch.setenv("PATH", "/usr/bin")
    return calls


def test_run_stdio_server(fake_registry, launched):
    code = run_server("@acme/weather", '{"apiKey": "w", "retries": 2}', "k")

    assert code == 3
    [call] = launched
    assert call["argv"] == ["npx", "-y", "@acme/weather-mcp"]
    env = call["env"]
    assert env["PATH"] == "/usr/bin"
    assert env["LOG_LEVEL"] == "info"
    assert env["apiKey"] == "w"
    assert env["retries"] == "2"


def test_run_checks_runtime(fake_registry, launched, monkeypatch):
    fake_registry.servers["@acme/fetch"] = {**stdio_server_payload("uvx mcp-server-fetch"), "qualifiedName": "@acme/fetch"}
    checked = []
    monkeypatch.setattr(check_module, "check_uv_installed", lambda: checked.append("uv") or True)
    run_server("@acme/fetch", None, "k")
    assert checked == ["uv"]
    assert launched[0]["argv"][0] == "uvx"


def test_remote_only_server_cannot_run(fake_registry, launched):
    fake_registry.servers["@acme/hosted"] = {
        "qualifiedName": "@acme/hosted",
        "connections": [{"type": "http", "deploymentUrl": "https://h.example.com"}],
    }
    with pytest.raises(ValueError, match="remote-only"):
        run_server("@acme/hosted", None, "k")
    assert launched == []


def test_stdio_without_command(fake_registry, launched):
    fake_registry.servers["@acme/js"] = {
        "qualifiedName": "@acme/js",
        "connections": [{"type": "stdio", "stdioFunction": "config => ({})"}],
    }
    with pytest.raises(ValueError, match="launch command"):
        run_server("@acme/js", None, "k")


def test_missing_executable(fake_registry, monkeypatch):
    def fake_run(argv, **kwargs):
        raise FileNotFoundError(argv[0])

    monkeypatch.setattr(subprocess, "run", fake_run)
    with pytest.raises(ValueError, match="Launch command not found: npx"):
        run_server("@acme/weather", None, "k")


def test_missing_runtime_never_touches_stdio(fake_registry, launched, monkeypatch, capsys):
    fake_registry.servers["@acme/fetch"] = {**stdio_server_payload("uvx mcp-server-fetch"), "qualifiedName": "@acme/fetch"}
    monkeypatch.setattr(check_module, "check_uv_installed", lambda: False)

    def no_interaction(*args, **kwargs):
        raise AssertionError("run must not prompt")

    monkeypatch.setattr(typer, "confirm", no_interaction)
    monkeypatch.setattr(typer, "prompt", no_interaction)

    assert run_server("@acme/fetch", None, "k") == 3

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "UV is not installed" in captured.err
    assert launched[0]["argv"][0] == "uvx"


def test_saved_key_used_without_prompt(fake_registry, launched, monkeypatch):
    monkeypatch.setenv("MCPCTL_API_KEY", "env-key")
    run_server("@acme/weather", '{"apiKey": "w"}')
    assert fake_registry.calls[0]["headers"]["Authorization"] == "Bearer env-key"


def test_no_key_is_an_error(fake_registry, launched, monkeypatch):
    monkeypatch.setattr(typer, "prompt", lambda *a, **k: pytest.fail("run must not prompt"))
    with pytest.raises(ValueError, match="No API key"):
        run_server("@acme/weather", None)
    assert launched == []
