"""Unit tests for mcpctl.api.server.build_server_config."""

import base64
import json
import shutil
import sys
from urllib.parse import parse_qs, urlparse

import pytest

from mcpctl.api.registry.choose_connection import choose_connection
from mcpctl.api.registry.ServerDetails import ServerDetails
from mcpctl.api.server.build_server_config import build_server_config
from tests.unit.conftest import remote_server_payload, stdio_server_payload

pytestmark = pytest.mark.server


@pytest.fixture
def stdio_server():
    server = ServerDetails.model_validate(stdio_server_payload())
    return server, choose_connection(server)


def test_stdio_launches_through_cli(stdio_server, monkeypatch):
    monkeypatch.setattr(shutil, "which", lambda name: "/usr/local/bin/mcpctl")
    server, conn = stdio_server
    entry = build_server_config(server, conn, {"apiKey": "w"}, api_key="k")
    assert entry == {
        "command": "/usr/local/bin/mcpctl",
        "args": ["run", "@acme/weather", "--config", '{"apiKey":"w"}', "--key", "k"],
    }


def test_stdio_falls_back_to_module(stdio_server, monkeypatch):
    monkeypatch.setattr(shutil, "which", lambda name: None)
    server, conn = stdio_server
    entry = build_server_config(server, conn, {})
    assert entry == {"command": sys.executable, "args": ["-m", "mcpctl", "run", "@acme/weather"]}


def test_command_override(stdio_server):
    server, conn = stdio_server
    entry = build_server_config(server, conn, {}, command_override="~/bin/mcpctl")
    assert entry["command"].endswith("/bin/mcpctl")
    assert not entry["command"].startswith("~")


def test_remote_writes_url():
    server = ServerDetails.model_validate(remote_server_payload())
    conn = choose_connection(server)
    entry = build_server_config(server, conn, {"region": "eu"}, api_key="k")

    assert set(entry) == {"url"}
    parsed = urlparse(entry["url"])
    assert f"{parsed.scheme}://{parsed.netloc}{parsed.path}" == "https://search.example.com/mcp"
    query = parse_qs(parsed.query)
    assert json.loads(base64.b64decode(query["config"][0])) == {"region": "eu"}
    assert query["api_key"] == ["k"]


def test_remote_without_config_or_key():
    server = ServerDetails.model_validate(remote_server_payload())
    assert build_server_config(server, choose_connection(server), {}) == {"url": "https://search.example.com/mcp"}


def test_http_connection_of_non_remote_server_launches_locally(monkeypatch):
    monkeypatch.setattr(shutil, "which", lambda name: "/bin/mcpctl")
    server = ServerDetails.model_validate(remote_server_payload(remote=False))
    http = server.connections[0]
    assert "command" in build_server_config(server, http, {})
