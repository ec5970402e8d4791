"""Shared pytest configuration and fixtures for all tests."""

import json
from pathlib import Path

import pytest
import requests  # type: ignore
import typer

from mcpctl.api.client.get_client_targets import VALID_CLIENTS
from mcpctl.api.config.McpctlConfig import McpctlConfig
from mcpctl.utils.configure_logging import configure_logging


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without external processes")
    config.addinivalue_line("markers", "integration: tests that drive the CLI end to end")
    config.addinivalue_line("markers", "client: client configuration tests")
    config.addinivalue_line("markers", "runtime: runtime prerequisite tests")
    config.addinivalue_line("markers", "server: server command tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Environment
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def _session_logging(tmp_path_factory):
    """Send log output to a throwaway directory for the whole run."""
    configure_logging(tmp_path_factory.mktemp("logs"))


@pytest.fixture(autouse=True)
def mcpctl_home(tmp_path, monkeypatch) -> Path:
    """Isolated MCPCTL_HOME with no saved API key."""
    home = tmp_path / "mcpctl_home"
    home.mkdir()
    monkeypatch.setenv("MCPCTL_HOME", str(home))
    monkeypatch.delenv("MCPCTL_API_KEY", raising=False)
    return home


@pytest.fixture
def client_paths(mcpctl_home, tmp_path) -> dict[str, Path]:
    """Point every client at a file under tmp_path via config overrides."""
    paths = {name: tmp_path / "clients" / name / "mcp.json" for name in VALID_CLIENTS}
    McpctlConfig(clients={name: str(path) for name, path in paths.items()}).save()
    return paths


@pytest.fixture
def decline_prompts(monkeypatch):
    """Answer 'no' to every confirm prompt."""
    monkeypatch.setattr(typer, "confirm", lambda *args, **kwargs: False)


# =============================================================================
# Command Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


def write_json(path: Path, data) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2))


def read_json(path: Path):
    return json.loads(path.read_text())


# =============================================================================
# Registry Payloads
# =============================================================================


def stdio_server_payload(launch: str = "npx -y @acme/weather-mcp") -> dict:
    command, *args = launch.split()
    return {
        "qualifiedName": "@acme/weather",
        "displayName": "Weather",
        "description": "Forecasts over MCP",
        "connections": [
            {
                "type": "stdio",
                "stdioFunction": f"config => ({{command: '{command}', args: {args!r}}})",
                "command": command,
                "args": args,
                "env": {"LOG_LEVEL": "info"},
                "configSchema": {
                    "type": "object",
                    "required": ["apiKey"],
                    "properties": {
                        "apiKey": {"type": "string", "description": "Weather API key"},
                        "units": {"type": "string", "default": "metric"},
                    },
                },
            }
        ],
        "tools": [{"name": "forecast"}, {"name": "alerts"}],
    }


def remote_server_payload(remote=True) -> dict:
    payload = {
        "qualifiedName": "@acme/search",
        "displayName": "Search",
        "description": "Hosted search",
        "connections": [
            {
                "type": "http",
                "deploymentUrl": "https://search.example.com",
                "configSchema": {},
            },
            {
                "type": "stdio",
                "command": "uvx",
                "args": ["acme-search"],
            },
        ],
    }
    if remote is not None:
        payload["remote"] = remote
    return payload


class FakeResponse:
    def __init__(self, status_code: int, payload=None, text: str = ""):
        self.status_code = status_code
        self._payload = payload
        self.text = text or (json.dumps(payload) if payload is not None else "")

    def json(self):
        if self._payload is None:
            raise ValueError("no JSON")
        return self._payload


class FakeSession:
    """Stands in for requests.Session; serves payloads keyed by qualified name."""

    def __init__(self, servers: dict | None = None):
        self.servers = servers or {}
        self.calls: list[dict] = []

    def get(self, url, headers=None, timeout=None, params=None):
        self.calls.append({"url": url, "headers": headers or {}, "timeout": timeout, "params": params})
        if url.endswith("/servers"):
            auth = (headers or {}).get("Authorization", "")
            return FakeResponse(200 if auth == "Bearer good-key" else 401, {"servers": []})
        name = url.split("/servers/", 1)[1]
        if name in self.servers:
            return FakeResponse(200, self.servers[name])
        return FakeResponse(404, {"error": "not found"})


@pytest.fixture
def fake_registry(monkeypatch) -> FakeSession:
    """Route registry requests to an in-memory session."""
    session = FakeSession(
        {
            "@acme/weather": stdio_server_payload(),
            "@acme/search": remote_server_payload(),
        }
    )
    monkeypatch.setattr(requests, "Session", lambda: session)
    return session
