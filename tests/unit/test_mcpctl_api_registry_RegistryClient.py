"""Unit tests for mcpctl.api.registry.RegistryClient."""

import pytest
import requests  # type: ignore

from mcpctl.api.config.McpctlConfig import McpctlConfig
from mcpctl.api.registry.RegistryClient import RegistryClient
from mcpctl.api.registry.RegistryError import RegistryError, ServerNotFoundError
from tests.unit.conftest import FakeResponse, FakeSession, stdio_server_payload


class StaticSession:
    def __init__(self, response=None, exc=None):
        self.response = response
        self.exc = exc

    def get(self, url, headers=None, timeout=None, params=None):
        if self.exc:
            raise self.exc
        return self.response


def test_get_server_parses_payload():
    session = FakeSession({"@acme/weather": stdio_server_payload()})
    client = RegistryClient("https://reg.example.com/", api_key="k", timeout=3, session=session)

    server = client.get_server("@acme/weather")

    assert server.qualified_name == "@acme/weather"
    assert server.connections[0].stdio_function.startswith("config =>")
    assert server.connections[0].required_config_keys() == ["apiKey"]
    call = session.calls[0]
    assert call["url"] == "https://reg.example.com/servers/@acme/weather"
    assert call["headers"]["Authorization"] == "Bearer k"
    assert call["timeout"] == 3


def test_no_key_no_auth_header():
    session = FakeSession({"@acme/weather": stdio_server_payload()})
    RegistryClient("https://reg.example.com", session=session).get_server("@acme/weather")
    assert "Authorization" not in session.calls[0]["headers"]


def test_not_found():
    client = RegistryClient("https://reg.example.com", session=FakeSession())
    with pytest.raises(ServerNotFoundError, match="@acme/missing"):
        client.get_server("@acme/missing")


@pytest.mark.parametrize("status", [401, 403])
def test_auth_rejected(status):
    client = RegistryClient("https://r", session=StaticSession(FakeResponse(status, {})))
    with pytest.raises(RegistryError, match="rejected the API key"):
        client.get_server("@acme/x")


def test_server_error():
    client = RegistryClient("https://r", session=StaticSession(FakeResponse(500, None, text="boom")))
    with pytest.raises(RegistryError, match="Registry error 500: boom"):
        client.get_server("@acme/x")


def test_network_error():
    client = RegistryClient("https://r", session=StaticSession(exc=requests.ConnectionError("down")))
    with pytest.raises(RegistryError, match="Failed to reach registry"):
        client.get_server("@acme/x")


def test_invalid_json():
    client = RegistryClient("https://r", session=StaticSession(FakeResponse(200, None, text="<html>")))
    with pytest.raises(RegistryError, match="invalid JSON"):
        client.get_server("@acme/x")


def test_unexpected_payload():
    client = RegistryClient("https://r", session=StaticSession(FakeResponse(200, {"name": "x"})))
    with pytest.raises(RegistryError, match="Unexpected registry payload"):
        client.get_server("@acme/x")


def test_validate_api_key():
    session = FakeSession()
    assert RegistryClient("https://r", api_key="good-key", session=session).validate_api_key() is True
    assert RegistryClient("https://r", api_key="bad-key", session=session).validate_api_key() is False
    assert RegistryClient("https://r", session=session).validate_api_key() is False


def test_from_config(fake_registry):
    config = McpctlConfig.model_validate({"registry": {"url": "https://reg.example.com", "timeout": 2.5}})
    client = RegistryClient.from_config(config, api_key="k")
    assert client.base_url == "https://reg.example.com"
    assert client.timeout == 2.5
    assert client.session is fake_registry
