"""Unit tests for mcpctl.api.runtime.get_runtime_environment."""

import mcp.client.stdio
import pytest

from mcpctl.api.runtime.get_runtime_environment import get_runtime_environment

pytestmark = pytest.mark.runtime


@pytest.fixture
def posix_vars(monkeypatch):
    monkeypatch.setattr(mcp.client.stdio, "DEFAULT_INHERITED_ENV_VARS", ["HOME", "PATH", "SHELL"])


def test_inherits_only_safe_vars(posix_vars, monkeypatch):
    monkeypatch.setenv("PATH", "/usr/bin")
    monkeypatch.setenv("HOME", "/home/u")
    monkeypatch.setenv("SECRET_TOKEN", "nope")
    env = get_runtime_environment()
    assert env["PATH"] == "/usr/bin"
    assert env["HOME"] == "/home/u"
    assert "SECRET_TOKEN" not in env


def test_shell_functions_skipped(posix_vars, monkeypatch):
    monkeypatch.setenv("SHELL", "() { echo hi; }")
    assert "SHELL" not in get_runtime_environment()


def test_base_env_wins(posix_vars, monkeypatch):
    monkeypatch.setenv("PATH", "/usr/bin")
    env = get_runtime_environment({"PATH": "/opt/bin", "API_KEY": "k"})
    assert env["PATH"] == "/opt/bin"
    assert env["API_KEY"] == "k"


def test_no_base_env_matches_sdk_default():
    assert get_runtime_environment() == mcp.client.stdio.get_default_environment()
