"""Unit tests for mcpctl.api.runtime.prompt_for_install."""

import importlib
import subprocess

import pytest
import typer

from mcpctl.api.runtime.prompt_for_install import (
    BUN_POSIX_INSTALLS,
    BUN_WINDOWS_INSTALL,
    UV_POSIX_INSTALLS,
    UV_WINDOWS_INSTALL,
    prompt_for_bun_install,
    prompt_for_uv_install,
)

pytestmark = pytest.mark.runtime

install_module = importlib.import_module("mcpctl.api.runtime.prompt_for_install")


@pytest.fixture
def accept(monkeypatch):
    monkeypatch.setattr(typer, "confirm", lambda *a, **k: True)


def _record_shell(monkeypatch, failing=()):
    commands = []

    def fake_run(command, **kwargs):
        assert kwargs.get("shell") is True
        commands.append(command)
        if command in failing:
            raise subprocess.CalledProcessError(1, command)
        return subprocess.CompletedProcess(command, 0)

    monkeypatch.setattr(subprocess, "run", fake_run)
    return commands


def test_declined_uv_install_runs_nothing(monkeypatch, decline_prompts, capsys):
    commands = _record_shell(monkeypatch)
    assert prompt_for_uv_install() is False
    assert commands == []
    assert "astral.sh/uv" in capsys.readouterr().err


def test_uv_posix_uses_curl(monkeypatch, accept):
    monkeypatch.setattr(install_module, "detect_os", lambda: "linux")
    commands = _record_shell(monkeypatch)
    assert prompt_for_uv_install() is True
    assert commands == [UV_POSIX_INSTALLS[0]]


def test_uv_posix_falls_back_to_wget(monkeypatch, accept):
    monkeypatch.setattr(install_module, "detect_os", lambda: "macos")
    commands = _record_shell(monkeypatch, failing={UV_POSIX_INSTALLS[0]})
    assert prompt_for_uv_install() is True
    assert commands == list(UV_POSIX_INSTALLS)


def test_uv_windows_uses_powershell(monkeypatch, accept):
    monkeypatch.setattr(install_module, "detect_os", lambda: "windows")
    commands = _record_shell(monkeypatch)
    assert prompt_for_uv_install() is True
    assert commands == [UV_WINDOWS_INSTALL]


def test_uv_all_installers_fail(monkeypatch, accept, capsys):
    monkeypatch.setattr(install_module, "detect_os", lambda: "linux")
    _record_shell(monkeypatch, failing=set(UV_POSIX_INSTALLS))
    assert prompt_for_uv_install() is False
    assert "Failed to install UV" in capsys.readouterr().err


def test_bun_prefers_homebrew(monkeypatch, accept):
    monkeypatch.setattr(install_module, "detect_os", lambda: "macos")
    commands = _record_shell(monkeypatch)
    assert prompt_for_bun_install() is True
    assert commands == ["brew install oven-sh/bun/bun"]


def test_bun_falls_back_to_curl(monkeypatch, accept):
    monkeypatch.setattr(install_module, "detect_os", lambda: "linux")
    commands = _record_shell(monkeypatch, failing={BUN_POSIX_INSTALLS[0]})
    assert prompt_for_bun_install() is True
    assert commands == list(BUN_POSIX_INSTALLS)


def test_bun_windows(monkeypatch, accept):
    monkeypatch.setattr(install_module, "detect_os", lambda: "windows")
    commands = _record_shell(monkeypatch)
    assert prompt_for_bun_install() is True
    assert commands == [BUN_WINDOWS_INSTALL]


def test_bun_failure_points_to_manual_install(monkeypatch, accept, capsys):
    monkeypatch.setattr(install_module, "detect_os", lambda: "linux")
    _record_shell(monkeypatch, failing=set(BUN_POSIX_INSTALLS))
    assert prompt_for_bun_install() is False
    assert "https://bun.sh" in capsys.readouterr().err
