"""Pytest fixtures for mkservice tests."""

import subprocess
from pathlib import Path
from typing import Any

import pytest

from mkservice.config import Settings


class FakeSystemctl:
    """Stand-in for subprocess.run that records systemctl calls."""

    def __init__(self) -> None:
        self.calls: list[list[str]] = []
        self.failures: dict[str, int] = {}

    def fail_on(self, subcommand: str, returncode: int = 1) -> None:
        """Make calls containing the subcommand exit with returncode."""
        self.failures[subcommand] = returncode

    def __call__(self, command: list[str], **kwargs: Any) -> subprocess.CompletedProcess:
        self.calls.append(list(command))
        for subcommand, returncode in self.failures.items():
            if subcommand in command:
                return subprocess.CompletedProcess(
                    command, returncode, stdout="", stderr=f"{subcommand} failed"
                )
        return subprocess.CompletedProcess(command, 0, stdout="", stderr="")


@pytest.fixture
def unit_dirs(tmp_path: Path) -> dict[str, Path]:
    """Create fake systemd directories.

    Returns:
        Mapping of system, user and runtime directory paths. The user
        directory is not created so tests can check it gets made.
    """
    dirs = {
        "system": tmp_path / "etc" / "systemd" / "system",
        "user": tmp_path / "home" / ".config" / "systemd" / "user",
        "runtime": tmp_path / "run" / "systemd" / "system",
    }
    dirs["system"].mkdir(parents=True)
    dirs["runtime"].mkdir(parents=True)
    return dirs


@pytest.fixture
def settings(unit_dirs: dict[str, Path]) -> Settings:
    """Settings pointing at the fake systemd directories."""
    return Settings(
        system_unit_dir=unit_dirs["system"],
        user_unit_dir=unit_dirs["user"],
        systemd_runtime_dir=unit_dirs["runtime"],
    )


@pytest.fixture
def fake_systemctl(monkeypatch: pytest.MonkeyPatch) -> FakeSystemctl:
    """Replace subprocess.run in the systemd provider."""
    fake = FakeSystemctl()
    monkeypatch.setattr("mkservice.provider.systemd.subprocess.run", fake)
    return fake


@pytest.fixture
def mkservice_env(monkeypatch: pytest.MonkeyPatch, unit_dirs: dict[str, Path]) -> dict[str, Path]:
    """Point the CLI at the fake systemd directories via the environment."""
    monkeypatch.setenv("MKSERVICE_SYSTEM_UNIT_DIR", str(unit_dirs["system"]))
    monkeypatch.setenv("MKSERVICE_USER_UNIT_DIR", str(unit_dirs["user"]))
    monkeypatch.setenv("MKSERVICE_SYSTEMD_RUNTIME_DIR", str(unit_dirs["runtime"]))
    monkeypatch.delenv("MKSERVICE_SYSTEMCTL", raising=False)
    monkeypatch.delenv("MKSERVICE_LOG_LEVEL", raising=False)
    return unit_dirs
