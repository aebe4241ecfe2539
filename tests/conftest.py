"""Shared pytest configuration and fixtures for all tests."""

import json
import os
import platform
import subprocess
from collections.abc import Sequence
from pathlib import Path

import pytest


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without external processes")
    config.addinivalue_line("markers", "smoke: end-to-end checks of the installed CLI")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/smoke/" in path_str:
            item.add_marker(pytest.mark.smoke)
        elif "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Configuration Helpers
# =============================================================================


def minimal_config_dict(root: Path) -> dict:
    """Configuration pointing every path of the agent below ``root``."""
    return {
        "service": {
            "pid_file_linux": str(root / "run" / "comelit-hub-hap.pid"),
            "pid_file_darwin": str(root / "lib" / "comelit-hub-hap.pid"),
            "restart_delay_secs": 0,
        },
        "log": {
            "log_dir": str(root / "log"),
            "follow_poll_secs": 0.05,
        },
        "data_dir": str(root / "lib"),
    }


@pytest.fixture
def hub_home(tmp_path: Path, monkeypatch) -> Path:
    """Set up HUBCTL_HOME with a config file rooted in tmp_path.

    The log directory exists and is empty.

    Returns:
        Path to the HUBCTL home directory (tmp_path)
    """
    monkeypatch.setenv("HUBCTL_HOME", str(tmp_path))
    (tmp_path / "config.json").write_text(json.dumps(minimal_config_dict(tmp_path)))
    (tmp_path / "log").mkdir()
    return tmp_path


@pytest.fixture
def write_config(hub_home: Path):
    """Rewrite config.json with section overrides merged into the minimal config."""

    def _write(**sections) -> Path:
        config = minimal_config_dict(hub_home)
        for name, value in sections.items():
            if isinstance(value, dict):
                config.setdefault(name, {}).update(value)
            else:
                config[name] = value
        path = hub_home / "config.json"
        path.write_text(json.dumps(config))
        return path

    return _write


# =============================================================================
# Platform, privilege and process fakes
# =============================================================================


@pytest.fixture
def on_linux(monkeypatch):
    monkeypatch.setattr(platform, "system", lambda: "Linux")


@pytest.fixture
def on_darwin(monkeypatch):
    monkeypatch.setattr(platform, "system", lambda: "Darwin")


@pytest.fixture
def on_windows(monkeypatch):
    monkeypatch.setattr(platform, "system", lambda: "Windows")


@pytest.fixture
def as_root(monkeypatch):
    monkeypatch.setattr(os, "geteuid", lambda: 0, raising=False)


@pytest.fixture
def as_user(monkeypatch):
    monkeypatch.setattr(os, "geteuid", lambda: 1000, raising=False)


class FakeNative:
    """Stand-in for ``subprocess.run``/``subprocess.call`` recording every argv.

    Responses are chosen by the longest registered argv prefix; anything
    unregistered succeeds with empty output.
    """

    def __init__(self) -> None:
        self.calls: list[list[str]] = []
        self._responses: dict[tuple[str, ...], tuple[int, str, str]] = {}

    def respond(self, prefix: Sequence[str], returncode: int = 0, stdout: str = "", stderr: str = "") -> None:
        self._responses[tuple(prefix)] = (returncode, stdout, stderr)

    def missing(self, program: str) -> None:
        self._responses[(program,)] = (-1, "", "")

    def _lookup(self, argv: list[str]) -> tuple[int, str, str]:
        best: tuple[int, str, str] = (0, "", "")
        best_len = -1
        for prefix, response in self._responses.items():
            if tuple(argv[: len(prefix)]) == prefix and len(prefix) > best_len:
                best, best_len = response, len(prefix)
        return best

    def run(self, args, **kwargs):
        argv = [str(arg) for arg in args]
        self.calls.append(argv)
        returncode, stdout, stderr = self._lookup(argv)
        if returncode == -1:
            raise FileNotFoundError(2, "No such file or directory", argv[0])
        return subprocess.CompletedProcess(argv, returncode, stdout, stderr)

    def call(self, args, **kwargs):
        return self.run(args, **kwargs).returncode

    def commands(self, program: str | None = None) -> list[str]:
        """Recorded calls joined as strings, optionally filtered by program."""
        return [" ".join(argv) for argv in self.calls if program is None or argv[0] == program]


@pytest.fixture
def native(monkeypatch) -> FakeNative:
    fake = FakeNative()
    monkeypatch.setattr(subprocess, "run", fake.run)
    monkeypatch.setattr(subprocess, "call", fake.call)
    return fake


class FakeProcessTable:
    """Stand-in for ``os.kill``: PIDs in ``alive`` exist, signals are recorded."""

    def __init__(self) -> None:
        self.alive: set[int] = set()
        self.signals: list[tuple[int, int]] = []

    def kill(self, pid: int, sig: int) -> None:
        if pid not in self.alive:
            raise ProcessLookupError(3, "No such process")
        if sig != 0:
            self.signals.append((pid, sig))


@pytest.fixture
def processes(monkeypatch) -> FakeProcessTable:
    table = FakeProcessTable()
    monkeypatch.setattr(os, "kill", table.kill)
    return table


# =============================================================================
# Test Helpers
# =============================================================================


def _run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


@pytest.fixture
def run_cmd():
    return _run_cmd


def write_log(path: Path, lines: Sequence[str], mtime: float | None = None) -> Path:
    """Write ``lines`` (newline terminated) to ``path`` and optionally set its mtime."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("".join(f"{line}\n" for line in lines))
    if mtime is not None:
        os.utime(path, (mtime, mtime))
    return path


@pytest.fixture(name="write_log")
def write_log_fixture():
    return write_log


@pytest.fixture(autouse=True)
def _no_logging_handlers(monkeypatch):
    """Keep main() from attaching stderr handlers that outlive a test's capture."""
    monkeypatch.setattr("hubctl.utils.logger._CONFIGURED", True)
