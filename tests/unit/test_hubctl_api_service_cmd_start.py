"""Unit tests for hubctl.api.service.cmd_start and cmd_stop.

The native service manager is faked at the subprocess boundary.
"""

from hubctl.api.service.cmd_start import cmd_start
from hubctl.api.service.cmd_stop import cmd_stop

LOADED = "PID\tStatus\tLabel\n512\t0\tcom.comelit.hub.hap\n"


def test_start_inactive_service(hub_home, on_linux, as_root, native, run_cmd):
    native.respond(["systemctl", "is-active"], returncode=3)
    result = run_cmd(cmd_start)
    assert result.success is True
    assert result.result == "Service started"
    assert result.output["changed"] is True
    assert result.output["running"] is True
    assert "systemctl start comelit-hub-hap" in native.commands()


def test_start_twice_is_idempotent(hub_home, on_linux, as_root, native, run_cmd):
    native.respond(["systemctl", "is-active"], returncode=3)
    run_cmd(cmd_start)
    # The service manager now reports the unit as active
    native.respond(["systemctl", "is-active"], returncode=0)
    before = len(native.commands("systemctl"))

    second = run_cmd(cmd_start)
    assert second.success is True
    assert second.output["changed"] is False
    assert second.output["warnings"] == ["Service is already running"]
    assert native.commands("systemctl")[before:] == ["systemctl is-active --quiet comelit-hub-hap"]


def test_start_already_loaded_on_darwin(hub_home, on_darwin, as_root, native, run_cmd):
    native.respond(["launchctl", "list"], stdout=LOADED)
    result = run_cmd(cmd_start)
    assert result.success is True
    assert result.output["warnings"] == ["Service is already loaded"]
    assert not [cmd for cmd in native.commands() if " load " in cmd]


def test_start_native_failure(hub_home, on_linux, as_root, native, run_cmd):
    native.respond(["systemctl", "is-active"], returncode=3)
    native.respond(["systemctl", "start"], returncode=1, stderr="Job failed")
    result = run_cmd(cmd_start)
    assert result.success is False
    assert "Job failed" in result.result
    assert result.output["running"] is False


def test_start_requires_root(hub_home, on_linux, as_user, native, run_cmd):
    result = run_cmd(cmd_start)
    assert result.success is False
    assert result.result == "This command must be run as root (use sudo)"
    assert native.calls == []


def test_start_unsupported_platform(hub_home, on_windows, as_user, native, run_cmd):
    result = run_cmd(cmd_start)
    assert result.success is False
    assert result.result == "Unsupported operating system: Windows"
    assert result.output["platform"] == "unsupported"
    assert native.calls == []


def test_stop_active_service(hub_home, on_linux, as_root, native, run_cmd):
    result = run_cmd(cmd_stop)
    assert result.success is True
    assert result.result == "Service stopped"
    assert "systemctl stop comelit-hub-hap" in native.commands()


def test_stop_when_stopped_warns(hub_home, on_linux, as_root, native, run_cmd):
    native.respond(["systemctl", "is-active"], returncode=3)
    result = run_cmd(cmd_stop)
    assert result.success is True
    assert result.output["changed"] is False
    assert result.output["warnings"] == ["Service is not running"]
    assert native.commands() == ["systemctl is-active --quiet comelit-hub-hap"]


def test_stop_when_not_loaded_on_darwin(hub_home, on_darwin, as_root, native, run_cmd):
    result = run_cmd(cmd_stop)
    assert result.success is True
    assert result.output["warnings"] == ["Service is not loaded"]
    assert native.commands() == ["launchctl list"]


def test_stop_requires_root(hub_home, on_darwin, as_user, native, run_cmd):
    result = run_cmd(cmd_stop)
    assert result.success is False
    assert native.calls == []
