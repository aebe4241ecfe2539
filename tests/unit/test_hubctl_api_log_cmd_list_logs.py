"""Unit tests for hubctl.api.log.cmd_list_logs."""

from hubctl.api.log.cmd_list_logs import cmd_list_logs


def test_lists_files_oldest_first(hub_home, write_log, run_cmd):
    log_dir = hub_home / "log"
    write_log(log_dir / "comelit-hub-hap.new.log", ["x" * 9], mtime=2_000)
    write_log(log_dir / "comelit-hub-hap.old.log", ["y"], mtime=1_000)
    result = run_cmd(cmd_list_logs)
    assert result.success is True
    assert result.output["found"] is True
    assert [entry["path"] for entry in result.output["files"]] == [
        str(log_dir / "comelit-hub-hap.old.log"),
        str(log_dir / "comelit-hub-hap.new.log"),
    ]
    assert result.output["files"][1]["size"] == 10


def test_no_files_found(hub_home, run_cmd):
    result = run_cmd(cmd_list_logs)
    assert result.success is True
    assert result.output["found"] is False
    assert result.output["warnings"] == ["No log files found"]


def test_missing_directory(hub_home, write_config, run_cmd):
    write_config(log={"log_dir": str(hub_home / "absent")})
    result = run_cmd(cmd_list_logs)
    assert result.success is True
    assert result.output["warnings"] == [f"Log directory not found: {hub_home / 'absent'}"]


def test_default_config_lists_every_log_file(hub_home, write_log, run_cmd):
    log_dir = hub_home / "log"
    write_log(log_dir / "a.log", ["a"], mtime=1_000)
    write_log(log_dir / "b.log", ["b"], mtime=2_000)
    write_log(log_dir / "comelit-hub.2025-10-17.log", ["c"], mtime=3_000)
    result = run_cmd(cmd_list_logs)
    assert [entry["path"] for entry in result.output["files"]] == [
        str(log_dir / "a.log"),
        str(log_dir / "b.log"),
        str(log_dir / "comelit-hub.2025-10-17.log"),
    ]
