"""Unit tests for hubctl.api.log.follow_files.

Each test runs the follower in a background thread and stops it through an
event, so every test is bounded by a timeout.
"""

import sys
import threading
import time
from pathlib import Path

import pytest

from hubctl.api.log.follow_files import follow_files, snapshot_offsets
from hubctl.api.log.follow_logs import follow_errors, follow_logs

pytestmark = pytest.mark.timeout(20)


class Follower:
    def __init__(self, target, *args, **kwargs):
        self.chunks: list[str] = []
        self.stop = threading.Event()
        kwargs.setdefault("stop", self.stop)
        self.thread = threading.Thread(
            target=target, args=args, kwargs={"write": self.chunks.append, **kwargs}, daemon=True
        )

    def __enter__(self) -> "Follower":
        self.thread.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.stop.set()
        self.thread.join(timeout=5)
        return False

    @property
    def text(self) -> str:
        return "".join(self.chunks)

    def wait_for(self, needle: str, timeout: float = 5.0) -> bool:
        deadline = time.monotonic() + timeout
        while time.monotonic() < deadline:
            if needle in self.text:
                return True
            time.sleep(0.02)
        return False


def _append(path: Path, text: str) -> None:
    with path.open("a") as fh:
        fh.write(text)


def test_streams_appended_content_only(tmp_path):
    path = tmp_path / "agent.log"
    path.write_text("already there\n")
    with Follower(follow_files, [path], poll_secs=0.05) as follower:
        time.sleep(0.2)
        _append(path, "fresh line\n")
        assert follower.wait_for("fresh line\n")
    assert "already there" not in follower.text


def test_truncation_restarts_from_beginning(tmp_path):
    path = tmp_path / "agent.log"
    path.write_text("a fairly long first line of output\n")
    with Follower(follow_files, [path], poll_secs=0.05) as follower:
        time.sleep(0.2)
        path.write_text("short\n")
        assert follower.wait_for("short\n")


def test_recreated_file_is_picked_up(tmp_path):
    path = tmp_path / "agent.log"
    path.write_text("first\n")
    with Follower(follow_files, [path], poll_secs=0.05) as follower:
        time.sleep(0.2)
        path.unlink()
        time.sleep(0.2)
        path.write_text("second life\n")
        assert follower.wait_for("second life\n")


def test_multiplexes_files_with_headers(tmp_path):
    first = tmp_path / "one.log"
    second = tmp_path / "two.log"
    first.write_text("")
    second.write_text("")
    with Follower(follow_files, [first, second], poll_secs=0.05, headers=True) as follower:
        time.sleep(0.2)
        _append(first, "from one\n")
        assert follower.wait_for("from one\n")
        _append(second, "from two\n")
        assert follower.wait_for("from two\n")
    assert "==> " in follower.text
    assert "two.log <==" in follower.text


def test_accepts_new_files(tmp_path):
    existing = tmp_path / "comelit-hub-hap.1.log"
    existing.write_text("")
    with Follower(
        follow_files,
        [existing],
        poll_secs=0.05,
        accept=lambda path: path.name.endswith(".log"),
    ) as follower:
        time.sleep(0.2)
        (tmp_path / "comelit-hub-hap.2.log").write_text("rotated in\n")
        assert follower.wait_for("rotated in\n")


def test_follow_logs_prints_tail_then_streams(hub_home, on_darwin, write_log):
    path = write_log(hub_home / "log" / "comelit-hub-hap.log", [f"line {i}" for i in range(20)])
    with Follower(follow_logs, 2) as follower:
        assert follower.wait_for("line 18\nline 19\n")
        time.sleep(0.2)
        _append(path, "line 20\n")
        assert follower.wait_for("line 20\n")
    assert "line 17" not in follower.text


def test_follow_logs_without_files_returns(hub_home, on_darwin):
    notes: list[str] = []
    assert follow_logs(5, write=notes.append, notify=notes.append) == 0
    assert notes == [f"No log files found in {hub_home / 'log'}"]


def test_follow_logs_journal_fallback(hub_home, on_linux, native, write_config):
    write_config(log={"log_dir": str(hub_home / "absent")})
    assert follow_logs(7, notify=lambda message: None) == 0
    assert native.commands() == ["journalctl -u comelit-hub-hap -n 7 -f"]


def test_follow_errors_missing_file(hub_home):
    notes: list[str] = []
    assert follow_errors(5, notify=notes.append) == 0
    assert notes == [f"Error log not found: {hub_home / 'log' / 'comelit-hub-hap.err'}"]


def test_resumes_from_given_offsets(tmp_path):
    path = tmp_path / "agent.log"
    path.write_text("seen\n")
    offsets = snapshot_offsets([path])
    _append(path, "in between\n")
    with Follower(follow_files, [path], poll_secs=0.05, start_offsets=offsets) as follower:
        assert follower.wait_for("in between\n")
    assert "seen" not in follower.text


def test_follow_logs_keeps_lines_written_while_tail_prints(hub_home, on_darwin, write_log, monkeypatch):
    path = write_log(hub_home / "log" / "comelit-hub-hap.log", ["line 0", "line 1"])
    module = sys.modules[follow_logs.__module__]
    real_tail_lines = module.tail_lines

    def tail_then_append(paths, count, ends=None):
        lines = real_tail_lines(paths, count, ends=ends)
        _append(path, "line 2\n")
        return lines

    monkeypatch.setattr(module, "tail_lines", tail_then_append)
    with Follower(follow_logs, 5) as follower:
        assert follower.wait_for("line 2\n")
    assert follower.text.count("line 2\n") == 1
    assert follower.text.startswith("line 0\nline 1\n")
