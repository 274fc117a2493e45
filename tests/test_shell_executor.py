"""Tests for ShellExecutor against real, harmless processes."""

from __future__ import annotations

import os
import subprocess
import sys
import time
from pathlib import Path

import pytest

from raur.common.shell_executor import ShellExecutor
from raur.errors import CommandTimeoutError, ToolNotFoundError


def _py(code: str) -> list:
    return [sys.executable, "-c", code]


def _process_alive(pid: int) -> bool:
    """True while pid exists and is not a zombie"""
    try:
        with open(f"/proc/{pid}/stat") as f:
            state = f.read().rsplit(")", 1)[1].split()[0]
    except (FileNotFoundError, ProcessLookupError):
        return False
    return state != "Z"


def test_captures_output_as_clean_text() -> None:
    result = ShellExecutor().run(_py("print('foo 1.0-1  ')"))

    assert result.returncode == 0
    assert result.stdout == "foo 1.0-1"


def test_keeps_caller_locale_by_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LC_ALL", "en_US.UTF-8")

    result = ShellExecutor().run(_py("import os; print(os.environ['LC_ALL'])"))

    assert result.stdout == "en_US.UTF-8"


def test_extra_env_overrides_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LC_ALL", "en_US.UTF-8")

    result = ShellExecutor().run(
        _py("import os; print(os.environ['LC_ALL'])"),
        extra_env={"LC_ALL": "C"},
    )

    assert result.stdout == "C"
    assert os.environ["LC_ALL"] == "en_US.UTF-8"


def test_runs_in_cwd(tmp_path: Path) -> None:
    result = ShellExecutor().run(_py("import os; print(os.getcwd())"), cwd=tmp_path)

    assert Path(result.stdout).resolve() == tmp_path.resolve()


def test_stderr_only_capture() -> None:
    result = ShellExecutor().run(
        _py("import sys; print('out'); sys.stderr.write('bad thing\\n'); sys.exit(3)"),
        capture=False,
        stderr=subprocess.PIPE,
    )

    assert result.returncode == 3
    assert result.stdout is None
    assert result.stderr == "bad thing"


def test_sudo_prefix(monkeypatch: pytest.MonkeyPatch) -> None:
    seen = {}

    def fake_run_direct(self, cmd, cmd_str, timeout, popen_kwargs, log_cmd):
        seen["cmd"] = cmd
        return subprocess.CompletedProcess(cmd, 0, stdout="", stderr="")

    monkeypatch.setattr(ShellExecutor, "_run_direct", fake_run_direct)

    ShellExecutor().run(["pacman", "-Rns", "foo"], sudo=True)

    assert seen["cmd"] == ["sudo", "pacman", "-Rns", "foo"]


def test_missing_program_is_fatal() -> None:
    with pytest.raises(ToolNotFoundError) as excinfo:
        ShellExecutor().run(["raur-definitely-not-installed-xyz", "--help"])

    assert excinfo.value.tool == "raur-definitely-not-installed-xyz"


def test_timeout_is_fatal() -> None:
    with pytest.raises(CommandTimeoutError):
        ShellExecutor(default_timeout=0.2).run(_py("import time; time.sleep(5)"))


def test_untimed_command_shares_our_session() -> None:
    result = ShellExecutor().run(_py("import os; print(os.getsid(0))"))

    assert int(result.stdout) == os.getsid(0)


def test_timed_command_runs_in_own_session() -> None:
    result = ShellExecutor().run(_py("import os; print(os.getsid(0) == os.getpid())"), timeout=10)

    assert result.stdout == "True"


@pytest.mark.skipif(not os.path.isdir("/proc"), reason="needs /proc")
def test_timeout_kills_background_children(tmp_path: Path) -> None:
    with pytest.raises(CommandTimeoutError):
        ShellExecutor().run(
            ["sh", "-c", "sleep 30 & echo $! > child.pid; wait"],
            cwd=tmp_path,
            timeout=1,
        )

    child_pid = int((tmp_path / "child.pid").read_text().strip())
    deadline = time.monotonic() + 5
    while _process_alive(child_pid) and time.monotonic() < deadline:
        time.sleep(0.05)

    assert not _process_alive(child_pid)
