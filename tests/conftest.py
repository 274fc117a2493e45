from __future__ import annotations

import subprocess
import tempfile
from pathlib import Path
from typing import Callable, Dict, List, Optional, Union

import pytest

from raur.aur.rpc_client import PackageInfo

Handler = Union[subprocess.CompletedProcess, Callable[..., subprocess.CompletedProcess]]


def completed(cmd: List[str], returncode: int = 0, stdout: str = "", stderr: str = "") -> subprocess.CompletedProcess:
    return subprocess.CompletedProcess(cmd, returncode, stdout=stdout, stderr=stderr)


class FakeShell:
    """Stands in for ShellExecutor; answers by program name and records calls."""

    def __init__(self) -> None:
        self.calls: List[dict] = []
        self.handlers: Dict[str, Handler] = {}

    def on(self, program: str, handler: Handler) -> None:
        self.handlers[program] = handler

    def run(self, cmd, cwd=None, **kwargs) -> subprocess.CompletedProcess:
        cmd = list(cmd)
        self.calls.append({"cmd": cmd, "cwd": cwd, **kwargs})
        handler = self.handlers.get(cmd[0])
        if handler is None:
            return completed(cmd)
        if callable(handler):
            return handler(cmd, cwd=cwd, **kwargs)
        return handler

    def programs(self) -> List[str]:
        return [call["cmd"][0] for call in self.calls]


class FakeAURClient:
    def __init__(self, info: Optional[PackageInfo] = None) -> None:
        self.result = info
        self.queries: List[str] = []

    def info(self, pkg_name: str) -> Optional[PackageInfo]:
        self.queries.append(pkg_name)
        return self.result


@pytest.fixture
def fake_shell() -> FakeShell:
    return FakeShell()


@pytest.fixture
def isolated_tmp(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point tempfile at an empty directory so leftover workspaces are visible."""
    root = tmp_path / "tmp"
    root.mkdir()
    monkeypatch.setattr(tempfile, "tempdir", str(root))
    return root
