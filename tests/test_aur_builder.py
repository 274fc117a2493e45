"""Tests for cloning and running makepkg."""

from __future__ import annotations

import subprocess
from pathlib import Path

from raur.build.aur_builder import AURBuilder, BuildOutcome

from conftest import completed

CONFIG = {"aur_url": "https://aur.archlinux.org", "clone_timeout": 60, "makepkg_timeout": 600}


def test_clone_uses_package_git_url(fake_shell, tmp_path: Path) -> None:
    builder = AURBuilder(CONFIG, fake_shell)

    assert builder.clone("yay-bin", tmp_path / "yay-bin") is True

    call = fake_shell.calls[0]
    assert call["cmd"] == ["git", "clone", "https://aur.archlinux.org/yay-bin.git", str(tmp_path / "yay-bin")]
    assert call["timeout"] == 60


def test_clone_failure(fake_shell, tmp_path: Path) -> None:
    fake_shell.on("git", completed(["git"], returncode=128, stderr="fatal: repository not found"))

    assert AURBuilder(CONFIG, fake_shell).clone("nope", tmp_path / "nope") is False


def test_makepkg_command_flags() -> None:
    builder = AURBuilder(CONFIG, None)

    assert builder.makepkg_command() == ["makepkg", "-si", "--noconfirm"]
    assert builder.makepkg_command(skip_pgp_check=True) == ["makepkg", "-si", "--noconfirm", "--skippgpcheck"]


def test_build_success_runs_in_package_dir(fake_shell, tmp_path: Path) -> None:
    outcome = AURBuilder(CONFIG, fake_shell).build(tmp_path)

    assert outcome == BuildOutcome(success=True)
    call = fake_shell.calls[0]
    assert call["cmd"] == ["makepkg", "-si", "--noconfirm"]
    assert call["cwd"] == tmp_path
    assert call["capture"] is False
    assert call["stderr"] is subprocess.PIPE
    assert call["timeout"] == 600
    assert call["extra_env"] == {"LC_ALL": "C"}


def test_build_failure_keeps_stderr(fake_shell, tmp_path: Path) -> None:
    fake_shell.on("makepkg", completed(["makepkg"], returncode=4, stderr="==> ERROR: A failure occurred in build()."))

    outcome = AURBuilder(CONFIG, fake_shell).build(tmp_path, skip_pgp_check=True)

    assert outcome.success is False
    assert outcome.returncode == 4
    assert "A failure occurred" in outcome.stderr
    assert fake_shell.calls[0]["cmd"][-1] == "--skippgpcheck"


def test_build_has_no_time_limit_by_default(fake_shell, tmp_path: Path) -> None:
    AURBuilder({"aur_url": "https://aur.archlinux.org"}, fake_shell).build(tmp_path)

    assert fake_shell.calls[0]["timeout"] is None


def test_clone_keeps_user_locale(fake_shell, tmp_path: Path) -> None:
    AURBuilder(CONFIG, fake_shell).clone("yay-bin", tmp_path / "yay-bin")

    assert "extra_env" not in fake_shell.calls[0]
