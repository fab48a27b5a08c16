"""Tests for makemkvcon invocation (subprocess is stubbed)."""

import subprocess
from types import SimpleNamespace

import pytest

from ripmkv.makemkv import runner
from ripmkv.makemkv.runner import build_rip_command, info_command, read_disc_info, run_rip


def _fake_run(returncode: int = 0, stdout: str = "", stderr: str = ""):
    calls: list[list[str]] = []

    def run(cmd, **kwargs):
        calls.append(cmd)
        return SimpleNamespace(returncode=returncode, stdout=stdout, stderr=stderr)

    return run, calls


class TestInfo:
    def test_info_command(self) -> None:
        cmd = info_command("/dev/sr0", makemkvcon_path="/opt/makemkvcon")
        assert cmd == ["/opt/makemkvcon", "-r", "info", "dev:/dev/sr0"]

    def test_missing_drive(self) -> None:
        with pytest.raises(ValueError, match="Drive not specified"):
            info_command("", makemkvcon_path="makemkvcon")

    def test_missing_binary(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(runner, "find_makemkvcon", lambda: None)
        with pytest.raises(RuntimeError, match="makemkvcon not found"):
            info_command("/dev/sr0")

    def test_read_disc_info(self, monkeypatch: pytest.MonkeyPatch, info_text: str) -> None:
        run, calls = _fake_run(stdout=info_text)
        monkeypatch.setattr(subprocess, "run", run)
        assert read_disc_info("/dev/sr0", makemkvcon_path="makemkvcon") == info_text
        assert calls == [["makemkvcon", "-r", "info", "dev:/dev/sr0"]]

    def test_read_disc_info_failure(self, monkeypatch: pytest.MonkeyPatch) -> None:
        run, _ = _fake_run(returncode=1, stderr="no disc")
        monkeypatch.setattr(subprocess, "run", run)
        with pytest.raises(RuntimeError, match="no disc"):
            read_disc_info("/dev/sr0", makemkvcon_path="makemkvcon")


class TestRipCommand:
    def test_defaults_rip_all(self) -> None:
        cmd = build_rip_command("/dev/sr0", "/tmp/out", makemkvcon_path="makemkvcon")
        assert cmd == [
            "makemkvcon",
            "mkv",
            "--progress",
            "--noscan",
            "--directio=true",
            "dev:/dev/sr0",
            "all",
            "/tmp/out",
        ]

    def test_selection_options(self) -> None:
        cmd = build_rip_command(
            "/dev/sr0",
            "/tmp/out",
            tracks=[0, 3],
            audio=["eng", "jpn"],
            subtitles=["eng"],
            min_length="3600",
            makemkvcon_path="makemkvcon",
        )
        assert "--minlength=3600" in cmd
        assert "--audio=eng,jpn" in cmd
        assert "--subtitle=eng" in cmd
        assert cmd[-4:] == ["dev:/dev/sr0", "0", "3", "/tmp/out"]
        assert "all" not in cmd

    def test_zero_min_length_omitted(self) -> None:
        cmd = build_rip_command("/dev/sr0", "/tmp/out", min_length="0", makemkvcon_path="m")
        assert not any(arg.startswith("--minlength") for arg in cmd)

    def test_run_rip_failure(self, monkeypatch: pytest.MonkeyPatch) -> None:
        run, _ = _fake_run(returncode=2, stderr="read error")
        monkeypatch.setattr(subprocess, "run", run)
        with pytest.raises(RuntimeError, match="read error"):
            run_rip(["makemkvcon", "mkv"])
