"""Invocation of ``makemkvcon`` for disc info and ripping.

Requires MakeMKV's ``makemkvcon`` on PATH or specified explicitly.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from collections.abc import Sequence
from pathlib import Path

log = logging.getLogger(__name__)


def find_makemkvcon() -> str | None:
    """Return path to makemkvcon if found, else None."""
    for name in ("makemkvcon", "makemkvcon64"):
        found = shutil.which(name)
        if found:
            return found
    for candidate in (
        Path(r"C:\Program Files (x86)\MakeMKV\makemkvcon64.exe"),
        Path(r"C:\Program Files\MakeMKV\makemkvcon64.exe"),
        Path("/Applications/MakeMKV.app/Contents/MacOS/makemkvcon"),
    ):
        if candidate.is_file():
            return str(candidate)
    return None


def _resolve(makemkvcon_path: str | None) -> str:
    exe = makemkvcon_path or find_makemkvcon()
    if exe is None:
        raise RuntimeError(
            "makemkvcon not found. Install MakeMKV or pass --makemkvcon-path.\n"
            "  https://www.makemkv.com/"
        )
    return exe


def info_command(drive: str, makemkvcon_path: str | None = None) -> list[str]:
    if not drive:
        raise ValueError("Drive not specified. Use -d or --drive to specify the drive.")
    return [_resolve(makemkvcon_path), "-r", "info", f"dev:{drive}"]


def read_disc_info(drive: str, makemkvcon_path: str | None = None) -> str:
    """Run ``makemkvcon -r info`` against *drive* and return its stdout."""
    cmd = info_command(drive, makemkvcon_path)
    log.debug("running %s", " ".join(cmd))
    result = subprocess.run(cmd, capture_output=True, text=True, encoding="utf-8", errors="replace")
    if result.returncode != 0:
        raise RuntimeError(f"makemkvcon info failed for {drive}:\n{result.stderr}")
    return result.stdout


def build_rip_command(
    drive: str,
    out_dir: str | Path,
    tracks: Sequence[int] = (),
    audio: Sequence[str] = (),
    subtitles: Sequence[str] = (),
    min_length: str = "",
    makemkvcon_path: str | None = None,
) -> list[str]:
    """Build the ``makemkvcon mkv`` argv.

    Rips every title (``all``) when *tracks* is empty.  *min_length* is in
    seconds; ``""`` and ``"0"`` leave MakeMKV's own default in place.
    """
    if not drive:
        raise ValueError("Drive not specified. Use -d or --drive to specify the drive.")
    cmd = [_resolve(makemkvcon_path), "mkv", "--progress", "--noscan", "--directio=true"]
    if min_length and min_length != "0":
        cmd.append(f"--minlength={min_length}")
    if audio:
        cmd.append("--audio=" + ",".join(audio))
    if subtitles:
        cmd.append("--subtitle=" + ",".join(subtitles))
    cmd.append(f"dev:{drive}")
    if tracks:
        cmd.extend(str(t) for t in tracks)
    else:
        cmd.append("all")
    cmd.append(str(out_dir))
    return cmd


def run_rip(cmd: Sequence[str]) -> None:
    """Run a rip command, letting makemkvcon's progress go to the terminal."""
    log.debug("running %s", " ".join(cmd))
    result = subprocess.run(list(cmd), stderr=subprocess.PIPE, text=True, errors="replace")
    if result.returncode != 0:
        raise RuntimeError(f"makemkvcon rip failed:\n{result.stderr}")
