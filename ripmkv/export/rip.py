"""Rip titles to MKV and name/tag the results.

MakeMKV writes ``<disc>_tNN.mkv`` files into a scratch directory; these are
tagged with ``mkvpropedit`` (MKVToolNix) and copied to the output directory
as ``<name>_NN.mkv``.
"""

from __future__ import annotations

import logging
import re
import shutil
import subprocess
import tempfile
from collections.abc import Callable, Sequence
from pathlib import Path

from ripmkv.makemkv.runner import build_rip_command, run_rip

log = logging.getLogger(__name__)

_TRACK_NUMBER_RE = re.compile(r"^.*?(\d+)\.mkv$")


def find_mkvpropedit() -> str | None:
    """Return path to mkvpropedit if found, else None."""
    found = shutil.which("mkvpropedit")
    if found:
        return found
    for candidate in (
        Path(r"C:\Program Files\MKVToolNix\mkvpropedit.exe"),
        Path(r"C:\Program Files (x86)\MKVToolNix\mkvpropedit.exe"),
    ):
        if candidate.is_file():
            return str(candidate)
    return None


def output_name(filename: str, name: str) -> str:
    """``"Up (Disc 1)_t03.mkv"`` with name ``"Up"`` -> ``"Up_03.mkv"``."""
    m = _TRACK_NUMBER_RE.match(filename)
    suffix = f"_{m.group(1)}" if m else ""
    return f"{name}{suffix}.mkv"


def _set_segment_title(mkvpropedit: str, path: Path, title: str) -> None:
    result = subprocess.run(
        [mkvpropedit, str(path), "--edit", "info", "--set", f"title={title}"],
        capture_output=True,
        text=True,
    )
    if result.returncode != 0:
        log.warning("mkvpropedit failed for %s: %s", path.name, result.stderr.strip())


def finalize_rips(
    src_dir: str | Path,
    out_dir: str | Path,
    name: str = "",
    mkvpropedit_path: str | None = None,
    on_file: Callable[[Path, Path], None] | None = None,
) -> list[Path]:
    """Tag and copy every MKV in *src_dir* to *out_dir*.

    When *name* is given it becomes each file's segment title and the
    output file prefix; otherwise files keep their MakeMKV names.
    *on_file(src, dest)* is called before each copy.  A file that fails to copy
    is logged and skipped.  Returns the created paths.
    """
    src = Path(src_dir)
    out = Path(out_dir)
    out.mkdir(parents=True, exist_ok=True)

    files = sorted(src.glob("*.mkv"))
    if not files:
        return []

    mkvpropedit = None
    if name:
        mkvpropedit = mkvpropedit_path or find_mkvpropedit()
        if mkvpropedit is None:
            log.warning("mkvpropedit not found; segment titles left unchanged")

    created: list[Path] = []
    for path in files:
        if mkvpropedit is not None:
            _set_segment_title(mkvpropedit, path, name)
        dest = out / (output_name(path.name, name) if name else path.name)
        if on_file is not None:
            on_file(path, dest)
        try:
            shutil.copyfile(path, dest)
        except OSError as e:
            log.error("failed to copy %s to %s: %s", path.name, dest, e)
            continue
        created.append(dest)
    return created


def rip_disc(
    drive: str,
    out_dir: str | Path,
    tracks: Sequence[int] = (),
    audio: Sequence[str] = (),
    subtitles: Sequence[str] = (),
    name: str = "",
    min_length: str = "",
    makemkvcon_path: str | None = None,
    mkvpropedit_path: str | None = None,
    on_file: Callable[[Path, Path], None] | None = None,
) -> list[Path]:
    """Rip *tracks* (all when empty) from *drive* into *out_dir*.

    Returns the list of created MKV paths.  The scratch directory is removed
    only once every ripped file has been copied; if any copy fails it is left
    in place and a ``RuntimeError`` names it.
    """
    if not out_dir:
        raise ValueError("Output directory not specified. Use -o or --outdir.")
    out = Path(out_dir).resolve()
    out.mkdir(parents=True, exist_ok=True)

    tmp = Path(tempfile.mkdtemp(prefix="ripmkv-"))
    try:
        cmd = build_rip_command(
            drive,
            tmp,
            tracks=tracks,
            audio=audio,
            subtitles=subtitles,
            min_length=min_length,
            makemkvcon_path=makemkvcon_path,
        )
        run_rip(cmd)
    except Exception:
        shutil.rmtree(tmp, ignore_errors=True)
        raise

    ripped = len(list(tmp.glob("*.mkv")))
    created = finalize_rips(
        tmp,
        out,
        name=name,
        mkvpropedit_path=mkvpropedit_path,
        on_file=on_file,
    )
    if len(created) < ripped:
        raise RuntimeError(
            f"{ripped - len(created)} of {ripped} file(s) could not be copied; "
            f"ripped files kept in {tmp}"
        )
    shutil.rmtree(tmp, ignore_errors=True)
    return created
