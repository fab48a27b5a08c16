"""ripmkv CLI — list and rip disc titles with MakeMKV."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler

from ripmkv.export import export_json, rip_disc, text_report
from ripmkv.makemkv.loader import load_disc
from ripmkv.makemkv.runner import build_rip_command, read_disc_info
from ripmkv.model import Disc

VERSION = "0.1.0"

app = typer.Typer(name="ripmkv", help="List and rip disc titles with MakeMKV")
console = Console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"ripmkv {VERSION}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """List and rip disc titles with MakeMKV."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )


def _load(drive: str | None, input_file: str | None, makemkvcon_path: str | None) -> Disc:
    """Load the disc model from a saved info dump or by querying the drive."""
    if input_file:
        p = Path(input_file)
        if not p.is_file():
            console.print(f"[red]Error:[/red] {p} is not a file")
            raise typer.Exit(1)
        return load_disc(p.read_text(encoding="utf-8", errors="replace"))

    try:
        with console.status("[bold]Reading disc info…"):
            output = read_disc_info(drive or "", makemkvcon_path=makemkvcon_path)
    except (RuntimeError, ValueError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    return load_disc(output)


@app.command(name="list")
def list_cmd(
    drive: str = typer.Option(
        None, "-d", "--drive", envvar="RIPMKV_DRIVE", help="Drive path, e.g. /dev/sr0"
    ),
    input_file: str = typer.Option(
        None, "-i", "--input", help="Read saved `makemkvcon -r info` output instead of a drive"
    ),
    min_size: str = typer.Option(
        "", "--minsize", help="Only list titles of at least this size, e.g. 100M, 4G"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the disc model as JSON"),
    output: str = typer.Option(None, "-o", "--output", help="Also write JSON to this file"),
    makemkvcon_path: str = typer.Option(
        None, "--makemkvcon-path", envvar="RIPMKV_MAKEMKVCON", help="Path to makemkvcon executable"
    ),
):
    """List the titles on a disc."""
    disc = _load(drive, input_file, makemkvcon_path)

    if as_json or output:
        json_str = export_json(disc, path=output, min_size=min_size)
        if as_json:
            typer.echo(json_str)
        if output:
            console.print(f"[green]Wrote:[/green] {output}")
        return

    typer.echo(text_report(disc, min_size=min_size))


@app.command()
def rip(
    drive: str = typer.Option(
        None, "-d", "--drive", envvar="RIPMKV_DRIVE", help="Drive path, e.g. /dev/sr0"
    ),
    out: str = typer.Option(None, "-o", "--outdir", help="Output directory"),
    tracks: list[int] = typer.Option(
        None, "-t", "--track", help="Title id to rip (repeatable); all if omitted"
    ),
    audio: list[str] = typer.Option(
        None, "-a", "--audio", help="Audio language to keep (repeatable)"
    ),
    subtitle: list[str] = typer.Option(
        None, "-s", "--subtitle", help="Subtitle language to keep (repeatable)"
    ),
    name: str = typer.Option(
        "", "-n", "--name", help="Output name prefix, also used as segment title"
    ),
    min_length: str = typer.Option(
        "", "--minlength", help="Skip titles shorter than this many seconds (when no -t given)"
    ),
    makemkvcon_path: str = typer.Option(
        None, "--makemkvcon-path", envvar="RIPMKV_MAKEMKVCON", help="Path to makemkvcon executable"
    ),
    mkvpropedit_path: str = typer.Option(
        None,
        "--mkvpropedit-path",
        envvar="RIPMKV_MKVPROPEDIT",
        help="Path to mkvpropedit executable",
    ),
    dry_run: bool = typer.Option(
        False, "--dry-run", help="Print the makemkvcon command without executing"
    ),
):
    """Rip titles to MKV, then name and tag the output files.

    Titles are ripped into a scratch directory first; each resulting file
    gets its segment title set to --name (via mkvpropedit, from MKVToolNix)
    and is copied to --outdir as <name>_<id>.mkv.
    """
    if not drive:
        console.print("[red]Error:[/red] Drive not specified. Use -d or --drive.")
        raise typer.Exit(1)
    if not out:
        console.print("[red]Error:[/red] Output directory not specified. Use -o or --outdir.")
        raise typer.Exit(1)

    tracks = tracks or []
    audio = _split(audio)
    subtitle = _split(subtitle)

    try:
        if dry_run:
            cmd = build_rip_command(
                drive,
                "<tmpdir>",
                tracks=tracks,
                audio=audio,
                subtitles=subtitle,
                min_length=min_length,
                makemkvcon_path=makemkvcon_path or "makemkvcon",
            )
            console.print(f"[dim]{' '.join(cmd)}[/dim]")
            return

        def _on_file(src: Path, dest: Path) -> None:
            console.print(f"→ {src.name}  ==>  {dest.name}")

        created = rip_disc(
            drive,
            out,
            tracks=tracks,
            audio=audio,
            subtitles=subtitle,
            name=name,
            min_length=min_length,
            makemkvcon_path=makemkvcon_path,
            mkvpropedit_path=mkvpropedit_path,
            on_file=_on_file,
        )
    except (RuntimeError, ValueError, OSError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if not created:
        console.print("[yellow]No MKVs produced. Nothing to do.[/yellow]")
        return
    console.print(f"[green]✓ Done.[/green] Wrote {len(created)} file(s) to: {created[0].parent}")


def _split(values: list[str] | None) -> list[str]:
    """Accept both ``-a eng -a jpn`` and ``-a eng,jpn``."""
    result: list[str] = []
    for v in values or []:
        result.extend(part.strip() for part in v.split(",") if part.strip())
    return result


if __name__ == "__main__":
    app()
