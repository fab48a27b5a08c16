"""Plain-text disc listing for terminal display."""

from __future__ import annotations

from ripmkv.export.summary import summarize_audio, summarize_subtitles, summarize_video
from ripmkv.model import Disc, Title
from ripmkv.sizes import filter_by_min_size

# (header, width); cells are padded and truncated to width, except Size,
# which is right-aligned and may overflow
_COLUMNS: list[tuple[str, int]] = [
    ("TrackID", 7),
    ("Name", 30),
    ("Duration", 8),
    ("Ch", 2),
    ("Size", 8),
    ("Video", 28),
    ("Audio", 40),
    ("Subtitles", 24),
]


def _fit(text: str, width: int) -> str:
    return f"{text[:width]:<{width}}"


def _join(cells: list[str]) -> str:
    # two spaces after TrackID and Size, one elsewhere
    return (
        f"{cells[0]}  {cells[1]} {cells[2]} {cells[3]} {cells[4]}  "
        f"{cells[5]} {cells[6]} {cells[7]}"
    )


def title_row(title: Title) -> str:
    """Format one title as a table row."""
    cells = [
        f"{title.title_id:02d}".ljust(7),
        _fit(title.name, 30),
        _fit(title.duration, 8),
        f"{title.chapters:02d}",
        f"{title.size_human:>8}",
        _fit(summarize_video(title.video), 28),
        _fit(summarize_audio(title.audio), 40),
        _fit(summarize_subtitles(title.subtitles), 24),
    ]
    return _join(cells).rstrip()


def text_report(disc: Disc, min_size: str = "") -> str:
    """Generate the disc header and title table.

    *min_size* (e.g. ``"1G"``) hides smaller titles from the table; the
    ``Titles:`` count always reflects the whole disc.
    """
    lines: list[str] = []
    lines.append(f"Name:   {disc.name}")
    lines.append(f"Type:   {disc.disc_type}")
    lines.append(f"Volume: {disc.volume}")
    lines.append(f"Titles: {len(disc.titles)}")
    lines.append("")

    lines.append(_join([_fit(h, w) for h, w in _COLUMNS]).rstrip())
    lines.append(_join(["-" * w for _, w in _COLUMNS]))

    titles = filter_by_min_size(disc.titles, min_size)
    for title in sorted(titles, key=lambda t: t.title_id):
        lines.append(title_row(title))

    return "\n".join(lines)
