"""JSON export for the disc model."""

from __future__ import annotations

import json
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path

from ripmkv.export.summary import summarize_audio, summarize_subtitles, summarize_video
from ripmkv.model import Disc
from ripmkv.sizes import filter_by_min_size


def _extra(bag: dict[int, str]) -> dict[str, str]:
    return {str(k): v for k, v in sorted(bag.items())}


def disc_to_dict(disc: Disc, min_size: str = "") -> dict:
    """Convert a Disc to a JSON-serializable dict.

    *min_size* drops smaller titles, as in the text report.
    """
    container = asdict(disc.container)
    container["extra"] = _extra(disc.container.extra)

    titles = []
    for t in filter_by_min_size(disc.titles, min_size):
        titles.append(
            {
                "id": t.title_id,
                "name": t.name,
                "chapters": t.chapters,
                "duration": t.duration,
                "size": t.size_human,
                "bytes": t.size_bytes,
                "playlist": t.playlist,
                "video_count": t.video_count,
                "audio_count": t.audio_count,
                "default_output_name": t.default_output_name,
                "lang_code": t.lang_code,
                "lang_name": t.lang_name,
                "long_desc": t.long_desc,
                "extra": _extra(t.extra),
                "video": [asdict(v) for v in t.video],
                "audio": [asdict(a) for a in t.audio],
                "subtitles": [asdict(s) for s in t.subtitles],
                "summary": {
                    "video": summarize_video(t.video),
                    "audio": summarize_audio(t.audio),
                    "subtitles": summarize_subtitles(t.subtitles),
                },
            }
        )

    return {
        "schema_version": "ripmkv.disc.v1",
        "disc": {
            "type": disc.disc_type,
            "name": disc.name,
            "volume": disc.volume,
            "generated_at": datetime.now(timezone.utc).isoformat(),
        },
        "container": container,
        "titles": titles,
    }


def export_json(
    disc: Disc,
    path: str | Path | None = None,
    pretty: bool = True,
    min_size: str = "",
) -> str:
    """Export the disc to JSON. If path given, write to file. Always returns JSON string."""
    data = disc_to_dict(disc, min_size=min_size)
    indent = 2 if pretty else None
    text = json.dumps(data, indent=indent, ensure_ascii=False)
    if path is not None:
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(text, encoding="utf-8")
    return text
