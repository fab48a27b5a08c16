"""Compact per-title stream summaries for the listing table.

These only shape text for display; nothing here raises, and missing fields
fall back to ``"?"``, ``"—"`` or the raw value.
"""

from __future__ import annotations

from collections.abc import Iterable

from ripmkv.model import AudioStream, SubtitleStream, VideoStream

NONE = "—"
UNKNOWN = "?"
UNDETERMINED = "und"

FORCED = "⚑"
HEARING_IMPAIRED = "ⓢ"

_RESOLUTIONS: dict[str, str] = {
    "1920x1080": "1080p",
    "3840x2160": "2160p",
    "1280x720": "720p",
}

_CHANNELS: dict[int, str] = {1: "1.0", 2: "2.0", 6: "5.1", 8: "7.1"}


# ── helpers ──────────────────────────────────────────────────────────


def first_non_blank(*values: str) -> str:
    """Return the first value that isn't empty or whitespace, else ``"?"``."""
    for v in values:
        if v.strip():
            return v
    return UNKNOWN


def language_key(code: str, name: str) -> str:
    lang = first_non_blank(code, name)
    if lang == UNKNOWN:
        return UNDETERMINED
    return lang.lower()


def format_channels(channels: int) -> str:
    return _CHANNELS.get(channels, str(channels))


def channel_weight(channels: str) -> int:
    """Sort weight for a formatted channel count; higher sorts first."""
    if channels == "7.1":
        return 3
    if channels == "5.1":
        return 2
    if channels == "2.0":
        return 1
    return 0


def subtitle_flags(description: str) -> str:
    """Forced / hearing-impaired markers found in a subtitle description."""
    d = description.lower()
    flags = ""
    if "forced" in d:
        flags += FORCED
    if "sdh" in d or "hoh" in d:
        flags += HEARING_IMPAIRED
    return flags


def subtitle_flag_priority(flags: str) -> int:
    if flags == FORCED:
        return 1
    if flags == HEARING_IMPAIRED:
        return 2
    if flags == FORCED + HEARING_IMPAIRED:
        return 3
    return 0


def normalize_resolution(resolution: str) -> str:
    return _RESOLUTIONS.get(resolution, resolution)


def short_frame_rate(frame_rate: str) -> str:
    """``"23.976 (24000/1001)"`` -> ``"23.976"``."""
    i = frame_rate.find(" ")
    if i > 0:
        return frame_rate[:i]
    return frame_rate


# ── summaries ────────────────────────────────────────────────────────


def summarize_video(streams: list[VideoStream]) -> str:
    """Describe the first video stream as ``codec • resolution • fps``."""
    if not streams:
        return NONE
    v = streams[0]
    codec = first_non_blank(v.codec_short, v.codec_long, v.codec_id)
    return f"{codec} • {normalize_resolution(v.resolution)} • {short_frame_rate(v.frame_rate)}"


def summarize_audio(streams: Iterable[AudioStream]) -> str:
    """Group audio by language, e.g. ``"eng: 7.1 TrueHD* • 5.1 DD / fra: 5.1 DD"``.

    Streams that share channels, codec and layout within a language collapse
    into one entry; the entry is marked ``*`` if any of them is the default.
    """
    per_lang: dict[str, dict[tuple[str, str, str], bool]] = {}
    for a in streams:
        lang = language_key(a.lang_code, a.lang_name)
        key = (
            format_channels(a.channels),
            first_non_blank(a.codec_short, a.codec_long, a.codec_id),
            a.layout.strip(),
        )
        entries = per_lang.setdefault(lang, {})
        entries[key] = entries.get(key, False) or a.default
    if not per_lang:
        return NONE

    chunks: list[str] = []
    for lang in sorted(per_lang):
        entries = per_lang[lang]
        keys = sorted(entries, key=lambda k: (-channel_weight(k[0]), k[1], k[2]))
        parts = []
        for channels, codec, layout in keys:
            entry = f"{channels} {codec}"
            if entries[(channels, codec, layout)]:
                entry += "*"
            parts.append(entry)
        chunks.append(f"{lang}: " + " • ".join(parts))
    return " / ".join(chunks)


def summarize_subtitles(streams: Iterable[SubtitleStream]) -> str:
    """List subtitle languages with flags, e.g. ``"eng*, eng⚑, engⓢ, spa"``."""
    merged: dict[tuple[str, str], bool] = {}
    for s in streams:
        key = (language_key(s.lang_code, s.lang_name), subtitle_flags(s.description))
        merged[key] = merged.get(key, False) or s.default
    if not merged:
        return NONE

    out = []
    for lang, flags in sorted(merged, key=lambda k: (k[0], subtitle_flag_priority(k[1]))):
        entry = lang + flags
        if merged[(lang, flags)]:
            entry += "*"
        out.append(entry)
    return ", ".join(out)
