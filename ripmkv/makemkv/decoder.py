"""Field decoding for CINFO/TINFO/SINFO records.

Every conversion here is total: MakeMKV's output is not a documented format,
so bad numbers decode to 0 and unknown codes go to the entity's ``extra`` bag.
"""

from __future__ import annotations

import re
from collections.abc import Callable

from ripmkv.makemkv import codes as c
from ripmkv.model import Container, Stream, Title

_INT_RE = re.compile(r"[+-]?[0-9]+")

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def parse_int(text: str) -> int:
    """Parse a decimal integer, returning 0 for anything malformed."""
    if not _INT_RE.fullmatch(text):
        return 0
    return int(text)


def parse_int64(text: str) -> int:
    """Like :func:`parse_int`, but values outside the signed 64-bit range are 0."""
    n = parse_int(text)
    if not _INT64_MIN <= n <= _INT64_MAX:
        return 0
    return n


def parse_default_flag(text: str) -> bool:
    return text == "Default"


def _text(value: str) -> str:
    return value


Decoder = Callable[[str], object]

_CONTAINER_FIELDS: dict[int, tuple[str, Decoder]] = {
    c.CI_DISC_TYPE: ("disc_type", _text),
    c.CI_DISC_NAME: ("disc_name", _text),
    c.CI_LANG_CODE: ("lang_code", _text),
    c.CI_LANG_NAME: ("lang_name", _text),
    c.CI_TITLE: ("title", _text),
    c.CI_UI_HEADER: ("ui_header", _text),
    c.CI_VOLUME_LABEL: ("volume_label", _text),
    c.CI_LAYER_INFO: ("layer_info", _text),
}

_TITLE_FIELDS: dict[int, tuple[str, Decoder]] = {
    c.TI_NAME: ("name", _text),
    c.TI_CHAPTERS: ("chapters", parse_int),
    c.TI_DURATION: ("duration", _text),
    c.TI_SIZE_HUMAN: ("size_human", _text),
    c.TI_SIZE_BYTES: ("size_bytes", parse_int64),
    c.TI_PLAYLIST: ("playlist", _text),
    c.TI_VIDEO_COUNT: ("video_count", parse_int),
    c.TI_AUDIO_COUNT: ("audio_count", parse_int),
    c.TI_DEFAULT_OUTPUT_NAME: ("default_output_name", _text),
    c.TI_LANG_CODE: ("lang_code", _text),
    c.TI_LANG_NAME: ("lang_name", _text),
    c.TI_LONG_DESC: ("long_desc", _text),
    c.TI_UI_HEADER: ("ui_header", _text),
}

_STREAM_FIELDS: dict[int, tuple[str, Decoder]] = {
    c.SI_TYPE_NAME: ("type_name", _text),
    c.SI_ATTR: ("attr", _text),
    c.SI_LANG_CODE: ("lang_code", _text),
    c.SI_LANG_NAME: ("lang_name", _text),
    c.SI_CODEC_ID: ("codec_id", _text),
    c.SI_CODEC_SHORT: ("codec_short", _text),
    c.SI_CODEC_LONG: ("codec_long", _text),
    c.SI_BITRATE: ("bitrate", _text),
    c.SI_CHANNELS: ("channels", parse_int),
    c.SI_SAMPLE_RATE: ("sample_rate", parse_int),
    c.SI_BITS_PER_SAMPLE: ("bits_per_sample", parse_int),
    c.SI_RESOLUTION: ("resolution", _text),
    c.SI_ASPECT_RATIO: ("aspect_ratio", _text),
    c.SI_FRAME_RATE: ("frame_rate", _text),
    c.SI_PG_SIZE_OR_FLAG: ("pg_size_or_flag", _text),
    c.SI_LANG_CODE2: ("lang_code2", _text),
    c.SI_LANG_NAME2: ("lang_name2", _text),
    c.SI_LONG_DESC: ("long_desc", _text),
    c.SI_UI_HEADER: ("ui_header", _text),
    c.SI_SOURCE_TRACK_ID: ("source_track_id", _text),
    c.SI_DEFAULT_FLAG: ("default", parse_default_flag),
    c.SI_CHANNEL_LAYOUT: ("channel_layout", _text),
    c.SI_NOTES: ("notes", _text),
}


def _apply(entity: Container | Title | Stream, fields: dict, field: int, value: str) -> None:
    """Set the attribute mapped to *field*, or keep the raw value in ``extra``."""
    mapped = fields.get(field)
    if mapped is None:
        entity.extra[field] = value
        return
    attr, decode = mapped
    setattr(entity, attr, decode(value))


def apply_container_field(container: Container, field: int, value: str) -> None:
    _apply(container, _CONTAINER_FIELDS, field, value)


def apply_title_field(title: Title, field: int, value: str) -> None:
    _apply(title, _TITLE_FIELDS, field, value)


def apply_stream_field(stream: Stream, field: int, value: str) -> None:
    _apply(stream, _STREAM_FIELDS, field, value)
