"""Fold tokenized records into the disc model."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ripmkv.makemkv import codes
from ripmkv.makemkv.decoder import apply_container_field, apply_stream_field, apply_title_field
from ripmkv.makemkv.tokenizer import ContainerRecord, StreamRecord, TitleRecord, tokenize
from ripmkv.model import Container, Disc, Stream, Title

log = logging.getLogger(__name__)


def parse_container(records: Iterable[ContainerRecord]) -> Container:
    """Build the Container; a repeated code keeps the last value."""
    container = Container()
    for rec in records:
        apply_container_field(container, rec.field, rec.value)
    return container


def parse_titles(records: Iterable[TitleRecord]) -> dict[int, Title]:
    """Return titles keyed by title id, in order of first appearance."""
    titles: dict[int, Title] = {}
    for rec in records:
        title = titles.get(rec.title_id)
        if title is None:
            title = titles[rec.title_id] = Title(title_id=rec.title_id)
        apply_title_field(title, rec.field, rec.value)
    return titles


def parse_streams(records: Iterable[StreamRecord]) -> dict[int, dict[int, Stream]]:
    """Return streams keyed by title id, then stream id, in order of first appearance."""
    streams: dict[int, dict[int, Stream]] = {}
    for rec in records:
        per_title = streams.setdefault(rec.title_id, {})
        stream = per_title.get(rec.stream_id)
        if stream is None:
            stream = per_title[rec.stream_id] = Stream(
                title_id=rec.title_id, stream_id=rec.stream_id
            )
        apply_stream_field(stream, rec.field, rec.value)
    return streams


def build_titles(
    titles: dict[int, Title],
    streams: dict[int, dict[int, Stream]],
) -> list[Title]:
    """Attach typed streams to their titles and return titles sorted by id.

    Streams keep first-seen order within each kind.  Streams with an unknown
    type name, or whose title has no TINFO records, are left out.
    """
    for title_id in sorted(streams.keys() - titles.keys()):
        log.debug("dropping %d stream(s) of unknown title %d", len(streams[title_id]), title_id)

    result: list[Title] = []
    for title_id in sorted(titles):
        title = titles[title_id]
        title.video, title.audio, title.subtitles = [], [], []
        for stream in streams.get(title_id, {}).values():
            if stream.type_name == codes.STREAM_VIDEO:
                title.video.append(stream.to_video())
            elif stream.type_name == codes.STREAM_AUDIO:
                title.audio.append(stream.to_audio())
            elif stream.type_name == codes.STREAM_SUBTITLES:
                title.subtitles.append(stream.to_subtitle())
            else:
                log.debug(
                    "title %d stream %d: skipping type %r (fields=%s)",
                    title_id,
                    stream.stream_id,
                    stream.type_name,
                    sorted(stream.extra),
                )
        result.append(title)
    return result


def load_disc(text: str | Iterable[str]) -> Disc:
    """Parse ``makemkvcon -r info`` output into a Disc."""
    cinfo, tinfo, sinfo = tokenize(text)
    container = parse_container(cinfo)
    titles = build_titles(parse_titles(tinfo), parse_streams(sinfo))
    log.debug("loaded disc %r with %d title(s)", container.disc_name, len(titles))
    return Disc(
        disc_type=container.disc_type,
        name=container.disc_name,
        volume=container.volume_label,
        container=container,
        titles=titles,
    )
