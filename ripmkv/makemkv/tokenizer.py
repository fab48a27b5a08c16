"""Tokenizer for ``makemkvcon -r info`` robot output."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass

log = logging.getLogger(__name__)

# KIND:ID[,ID2][,ID3],MSGCODE,"VALUE"
_LINE_RE = re.compile(r'^([A-Z]+):([0-9]+)(?:,([0-9]+))?(?:,([0-9]+))?,([0-9]+),"(.*)"$')


@dataclass(slots=True)
class ContainerRecord:
    field: int
    code: int
    value: str

    def to_line(self) -> str:
        return f'CINFO:{self.field},{self.code},"{self.value}"'


@dataclass(slots=True)
class TitleRecord:
    title_id: int
    field: int
    code: int
    value: str

    def to_line(self) -> str:
        return f'TINFO:{self.title_id},{self.field},{self.code},"{self.value}"'


@dataclass(slots=True)
class StreamRecord:
    title_id: int
    stream_id: int
    field: int
    code: int
    value: str

    def to_line(self) -> str:
        return (
            f"SINFO:{self.title_id},{self.stream_id},{self.field},{self.code},"
            f'"{self.value}"'
        )


Record = ContainerRecord | TitleRecord | StreamRecord


def _id(group: str | None) -> int:
    return int(group) if group else 0


def tokenize_line(line: str) -> Record | None:
    """Parse one line; return None for anything that isn't a C/T/SINFO record."""
    m = _LINE_RE.match(line.rstrip("\r\n"))
    if m is None:
        return None
    kind, id1, id2, id3, code, value = m.groups()
    if kind == "CINFO":
        return ContainerRecord(field=_id(id1), code=int(code), value=value)
    if kind == "TINFO":
        return TitleRecord(title_id=_id(id1), field=_id(id2), code=int(code), value=value)
    if kind == "SINFO":
        return StreamRecord(
            title_id=_id(id1),
            stream_id=_id(id2),
            field=_id(id3),
            code=int(code),
            value=value,
        )
    return None


def tokenize(
    text: str | Iterable[str],
) -> tuple[list[ContainerRecord], list[TitleRecord], list[StreamRecord]]:
    """Split robot output into CINFO, TINFO and SINFO records.

    Accepts the whole output as one string or any iterable of lines (an open
    file works).  Lines that don't match the record grammar, including DRV,
    MSG and TCOUNT lines, are skipped.  Each returned list keeps input order,
    which the loader relies on for last-value-wins folding.
    """
    # only "\n" ends a record; values may hold other line-break characters
    lines = text.split("\n") if isinstance(text, str) else text
    containers: list[ContainerRecord] = []
    titles: list[TitleRecord] = []
    streams: list[StreamRecord] = []
    skipped = 0
    for line in lines:
        record = tokenize_line(line)
        if isinstance(record, ContainerRecord):
            containers.append(record)
        elif isinstance(record, TitleRecord):
            titles.append(record)
        elif isinstance(record, StreamRecord):
            streams.append(record)
        else:
            skipped += 1
    log.debug(
        "tokenized %d CINFO, %d TINFO, %d SINFO records (%d lines skipped)",
        len(containers),
        len(titles),
        len(streams),
        skipped,
    )
    return containers, titles, streams
