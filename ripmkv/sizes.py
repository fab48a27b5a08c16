"""Human-readable size parsing for title filtering."""

from __future__ import annotations

import re
from collections.abc import Iterable

from ripmkv.model import Title

_SIZE_RE = re.compile(r"^([0-9]+) ?(?:([KkMmGgTtPp])[Bb]?)?$")

_MULTIPLIERS: dict[str, int] = {
    "K": 1024,
    "M": 1024**2,
    "G": 1024**3,
    "T": 1024**4,
    "P": 1024**5,
}


def size_to_bytes(size: str) -> int:
    """Convert ``"100M"``, ``"4 GB"`` or ``"500"`` to bytes.

    Units are binary multiples.  Only whole numbers are accepted; ``"1.5G"``
    or any other unrecognised form returns 0.
    """
    m = _SIZE_RE.match(size.strip())
    if m is None:
        return 0
    value = int(m.group(1))
    unit = (m.group(2) or "").upper()
    return value * _MULTIPLIERS.get(unit, 1)


def filter_by_min_size(titles: Iterable[Title], min_size: str | None) -> list[Title]:
    """Keep titles of at least *min_size* bytes; empty or ``"0"`` keeps all."""
    if not min_size or min_size == "0":
        return list(titles)
    min_bytes = size_to_bytes(min_size)
    return [t for t in titles if t.size_bytes >= min_bytes]
