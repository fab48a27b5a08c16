import os
from pathlib import Path

import pytest

from ripmkv.makemkv.loader import load_disc
from ripmkv.model import Disc

_FIXTURE: Path = Path(__file__).parent / "fixtures" / "up_disc1_info.txt"


@pytest.fixture
def info_path() -> Path:
    """Path to a `makemkvcon -r info` dump.

    Uses RIPMKV_TEST_INFO env var if set, otherwise the bundled capture.
    Tests asserting on exact values of the bundled capture use
    ``bundled_info_path`` instead.
    """
    env: str | None = os.environ.get("RIPMKV_TEST_INFO")
    if env:
        p = Path(env)
        if not p.is_file():
            pytest.skip(f"No info dump found at {p}")
        return p
    return _FIXTURE


@pytest.fixture
def bundled_info_path() -> Path:
    return _FIXTURE


@pytest.fixture
def info_text(bundled_info_path: Path) -> str:
    return bundled_info_path.read_text(encoding="utf-8")


@pytest.fixture
def disc(info_text: str) -> Disc:
    """The bundled capture loaded into the disc model."""
    return load_disc(info_text)
