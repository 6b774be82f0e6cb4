from __future__ import annotations

import logging
import zipfile
from pathlib import Path
from typing import Callable, Iterator

import pytest


@pytest.fixture(autouse=True)
def _reset_root_logging() -> Iterator[None]:
    """Drop handlers bound to this test's captured streams once it finishes."""
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()


@pytest.fixture
def make_archive(tmp_path: Path) -> Callable[..., Path]:
    """Return a factory writing `text` as the single entry of a zip archive."""

    def _make(
        text: str | None,
        name: str = "FL_insurance.csv.zip",
        entry: str = "FL_insurance.csv",
        compression: int = zipfile.ZIP_DEFLATED,
    ) -> Path:
        path = tmp_path / name
        with zipfile.ZipFile(path, "w", compression=compression) as zf:
            if text is not None:
                zf.writestr(entry, text.encode("utf-8"))
        return path

    return _make


@pytest.fixture
def corrupt_archive(make_archive: Callable[..., Path]) -> Path:
    """Stored archive whose entry data has one flipped byte (CRC mismatch)."""
    path = make_archive(
        "county,tiv_2011,tiv_2012\nDade,100.00,150.00\n",
        compression=zipfile.ZIP_STORED,
    )
    data = bytearray(path.read_bytes())
    i = data.index(b"Dade,100.00")
    data[i] ^= 0x01
    path.write_bytes(bytes(data))
    return path


@pytest.fixture
def dade_lee_csv() -> str:
    return "county,tiv_2011,tiv_2012\nDade,100.00,150.00\nDade,50.00,40.00\nLee,10.00,5.00\n"
