"""Access to the first entry of a zip archive as UTF-8 text."""

from __future__ import annotations

import io
import logging
import zipfile
import zlib
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, TextIO

from fl_insurance.exceptions import ArchiveEmptyError, ArchiveReadError

log = logging.getLogger(__name__)


@contextmanager
def open_first_entry(path: Path) -> Iterator[TextIO]:
    """Yield a text stream over the first entry of the zip archive at `path`.

    Both the archive and the entry stream are closed when the block exits,
    whether it finishes normally or raises.

    Args:
        path: Path to the zip archive.

    Yields:
        Text stream decoded as UTF-8 (undecodable bytes are replaced).

    Raises:
        FileNotFoundError: if `path` does not exist.
        ArchiveReadError: if `path` is not a readable zip archive, or the
            entry cannot be decompressed while it is being read.
        ArchiveEmptyError: if the archive has no entries.
    """
    try:
        zf = zipfile.ZipFile(path)
    except zipfile.BadZipFile as e:
        raise ArchiveReadError(f"Cannot read zip archive {path}: {e}") from e

    with zf:
        entries = zf.infolist()
        if not entries:
            raise ArchiveEmptyError(path)

        entry = entries[0]
        log.info("Reading %s from %s (%d bytes)", entry.filename, path, entry.file_size)
        try:
            raw = zf.open(entry)
        except (zipfile.BadZipFile, RuntimeError, NotImplementedError) as e:
            # encrypted entry, unsupported compression or a broken local header
            raise ArchiveReadError(f"Cannot read zip archive {path}: {e}") from e

        with raw, io.TextIOWrapper(raw, encoding="utf-8", errors="replace") as text:
            try:
                yield text
            except (zipfile.BadZipFile, zlib.error, EOFError) as e:
                # raised while the caller reads: bad CRC or a damaged deflate stream
                raise ArchiveReadError(f"Cannot read zip archive {path}: {e}") from e
