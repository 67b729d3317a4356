"""
txtar Reader - Parser for txtar archives.

Speed features:
  - Markers are only probed at line starts; other lines are skipped with a
    single newline search, so a full parse touches each byte a constant
    number of times
  - Scanning works on offsets into the original buffer; only the comment,
    file contents and names are copied out
  - No syntax errors: anything that isn't a marker line is content
"""

from __future__ import annotations

import logging
from pathlib import Path

from txtar.archive import Archive, File, with_newline
from txtar.spec import (
    ENCODING,
    MARKER_END,
    MARKER_START,
    MAX_FILE_SIZE,
    MIN_MARKER_LINE_LENGTH,
    NEWLINE,
)

logger = logging.getLogger(__name__)


def is_marker_line(data: bytes, start: int = 0) -> tuple[str, int] | None:
    """
    Check whether the line beginning at data[start] is a file marker line.

    Returns (name, after) where after is the offset just past the line's
    newline (or len(data) for a final line without one). Returns None if the
    line is not a marker.
    """
    if not data.startswith(MARKER_START, start):
        return None

    end = data.find(NEWLINE, start)
    if end == -1:
        end = after = len(data)
    else:
        after = end + 1

    if not data.endswith(MARKER_END, start, end):
        return None
    if end - start < MIN_MARKER_LINE_LENGTH:
        return None

    raw_name = data[start + len(MARKER_START):end - len(MARKER_END)]
    try:
        name = raw_name.decode(ENCODING)
    except UnicodeDecodeError:
        return None
    return name.strip(), after


def find_next_file_marker(data: bytes, start: int = 0) -> tuple[int, str, int] | None:
    """
    Find the first marker line at or after data[start].

    Returns (marker, name, after): data[start:marker] is the text before the
    marker line and data[after:] is what follows it. Returns None if there
    are no more markers.
    """
    pos = start
    while True:
        found = is_marker_line(data, pos)
        if found is not None:
            name, after = found
            return pos, name, after
        newline = data.find(NEWLINE, pos)
        if newline == -1:
            return None
        pos = newline + 1


def parse(data: bytes) -> Archive:
    """Parse bytes into an Archive."""
    if not isinstance(data, bytes):
        data = bytes(data)

    found = find_next_file_marker(data)
    if found is None:
        return Archive(comment=with_newline(data))

    marker, name, pos = found
    comment = with_newline(data[:marker])
    files: list[File] = []

    while True:
        found = find_next_file_marker(data, pos)
        if found is None:
            files.append(File(name, with_newline(data[pos:])))
            break
        marker, next_name, after = found
        files.append(File(name, with_newline(data[pos:marker])))
        name, pos = next_name, after

    return Archive(comment=comment, files=files)


def parse_file(path: str | Path, max_size: int = MAX_FILE_SIZE) -> Archive:
    """Read and parse a txtar file."""
    return TxtarReader.read(path, max_size=max_size)


class TxtarReader:
    """
    txtar file reader.

    Usage:
        # Bytes already in memory
        archive = TxtarReader.parse(raw)

        # From disk
        archive = TxtarReader.read("testdata/basic.txtar")
    """

    @staticmethod
    def parse(data: bytes) -> Archive:
        """Parse bytes into an Archive."""
        return parse(data)

    @classmethod
    def read(cls, path: str | Path, max_size: int = MAX_FILE_SIZE) -> Archive:
        """
        Fully parse a txtar file into an Archive.

        Raises ValueError if the file holds more than max_size bytes. At most
        max_size + 1 bytes are read.
        """
        with open(path, "rb") as f:
            data = f.read(max_size + 1)
        if len(data) > max_size:
            raise ValueError(
                f"File size exceeds maximum allowed size {max_size}: {path}"
            )
        archive = cls.parse(data)
        logger.debug("Read %s (%d bytes, %d files)", path, len(data), len(archive.files))
        return archive
