"""
txtar Writer - Serializes Archive objects to the txtar layout.

Output is canonical: one "-- name --" line per file, and the comment and
every file body end in a newline whether or not the in-memory value does.
"""

from __future__ import annotations

import logging
from pathlib import Path

from txtar.archive import Archive, File, with_newline
from txtar.spec import ENCODING, MARKER_END, MARKER_START, NEWLINE

logger = logging.getLogger(__name__)


def format_comment(comment: bytes) -> bytes:
    return with_newline(comment)


def format_file(file: File) -> bytes:
    return b"".join([
        MARKER_START,
        file.name.encode(ENCODING),
        MARKER_END,
        NEWLINE,
        with_newline(file.data),
    ])


def format_archive(archive: Archive) -> bytes:
    """
    Serialize an Archive to bytes.

    Nothing is validated: content holding a marker line, or a file with an
    empty name, produces output that parses back differently.
    """
    parts = [format_comment(archive.comment)]
    for file in archive.files:
        parts.append(format_file(file))
    return b"".join(parts)


class TxtarWriter:
    """Writes Archive objects to bytes or to disk."""

    @staticmethod
    def serialize(archive: Archive) -> bytes:
        return format_archive(archive)

    @classmethod
    def write(cls, archive: Archive, path: str | Path) -> int:
        """Write an Archive to a file. Returns the number of bytes written."""
        data = cls.serialize(archive)
        with open(path, "wb") as f:
            f.write(data)
        logger.debug("Wrote %s (%d bytes, %d files)", path, len(data), len(archive.files))
        return len(data)
