"""
txtar Archive - In-memory model of a parsed archive.

An Archive is a leading comment plus an ordered list of Files. Both are
immutable values: build them by parsing bytes or by passing the pieces in.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from txtar.spec import NEWLINE


def with_newline(data: bytes) -> bytes:
    """Return data unchanged if it is empty or ends in a newline, else data + newline."""
    if not data or data.endswith(NEWLINE):
        return bytes(data)
    return bytes(data) + NEWLINE


@dataclass(frozen=True)
class File:
    """A single named file inside an Archive."""

    name: str
    data: bytes = b""

    def __post_init__(self) -> None:
        if not isinstance(self.data, bytes):
            object.__setattr__(self, "data", bytes(self.data))


@dataclass(frozen=True)
class Archive:
    """
    A comment followed by zero or more files.

    Usage:
        archive = Archive.parse(raw)
        archive.comment           # bytes before the first marker
        archive.get_file("a.txt") # first file with that name, or None
        raw = archive.format()

        archive = Archive(comment=b"notes\\n", files=[File("a.txt", b"hello\\n")])
    """

    comment: bytes = b""
    files: tuple[File, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.comment, bytes):
            object.__setattr__(self, "comment", bytes(self.comment))
        if not isinstance(self.files, tuple):
            object.__setattr__(self, "files", tuple(self.files))

    @classmethod
    def parse(cls, data: bytes) -> Archive:
        """Parse the serialized form of an archive."""
        from txtar.reader import parse
        return parse(data)

    def format(self) -> bytes:
        """
        Return the txtar representation of this archive.

        The comment and file data are assumed to contain no marker lines,
        and all file names are assumed non-empty.
        """
        from txtar.writer import format_archive
        return format_archive(self)

    def get_file(self, name: str) -> File | None:
        """Get the first file with the given name."""
        for f in self.files:
            if f.name == name:
                return f
        return None

    def get_files(self, name: str) -> list[File]:
        """Get all files with the given name, in archive order."""
        return [f for f in self.files if f.name == name]

    @property
    def names(self) -> list[str]:
        return [f.name for f in self.files]

    def __len__(self) -> int:
        return len(self.files)

    def __iter__(self) -> Iterator[File]:
        return iter(self.files)

    def __repr__(self) -> str:
        return f"Archive(comment={len(self.comment)} bytes, files={self.names})"
