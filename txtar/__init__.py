"""
txtar - A trivial text-based file archive format.

    from txtar import Archive, File

    archive = Archive.parse(raw)
    raw = archive.format()
"""

__version__ = "1.0.0"

from txtar.archive import Archive, File, with_newline
from txtar.reader import TxtarReader, find_next_file_marker, is_marker_line, parse, parse_file
from txtar.writer import TxtarWriter, format_archive

__all__ = [
    "Archive",
    "File",
    "TxtarReader",
    "TxtarWriter",
    "find_next_file_marker",
    "format_archive",
    "is_marker_line",
    "parse",
    "parse_file",
    "with_newline",
]
