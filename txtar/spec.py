"""
txtar Format Specification
==========================

Layout:
    <comment lines>              <- Everything before the first marker line
    -- <name> --                 <- File marker line
    <file content lines>         <- Content runs until the next marker line
    -- <name> --
    <file content lines>
    ...

Design Decisions:
    - A marker line starts with "-- " and ends with " --", nothing else
    - Whitespace around the name is stripped, so "--  a.txt  --" names "a.txt"
    - Markers are only recognized at the start of a line
    - A missing final newline is treated as present, for the comment and every file
    - Names are UTF-8; content is raw bytes, carriage returns included
    - There are no syntax errors: a line that is almost a marker is just content

Not supported: binary data, file modes, symlinks or other special files.
"""

# Marker line delimiters
MARKER_START = b"-- "
MARKER_END = b" --"
NEWLINE = b"\n"

# "-- --" would share its middle space between both delimiters
MIN_MARKER_LINE_LENGTH = len(MARKER_START) + len(MARKER_END)

# File names inside marker lines
ENCODING = "utf-8"

# File extension
EXTENSION = ".txtar"

# Default limit for TxtarReader.read (100 MiB)
MAX_FILE_SIZE = 100 * 1024 * 1024
