"""
Line formatting for hex dump output.

Each chunk becomes one line:

     0 | 48 65 6C 6C  6F 2C 20 77  6F 72 6C 64  21 0A       | Hello, world!.

The hex column always has `bytes_per_line` slots, so short final lines keep
the ASCII column aligned with the lines above them.
"""

from .models import Chunk

OFFSET_WIDTH = 6
GROUP_SIZE = 4
NON_PRINTABLE = '.'


def is_printable(byte: int) -> bool:
    """Printable ASCII, space through tilde."""
    return 31 < byte < 127


def format_offset(offset: int) -> str:
    return f"{offset:{OFFSET_WIDTH}X} |"


def format_hex(data: bytes, bytes_per_line: int) -> str:
    """
    Render the hex byte matrix.

    Every slot is three characters wide: a space and two uppercase hex
    digits, or three spaces past the end of `data`. An extra space opens
    each group of GROUP_SIZE slots after the first.
    """
    parts = []
    for i in range(bytes_per_line):
        if i > 0 and i % GROUP_SIZE == 0:
            parts.append(' ')
        if i < len(data):
            parts.append(f" {data[i]:02X}")
        else:
            parts.append('   ')
    return ''.join(parts)


def format_ascii(data: bytes) -> str:
    return ''.join(chr(b) if is_printable(b) else NON_PRINTABLE for b in data)


def format_line(chunk: Chunk, bytes_per_line: int) -> str:
    """Format one chunk as a dump line, without the trailing newline."""
    return (
        format_offset(chunk.start_offset)
        + format_hex(chunk.data, bytes_per_line)
        + ' | '
        + format_ascii(chunk.data)
    )
