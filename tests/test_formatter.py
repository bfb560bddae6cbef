"""
Tests for dump line formatting.
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest
from hexdump.formatter import format_ascii, format_hex, format_line, format_offset, is_printable
from hexdump.models import Chunk


def test_hello_world_line():
    """Test the reference line: 14 bytes in a 16 byte row."""
    line = format_line(Chunk(b'Hello, world!\n', 0), 16)
    assert line == (
        '     0 | 48 65 6C 6C  6F 2C 20 77  6F 72 6C 64  21 0A       | Hello, world!.'
    )


def test_offset_field():
    assert format_offset(0) == '     0 |'
    assert format_offset(0xABC) == '   ABC |'
    assert format_offset(0xFFFFFF) == 'FFFFFF |'


def test_offset_field_grows_past_six_digits():
    assert format_offset(0x1234567) == '1234567 |'


def test_hex_bytes_zero_padded_uppercase():
    assert format_hex(b'\x0a\xff', 2) == ' 0A FF'


def test_hex_grouping():
    """Test the extra space before every fourth slot after the first."""
    assert format_hex(bytes(range(9)), 9) == ' 00 01 02 03  04 05 06 07  08'


def test_hex_blank_slots():
    """Test that missing bytes keep their three columns."""
    assert format_hex(b'\x01', 6) == ' 01' + '   ' * 3 + ' ' + '   ' * 2


def test_hex_width_independent_of_data_length():
    widths = {len(format_hex(bytes(n), 16)) for n in range(17)}
    assert widths == {16 * 3 + 3}


def test_ascii_rendering():
    assert format_ascii(b'A\x00z\x7f~ \x1f') == 'A.z.~ .'


def test_ascii_high_bytes():
    assert format_ascii(bytes([0x80, 0xC3, 0xFF])) == '...'


@pytest.mark.parametrize('byte,expected', [
    (31, False), (32, True), (65, True), (126, True), (127, False), (200, False),
])
def test_is_printable(byte, expected):
    assert is_printable(byte) is expected


def test_short_line_keeps_ascii_column_aligned():
    full = format_line(Chunk(b'ABCD', 0), 4)
    short = format_line(Chunk(b'IJ', 8), 4)
    assert full == '     0 | 41 42 43 44 | ABCD'
    assert short == '     8 | 49 4A       | IJ'
    assert full.index(' | ', 7) == short.index(' | ', 7)


def test_single_byte_per_line():
    assert format_line(Chunk(b'\x7e', 0x10), 1) == '    10 | 7E | ~'


def test_ascii_pipe_character():
    """A '|' in the data does not disturb the columns."""
    line = format_line(Chunk(b'|', 0), 2)
    assert line == '     0 | 7C    | |'


if __name__ == '__main__':
    pytest.main([__file__])
