"""
Hex dump utility: renders a file or standard input as offset, hex and ASCII columns.
"""

from .models import UNBOUNDED, Bounded, Chunk, DumpConfig, DumpResult, Unbounded, byte_limit
from .errors import ArgumentError, HexdumpError, InputNotFoundError, ReadError, SeekError
from .formatter import format_line
from .reader import ChunkReader
from .dumper import dump, dump_bytes

__version__ = '0.2.0'

__all__ = [
    'UNBOUNDED', 'Bounded', 'Unbounded', 'byte_limit',
    'Chunk', 'DumpConfig', 'DumpResult',
    'ArgumentError', 'HexdumpError', 'InputNotFoundError', 'ReadError', 'SeekError',
    'ChunkReader', 'format_line', 'dump', 'dump_bytes',
]
