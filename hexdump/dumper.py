"""
Dump loop: reads chunks and writes one formatted line per chunk.
"""

import io
import sys
from typing import List, TextIO

from .errors import HexdumpError
from .formatter import format_line
from .models import UNBOUNDED, ByteLimit, DumpConfig, DumpResult
from .reader import ChunkReader


def dump(config: DumpConfig, out: TextIO = None) -> DumpResult:
    """
    Print hex dump of the configured source.

    Lines are written to `out` as soon as each chunk is read. Errors end the
    run and are returned in the result; lines written before the error stay
    written.

    Args:
        config: Validated dump parameters
        out: Text stream to write to (default: stdout)

    Returns:
        DumpResult with line and byte counts, and the error if one occurred
    """
    if out is None:
        out = sys.stdout
    result = DumpResult()

    try:
        with ChunkReader(config.source) as reader:
            for chunk in reader.chunks(config):
                out.write(format_line(chunk, config.bytes_per_line) + '\n')
                result.lines += 1
                result.bytes += len(chunk)
    except HexdumpError as e:
        result.error = e

    return result


def dump_bytes(data: bytes, bytes_per_line: int = 16, bytes_to_read: ByteLimit = UNBOUNDED,
               offset: int = 0) -> List[str]:
    """
    Hex dump in-memory data.

    Unlike dump(), errors are raised rather than returned.

    Returns:
        List of formatted lines, without newlines
    """
    config = DumpConfig(
        bytes_per_line=bytes_per_line,
        bytes_to_read=bytes_to_read,
        offset=offset,
        source=io.BytesIO(data),
    )
    with ChunkReader(config.source) as reader:
        return [format_line(chunk, bytes_per_line) for chunk in reader.chunks(config)]
