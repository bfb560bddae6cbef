"""
Chunked reader for hex dump input.
"""

import sys
from pathlib import Path
from typing import BinaryIO, Iterator, Optional

from .errors import InputNotFoundError, ReadError, SeekError
from .models import Bounded, ByteLimit, Chunk, DumpConfig, Source

# Largest read used when skipping over a non-seekable stream
SKIP_BLOCK_SIZE = 64 * 1024


class ChunkReader:
    """Reads a byte source in line-sized chunks, after an optional seek."""

    def __init__(self, source: Source = None):
        """
        Initialize chunk reader.

        Args:
            source: Path to a file, an open binary stream, or None for stdin
        """
        self.source = source
        self.file: Optional[BinaryIO] = None
        self._owns_file = False

    def __enter__(self):
        """Context manager entry."""
        if self.source is None:
            self.file = sys.stdin.buffer
        elif isinstance(self.source, (str, Path)):
            path = Path(self.source)
            try:
                self.file = open(path, 'rb')
            except FileNotFoundError:
                raise InputNotFoundError(f"file not found: {path}") from None
            except OSError as e:
                raise ReadError(f"cannot open {path}: {e.strerror or e}") from e
            self._owns_file = True
        else:
            self.file = self.source
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit. Only files opened here are closed."""
        if self.file and self._owns_file:
            self.file.close()
        self.file = None
        self._owns_file = False

    def _require_file(self) -> BinaryIO:
        if not self.file:
            raise RuntimeError("Source not open. Use as context manager.")
        return self.file

    def remaining_bytes(self) -> int:
        """Get number of bytes between the current position and the end."""
        f = self._require_file()
        pos = f.tell()
        size = f.seek(0, 2)  # Seek to end
        f.seek(pos)  # Restore position
        return size - pos

    def seek(self, offset: int) -> int:
        """
        Discard the first `offset` bytes of the source.

        Seekable sources are checked against their remaining length first;
        other streams are read and discarded until the offset is reached.
        Ending up anywhere short of the offset raises SeekError.

        Returns:
            Number of bytes skipped past the current position
        """
        if offset == 0:
            return 0
        f = self._require_file()
        try:
            if f.seekable():
                if self.remaining_bytes() < offset:
                    raise SeekError()
                f.seek(offset, 1)
            else:
                skipped = 0
                while skipped < offset:
                    data = f.read(min(SKIP_BLOCK_SIZE, offset - skipped))
                    if not data:
                        raise SeekError()
                    skipped += len(data)
        except OSError as e:
            raise SeekError() from e
        return offset

    def next_chunk(self, start_offset: int, remaining: ByteLimit, bytes_per_line: int) -> Chunk:
        """
        Read up to one line of bytes.

        The request is capped by the remaining budget when it is bounded.
        An empty chunk means end-of-stream.
        """
        max_bytes = bytes_per_line
        if isinstance(remaining, Bounded):
            max_bytes = min(max_bytes, remaining.count)
        if max_bytes == 0:
            return Chunk(b'', start_offset)
        f = self._require_file()
        try:
            data = f.read(max_bytes)
        except OSError as e:
            raise ReadError(f"read failed at offset {start_offset:#x}: {e.strerror or e}") from e
        return Chunk(data or b'', start_offset)

    def chunks(self, config: DumpConfig) -> Iterator[Chunk]:
        """Seek to the configured offset and yield non-empty chunks until the budget or the source runs out."""
        offset = config.offset
        remaining = config.bytes_to_read
        self.seek(offset)

        while True:
            chunk = self.next_chunk(offset, remaining, config.bytes_per_line)
            if not chunk:
                break
            yield chunk
            offset += len(chunk)
            if isinstance(remaining, Bounded):
                remaining = Bounded(remaining.count - len(chunk))
