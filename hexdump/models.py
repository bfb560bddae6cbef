"""
Data models for a hex dump run.

Everything here is scoped to a single invocation: a DumpConfig is built once
from validated command line input, the reader produces Chunks from it, and
the dumper reports a DumpResult at the end.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Optional, Union

from .errors import HexdumpError

DEFAULT_BYTES_PER_LINE = 16
DEFAULT_OFFSET = 0


@dataclass(frozen=True)
class Unbounded:
    """Read until the source is exhausted."""


@dataclass(frozen=True)
class Bounded:
    """Read at most `count` bytes."""
    count: int

    def __post_init__(self):
        if self.count < 0:
            raise ValueError(f"Byte count must be non-negative, got {self.count}")


ByteLimit = Union[Unbounded, Bounded]

UNBOUNDED = Unbounded()


def byte_limit(count: Optional[int]) -> ByteLimit:
    """
    Convert a raw byte count into a ByteLimit.

    None and negative counts mean "read everything", as the -n option
    has always accepted.
    """
    if count is None or count < 0:
        return UNBOUNDED
    return Bounded(count)


Source = Union[Path, str, BinaryIO, None]


@dataclass(frozen=True)
class DumpConfig:
    """
    Parameters of one dump run.

    Args:
        bytes_per_line: Number of byte slots on each output line (>= 1)
        bytes_to_read: Total byte budget, Bounded(n) or UNBOUNDED
        offset: Number of leading bytes to skip (>= 0)
        source: Path or open binary stream to read; None means stdin
    """
    bytes_per_line: int = DEFAULT_BYTES_PER_LINE
    bytes_to_read: ByteLimit = UNBOUNDED
    offset: int = DEFAULT_OFFSET
    source: Source = None

    def __post_init__(self):
        if self.bytes_per_line < 1:
            raise ValueError(f"bytes_per_line must be at least 1, got {self.bytes_per_line}")
        if self.offset < 0:
            raise ValueError(f"offset must be non-negative, got {self.offset}")
        if isinstance(self.bytes_to_read, int):
            # Accept plain integers from library callers
            object.__setattr__(self, 'bytes_to_read', byte_limit(self.bytes_to_read))


@dataclass(frozen=True)
class Chunk:
    """A run of bytes read from the source, at most one line long."""
    data: bytes
    start_offset: int

    def __len__(self):
        return len(self.data)

    @property
    def end_offset(self) -> int:
        return self.start_offset + len(self.data)


@dataclass
class DumpResult:
    """Outcome of a dump run."""
    lines: int = 0
    bytes: int = 0
    error: Optional[HexdumpError] = None

    @property
    def ok(self) -> bool:
        return self.error is None
