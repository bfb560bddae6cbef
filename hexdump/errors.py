"""
Error kinds reported by the hex dump utility.
"""


class HexdumpError(Exception):
    """Base class for all errors reported to the user."""

    default_message = 'unexpected error'

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ArgumentError(HexdumpError):
    """Invalid or missing command line option value."""

    default_message = 'invalid argument'


class InputNotFoundError(HexdumpError, FileNotFoundError):
    """The input file does not exist."""

    default_message = 'file not found'


class SeekError(HexdumpError):
    """The source ended before the requested offset was reached."""

    default_message = 'error while attempting to seek to the specified offset'


class ReadError(HexdumpError):
    """I/O failure while opening or reading the source."""

    default_message = 'error while reading input'
