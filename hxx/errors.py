"""
Exceptions raised by hxx.

Every error aborts the running dump or reverse dump. The command-line layer
catches HxxError, prints the message and exits with a non-zero status.
"""

from typing import Optional


class HxxError(Exception):
    """Base class for all hxx errors."""


class StreamIOError(HxxError):
    """Reading the input or writing the output failed."""

    READ = 'read'
    WRITE = 'write'

    def __init__(self, direction: str, reason: object = None):
        self.direction = direction
        self.reason = reason
        if direction == self.READ:
            message = "failed to read from input"
        else:
            message = "failed to write to output"
        if reason is not None:
            message += f": {reason}"
        super().__init__(message)


class MalformedLineError(HxxError):
    """A line of a hex dump could not be parsed."""

    kind = 'MalformedLine'
    description = 'malformed line'

    def __init__(self, detail: Optional[str] = None, line_number: Optional[int] = None):
        self.detail = detail
        self.line_number = line_number
        super().__init__(self._message())

    def _message(self) -> str:
        message = self.description
        if self.detail:
            message += f": {self.detail}"
        if self.line_number is not None:
            message = f"line {self.line_number}: {message}"
        return message

    def at_line(self, line_number: int) -> 'MalformedLineError':
        """Attach the 1-based input line number and rebuild the message."""
        self.line_number = line_number
        self.args = (self._message(),)
        return self


class MissingOffsetDelimiter(MalformedLineError):
    kind = 'MissingOffsetDelimiter'
    description = "malformed line: missing ':'"


class MissingPanelSeparator(MalformedLineError):
    kind = 'MissingPanelSeparator'
    description = 'malformed line: missing double space separator'


class LineTooShort(MalformedLineError):
    kind = 'LineTooShort'
    description = 'malformed line: line too short'


class OddDigitCount(MalformedLineError):
    kind = 'OddDigitCount'
    description = 'malformed hex: odd number of hex digits'


class InvalidHexDigit(MalformedLineError):
    kind = 'InvalidHexDigit'
    description = 'malformed line: invalid hex char'


class OffsetMismatch(MalformedLineError):
    # Only raised by the decoder in strict mode
    kind = 'OffsetMismatch'
    description = 'malformed line: offset does not match decoded length'


class InvalidOptionValue(HxxError):
    """A command-line option is unknown, missing its value or out of range."""
