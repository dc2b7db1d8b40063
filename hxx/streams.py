"""
Byte stream adapters for hxx.

The encoder and decoder only see ByteSource and ByteSink. The command-line
layer picks the concrete adapter (a file, stdin/stdout or an in-memory
buffer) and owns its lifetime.
"""

import io
import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import BinaryIO, Optional, Union

from .errors import StreamIOError

DEFAULT_BUFFER_SIZE = 64 * 1024


class ByteSource(ABC):
    """Readable byte stream."""

    @abstractmethod
    def read(self, size: int) -> bytes:
        """Read at most size bytes. An empty result means end of stream."""

    def read_chunk(self, size: int) -> bytes:
        """
        Read exactly size bytes unless the stream ends first.

        Pipes and terminals may hand back fewer bytes than asked for; this
        keeps reading so that only the last chunk of a stream is short.
        """
        data = self.read(size)
        if not data or len(data) >= size:
            return data
        parts = [data]
        remaining = size - len(data)
        while remaining > 0:
            data = self.read(remaining)
            if not data:
                break
            parts.append(data)
            remaining -= len(data)
        return b''.join(parts)

    def readline(self) -> bytes:
        """Read up to and including the next b'\\n'. Empty at end of stream."""
        line = bytearray()
        while True:
            byte = self.read(1)
            if not byte:
                break
            line += byte
            if byte == b'\n':
                break
        return bytes(line)

    def __iter__(self):
        while True:
            line = self.readline()
            if not line:
                return
            yield line

    def close(self) -> None:
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


class ByteSink(ABC):
    """Writable byte stream."""

    @abstractmethod
    def write(self, data: bytes) -> int:
        """Write all of data and return the number of bytes written."""

    def flush(self) -> None:
        pass

    def close(self) -> None:
        self.flush()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


class FileSource(ByteSource):
    """ByteSource over a binary file object."""

    def __init__(self, file: BinaryIO, owns_file: bool = False):
        """
        Initialize source.

        Args:
            file: Binary file object opened for reading
            owns_file: Close the file when the source is closed
        """
        self.file: Optional[BinaryIO] = file
        self.owns_file = owns_file

    def read(self, size: int) -> bytes:
        if not self.file:
            raise RuntimeError("Source is closed.")
        try:
            return self.file.read(size)
        except OSError as e:
            raise StreamIOError(StreamIOError.READ, e) from e

    def readline(self) -> bytes:
        if not self.file:
            raise RuntimeError("Source is closed.")
        try:
            return self.file.readline()
        except OSError as e:
            raise StreamIOError(StreamIOError.READ, e) from e

    def close(self) -> None:
        if self.file and self.owns_file:
            self.file.close()
        self.file = None


class FileSink(ByteSink):
    """ByteSink over a binary file object."""

    def __init__(self, file: BinaryIO, owns_file: bool = False):
        self.file: Optional[BinaryIO] = file
        self.owns_file = owns_file

    def write(self, data: bytes) -> int:
        if not self.file:
            raise RuntimeError("Sink is closed.")
        try:
            self.file.write(data)
        except OSError as e:
            raise StreamIOError(StreamIOError.WRITE, e) from e
        return len(data)

    def flush(self) -> None:
        if not self.file:
            return
        try:
            self.file.flush()
        except OSError as e:
            raise StreamIOError(StreamIOError.WRITE, e) from e

    def close(self) -> None:
        if not self.file:
            return
        try:
            self.flush()
        finally:
            if self.owns_file:
                self.file.close()
            self.file = None


class BytesSource(FileSource):
    """In-memory source, mostly for tests and the *_bytes helpers."""

    def __init__(self, data: Union[bytes, str] = b''):
        if isinstance(data, str):
            data = data.encode('ascii')
        super().__init__(io.BytesIO(data), owns_file=True)


class BytesSink(FileSink):
    """In-memory sink. The written data stays available after close()."""

    def __init__(self):
        self.buffer = io.BytesIO()
        super().__init__(self.buffer)

    def getvalue(self) -> bytes:
        return self.buffer.getvalue()


def open_source(path: Optional[Path] = None) -> FileSource:
    """
    Open the input stream.

    Args:
        path: File to read from (None = stdin)

    Returns:
        FileSource to be used as a context manager
    """
    if path is None:
        return FileSource(sys.stdin.buffer)
    try:
        file = open(path, 'rb', buffering=DEFAULT_BUFFER_SIZE)
    except OSError as e:
        raise StreamIOError(StreamIOError.READ, f"failed to open file: {e}") from e
    return FileSource(file, owns_file=True)


def open_sink(path: Optional[Path] = None) -> FileSink:
    """
    Open the output stream.

    An existing output file is appended to, a missing one is created.

    Args:
        path: File to write to (None = stdout)
    """
    if path is None:
        return FileSink(sys.stdout.buffer)
    try:
        file = open(path, 'ab', buffering=DEFAULT_BUFFER_SIZE)
    except OSError as e:
        raise StreamIOError(StreamIOError.WRITE, f"failed to create file: {e}") from e
    return FileSink(file, owns_file=True)
