"""In-memory file objects: a writable RAM file and a read-only program-memory file."""

from __future__ import annotations

import enum
from typing import BinaryIO, Optional, Union

_Writable = Union[int, bytes, bytearray, memoryview]


class SeekMode(enum.Enum):
    """Reference point for :meth:`RamFile.seek` and :meth:`PGMFile.seek`."""

    SET = 0
    CUR = 1
    END = 2


class _MemoryFile:
    """Cursor bookkeeping shared by the in-memory files."""

    _data: Optional[Union[bytes, bytearray]]

    def __init__(self) -> None:
        self._cursor = 0

    def _length(self) -> int:
        return 0 if self._data is None else len(self._data)

    def _read_chunk(self, size: int) -> bytes:
        if size < 0:
            raise ValueError("size must not be negative")
        if self._data is None or self._cursor >= len(self._data):
            return b""
        chunk = bytes(self._data[self._cursor : self._cursor + size])
        self._cursor += len(chunk)
        return chunk

    def _peek_byte(self) -> int:
        if self._data is None or self._cursor >= len(self._data):
            return -1
        return self._data[self._cursor]

    def _take_byte(self) -> int:
        value = self._peek_byte()
        if value >= 0:
            self._cursor += 1
        return value

    def _move(self, target: int) -> bool:
        if target < 0:
            raise ValueError(f"seek to negative position {target}")
        self._cursor = target
        return True


class RamFile(_MemoryFile):
    """File whose contents live in memory and grow as they are written."""

    def __init__(self, data: Optional[bytes] = None, readonly: bool = True) -> None:
        super().__init__()
        self._data = None if data is None else bytearray(data)
        self.readonly = readonly
        self.name = ""

    @classmethod
    def from_file(cls, file: BinaryIO, readonly: bool = True) -> RamFile:
        """Load the whole of ``file`` into memory, keeping its name."""
        file.seek(0)
        ram = cls(file.read(), readonly)
        ram.name = str(getattr(file, "name", "") or "")
        return ram

    @classmethod
    def create(cls, filename: str = "") -> RamFile:
        """Return an empty writable file; it is false until something is written."""
        ram = cls(None, readonly=False)
        ram.name = filename
        return ram

    @property
    def data(self) -> bytes:
        """Current contents."""
        return b"" if self._data is None else bytes(self._data)

    def write(self, data: _Writable) -> int:
        """Write a byte value or a bytes-like object at the cursor.

        Returns the number of bytes written, which is 0 for a read-only file.
        """
        if self.readonly:
            return 0
        chunk = bytes([data]) if isinstance(data, int) else bytes(data)
        if not chunk:
            return 0
        if self._data is None:
            self._data = bytearray()
        if self._cursor > len(self._data):
            self._data.extend(bytes(self._cursor - len(self._data)))
        self._data[self._cursor : self._cursor + len(chunk)] = chunk
        self._cursor += len(chunk)
        return len(chunk)

    def read(self, size: int) -> bytes:
        """Read up to ``size`` bytes from the cursor; empty at the end of the data."""
        return self._read_chunk(size)

    def read_byte(self) -> int:
        """Read one byte and advance; -1 at the end of the data."""
        return self._take_byte()

    def peek(self) -> int:
        """Return the byte at the cursor without advancing; -1 at the end."""
        return self._peek_byte()

    def available(self) -> int:
        """Number of bytes between the cursor and the end."""
        return self._length() - self._cursor

    def seek(self, pos: int, mode: SeekMode = SeekMode.SET) -> bool:
        """Move the cursor; with END, ``pos`` counts back from the end."""
        if mode is SeekMode.SET:
            return self._move(pos)
        if mode is SeekMode.END:
            return self._move(self._length() - pos)
        return self._move(self._cursor + pos)

    def position(self) -> int:
        return self._cursor

    def size(self) -> int:
        return self._length()

    def flush(self) -> None:
        """Nothing is buffered, so there is nothing to flush."""

    def close(self) -> None:
        """Drop the contents and the name."""
        self._data = None
        self.name = ""

    def __bool__(self) -> bool:
        return self._data is not None

    def __enter__(self) -> RamFile:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class PGMFile(_MemoryFile):
    """Read-only file over a fixed block of bytes."""

    def __init__(self, data: bytes) -> None:
        super().__init__()
        self._data = bytes(data)
        self.name: Optional[str] = None

    def write(self, data: _Writable) -> int:
        """Writing is not supported; always returns 0."""
        return 0

    def read(self, size: int) -> bytes:
        """Read up to ``size`` bytes from the cursor; empty at the end of the data."""
        return self._read_chunk(size)

    def read_byte(self) -> int:
        """Read one byte and advance; -1 at the end of the data."""
        return self._take_byte()

    def peek(self) -> int:
        """Return the byte at the cursor without advancing; -1 at the end."""
        return self._peek_byte()

    def available(self) -> int:
        """1 while bytes remain to be read, else 0."""
        return int(self._cursor < self._length())

    def seek(self, pos: int, mode: SeekMode = SeekMode.SET) -> bool:
        """Move the cursor; with END, ``pos`` counts back from the last byte."""
        if mode is SeekMode.SET:
            return self._move(pos)
        if mode is SeekMode.END:
            return self._move(self._length() - pos - 1)
        return self._move(self._cursor + pos)

    def position(self) -> int:
        return self._cursor

    def size(self) -> int:
        return self._length()

    def flush(self) -> None:
        """Nothing is buffered, so there is nothing to flush."""

    def close(self) -> None:
        self._data = None

    def __bool__(self) -> bool:
        return self._data is not None

    def __enter__(self) -> PGMFile:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()