"""Stream views over a memory, for reading, writing and seeking."""

from __future__ import annotations

import io

from .memory import Memory, MemoryAccessError


class ReadCursor(io.RawIOBase):
    """A read-only, seekable stream over a memory starting at a given address."""

    def __init__(self, memory: Memory, start: int = 0):
        super().__init__()
        self._memory = memory
        self._pos = start

    def _check_open(self) -> None:
        if self.closed:
            raise ValueError("I/O operation on closed cursor")

    def readable(self) -> bool:
        return True

    def seekable(self) -> bool:
        return True

    def tell(self) -> int:
        return self._pos

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        self._check_open()
        if whence == io.SEEK_SET:
            pos = offset
        elif whence == io.SEEK_CUR:
            pos = self._pos + offset
        elif whence == io.SEEK_END:
            pos = len(self._memory) + offset
        else:
            raise ValueError(f"invalid whence ({whence})")
        if pos < 0:
            raise ValueError("invalid seek to a negative position")
        self._pos = pos
        return pos

    def _read_exact(self, size: int) -> bytes:
        try:
            data = self._memory.get(self._pos, size)
        except MemoryAccessError as err:
            raise OSError(str(err)) from err
        self._pos += size
        return data

    def readinto(self, buffer) -> int:
        """Fill ``buffer`` completely from memory, or raise without moving."""
        self._check_open()
        view = memoryview(buffer).cast("B")
        size = len(view)
        view[:] = self._read_exact(size)
        return size

    def read(self, size: int = -1) -> bytes:
        """Read exactly ``size`` bytes, or everything up to the memory's end."""
        self._check_open()
        if size is None or size < 0:
            size = max(len(self._memory) - self._pos, 0)
        return self._read_exact(size)


class Cursor(ReadCursor):
    """A readable, writable, seekable stream over a memory."""

    def writable(self) -> bool:
        return True

    def write(self, data) -> int:
        self._check_open()
        payload = bytes(data)
        try:
            self._memory.set(self._pos, payload)
        except MemoryAccessError as err:
            raise OSError(str(err)) from err
        self._pos += len(payload)
        return len(payload)


def read_cursor(memory: Memory, start: int = 0) -> ReadCursor:
    """Return a read-only stream over ``memory`` positioned at ``start``."""
    return ReadCursor(memory, start)


def cursor(memory: Memory, start: int = 0) -> Cursor:
    """Return a read/write stream over ``memory`` positioned at ``start``."""
    return Cursor(memory, start)