"""Concrete memory banks: flat, empty, mirrored and access-restricted."""

from __future__ import annotations

from collections.abc import Iterable

from .memory import ErrorKind, Memory, MemoryAccessError


class Fixed(Memory):
    """A flat, fixed-size memory buffer."""

    def __init__(self, size: int):
        self._data = bytearray(size)

    @classmethod
    def from_contents(cls, contents: Iterable[int]) -> "Fixed":
        """Create a fixed memory holding exactly ``contents``."""
        memory = cls(0)
        memory._data = bytearray(contents)
        return memory

    def __len__(self) -> int:
        return len(self._data)

    def _in_bounds(self, addr: int) -> bool:
        return 0 <= addr < len(self._data)

    def get_u8(self, addr: int) -> int:
        if not self._in_bounds(addr):
            raise MemoryAccessError(
                ErrorKind.OUT_OF_BOUNDS,
                "Read would reach end of memory",
                f"attempted to read from 0x{addr:X}, but size is 0x{len(self._data):x}",
            )
        return self._data[addr]

    def set_u8(self, addr: int, val: int) -> None:
        if not self._in_bounds(addr):
            raise MemoryAccessError(
                ErrorKind.OUT_OF_BOUNDS,
                "Write would reach end of memory",
                f"attempted to write to 0x{addr:X}, but size is 0x{len(self._data):x}",
            )
        self._data[addr] = val


class Empty(Memory):
    """A memory with no addresses; every access fails."""

    def __len__(self) -> int:
        return 0

    def get_u8(self, addr: int) -> int:
        raise MemoryAccessError(
            ErrorKind.MEMORY_NOT_READABLE, "EmptyMemory cannot be read from"
        )

    def set_u8(self, addr: int, val: int) -> None:
        raise MemoryAccessError(
            ErrorKind.MEMORY_NOT_WRITABLE, "EmptyMemory cannot be written to"
        )


class Mirrored(Memory):
    """Repeats an inner memory through ``size`` bytes of address space.

    An address ``addr`` below ``size`` maps to ``addr % len(memory)``.
    """

    def __init__(self, memory: Memory, size: int):
        self._memory = memory
        self._size = size

    def __len__(self) -> int:
        return self._size

    def get_u8(self, addr: int) -> int:
        if not 0 <= addr < self._size:
            raise MemoryAccessError(
                ErrorKind.OUT_OF_BOUNDS,
                "Read would reach end of memory",
                f"attempted to read from 0x{addr:X}, but size is 0x{self._size:x}",
            )
        return self._memory.get_u8(addr % len(self._memory))

    def set_u8(self, addr: int, val: int) -> None:
        if not 0 <= addr < self._size:
            raise MemoryAccessError(
                ErrorKind.OUT_OF_BOUNDS,
                "Write would reach end of memory",
                f"attempted to write to 0x{addr:X}, but size is 0x{self._size:x}",
            )
        self._memory.set_u8(addr % len(self._memory), val)


class ReadOnlyMemory(Memory):
    """Wraps a memory so that it can be read but not written."""

    def __init__(self, inner: Memory):
        self._inner = inner

    def __len__(self) -> int:
        return len(self._inner)

    def get_u8(self, addr: int) -> int:
        return self._inner.get_u8(addr)

    def set_u8(self, addr: int, val: int) -> None:
        raise MemoryAccessError(
            ErrorKind.MEMORY_NOT_WRITABLE, "attempted to write to read-only memory"
        )


class WriteOnlyMemory(Memory):
    """Wraps a memory so that it can be written but not read."""

    def __init__(self, inner: Memory):
        self._inner = inner

    def __len__(self) -> int:
        return len(self._inner)

    def get_u8(self, addr: int) -> int:
        raise MemoryAccessError(
            ErrorKind.MEMORY_NOT_READABLE, "attempted to read from write-only memory"
        )

    def set_u8(self, addr: int, val: int) -> None:
        self._inner.set_u8(addr, val)


def read_only(inner: Memory) -> ReadOnlyMemory:
    """Return a read-only view of ``inner``."""
    return ReadOnlyMemory(inner)


def write_only(inner: Memory) -> WriteOnlyMemory:
    """Return a write-only view of ``inner``."""
    return WriteOnlyMemory(inner)