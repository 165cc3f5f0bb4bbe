"""Core memory abstraction shared by every memory bank."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod


class ErrorKind(enum.Enum):
    """The kind of a memory access failure."""

    OUT_OF_BOUNDS = "out_of_bounds"
    MEMORY_NOT_READABLE = "memory_not_readable"
    MEMORY_NOT_WRITABLE = "memory_not_writable"
    MEMORY_NOT_PRESENT = "memory_not_present"
    OTHER = "other"


class MemoryAccessError(Exception):
    """Raised when reading or writing a memory fails."""

    def __init__(self, kind: ErrorKind, desc: str, detail: str | None = None):
        super().__init__(desc)
        self.kind = kind
        self.desc = desc
        self.detail = detail

    def __str__(self) -> str:
        return self.desc

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(kind={self.kind!r}, desc={self.desc!r}, "
            f"detail={self.detail!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MemoryAccessError):
            return NotImplemented
        return (self.kind, self.desc, self.detail) == (
            other.kind,
            other.desc,
            other.detail,
        )

    def __hash__(self) -> int:
        return hash((self.kind, self.desc, self.detail))


class Memory(ABC):
    """Any byte-addressable memory accessible to a CPU.

    Multi-byte accessors take a ``byteorder`` of ``"little"`` or ``"big"``.
    """

    @abstractmethod
    def __len__(self) -> int:
        """Return the size of the memory in bytes."""

    @abstractmethod
    def get_u8(self, addr: int) -> int:
        """Read a single byte at ``addr``."""

    @abstractmethod
    def set_u8(self, addr: int, val: int) -> None:
        """Write a single byte ``val`` at ``addr``."""

    def get(self, addr: int, length: int) -> bytes:
        """Read ``length`` bytes starting at ``addr``."""
        return bytes(self.get_u8(addr + offset) for offset in range(length))

    def set(self, addr: int, data: bytes) -> None:
        """Write ``data`` starting at ``addr``, one byte at a time."""
        for offset, byte in enumerate(data):
            self.set_u8(addr + offset, byte)

    def _get_int(self, addr: int, size: int, byteorder: str, signed: bool) -> int:
        return int.from_bytes(self.get(addr, size), byteorder, signed=signed)

    def _set_int(
        self, addr: int, val: int, size: int, byteorder: str, signed: bool
    ) -> None:
        self.set(addr, val.to_bytes(size, byteorder, signed=signed))

    def get_u16(self, addr: int, byteorder: str) -> int:
        return self._get_int(addr, 2, byteorder, False)

    def get_i16(self, addr: int, byteorder: str) -> int:
        return self._get_int(addr, 2, byteorder, True)

    def get_u32(self, addr: int, byteorder: str) -> int:
        return self._get_int(addr, 4, byteorder, False)

    def get_i32(self, addr: int, byteorder: str) -> int:
        return self._get_int(addr, 4, byteorder, True)

    def get_u64(self, addr: int, byteorder: str) -> int:
        return self._get_int(addr, 8, byteorder, False)

    def get_i64(self, addr: int, byteorder: str) -> int:
        return self._get_int(addr, 8, byteorder, True)

    def set_u16(self, addr: int, val: int, byteorder: str) -> None:
        self._set_int(addr, val, 2, byteorder, False)

    def set_i16(self, addr: int, val: int, byteorder: str) -> None:
        self._set_int(addr, val, 2, byteorder, True)

    def set_u32(self, addr: int, val: int, byteorder: str) -> None:
        self._set_int(addr, val, 4, byteorder, False)

    def set_i32(self, addr: int, val: int, byteorder: str) -> None:
        self._set_int(addr, val, 4, byteorder, True)

    def set_u64(self, addr: int, val: int, byteorder: str) -> None:
        self._set_int(addr, val, 8, byteorder, False)

    def set_i64(self, addr: int, val: int, byteorder: str) -> None:
        self._set_int(addr, val, 8, byteorder, True)