"""A virtual memory built from non-overlapping segments at fixed base addresses."""

from __future__ import annotations

import bisect
from typing import NamedTuple

from .memory import ErrorKind, Memory, MemoryAccessError


class MemoryOverlapError(ValueError):
    """Raised when an attached memory would overlap another attached memory."""


class _Segment(NamedTuple):
    base: int
    memory: Memory

    @property
    def end(self) -> int:
        """The first address past the end of the segment."""
        return self.base + len(self.memory)

    def has_addr(self, addr: int) -> bool:
        return self.base <= addr < self.end

    def __repr__(self) -> str:
        return f"${self.base:04X} - ${self.end - 1:04X}"


class Virtual(Memory):
    """Dispatches each access to the memory mapped at the matching address.

    Attached memories may not overlap.
    """

    def __init__(self) -> None:
        self._segments: list[_Segment] = []

    def attach(self, base: int, memory: Memory) -> None:
        """Map ``memory`` so that its address 0 appears at ``base``."""
        index = bisect.bisect_right([segment.base for segment in self._segments], base)

        if index > 0:
            left = self._segments[index - 1]
            if left.base + len(left.memory) - 1 >= base:
                raise MemoryOverlapError(
                    "attempted to attach a memory in a location that would "
                    "overlap with another memory"
                )

        if index < len(self._segments):
            right = self._segments[index]
            if base + len(memory) - 1 >= right.base:
                raise MemoryOverlapError(
                    "attempted to attach a memory in a location that would "
                    "overlap with another memory"
                )

        self._segments.insert(index, _Segment(base, memory))

    def segments(self) -> tuple[_Segment, ...]:
        """Return the attached segments ordered by base address."""
        return tuple(self._segments)

    def __len__(self) -> int:
        """Return the extent of the address space covered, up to the last segment's end."""
        return self._segments[-1].end if self._segments else 0

    def _find(self, addr: int) -> _Segment:
        segment = next((s for s in self._segments if s.has_addr(addr)), None)
        if segment is None:
            raise MemoryAccessError(
                ErrorKind.OUT_OF_BOUNDS,
                "Unable to locate a suitable memory segment",
                f"at address: 0x{addr:X}",
            )
        return segment

    def get_u8(self, addr: int) -> int:
        segment = self._find(addr)
        return segment.memory.get_u8(addr - segment.base)

    def set_u8(self, addr: int, val: int) -> None:
        segment = self._find(addr)
        segment.memory.set_u8(addr - segment.base, val)

    def __repr__(self) -> str:
        return "[" + ", ".join(repr(segment) for segment in self._segments) + "]"