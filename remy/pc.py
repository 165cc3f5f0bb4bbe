"""Instruction decoding interface and the program counter that drives it."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import BinaryIO, TypeVar

from .cursor import read_cursor
from .memory import Memory

_ADDRESS_MASK = (1 << 64) - 1

I = TypeVar("I", bound="Instruction")


class Instruction(ABC):
    """An instruction of some instruction set that can be decoded from a stream."""

    @abstractmethod
    def mnemonic(self) -> str:
        """Return the instruction's mnemonic."""

    @classmethod
    @abstractmethod
    def decode(cls: type[I], reader: BinaryIO) -> I:
        """Decode one instruction from ``reader``, raising on failure."""


@dataclass
class ProgramCounter:
    """A 64-bit program counter value."""

    value: int = 0

    def advance(self, amount: int) -> None:
        """Move the counter forward (or back, if negative), wrapping at 64 bits."""
        self.value = (self.value + amount) & _ADDRESS_MASK

    def decode(self, memory: Memory, instruction_type: type[I]) -> I:
        """Decode the instruction at the counter and move past the bytes consumed.

        The counter moves past whatever was read even when decoding fails.
        """
        reader = read_cursor(memory, self.value)
        try:
            return instruction_type.decode(reader)
        finally:
            self.value = reader.tell()