"""Cartridge hardware: mappers and the cartridge that holds one."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable

from .banks import Empty, Fixed
from .memory import ErrorKind, Memory, MemoryAccessError
from .rom import Rom, RomHeader

_log = logging.getLogger(__name__)


class UnknownMapperError(Exception):
    """Raised when a ROM asks for a mapper that is not emulated."""

    def __init__(self, mapper: int, submapper: int):
        super().__init__(f"unknown mapper {mapper}.{submapper}")
        self.mapper = mapper
        self.submapper = submapper


class Mapper(ABC):
    """Cartridge hardware that exposes PRG and CHR memory."""

    @abstractmethod
    def name(self) -> str:
        """Return the mapper's name."""

    @abstractmethod
    def prg(self) -> Memory:
        """Return the memory holding the active PRG banks."""

    @abstractmethod
    def chr(self) -> Memory:
        """Return the memory holding the active CHR banks."""


class NRomPrg(Memory):
    """The PRG address space of an NROM cartridge ($6000-$FFFF).

    RAM at $6000-$7FFF and ROM from $8000 are each mirrored as needed.
    """

    def __init__(self, ram_size: int, rom: Iterable[int]):
        self._ram = Fixed(ram_size)
        self._rom = Fixed.from_contents(rom)

    def __len__(self) -> int:
        return 0xA000

    def get_u8(self, addr: int) -> int:
        if addr < 0x6000:
            _log.error("read below NROM range at $%04X", addr)
            raise MemoryAccessError(
                ErrorKind.OUT_OF_BOUNDS,
                "memory access out of range addressable on NROM cartridge",
                f"${addr:4X} is below the addressable range of 0x6000-0xFFFF",
            )
        if addr < 0x8000:
            eaddr = (addr - 0x6000) % len(self._ram)
            _log.debug("read $%04X -> RAM $%04X", addr, eaddr)
            return self._ram.get_u8(eaddr)
        eaddr = (addr - 0x8000) % len(self._rom)
        _log.debug("read $%04X -> ROM $%04X", addr, eaddr)
        return self._rom.get_u8(eaddr)

    def set_u8(self, addr: int, val: int) -> None:
        if addr < 0x6000:
            _log.error("write below NROM range at $%04X", addr)
            raise MemoryAccessError(
                ErrorKind.OUT_OF_BOUNDS,
                "memory access out of range addressable on NROM cartridge",
                f"${addr:4X} is below the addressable range on NROM cartridge",
            )
        if addr < 0x8000:
            eaddr = (addr - 0x6000) % len(self._ram)
            _log.debug("write $%04X -> RAM $%04X", addr, eaddr)
            self._ram.set_u8(eaddr, val)
            return
        _log.error("write to NROM PRG ROM at $%04X", addr)
        raise MemoryAccessError(
            ErrorKind.MEMORY_NOT_WRITABLE,
            "cannot write to cartridge PRG ROM",
            f"${addr:4X} is in the read-only memory on NROM cartridge",
        )


class NRom(Mapper):
    """Mapper 0: fixed PRG ROM with optional PRG RAM and no CHR banking."""

    def __init__(self, ram_size: int, rom: Iterable[int]):
        self._prg = NRomPrg(ram_size, rom)
        self._chr = Empty()

    def name(self) -> str:
        return "NRom"

    def prg(self) -> Memory:
        return self._prg

    def chr(self) -> Memory:
        return self._chr


@dataclass
class Cartridge:
    """A cartridge ready to be plugged into the system."""

    header: RomHeader
    mapper: Mapper

    @classmethod
    def load(cls, rom: Rom) -> "Cartridge":
        """Build a cartridge from a loaded ROM, choosing its mapper."""
        info = rom.header.cartridge
        if info.mapper == 0:
            mapper: Mapper = NRom(0x2000, rom.prg)
        else:
            _log.error("unknown mapper %d.%d", info.mapper, info.submapper)
            raise UnknownMapperError(info.mapper, info.submapper)
        _log.info(
            "loaded mapper %d.%d %s", info.mapper, info.submapper, mapper.name()
        )
        return cls(header=rom.header, mapper=mapper)