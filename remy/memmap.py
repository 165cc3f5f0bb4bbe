"""The CPU-visible memory map of the NES."""

from __future__ import annotations

import logging

from .banks import Fixed
from .cart import Cartridge
from .memory import ErrorKind, Memory, MemoryAccessError

_log = logging.getLogger(__name__)

_RAM_SIZE = 0x0800
_RAM_END = 0x2000
_PPU_END = 0x4000
_APU_IO_END = 0x4200
_PPU_REGISTER_COUNT = 0x0008


class NoCartridgeError(RuntimeError):
    """Raised when a cartridge is ejected but none is loaded."""


class MemoryMap(Memory):
    """The NES address space: internal RAM, PPU and APU/IO registers, cartridge.

    The 2KB of internal RAM repeats through $0000-$1FFF. PPU registers
    ($2000-$3FFF) and APU/IO registers ($4000-$41FF) read as zero and ignore
    writes. Everything from $4200 up goes to the loaded cartridge.
    """

    def __init__(self) -> None:
        self._ram = Fixed(_RAM_SIZE)
        self._cart: Cartridge | None = None

    @property
    def cartridge(self) -> Cartridge | None:
        """The cartridge currently loaded, if any."""
        return self._cart

    def load(self, cart: Cartridge) -> None:
        """Load ``cart``, replacing any cartridge already loaded."""
        _log.info("Loaded %s cartridge", cart.mapper.name())
        self._cart = cart

    def eject(self) -> Cartridge:
        """Remove the loaded cartridge and return it."""
        if self._cart is None:
            raise NoCartridgeError(
                "Can't eject cartridge, there is no cartridge loaded!"
            )
        old_cart, self._cart = self._cart, None
        _log.info("Ejecting %s cartridge", old_cart.mapper.name())
        return old_cart

    def __len__(self) -> int:
        return 0xFFFF

    def get_u8(self, addr: int) -> int:
        if addr < _RAM_END:
            eaddr = addr % _RAM_SIZE
            _log.debug("read $%04X -> RAM $%04X", addr, eaddr)
            return self._ram.get_u8(eaddr)
        if addr < _PPU_END:
            eaddr = (addr - _RAM_END) % _PPU_REGISTER_COUNT
            _log.debug("read $%04X -> PPU $%04X", addr, eaddr)
            return 0
        if addr < _APU_IO_END:
            _log.debug("read $%04X -> APU/IO $%04X", addr, addr - _PPU_END)
            return 0
        if self._cart is None:
            _log.error("read from cartridge at $%04X with no cartridge", addr)
            raise MemoryAccessError(
                ErrorKind.MEMORY_NOT_PRESENT,
                "Attempted to read from cartridge memory, but there is no "
                "cartridge present",
            )
        return self._cart.mapper.prg().get_u8(addr)

    def set_u8(self, addr: int, val: int) -> None:
        if addr < _RAM_END:
            eaddr = addr % _RAM_SIZE
            _log.debug("write $%04X -> RAM $%04X", addr, eaddr)
            self._ram.set_u8(eaddr, val)
            return
        if addr < _PPU_END:
            eaddr = (addr - _RAM_END) % _PPU_REGISTER_COUNT
            _log.debug("write $%04X -> PPU $%04X", addr, eaddr)
            return
        if addr < _APU_IO_END:
            _log.debug("write $%04X -> APU/IO $%04X", addr, addr - _PPU_END)
            return
        if self._cart is None:
            _log.error("write to cartridge at $%04X with no cartridge", addr)
            raise MemoryAccessError(
                ErrorKind.MEMORY_NOT_PRESENT,
                "Attempted to write to cartridge memory, but there is no "
                "cartridge present",
            )
        self._cart.mapper.prg().set_u8(addr, val)