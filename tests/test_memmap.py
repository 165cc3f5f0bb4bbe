import io

import pytest

from remy.cart import Cartridge
from remy.memmap import MemoryMap, NoCartridgeError
from remy.memory import ErrorKind, MemoryAccessError
from remy.rom import PRG_BANK_SIZE, load_rom


def _cartridge(first_byte: int = 0x4C) -> Cartridge:
    header = b"NES\x1a" + bytes([1, 0]) + bytes(10)
    prg = bytes([first_byte]) + bytes(range(1, 256)) * (PRG_BANK_SIZE // 256)
    prg = prg[:PRG_BANK_SIZE]
    rom = load_rom(io.BytesIO(header + prg))
    return Cartridge.load(rom)


def test_length_is_full_address_space():
    assert len(MemoryMap()) == 0xFFFF


def test_ram_round_trip():
    mem = MemoryMap()
    mem.set_u8(0x0042, 42)
    assert mem.get_u8(0x0042) == 42


@pytest.mark.parametrize("mirror", [0x0842, 0x1042, 0x1842])
def test_ram_is_mirrored_every_2k(mirror):
    mem = MemoryMap()
    mem.set_u8(0x0042, 99)
    assert mem.get_u8(mirror) == 99


def test_write_to_mirror_reaches_base_ram():
    mem = MemoryMap()
    mem.set_u8(0x1F00, 7)
    assert mem.get_u8(0x0700) == 7


@pytest.mark.parametrize("addr", [0x2000, 0x2007, 0x3FFF, 0x4000, 0x41FF])
def test_register_ranges_read_zero_and_ignore_writes(addr):
    mem = MemoryMap()
    mem.set_u8(addr, 0xAB)
    assert mem.get_u8(addr) == 0


def test_cartridge_read_without_cartridge_fails():
    mem = MemoryMap()
    with pytest.raises(MemoryAccessError) as info:
        mem.get_u8(0x8000)
    assert info.value.kind is ErrorKind.MEMORY_NOT_PRESENT


def test_cartridge_write_without_cartridge_fails():
    mem = MemoryMap()
    with pytest.raises(MemoryAccessError) as info:
        mem.set_u8(0x6000, 1)
    assert info.value.kind is ErrorKind.MEMORY_NOT_PRESENT


def test_loaded_cartridge_prg_ram_round_trip():
    mem = MemoryMap()
    mem.load(_cartridge())
    mem.set_u8(0x6004, 0x55)
    assert mem.get_u8(0x6004) == 0x55


def test_loaded_cartridge_rejects_rom_writes():
    mem = MemoryMap()
    mem.load(_cartridge())
    with pytest.raises(MemoryAccessError) as info:
        mem.set_u8(0x8000, 1)
    assert info.value.kind is ErrorKind.MEMORY_NOT_WRITABLE


def test_eject_returns_cartridge_and_unloads():
    mem = MemoryMap()
    cart = _cartridge()
    mem.load(cart)
    assert mem.eject() is cart
    assert mem.cartridge is None
    with pytest.raises(MemoryAccessError):
        mem.get_u8(0x8000)


def test_eject_without_cartridge_raises():
    with pytest.raises(NoCartridgeError):
        MemoryMap().eject()


def test_load_replaces_previous_cartridge():
    mem = MemoryMap()
    mem.load(_cartridge(0x11))
    mem.load(_cartridge(0x22))
    assert mem.get_u8(0x8000) == 0x22


def test_multibyte_read_from_cartridge():
    mem = MemoryMap()
    mem.load(_cartridge(0x4C))
    assert mem.get(0x8000, 3) == bytes([0x4C, 1, 2])