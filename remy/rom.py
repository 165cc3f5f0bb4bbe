"""Loading of NES ROM images in the iNES and NES 2.0 formats."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import BinaryIO

HEADER_SIZE = 16
PRG_BANK_SIZE = 16384
CHR_BANK_SIZE = 8192

_SIGNATURE = b"NES\x1a"


class RomError(Exception):
    """Base class for failures while reading a ROM image."""


class InvalidHeaderError(RomError):
    """The ROM header is missing or truncated."""

    def __init__(self, message: str = "ROM file header is invalid"):
        super().__init__(message)


class InvalidSignatureError(RomError):
    """The ROM header does not begin with the iNES signature."""

    def __init__(self, message: str = "ROM file signature is invalid"):
        super().__init__(message)


class EndOfFileDuringBankError(RomError):
    """The ROM file ended in the middle of a bank."""

    def __init__(self, message: str = "unexpected end of file while reading ROM bank"):
        super().__init__(message)


class TvSystem(enum.Enum):
    """The television system a ROM expects."""

    UNKNOWN = "Unknown"
    NTSC = "NTSC"
    PAL = "PAL"
    DUAL = "Dual"


class Version(enum.Enum):
    """The header format version of a ROM."""

    ARCHAIC_INES = "ArchaicINES"
    INES = "INES"
    NES2 = "NES2"


def _full_size(nibble: int) -> int:
    return 0 if nibble == 0 else 2 ** (6 + nibble)


@dataclass(frozen=True)
class RamSize:
    """The size of a RAM bank, split by how much of it is battery backed."""

    battery_backed: int = 0
    total: int = 0

    @classmethod
    def empty(cls) -> "RamSize":
        """Return a size describing no RAM at all."""
        return cls(0, 0)

    @classmethod
    def from_header_byte(cls, val: int, version: Version) -> "RamSize":
        """Decode a RAM size byte of the header for the given version."""
        if version is not Version.NES2:
            return cls.empty()
        battery = _full_size((val & 0xF0) >> 4)
        other = _full_size(val & 0x0F)
        return cls(battery_backed=battery, total=battery + other)


@dataclass(frozen=True)
class CartridgeInfo:
    """Describes the cartridge hardware to emulate."""

    mapper: int
    submapper: int
    bus_conflicts: bool


@dataclass(frozen=True)
class RomHeader:
    """The decoded values of an iNES / NES 2.0 header."""

    prg_rom_size: int
    chr_rom_size: int
    prg_ram_size: RamSize
    chr_ram_size: RamSize
    cartridge: CartridgeInfo
    version: Version
    vertical_arrangement: bool
    four_screen_vram: bool
    sram_battery_backed: bool
    sram_present: bool
    trainer_present: bool
    vs_unisystem: bool
    playchoice_10: bool
    tv_system: TvSystem


@dataclass
class Rom:
    """A loaded ROM: its header plus the raw PRG and CHR bank data."""

    header: RomHeader
    prg: bytes
    chr: bytes

    def __repr__(self) -> str:
        return f"Rom(header={self.header!r}, prg={len(self.prg)}, chr={len(self.chr)})"


def _read_up_to(stream: BinaryIO, size: int) -> bytes:
    chunks = []
    remaining = size
    while remaining > 0:
        chunk = stream.read(remaining)
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def _read_banks(stream: BinaryIO, bank_count: int, bank_size: int) -> bytes:
    return _read_up_to(stream, bank_count * bank_size)


def _detect_version(header: bytes) -> Version:
    if header[7] & 0x0C == 0x08:
        return Version.NES2
    if not any(header[12:15]):
        return Version.ARCHAIC_INES
    return Version.INES


def _tv_system(header: bytes, version: Version) -> TvSystem:
    if version is Version.ARCHAIC_INES:
        return TvSystem.UNKNOWN
    if version is Version.INES:
        return TvSystem.PAL if header[9] & 0x01 else TvSystem.NTSC
    if header[12] & 0x02:
        return TvSystem.DUAL
    if header[12] & 0x01:
        return TvSystem.PAL
    return TvSystem.NTSC


def _read_header(stream: BinaryIO) -> RomHeader:
    header = _read_up_to(stream, HEADER_SIZE)
    if len(header) != HEADER_SIZE:
        raise InvalidHeaderError()
    if header[:4] != _SIGNATURE:
        raise InvalidSignatureError()

    version = _detect_version(header)

    if version is Version.NES2:
        prg_size = header[4] | (header[9] & 0x0F)
        chr_size = header[5] | ((header[9] & 0xF0) >> 4)
    else:
        prg_size = header[4]
        chr_size = header[5]

    mapper = (header[6] & 0xF0) >> 4
    submapper = 0
    if version is Version.INES:
        mapper |= header[7] & 0xF0
    elif version is Version.NES2:
        mapper |= (header[8] & 0x0F) << 8
        submapper = ((header[8] & 0xF0) << 4) & 0xFF

    return RomHeader(
        prg_rom_size=prg_size,
        chr_rom_size=chr_size,
        prg_ram_size=RamSize.from_header_byte(header[10], version),
        chr_ram_size=RamSize.from_header_byte(header[11], version),
        cartridge=CartridgeInfo(mapper, submapper, bool(header[10] & 0x20)),
        version=version,
        vertical_arrangement=(header[6] & 0x01) == 0,
        four_screen_vram=bool(header[6] & 0x08),
        sram_battery_backed=bool(header[6] & 0x02),
        sram_present=bool(header[10] & 0x10),
        trainer_present=bool(header[6] & 0x04),
        vs_unisystem=bool(header[7] & 0x01),
        playchoice_10=bool(header[7] & 0x02),
        tv_system=_tv_system(header, version),
    )


def load_rom(stream: BinaryIO) -> Rom:
    """Read an iNES / NES 2.0 ROM image from a binary stream."""
    header = _read_header(stream)
    prg = _read_banks(stream, header.prg_rom_size, PRG_BANK_SIZE)
    chr_data = _read_banks(stream, header.chr_rom_size, CHR_BANK_SIZE)
    return Rom(header=header, prg=prg, chr=chr_data)