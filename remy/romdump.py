"""Command that prints the header and sizes of an NES ROM file."""

from __future__ import annotations

import sys

from .rom import Rom, RomError, load_rom


def _format_number(value: float) -> str:
    if value.is_integer():
        return str(int(value))
    return repr(value)


def format_size(size: int) -> str:
    """Render a byte count in bytes, KB or MB."""
    if size < 1024:
        return f"{size} bytes"
    if size < 1024 * 1024:
        return f"{_format_number(size / 1024)} KB"
    return f"{_format_number(size / (1024 * 1024))} MB"


def describe_rom(rom: Rom) -> str:
    """Return a human-readable description of ``rom``."""
    header = rom.header
    if not header.sram_present:
        sram = "None"
    elif header.sram_battery_backed:
        sram = "Battery-Backed"
    else:
        sram = "Present"

    flags = [
        ("      Bus Conflicts?", header.cartridge.bus_conflicts),
        ("    Use Vertical Arrangement?", header.vertical_arrangement),
        ("    Four-Screen VRAM?", header.four_screen_vram),
    ]
    trailing_flags = [
        ("    Trainer Present?", header.trainer_present),
        ("    Designed for Vs. Unisystem?", header.vs_unisystem),
        ("    Designed for PlayChoice-10?", header.playchoice_10),
    ]

    lines = [
        f"{header.version.value} ROM",
        "  Header:",
        f"    TV System: {header.tv_system.value}",
        f"    PRG ROM Banks: {header.prg_rom_size}",
        f"    CHR ROM Banks: {header.chr_rom_size}",
        f"    PRG RAM Size: {header.prg_ram_size.total} bytes "
        f"({header.prg_ram_size.battery_backed} bytes of which battery backed)",
        f"    CHR RAM Size: {header.chr_ram_size.total} bytes "
        f"({header.chr_ram_size.battery_backed} bytes of which battery backed)",
        "    Cartridge Info:",
        f"      Mapper: {header.cartridge.mapper}",
        f"      Submapper: {header.cartridge.submapper}",
    ]
    lines.extend(f"{label}: {str(value).lower()}" for label, value in flags)
    lines.append(f"    SRAM: {sram}")
    lines.extend(f"{label}: {str(value).lower()}" for label, value in trailing_flags)
    lines.extend(
        [
            "",
            "  Memory:",
            f"    Total PRG ROM: {format_size(len(rom.prg))}",
            f"    Total CHR ROM: {format_size(len(rom.chr))}",
        ]
    )
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Print a description of the ROM file named in ``argv``."""
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print("usage: romdump [path to ROM file]")
        return 0

    rom_path = args[0]
    print(f"Loading ROM: {rom_path}")
    try:
        with open(rom_path, "rb") as stream:
            rom = load_rom(stream)
    except OSError as err:
        print(f"failed to open ROM file: {err}", file=sys.stderr)
        return 1
    except RomError as err:
        print(f"failed to load ROM file: {err}", file=sys.stderr)
        return 1

    print(describe_rom(rom))
    return 0


if __name__ == "__main__":
    sys.exit(main())