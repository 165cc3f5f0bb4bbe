# remy

Building blocks for emulating the Nintendo Entertainment System: byte-addressable
memories, NES ROM loading, the NROM cartridge mapper and the CPU-visible memory
map.

## Modules

- `remy.memory`: the abstract `Memory` base class. Subclasses provide
  `__len__`, `get_u8` and `set_u8`. The base class builds `get(addr, length)`,
  `set(addr, data)` and the 16/32/64-bit signed and unsigned accessors
  (`get_u16`, `set_i32`, ...) on top of them. Each of these accessors takes a
  `byteorder` of `"little"` or `"big"`. A failed access raises
  `MemoryAccessError`, and its `kind` is an `ErrorKind` (`OUT_OF_BOUNDS`,
  `MEMORY_NOT_READABLE`, `MEMORY_NOT_WRITABLE`, `MEMORY_NOT_PRESENT`, `OTHER`).
- `remy.banks`: the concrete memories.
  - `Fixed(size)` is a zero-filled buffer. `Fixed.from_contents(data)` builds one from existing bytes.
  - `Empty` refuses every access.
  - `Mirrored(memory, size)` repeats `memory` through `size` addresses.
  - `read_only(inner)` and `write_only(inner)` wrap another memory and block writes or reads.
- `remy.virtual`: `Virtual` maps several memories at base addresses with
  `attach(base, memory)`. Overlapping attachments raise `MemoryOverlapError`.
  An address that no segment covers raises `MemoryAccessError`. An access that
  crosses from one segment into the next works byte by byte. `segments()` lists
  the attachments in address order.
- `remy.cursor`: `read_cursor(memory, start)` and `cursor(memory, start)`
  return seekable binary streams over a memory. `cursor` also allows writes.
  A failed memory access inside the stream raises `OSError`.
- `remy.pc`: `ProgramCounter` holds a 64-bit value. `advance(amount)` moves it
  and wraps at 64 bits. `decode(memory, instruction_type)` decodes one instance
  of an `Instruction` subclass at the counter and moves the counter past the
  bytes it read, even if decoding fails.
- `remy.rom`: `load_rom(stream)` reads iNES, archaic iNES and NES 2.0 images
  into a `Rom`, which holds a `RomHeader` and the raw `prg` and `chr` data.
  A bad header raises `InvalidHeaderError` or `InvalidSignatureError`. Both
  derive from `RomError`.
- `remy.cart`: `Cartridge.load(rom)` picks a mapper for the ROM. Only mapper 0
  (`NRom`) is supported. Any other mapper raises `UnknownMapperError`.
  `NRom` provides 8 KB of PRG RAM at $6000-$7FFF and read-only PRG ROM from
  $8000, each mirrored to fill its range.
- `remy.memmap`: `MemoryMap` is the NES address space. It has 2 KB of RAM
  mirrored through $0000-$1FFF. PPU and APU/IO registers ($2000-$41FF) read as
  zero and ignore writes. Addresses from $4200 up go to the loaded cartridge.
  `load(cart)` plugs in a cartridge. `eject()` removes it and returns it, and
  raises `NoCartridgeError` if none is loaded.
- `remy.romdump`: the `romdump` command.

## Installing

```
pip install .
```

## Inspecting a ROM

```
romdump path/to/game.nes
```

The command prints the header fields: version, TV system, bank counts, RAM
sizes, mapper, submapper and flags. It then prints the total PRG and CHR ROM
sizes. The same text is available from `remy.romdump.describe_rom(rom)`.

## Using the library

```python
from remy.banks import Fixed, Mirrored
from remy.virtual import Virtual
from remy.rom import load_rom
from remy.cart import Cartridge
from remy.memmap import MemoryMap

space = Virtual()
space.attach(0x0000, Mirrored(Fixed(0x0800), 0x2000))
space.set_u16(0x0010, 0x1234, "little")
assert space.get_u16(0x0010, "little") == 0x1234

with open("game.nes", "rb") as stream:
    rom = load_rom(stream)

memory_map = MemoryMap()
memory_map.load(Cartridge.load(rom))
reset_vector = memory_map.get_u16(0xFFFC, "little")
```

## What this package does not do

There is no CPU, PPU or APU emulation, so the package cannot run a ROM. It
contains no concrete instruction set: `Instruction` is only an abstract base
class, and to use `ProgramCounter.decode` you must write your own subclass.
PPU and APU/IO registers in `MemoryMap` are placeholders that read as zero.
The only supported cartridge mapper is NROM.

## Running the tests

```
pip install ".[test]"
pytest
```