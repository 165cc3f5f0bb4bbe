"""Memory abstractions, NES ROM loading, the NROM cartridge and the NES memory map."""

__version__ = "0.0.1"