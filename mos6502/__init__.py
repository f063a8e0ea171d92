"""MOS 6502 syntax tree, symbol resolution, code generation, disassembly and listings."""

__version__ = "0.1.0"