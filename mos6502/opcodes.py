"""Mapping between instruction definitions and opcodes."""

from __future__ import annotations

from typing import Iterator, Optional, Tuple

from .instruction import AddressingMode as M
from .instruction import Mnemonic as N

_MAPPINGS: Tuple[Tuple[N, M, int], ...] = (
    (N.ADC, M.IMMEDIATE, 0x69),
    (N.ADC, M.ZERO_PAGE, 0x65),
    (N.ADC, M.ZERO_PAGE_X, 0x75),
    (N.ADC, M.ABSOLUTE, 0x6D),
    (N.ADC, M.ABSOLUTE_X, 0x7D),
    (N.ADC, M.ABSOLUTE_Y, 0x79),
    (N.ADC, M.INDIRECT_INDEXED_X, 0x61),
    (N.ADC, M.INDIRECT_INDEXED_Y, 0x71),
    (N.AND, M.IMMEDIATE, 0x29),
    (N.AND, M.ZERO_PAGE, 0x25),
    (N.AND, M.ZERO_PAGE_X, 0x35),
    (N.AND, M.ABSOLUTE, 0x2D),
    (N.AND, M.ABSOLUTE_X, 0x3D),
    (N.AND, M.ABSOLUTE_Y, 0x39),
    (N.AND, M.INDIRECT_INDEXED_X, 0x21),
    (N.AND, M.INDIRECT_INDEXED_Y, 0x31),
    (N.ASL, M.ACCUMULATOR, 0x0A),
    (N.ASL, M.ZERO_PAGE, 0x06),
    (N.ASL, M.ZERO_PAGE_X, 0x16),
    (N.ASL, M.ABSOLUTE, 0x0E),
    (N.ASL, M.ABSOLUTE_X, 0x1E),
    (N.BCC, M.RELATIVE, 0x90),
    (N.BCS, M.RELATIVE, 0xB0),
    (N.BEQ, M.RELATIVE, 0xF0),
    (N.BIT, M.ZERO_PAGE, 0x24),
    (N.BIT, M.ABSOLUTE, 0x2C),
    (N.BMI, M.RELATIVE, 0x30),
    (N.BNE, M.RELATIVE, 0xD0),
    (N.BPL, M.RELATIVE, 0x10),
    (N.BRK, M.IMPLIED, 0x00),
    (N.BVC, M.RELATIVE, 0x50),
    (N.BVS, M.RELATIVE, 0x70),
    (N.CLC, M.IMPLIED, 0x18),
    (N.CLD, M.IMPLIED, 0xD8),
    (N.CLI, M.IMPLIED, 0x58),
    (N.CLV, M.IMPLIED, 0xB8),
    (N.CMP, M.IMMEDIATE, 0xC9),
    (N.CMP, M.ZERO_PAGE, 0xC5),
    (N.CMP, M.ZERO_PAGE_X, 0xD5),
    (N.CMP, M.ABSOLUTE, 0xCD),
    (N.CMP, M.ABSOLUTE_X, 0xDD),
    (N.CMP, M.ABSOLUTE_Y, 0xD9),
    (N.CMP, M.INDIRECT_INDEXED_X, 0xC1),
    (N.CMP, M.INDIRECT_INDEXED_Y, 0xD1),
    (N.CPX, M.IMMEDIATE, 0xE0),
    (N.CPX, M.ZERO_PAGE, 0xE4),
    (N.CPX, M.ABSOLUTE, 0xEC),
    (N.CPY, M.IMMEDIATE, 0xC0),
    (N.CPY, M.ZERO_PAGE, 0xC4),
    (N.CPY, M.ABSOLUTE, 0xCC),
    (N.DEC, M.ZERO_PAGE, 0xC6),
    (N.DEC, M.ZERO_PAGE_X, 0xD6),
    (N.DEC, M.ABSOLUTE, 0xCE),
    (N.DEC, M.ABSOLUTE_X, 0xDE),
    (N.DEX, M.IMPLIED, 0xCA),
    (N.DEY, M.IMPLIED, 0x88),
    (N.EOR, M.IMMEDIATE, 0x49),
    (N.EOR, M.ZERO_PAGE, 0x45),
    (N.EOR, M.ZERO_PAGE_X, 0x55),
    (N.EOR, M.ABSOLUTE, 0x4D),
    (N.EOR, M.ABSOLUTE_X, 0x5D),
    (N.EOR, M.ABSOLUTE_Y, 0x59),
    (N.EOR, M.INDIRECT_INDEXED_X, 0x41),
    (N.EOR, M.INDIRECT_INDEXED_Y, 0x51),
    (N.INC, M.ZERO_PAGE, 0xE6),
    (N.INC, M.ZERO_PAGE_X, 0xF6),
    (N.INC, M.ABSOLUTE, 0xEE),
    (N.INC, M.ABSOLUTE_X, 0xFE),
    (N.INX, M.IMPLIED, 0xE8),
    (N.INY, M.IMPLIED, 0xC8),
    (N.JMP, M.ABSOLUTE, 0x4C),
    (N.JMP, M.INDIRECT, 0x6C),
    (N.JSR, M.ABSOLUTE, 0x20),
    (N.LDA, M.IMMEDIATE, 0xA9),
    (N.LDA, M.ZERO_PAGE, 0xA5),
    (N.LDA, M.ZERO_PAGE_X, 0xB5),
    (N.LDA, M.ABSOLUTE, 0xAD),
    (N.LDA, M.ABSOLUTE_X, 0xBD),
    (N.LDA, M.ABSOLUTE_Y, 0xB9),
    (N.LDA, M.INDIRECT_INDEXED_X, 0xA1),
    (N.LDA, M.INDIRECT_INDEXED_Y, 0xB1),
    (N.LDX, M.IMMEDIATE, 0xA2),
    (N.LDX, M.ZERO_PAGE, 0xA6),
    (N.LDX, M.ZERO_PAGE_Y, 0xB6),
    (N.LDX, M.ABSOLUTE, 0xAE),
    (N.LDX, M.ABSOLUTE_Y, 0xBE),
    (N.LDY, M.IMMEDIATE, 0xA0),
    (N.LDY, M.ZERO_PAGE, 0xA4),
    (N.LDY, M.ZERO_PAGE_X, 0xB4),
    (N.LDY, M.ABSOLUTE, 0xAC),
    (N.LDY, M.ABSOLUTE_X, 0xBC),
    (N.LSR, M.ACCUMULATOR, 0x4A),
    (N.LSR, M.ZERO_PAGE, 0x46),
    (N.LSR, M.ZERO_PAGE_X, 0x56),
    (N.LSR, M.ABSOLUTE, 0x4E),
    (N.LSR, M.ABSOLUTE_X, 0x5E),
    (N.NOP, M.IMPLIED, 0xEA),
    (N.ORA, M.IMMEDIATE, 0x09),
    (N.ORA, M.ZERO_PAGE, 0x05),
    (N.ORA, M.ZERO_PAGE_X, 0x15),
    (N.ORA, M.ABSOLUTE, 0x0D),
    (N.ORA, M.ABSOLUTE_X, 0x1D),
    (N.ORA, M.ABSOLUTE_Y, 0x19),
    (N.ORA, M.INDIRECT_INDEXED_X, 0x01),
    (N.ORA, M.INDIRECT_INDEXED_Y, 0x11),
    (N.PHA, M.IMPLIED, 0x48),
    (N.PHP, M.IMPLIED, 0x08),
    (N.PLA, M.IMPLIED, 0x68),
    (N.PLP, M.IMPLIED, 0x28),
    (N.ROL, M.ACCUMULATOR, 0x2A),
    (N.ROL, M.ZERO_PAGE, 0x26),
    (N.ROL, M.ZERO_PAGE_X, 0x36),
    (N.ROL, M.ABSOLUTE, 0x2E),
    (N.ROL, M.ABSOLUTE_X, 0x3E),
    (N.ROR, M.ACCUMULATOR, 0x6A),
    (N.ROR, M.ZERO_PAGE, 0x66),
    (N.ROR, M.ZERO_PAGE_X, 0x76),
    (N.ROR, M.ABSOLUTE, 0x6E),
    (N.ROR, M.ABSOLUTE_X, 0x7E),
    (N.RTI, M.IMPLIED, 0x40),
    (N.RTS, M.IMPLIED, 0x60),
    (N.SBC, M.IMMEDIATE, 0xE9),
    (N.SBC, M.ZERO_PAGE, 0xE5),
    (N.SBC, M.ZERO_PAGE_X, 0xF5),
    (N.SBC, M.ABSOLUTE, 0xED),
    (N.SBC, M.ABSOLUTE_X, 0xFD),
    (N.SBC, M.ABSOLUTE_Y, 0xF9),
    (N.SBC, M.INDIRECT_INDEXED_X, 0xE1),
    (N.SBC, M.INDIRECT_INDEXED_Y, 0xF1),
    (N.SEC, M.IMPLIED, 0x38),
    (N.SED, M.IMPLIED, 0xF8),
    (N.SEI, M.IMPLIED, 0x78),
    (N.STA, M.ZERO_PAGE, 0x85),
    (N.STA, M.ZERO_PAGE_X, 0x95),
    (N.STA, M.ABSOLUTE, 0x8D),
    (N.STA, M.ABSOLUTE_X, 0x9D),
    (N.STA, M.ABSOLUTE_Y, 0x99),
    (N.STA, M.INDIRECT_INDEXED_X, 0x81),
    (N.STA, M.INDIRECT_INDEXED_Y, 0x91),
    (N.STX, M.ZERO_PAGE, 0x86),
    (N.STX, M.ZERO_PAGE_Y, 0x96),
    (N.STX, M.ABSOLUTE, 0x8E),
    (N.STY, M.ZERO_PAGE, 0x84),
    (N.STY, M.ZERO_PAGE_X, 0x94),
    (N.STY, M.ABSOLUTE, 0x8C),
    (N.TAX, M.IMPLIED, 0xAA),
    (N.TAY, M.IMPLIED, 0xA8),
    (N.TSX, M.IMPLIED, 0xBA),
    (N.TXA, M.IMPLIED, 0x8A),
    (N.TXS, M.IMPLIED, 0x9A),
    (N.TYA, M.IMPLIED, 0x98),
)


class OpcodeMapping:
    """Two-way lookup between (mnemonic, addressing mode) pairs and opcodes."""

    def __init__(self) -> None:
        self._forward = {(mnemonic, mode): opcode for mnemonic, mode, opcode in _MAPPINGS}
        self._reverse = {opcode: (mnemonic, mode) for mnemonic, mode, opcode in _MAPPINGS}

    def find_opcode(self, mnemonic: N, addr_mode: M) -> Optional[int]:
        """The opcode for the given instruction, or None if there is none."""
        return self._forward.get((mnemonic, addr_mode))

    def find_instruction(self, opcode: int) -> Optional[Tuple[N, M]]:
        """The (mnemonic, addressing mode) for the given opcode, or None."""
        return self._reverse.get(opcode)

    def __iter__(self) -> Iterator[Tuple[N, M, int]]:
        return iter(_MAPPINGS)

    def __len__(self) -> int:
        return len(self._forward)


OPCODE_MAPPING = OpcodeMapping()