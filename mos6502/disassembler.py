"""Decoding of machine code back into instructions."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from . import listing
from .instruction import (
    Absolute,
    AddressingMode,
    Immediate,
    Implied,
    Instruction,
    Mnemonic,
    Operand,
    Relative,
    ZeroPage,
)
from .opcodes import OPCODE_MAPPING

_WORD_MODES = frozenset(
    {
        AddressingMode.ABSOLUTE,
        AddressingMode.ABSOLUTE_X,
        AddressingMode.ABSOLUTE_Y,
        AddressingMode.INDIRECT,
    }
)
_ZERO_PAGE_MODES = frozenset(
    {
        AddressingMode.ZERO_PAGE,
        AddressingMode.ZERO_PAGE_X,
        AddressingMode.ZERO_PAGE_Y,
        AddressingMode.INDIRECT_INDEXED_X,
        AddressingMode.INDIRECT_INDEXED_Y,
    }
)
_NO_OPERAND_MODES = frozenset({AddressingMode.ACCUMULATOR, AddressingMode.IMPLIED})


class DisassemblyError(Exception):
    """The input is not valid machine code."""


def _operand_bytes(data: bytes, start: int, count: int, addr: int) -> bytes:
    chunk = data[start:start + count]
    if len(chunk) < count:
        raise DisassemblyError(
            f"Unexpected end of input in operand of instruction at address: {addr:#06x}"
        )
    return chunk


def _decode_operand(data: bytes, ix: int, mode: AddressingMode, addr: int) -> Operand:
    if mode in _NO_OPERAND_MODES:
        return Implied()
    if mode in _WORD_MODES:
        return Absolute(int.from_bytes(_operand_bytes(data, ix, 2, addr), "little"))
    byte = _operand_bytes(data, ix, 1, addr)[0]
    if mode in _ZERO_PAGE_MODES:
        return ZeroPage(byte)
    if mode is AddressingMode.RELATIVE:
        return Relative(byte - 0x100 if byte >= 0x80 else byte)
    if mode is AddressingMode.IMMEDIATE:
        return Immediate(byte)
    raise DisassemblyError(
        f"Invalid operand for address mode: '{mode.value}' at address: {addr:#06x}"
    )


def _decode_opcode(opcode: int, addr: int) -> Tuple[Mnemonic, AddressingMode]:
    found = OPCODE_MAPPING.find_instruction(opcode)
    if found is None:
        raise DisassemblyError(f"Invalid opcode: '{opcode:#04x}' at address: {addr:#06x}")
    return found


def disassemble_code(data: bytes) -> List[Instruction]:
    """Decode a sequence of bytes into instructions."""
    data = bytes(data)
    code: List[Instruction] = []
    ix = 0
    while ix < len(data):
        mnemonic, mode = _decode_opcode(data[ix], ix)
        operand = _decode_operand(data, ix + 1, mode, ix)
        ins = Instruction(mnemonic, mode, operand)
        code.append(ins)
        ix += ins.size()
    return code


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Disassemble a binary file and print its listing."""
    parser = argparse.ArgumentParser(description="Disassemble 6502 machine code")
    parser.add_argument("input", type=Path, help="Input file to disassemble")
    args = parser.parse_args(argv)

    try:
        data = args.input.read_bytes()
    except OSError as exc:
        print(f"Unable to read file: {exc}", file=sys.stderr)
        return 1

    try:
        instructions = disassemble_code(data)
    except DisassemblyError as exc:
        print(exc, file=sys.stderr)
        return 1

    print(listing.generate(0x0000, instructions))
    return 0