"""Machine code generation from a resolved syntax tree."""

from __future__ import annotations

from typing import List

from .ast import AST, Origin
from .instruction import (
    Absolute,
    ConstantRef,
    Immediate,
    Implied,
    Instruction,
    LabelRef,
    Relative,
    ZeroPage,
)
from .opcodes import OPCODE_MAPPING

_MAX_PROGRAM_SIZE = 0xFFFF


class CodeGenError(Exception):
    """Base class for code generation errors."""


def _describe(ins: Instruction) -> str:
    try:
        return str(ins)
    except (ValueError, TypeError):
        return repr(ins)


class InvalidOpcodeError(CodeGenError):
    """No opcode exists for the instruction's mnemonic and addressing mode."""

    def __init__(self, instruction: Instruction) -> None:
        super().__init__(f"Invalid opcode: {_describe(instruction)}")
        self.instruction = instruction


class ProgramOverflowError(CodeGenError):
    """The generated program does not fit in memory."""

    def __init__(self) -> None:
        super().__init__("Program too large")


class OrgDirectiveOrderError(CodeGenError):
    """``.org`` directives are not in ascending order."""

    def __init__(self, address: int) -> None:
        super().__init__(
            f".org directives not specified in ascending order, address: {address}"
        )
        self.address = address


def _verify_org_directives(ast: AST) -> None:
    previous = 0
    for node in ast:
        if isinstance(node, Origin):
            if node.address < previous:
                raise OrgDirectiveOrderError(node.address)
            previous = node.address


def instruction_to_bytes(ins: Instruction) -> bytes:
    """Encode a single resolved instruction as machine code."""
    opcode = OPCODE_MAPPING.find_opcode(ins.mnemonic, ins.addr_mode)
    if opcode is None:
        raise InvalidOpcodeError(ins)

    match ins.operand:
        case Immediate(value=value):
            operand = bytes([value])
        case Absolute(address=address):
            operand = address.to_bytes(2, "little")
        case ZeroPage(address=address):
            operand = bytes([address])
        case Relative(offset=offset):
            operand = bytes([offset & 0xFF])
        case Implied():
            operand = b""
        case LabelRef(name=name):
            raise CodeGenError(f"Label should have been resolved to an address: {name}")
        case ConstantRef(name=name):
            raise CodeGenError(f"Constant should have been resolved to its value: {name}")
        case other:
            raise TypeError(f"Unknown operand: {other!r}")

    return bytes([opcode]) + operand


def generate(ast: AST) -> bytes:
    """Compile a resolved syntax tree to machine code.

    Labels and constants used by instructions must already have been replaced
    with their addresses and values.
    """
    _verify_org_directives(ast)

    out = bytearray()
    for node in ast:
        if isinstance(node, Instruction):
            out += instruction_to_bytes(node)
        elif isinstance(node, Origin):
            # Resize to the origin address: pad with zeros, or cut back.
            del out[node.address:]
            out.extend(bytes(node.address - len(out)))

    if len(out) > _MAX_PROGRAM_SIZE:
        raise ProgramOverflowError()
    return bytes(out)


__all__: List[str] = [
    "CodeGenError",
    "InvalidOpcodeError",
    "ProgramOverflowError",
    "OrgDirectiveOrderError",
    "instruction_to_bytes",
    "generate",
]