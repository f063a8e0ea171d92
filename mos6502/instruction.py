"""CPU instructions: mnemonics, addressing modes and operands."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union


class AddressingMode(enum.Enum):
    """How an instruction interprets its operand."""

    ABSOLUTE = "Absolute"
    ZERO_PAGE = "ZeroPage"
    ZERO_PAGE_X = "ZeroPageX"
    ZERO_PAGE_Y = "ZeroPageY"
    ABSOLUTE_X = "AbsoluteX"
    ABSOLUTE_Y = "AbsoluteY"
    RELATIVE = "Relative"
    INDIRECT = "Indirect"
    INDIRECT_INDEXED_X = "IndirectIndexedX"
    INDIRECT_INDEXED_Y = "IndirectIndexedY"
    IMMEDIATE = "Immediate"
    ACCUMULATOR = "Accumulator"
    IMPLIED = "Implied"
    # Used while parsing, before the size of a constant is known.
    CONSTANT = "Constant"


class Mnemonic(enum.Enum):
    """The operation performed by an instruction.

    ``Mnemonic("LDA")`` parses a mnemonic and raises ``ValueError`` for an
    unknown one.
    """

    ADC = "ADC"
    AND = "AND"
    ASL = "ASL"
    BCC = "BCC"
    BCS = "BCS"
    BEQ = "BEQ"
    BIT = "BIT"
    BMI = "BMI"
    BNE = "BNE"
    BPL = "BPL"
    BRK = "BRK"
    BVC = "BVC"
    BVS = "BVS"
    CLC = "CLC"
    CLD = "CLD"
    CLI = "CLI"
    CLV = "CLV"
    CMP = "CMP"
    CPX = "CPX"
    CPY = "CPY"
    DEC = "DEC"
    DEX = "DEX"
    DEY = "DEY"
    EOR = "EOR"
    INC = "INC"
    INX = "INX"
    INY = "INY"
    JMP = "JMP"
    JSR = "JSR"
    LDA = "LDA"
    LDX = "LDX"
    LDY = "LDY"
    LSR = "LSR"
    NOP = "NOP"
    ORA = "ORA"
    PHA = "PHA"
    PHP = "PHP"
    PLA = "PLA"
    PLP = "PLP"
    ROL = "ROL"
    ROR = "ROR"
    RTI = "RTI"
    RTS = "RTS"
    SBC = "SBC"
    SEC = "SEC"
    SED = "SED"
    SEI = "SEI"
    STA = "STA"
    STX = "STX"
    STY = "STY"
    TAX = "TAX"
    TAY = "TAY"
    TSX = "TSX"
    TXA = "TXA"
    TXS = "TXS"
    TYA = "TYA"

    def is_jumping_instruction(self) -> bool:
        return self in _JUMPING

    def is_branching_instruction(self) -> bool:
        return self in _BRANCHING

    def has_implied_addressing_mode(self) -> bool:
        return self in _IMPLIED

    def has_accumulator_addressing_mode(self) -> bool:
        return self in _ACCUMULATOR

    def __str__(self) -> str:
        return self.name


_JUMPING = frozenset({Mnemonic.JMP, Mnemonic.JSR})

_BRANCHING = frozenset(
    {
        Mnemonic.BCC,
        Mnemonic.BCS,
        Mnemonic.BEQ,
        Mnemonic.BMI,
        Mnemonic.BNE,
        Mnemonic.BPL,
        Mnemonic.BVC,
        Mnemonic.BVS,
    }
)

_IMPLIED = frozenset(
    {
        Mnemonic.BRK,
        Mnemonic.CLC,
        Mnemonic.CLD,
        Mnemonic.CLI,
        Mnemonic.CLV,
        Mnemonic.DEX,
        Mnemonic.DEY,
        Mnemonic.INX,
        Mnemonic.INY,
        Mnemonic.NOP,
        Mnemonic.PHA,
        Mnemonic.PHP,
        Mnemonic.PLA,
        Mnemonic.PLP,
        Mnemonic.RTI,
        Mnemonic.RTS,
        Mnemonic.SEC,
        Mnemonic.SED,
        Mnemonic.SEI,
        Mnemonic.TAX,
        Mnemonic.TAY,
        Mnemonic.TSX,
        Mnemonic.TXA,
        Mnemonic.TXS,
        Mnemonic.TYA,
    }
)

_ACCUMULATOR = frozenset({Mnemonic.ASL, Mnemonic.LSR, Mnemonic.ROL, Mnemonic.ROR})


def _check_range(kind: str, value: int, low: int, high: int) -> None:
    if not low <= value <= high:
        raise ValueError(f"{kind} value {value} out of range {low}..{high}")


@dataclass(frozen=True)
class Immediate:
    """A literal byte value."""

    value: int

    def __post_init__(self) -> None:
        _check_range("Immediate", self.value, 0, 0xFF)


@dataclass(frozen=True)
class Absolute:
    """A 16-bit address."""

    address: int

    def __post_init__(self) -> None:
        _check_range("Absolute", self.address, 0, 0xFFFF)


@dataclass(frozen=True)
class ZeroPage:
    """An 8-bit address in the zero page."""

    address: int

    def __post_init__(self) -> None:
        _check_range("ZeroPage", self.address, 0, 0xFF)


@dataclass(frozen=True)
class Relative:
    """A signed branch offset."""

    offset: int

    def __post_init__(self) -> None:
        _check_range("Relative", self.offset, -128, 127)


@dataclass(frozen=True)
class LabelRef:
    """A reference to a label, resolved to an address during assembly."""

    name: str


@dataclass(frozen=True)
class ConstantRef:
    """A reference to a constant, resolved to its value during assembly."""

    name: str


@dataclass(frozen=True)
class Implied:
    """No operand: covers both the implied and accumulator modes."""


Operand = Union[Immediate, Absolute, ZeroPage, Relative, LabelRef, ConstantRef, Implied]


@dataclass
class Instruction:
    """A CPU instruction with its addressing mode and operand."""

    mnemonic: Mnemonic
    addr_mode: AddressingMode
    operand: Operand

    def size(self) -> int:
        """Size of opcode plus operand in bytes."""
        match self.operand:
            case Immediate() | ZeroPage() | Relative():
                return 2
            case Absolute():
                return 3
            case Implied():
                return 1
            case LabelRef() | ConstantRef():
                if self.addr_mode is AddressingMode.ABSOLUTE:
                    return 3
                if self.addr_mode in (AddressingMode.RELATIVE, AddressingMode.IMMEDIATE):
                    return 2
        raise ValueError(f"Cannot calculate size for: {self!r}")

    def __str__(self) -> str:
        m = self.mnemonic
        mode = self.addr_mode
        if mode is AddressingMode.IMPLIED:
            return str(m)
        match self.operand:
            case Immediate(value=value):
                if mode is AddressingMode.ZERO_PAGE:
                    return f"{m} ${value:02x}"
                return f"{m} #${value:02x}"
            case Absolute(address=address):
                formats = {
                    AddressingMode.ABSOLUTE: "{m} ${a:04x}",
                    AddressingMode.ABSOLUTE_X: "{m} ${a:04x},X",
                    AddressingMode.ABSOLUTE_Y: "{m} ${a:04x},Y",
                    AddressingMode.INDIRECT: "{m} (${a:04x})",
                }
                if mode not in formats:
                    raise ValueError("Invalid addressing mode for absolute address")
                return formats[mode].format(m=m, a=address)
            case ZeroPage(address=address):
                formats = {
                    AddressingMode.ZERO_PAGE: "{m} ${a:02x}",
                    AddressingMode.ZERO_PAGE_X: "{m} ${a:02x},X",
                    AddressingMode.ZERO_PAGE_Y: "{m} ${a:02x},Y",
                    AddressingMode.INDIRECT_INDEXED_X: "{m} (${a:02x},X)",
                    AddressingMode.INDIRECT_INDEXED_Y: "{m} (${a:02x}),Y",
                }
                if mode not in formats:
                    raise ValueError("Invalid addressing mode for zero page address")
                return formats[mode].format(m=m, a=address)
            case Relative(offset=offset):
                return f"{m} ${offset & 0xFF:02x}"
            case LabelRef(name=name):
                return f"{m} {name}"
            case Implied():
                return str(m)
            case ConstantRef(name=name):
                formats = {
                    AddressingMode.ABSOLUTE: "{m} {c}",
                    AddressingMode.ZERO_PAGE: "{m} {c}",
                    AddressingMode.ZERO_PAGE_X: "{m} {c},X",
                    AddressingMode.ZERO_PAGE_Y: "{m} {c},Y",
                    AddressingMode.ABSOLUTE_X: "{m} {c},X",
                    AddressingMode.ABSOLUTE_Y: "{m} {c},Y",
                    AddressingMode.INDIRECT: "{m} ({c})",
                    AddressingMode.INDIRECT_INDEXED_X: "{m} ({c},X)",
                    AddressingMode.INDIRECT_INDEXED_Y: "{m} ({c}),Y",
                    AddressingMode.IMMEDIATE: "{m} #{c}",
                }
                if mode not in formats:
                    raise ValueError("Invalid addressing mode for constant")
                return formats[mode].format(m=m, c=name)
        raise TypeError(f"Unknown operand: {self.operand!r}")