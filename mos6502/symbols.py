"""Symbol table and resolution of labels and constants to addresses and values."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Dict, List, Optional

from .ast import AST, Byte, Constant, Label, Origin, Word
from .instruction import (
    Absolute,
    AddressingMode,
    ConstantRef,
    Immediate,
    Instruction,
    LabelRef,
    Relative,
    ZeroPage,
)


def _describe(ins: Instruction) -> str:
    try:
        return str(ins)
    except (ValueError, TypeError):
        return repr(ins)


class SymbolError(Exception):
    """Base class for errors found while indexing or resolving symbols."""


class SymbolNotFoundError(SymbolError):
    """A symbol was looked up during resolution but does not exist."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Symbol not found: {name}")
        self.name = name


class SymbolAlreadyDefinedError(SymbolError):
    """A symbol with the same name was defined twice."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Symbol already defined: {name}")
        self.name = name


class UndefinedSymbolError(SymbolError):
    """An instruction uses a symbol that is never defined."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Symbol not defined: {name}")
        self.name = name


class InvalidAddressingModeError(SymbolError):
    """The instruction's addressing mode cannot take the resolved symbol."""

    def __init__(self, instruction: Instruction) -> None:
        super().__init__(f"Invalid addressing mode: {_describe(instruction)}")
        self.instruction = instruction


class InvalidSymbolTypeError(SymbolError):
    """A constant operand refers to a symbol that is not a constant."""

    def __init__(self, instruction: Instruction) -> None:
        super().__init__(
            f"Invalid symbol type for constant operand: {_describe(instruction)}"
        )
        self.instruction = instruction


class SymbolKind(enum.Enum):
    """What a symbol stands for."""

    LABEL = "Label"
    CONSTANT_BYTE = "ConstantByte"
    CONSTANT_WORD = "ConstantWord"


_LIMITS = {
    SymbolKind.CONSTANT_BYTE: 0xFF,
    SymbolKind.CONSTANT_WORD: 0xFFFF,
}


@dataclass(frozen=True)
class Symbol:
    """A named label offset or constant value."""

    name: str
    kind: SymbolKind
    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"Symbol value {self.value} is negative")
        limit = _LIMITS.get(self.kind)
        if limit is not None and self.value > limit:
            raise ValueError(f"{self.kind.value} value {self.value} out of range")

    def __str__(self) -> str:
        return f"{self.name}: {self.kind.value}({self.value:#x})"


class SymbolTable:
    """The labels and constants of a program, in order of definition."""

    def __init__(self) -> None:
        self._symbols: Dict[str, Symbol] = {}

    @property
    def symbols(self) -> List[Symbol]:
        return list(self._symbols.values())

    def find_symbol(self, name: str) -> Optional[Symbol]:
        """The symbol with the given name, or None."""
        return self._symbols.get(name)

    def new_symbol(self, symbol: Symbol) -> None:
        """Add a symbol; raise if its name is already taken."""
        if symbol.name in self._symbols:
            raise SymbolAlreadyDefinedError(symbol.name)
        self._symbols[symbol.name] = symbol

    def __len__(self) -> int:
        return len(self._symbols)

    def __contains__(self, name: object) -> bool:
        return name in self._symbols


def index_labels(ast: AST, symbol_table: SymbolTable) -> None:
    """Add every label in the tree to the symbol table with its address."""
    current_addr = 0
    for node in ast:
        if isinstance(node, Instruction):
            current_addr += node.size()
        elif isinstance(node, Label):
            symbol_table.new_symbol(Symbol(node.name, SymbolKind.LABEL, current_addr))
        elif isinstance(node, Origin):
            current_addr = node.address


def index_constants(ast: AST, symbol_table: SymbolTable) -> None:
    """Add every constant definition in the tree to the symbol table."""
    for node in ast:
        if isinstance(node, Constant):
            if isinstance(node.value, Byte):
                kind = SymbolKind.CONSTANT_BYTE
            elif isinstance(node.value, Word):
                kind = SymbolKind.CONSTANT_WORD
            else:
                raise TypeError(f"Unknown constant value: {node.value!r}")
            symbol_table.new_symbol(Symbol(node.identifier, kind, node.value.value))


def verify_symbols(ast: AST, symbol_table: SymbolTable) -> None:
    """Raise if an instruction uses a label or constant that is not defined."""
    for node in ast:
        if isinstance(node, Instruction) and isinstance(
            node.operand, (LabelRef, ConstantRef)
        ):
            if symbol_table.find_symbol(node.operand.name) is None:
                raise UndefinedSymbolError(node.operand.name)


def _instructions(ast: AST):
    return (node for node in ast if isinstance(node, Instruction))


def _to_signed_byte(value: int) -> int:
    low = value & 0xFF
    return low - 0x100 if low >= 0x80 else low


def _resolve_label(ins: Instruction, symbol_table: SymbolTable, current_addr: int) -> None:
    if not isinstance(ins.operand, LabelRef):
        return
    symbol = symbol_table.find_symbol(ins.operand.name)
    if symbol is None:
        raise SymbolNotFoundError(ins.operand.name)
    if symbol.kind is not SymbolKind.LABEL:
        return

    target = symbol.value & 0xFFFF
    if ins.addr_mode is AddressingMode.ABSOLUTE:
        ins.operand = Absolute(target)
    elif ins.addr_mode is AddressingMode.RELATIVE:
        ins.operand = Relative(_to_signed_byte(target - (current_addr & 0xFFFF)))
    else:
        raise InvalidAddressingModeError(ins)


def resolve_labels_to_addr(ast: AST, symbol_table: SymbolTable) -> None:
    """Replace label operands with absolute addresses or relative offsets.

    Relative offsets are counted from the address of the following
    instruction, since the program counter has already moved past the
    current one.
    """
    current_addr = 0
    for ins in _instructions(ast):
        current_addr += ins.size()
        _resolve_label(ins, symbol_table, current_addr)


_ZERO_PAGE_MODES = frozenset(
    {
        AddressingMode.ZERO_PAGE_X,
        AddressingMode.ZERO_PAGE_Y,
        AddressingMode.INDIRECT_INDEXED_X,
        AddressingMode.INDIRECT_INDEXED_Y,
    }
)


def resolve_constants_to_values(ast: AST, symbol_table: SymbolTable) -> None:
    """Replace constant operands with their values, fixing the addressing mode."""
    for ins in _instructions(ast):
        if not isinstance(ins.operand, ConstantRef):
            continue
        symbol = symbol_table.find_symbol(ins.operand.name)
        if symbol is None:
            raise SymbolNotFoundError(ins.operand.name)

        mode = ins.addr_mode
        if symbol.kind is SymbolKind.CONSTANT_BYTE:
            if mode is AddressingMode.IMMEDIATE:
                ins.operand = Immediate(symbol.value)
            elif mode in _ZERO_PAGE_MODES:
                ins.operand = ZeroPage(symbol.value)
            elif mode is AddressingMode.CONSTANT:
                ins.operand = ZeroPage(symbol.value)
                ins.addr_mode = AddressingMode.ZERO_PAGE
            else:
                raise InvalidAddressingModeError(ins)
        elif symbol.kind is SymbolKind.CONSTANT_WORD:
            if mode is AddressingMode.CONSTANT:
                ins.operand = Absolute(symbol.value)
                ins.addr_mode = AddressingMode.ABSOLUTE
            else:
                raise InvalidAddressingModeError(ins)
        else:
            raise InvalidSymbolTypeError(ins)


def resolve_symbols(ast: AST) -> None:
    """Resolve all labels and constants in the tree, in place."""
    symbol_table = SymbolTable()

    # Constants change instruction sizes, which label addresses depend on.
    index_constants(ast, symbol_table)
    resolve_constants_to_values(ast, symbol_table)

    index_labels(ast, symbol_table)
    resolve_labels_to_addr(ast, symbol_table)

    verify_symbols(ast, symbol_table)